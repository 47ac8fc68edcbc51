from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from telemedicine.common.base_models import IntIdBase, TimestampMixin


class Major(IntIdBase, TimestampMixin):
    __tablename__ = "majors"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
