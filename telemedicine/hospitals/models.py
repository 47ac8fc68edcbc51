from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from telemedicine.common.base_models import IntIdBase, TimestampMixin


class Hospital(IntIdBase, TimestampMixin):
    __tablename__ = "hospitals"

    hospital_code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
