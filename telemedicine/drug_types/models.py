from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from telemedicine.common.base_models import IntIdBase, TimestampMixin


class DrugType(IntIdBase, TimestampMixin):
    __tablename__ = "drug_types"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
