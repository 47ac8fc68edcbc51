from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from telemedicine.common.base_models import IntIdBase, TimestampMixin


class Patient(IntIdBase, TimestampMixin):
    __tablename__ = "patients"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    background_disease: Mapped[str | None] = mapped_column(Text, nullable=True)
    allergy: Mapped[str | None] = mapped_column(Text, nullable=True)
    blood_group: Mapped[str | None] = mapped_column(String(10), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
