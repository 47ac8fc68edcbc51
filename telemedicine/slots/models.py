from datetime import date, time

from sqlalchemy import Date, ForeignKey, Integer, Time
from sqlalchemy.orm import Mapped, mapped_column

from telemedicine.common.base_models import IntIdBase, TimestampMixin


class Slot(IntIdBase, TimestampMixin):
    __tablename__ = "slots"

    assigned_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    doctor_id: Mapped[int] = mapped_column(ForeignKey("doctors.id"), nullable=False, index=True)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    # Set once a patient books the slot
    health_check_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
