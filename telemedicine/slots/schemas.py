from datetime import date, time
from typing import ClassVar

from pydantic import model_validator

from telemedicine.common.schemas import CamelModel, PartialUpdate


class SlotCreate(CamelModel):
    assigned_date: date
    doctor_id: int
    start_time: time
    end_time: time

    @model_validator(mode="after")
    def check_time_window(self) -> "SlotCreate":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class SlotUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple[str, ...]] = ("assigned_date", "start_time", "end_time")

    assigned_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None
    health_check_id: int | None = None


class SlotResponse(CamelModel):
    id: int
    assigned_date: date
    doctor_id: int
    start_time: time
    end_time: time
    health_check_id: int | None
