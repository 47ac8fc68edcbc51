from typing import ClassVar

from pydantic import Field

from telemedicine.common.schemas import CamelModel, PartialUpdate


class HospitalCreate(CamelModel):
    hospital_code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=500)
    description: str | None = None


class HospitalUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple[str, ...]] = ("hospital_code", "name", "is_active")

    hospital_code: str | None = Field(default=None, min_length=1, max_length=50)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=500)
    description: str | None = None
    is_active: bool | None = None


class HospitalResponse(CamelModel):
    id: int
    hospital_code: str
    name: str
    address: str | None
    description: str | None
    is_active: bool
