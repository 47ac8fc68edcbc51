from typing import ClassVar

from pydantic import EmailStr, Field

from telemedicine.common.schemas import CamelModel, PartialUpdate


class PatientCreate(CamelModel):
    email: EmailStr
    name: str = Field(min_length=1, max_length=255)
    background_disease: str | None = None
    allergy: str | None = None
    blood_group: str | None = Field(default=None, max_length=10)


class PatientUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple[str, ...]] = ("name", "is_active")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    background_disease: str | None = None
    allergy: str | None = None
    blood_group: str | None = Field(default=None, max_length=10)
    is_active: bool | None = None


class PatientResponse(CamelModel):
    id: int
    email: str
    name: str
    background_disease: str | None
    allergy: str | None
    blood_group: str | None
    is_active: bool
