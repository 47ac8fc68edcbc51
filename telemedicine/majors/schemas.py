from typing import ClassVar

from pydantic import Field

from telemedicine.common.schemas import CamelModel, PartialUpdate


class MajorCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class MajorUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple[str, ...]] = ("name", "is_active")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    is_active: bool | None = None


class MajorResponse(CamelModel):
    id: int
    name: str
    description: str | None
    is_active: bool
