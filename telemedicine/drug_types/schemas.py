from pydantic import Field

from telemedicine.common.schemas import CamelModel


class DrugTypeCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class DrugTypeUpdate(CamelModel):
    id: int
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class DrugTypeResponse(CamelModel):
    id: int
    name: str
    description: str | None
