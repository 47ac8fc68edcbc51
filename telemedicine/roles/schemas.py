from pydantic import Field

from telemedicine.common.schemas import CamelModel


class RoleCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)


class RoleUpdate(CamelModel):
    id: int
    name: str = Field(min_length=1, max_length=50)


class RoleResponse(CamelModel):
    id: int
    name: str
