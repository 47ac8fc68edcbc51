from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.common.pagination import ASCENDING, Paged, Paginator
from telemedicine.common.schemas import MessageResponse
from telemedicine.config import settings
from telemedicine.database import get_db
from telemedicine.roles.schemas import RoleCreate, RoleResponse, RoleUpdate
from telemedicine.roles.service import create_role, delete_role, get_role, get_roles, is_duplicated, rename_role

router = APIRouter()


@router.get("", response_model=Paged[RoleResponse])
async def list_roles(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: Optional[str] = None,
    offset: int = 1,
    limit: int = settings.default_page_limit,
):
    roles = await get_roles(db, name)
    return (
        Paginator.from_source(roles)
        .get_range(offset, limit, lambda r: r.id, ASCENDING)
        .paginate(RoleResponse.model_validate)
    )


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role_detail(role_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    role = await get_role(db, role_id)
    if role is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found role by id: {role_id}")
    return role


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
async def create_new_role(data: RoleCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await is_duplicated(db, data.name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Role name is duplicated")
    return await create_role(db, data)


@router.put("/{role_id}", response_model=RoleResponse)
async def update_existing_role(role_id: int, data: RoleUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    role = await get_role(db, role_id)
    if role is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found role by id: {role_id}")
    if role.id != data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Role id does not match")
    if role.name.upper() != data.name.strip().upper() and await is_duplicated(db, data.name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Role name is duplicated")
    return await rename_role(db, role, data.name)


@router.delete("/{role_id}", response_model=MessageResponse)
async def delete_existing_role(role_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    role = await get_role(db, role_id)
    if role is None:
        # Missing roles answer 400, unlike the other resources
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Can not found role by id: {role_id}")
    await delete_role(db, role)
    return MessageResponse(message="Success")
