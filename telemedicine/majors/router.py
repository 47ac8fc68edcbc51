from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.common.pagination import ASCENDING, Paged, Paginator
from telemedicine.common.schemas import MessageResponse
from telemedicine.config import settings
from telemedicine.database import get_db
from telemedicine.majors.schemas import MajorCreate, MajorResponse, MajorUpdate
from telemedicine.majors.service import (
    create_major,
    deactivate_major,
    get_major,
    get_majors,
    is_duplicated,
    update_major,
)

router = APIRouter()


@router.get("", response_model=Paged[MajorResponse])
async def list_majors(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: Optional[str] = None,
    is_active: Annotated[Optional[bool], Query(alias="is-active")] = None,
    offset: int = 1,
    limit: int = settings.default_page_limit,
):
    majors = await get_majors(db, name, is_active)
    return (
        Paginator.from_source(majors)
        .get_range(offset, limit, lambda m: m.id, ASCENDING)
        .paginate(MajorResponse.model_validate)
    )


@router.get("/{major_id}", response_model=MajorResponse)
async def get_major_detail(major_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    major = await get_major(db, major_id)
    if major is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Major not found")
    return major


@router.post("", response_model=MajorResponse, status_code=status.HTTP_201_CREATED)
async def create_new_major(data: MajorCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await is_duplicated(db, data.name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Major name is duplicated")
    return await create_major(db, data)


@router.put("/{major_id}", response_model=MajorResponse)
async def update_existing_major(major_id: int, data: MajorUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    major = await get_major(db, major_id)
    if major is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Major not found")
    if (
        data.name is not None
        and data.name.strip().upper() != major.name.upper()
        and await is_duplicated(db, data.name)
    ):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Major name is duplicated")
    return await update_major(db, major, data)


@router.delete("/{major_id}", response_model=MessageResponse)
async def delete_existing_major(major_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    major = await get_major(db, major_id)
    if major is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Major not found")
    await deactivate_major(db, major)
    return MessageResponse(message="Success")
