from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.common.pagination import ASCENDING, Paged, Paginator
from telemedicine.common.schemas import MessageResponse
from telemedicine.config import settings
from telemedicine.database import get_db
from telemedicine.hospitals.schemas import HospitalCreate, HospitalResponse, HospitalUpdate
from telemedicine.hospitals.service import (
    create_hospital,
    deactivate_hospital,
    get_hospital,
    get_hospitals,
    is_duplicated_code,
    update_hospital,
)

router = APIRouter()


@router.get("", response_model=Paged[HospitalResponse])
async def list_hospitals(
    db: Annotated[AsyncSession, Depends(get_db)],
    hospital_code: Annotated[Optional[str], Query(alias="hospital-code")] = None,
    name: Optional[str] = None,
    address: Optional[str] = None,
    is_active: Annotated[Optional[bool], Query(alias="is-active")] = None,
    offset: int = 1,
    limit: int = settings.default_page_limit,
):
    hospitals = await get_hospitals(db, hospital_code, name, address, is_active)
    return (
        Paginator.from_source(hospitals)
        .get_range(offset, limit, lambda h: h.id, ASCENDING)
        .paginate(HospitalResponse.model_validate)
    )


@router.get("/{hospital_id}", response_model=HospitalResponse)
async def get_hospital_detail(hospital_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    hospital = await get_hospital(db, hospital_id)
    if hospital is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found hospital by id: {hospital_id}")
    return hospital


@router.post("", response_model=HospitalResponse, status_code=status.HTTP_201_CREATED)
async def create_new_hospital(data: HospitalCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await is_duplicated_code(db, data.hospital_code):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Hospital code is duplicated")
    return await create_hospital(db, data)


@router.put("/{hospital_id}", response_model=HospitalResponse)
async def update_existing_hospital(
    hospital_id: int, data: HospitalUpdate, db: Annotated[AsyncSession, Depends(get_db)]
):
    hospital = await get_hospital(db, hospital_id)
    if hospital is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found hospital by id: {hospital_id}")
    if (
        data.hospital_code is not None
        and data.hospital_code.strip().upper() != hospital.hospital_code
        and await is_duplicated_code(db, data.hospital_code)
    ):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Hospital code is duplicated")
    return await update_hospital(db, hospital, data)


@router.delete("/{hospital_id}", response_model=MessageResponse)
async def delete_existing_hospital(hospital_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    hospital = await get_hospital(db, hospital_id)
    if hospital is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found hospital by id: {hospital_id}")
    await deactivate_hospital(db, hospital)
    return MessageResponse(message="Success")
