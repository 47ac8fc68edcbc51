from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.certifications.schemas import CertificationCreate, CertificationResponse, CertificationUpdate
from telemedicine.certifications.service import (
    create_certification,
    deactivate_certification,
    get_certification,
    get_certifications,
    is_duplicated,
    update_certification,
)
from telemedicine.common.pagination import ASCENDING, Paged, Paginator
from telemedicine.common.schemas import MessageResponse
from telemedicine.config import settings
from telemedicine.database import get_db

router = APIRouter()


@router.get("", response_model=Paged[CertificationResponse])
async def list_certifications(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: Optional[str] = None,
    is_active: Annotated[Optional[bool], Query(alias="is-active")] = None,
    offset: int = 1,
    limit: int = settings.default_page_limit,
):
    certifications = await get_certifications(db, name, is_active)
    return (
        Paginator.from_source(certifications)
        .get_range(offset, limit, lambda c: c.id, ASCENDING)
        .paginate(CertificationResponse.model_validate)
    )


@router.get("/{certification_id}", response_model=CertificationResponse)
async def get_certification_detail(certification_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    certification = await get_certification(db, certification_id)
    if certification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Certification not found")
    return certification


@router.post("", response_model=CertificationResponse, status_code=status.HTTP_201_CREATED)
async def create_new_certification(data: CertificationCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await is_duplicated(db, data.name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Certification name is duplicated")
    return await create_certification(db, data)


@router.put("/{certification_id}", response_model=CertificationResponse)
async def update_existing_certification(
    certification_id: int, data: CertificationUpdate, db: Annotated[AsyncSession, Depends(get_db)]
):
    certification = await get_certification(db, certification_id)
    if certification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Certification not found")
    if (
        data.name is not None
        and data.name.strip().upper() != certification.name.upper()
        and await is_duplicated(db, data.name)
    ):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Certification name is duplicated")
    return await update_certification(db, certification, data)


@router.delete("/{certification_id}", response_model=MessageResponse)
async def delete_existing_certification(certification_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    certification = await get_certification(db, certification_id)
    if certification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Certification not found")
    await deactivate_certification(db, certification)
    return MessageResponse(message="Success")
