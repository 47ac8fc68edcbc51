from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.common.pagination import ASCENDING, Paged, Paginator
from telemedicine.common.schemas import MessageResponse
from telemedicine.config import settings
from telemedicine.database import get_db
from telemedicine.patients.schemas import PatientCreate, PatientResponse, PatientUpdate
from telemedicine.patients.service import (
    create_patient,
    deactivate_patient,
    get_patient,
    get_patients,
    is_duplicated_email,
    update_patient,
)

router = APIRouter()


@router.get("", response_model=Paged[PatientResponse])
async def list_patients(
    db: Annotated[AsyncSession, Depends(get_db)],
    email: Optional[str] = None,
    name: Optional[str] = None,
    blood_group: Annotated[Optional[str], Query(alias="blood-group")] = None,
    is_active: Annotated[Optional[bool], Query(alias="is-active")] = None,
    offset: int = 1,
    limit: int = settings.default_page_limit,
):
    patients = await get_patients(db, email, name, blood_group, is_active)
    return (
        Paginator.from_source(patients)
        .get_range(offset, limit, lambda p: p.id, ASCENDING)
        .paginate(PatientResponse.model_validate)
    )


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient_detail(patient_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    patient = await get_patient(db, patient_id)
    if patient is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found patient by id: {patient_id}")
    return patient


@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_new_patient(data: PatientCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await is_duplicated_email(db, data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email has already been registered")
    return await create_patient(db, data)


@router.put("/{patient_id}", response_model=PatientResponse)
async def update_existing_patient(patient_id: int, data: PatientUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    patient = await get_patient(db, patient_id)
    if patient is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found patient by id: {patient_id}")
    return await update_patient(db, patient, data)


@router.delete("/{patient_id}", response_model=MessageResponse)
async def delete_existing_patient(patient_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    patient = await get_patient(db, patient_id)
    if patient is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found patient by id: {patient_id}")
    await deactivate_patient(db, patient)
    return MessageResponse(message="Success")
