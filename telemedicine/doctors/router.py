from datetime import date
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.certifications.service import missing_certification_ids
from telemedicine.common.pagination import ASCENDING, Paged, Paginator
from telemedicine.common.schemas import MessageResponse
from telemedicine.config import settings
from telemedicine.database import get_db
from telemedicine.doctors.schemas import DoctorCreate, DoctorResponse, DoctorUpdate
from telemedicine.doctors.service import (
    create_doctor,
    get_doctor,
    get_doctors,
    is_duplicated_certificate_code,
    is_duplicated_email,
    normalize_certificate_code,
    set_verified,
    update_doctor,
)
from telemedicine.hospitals.service import missing_hospital_ids
from telemedicine.majors.service import missing_major_ids

router = APIRouter()


def _not_found(doctor_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Can not found doctor by id: {doctor_id}")


@router.get("", response_model=Paged[DoctorResponse])
async def list_doctors(
    db: Annotated[AsyncSession, Depends(get_db)],
    email: Optional[str] = None,
    practising_certificate: Annotated[Optional[str], Query(alias="practising-certificate")] = None,
    certificate_code: Annotated[Optional[str], Query(alias="certificate-code")] = None,
    place_certificate: Annotated[Optional[str], Query(alias="place-certificate")] = None,
    date_start_certificate: Annotated[Optional[date], Query(alias="date-start-certificate")] = None,
    date_end_certificate: Annotated[Optional[date], Query(alias="date-end-certificate")] = None,
    scope_certificate: Annotated[Optional[str], Query(alias="scope-certificate")] = None,
    number_start_consultants: Annotated[int, Query(alias="number-start-consultants")] = 0,
    number_end_consultants: Annotated[int, Query(alias="number-end-consultants")] = 0,
    start_rating: Annotated[int, Query(alias="start-rating")] = 0,
    end_rating: Annotated[int, Query(alias="end-rating")] = 0,
    is_verify: Annotated[int, Query(alias="is-verify")] = 0,
    limit: int = settings.default_page_limit,
    offset: int = 1,
):
    doctors = await get_doctors(
        db,
        email=email,
        practising_certificate=practising_certificate,
        certificate_code=certificate_code,
        place_certificate=place_certificate,
        date_start_certificate=date_start_certificate,
        date_end_certificate=date_end_certificate,
        scope_certificate=scope_certificate,
        number_start_consultants=number_start_consultants,
        number_end_consultants=number_end_consultants,
        start_rating=start_rating,
        end_rating=end_rating,
        is_verify=is_verify,
    )
    return (
        Paginator.from_source(doctors)
        .get_range(offset, limit, lambda d: d.id, ASCENDING)
        .paginate(DoctorResponse.model_validate)
    )


@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor_detail(doctor_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    doctor = await get_doctor(db, doctor_id)
    if doctor is None:
        raise _not_found(doctor_id)
    return doctor


@router.post("", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
async def create_new_doctor(data: DoctorCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    if await is_duplicated_email(db, data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email has already been registered")
    if await is_duplicated_certificate_code(db, data.certificate_code):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Certificate code has already been registered"
        )
    if await missing_hospital_ids(db, (h.hospital_id for h in data.hospital_doctors)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Hospital does not exist")
    if await missing_major_ids(db, (m.major_id for m in data.major_doctors)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Major does not exist")
    if await missing_certification_ids(db, (c.certification_id for c in data.certification_doctors)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Certification does not exist")
    return await create_doctor(db, data)


@router.put("/{doctor_id}", response_model=DoctorResponse)
async def update_existing_doctor(doctor_id: int, data: DoctorUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    if doctor_id != data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Doctor id does not match")
    doctor = await get_doctor(db, doctor_id)
    if doctor is None:
        raise _not_found(doctor_id)
    if (
        normalize_certificate_code(data.certificate_code) != doctor.certificate_code
        and await is_duplicated_certificate_code(db, data.certificate_code)
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Certificate code has already been registered"
        )
    return await update_doctor(db, doctor, data)


@router.delete("/{doctor_id}", response_model=MessageResponse)
async def delete_doctor(doctor_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    doctor = await get_doctor(db, doctor_id)
    if doctor is None:
        raise _not_found(doctor_id)
    # Doctors are never removed; deleting revokes verification
    await set_verified(db, doctor, False)
    return MessageResponse(message="Success")


@router.patch("/{doctor_id}", response_model=MessageResponse)
async def verify_doctor(doctor_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    doctor = await get_doctor(db, doctor_id)
    if doctor is None:
        raise _not_found(doctor_id)
    await set_verified(db, doctor, True)
    return MessageResponse(message="Success")
