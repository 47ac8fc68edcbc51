import logging
from collections.abc import Sequence
from datetime import date
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.doctors.models import CertificationDoctor, Doctor, HospitalDoctor, MajorDoctor
from telemedicine.doctors.schemas import DoctorCreate, DoctorUpdate

logger = logging.getLogger(__name__)


def normalize_certificate_code(code: str) -> str:
    return code.strip().upper()


async def get_doctors(
    db: AsyncSession,
    email: Optional[str] = None,
    practising_certificate: Optional[str] = None,
    certificate_code: Optional[str] = None,
    place_certificate: Optional[str] = None,
    date_start_certificate: Optional[date] = None,
    date_end_certificate: Optional[date] = None,
    scope_certificate: Optional[str] = None,
    number_start_consultants: int = 0,
    number_end_consultants: int = 0,
    start_rating: int = 0,
    end_rating: int = 0,
    is_verify: int = 0,
) -> Sequence[Doctor]:
    """Return doctors matching every supplied filter.

    Text filters are trimmed, case-insensitive substring matches. For the
    consultant and rating ranges a bound of 0 means "no bound". ``is_verify``
    is 1 for verified doctors only, -1 for unverified only, anything else
    for both.
    """
    query = select(Doctor)

    text_filters = (
        (Doctor.email, email),
        (Doctor.practising_certificate, practising_certificate),
        (Doctor.certificate_code, certificate_code),
        (Doctor.place_of_certificate, place_certificate),
        (Doctor.scope_of_practice, scope_certificate),
    )
    for column, value in text_filters:
        if value and value.strip():
            query = query.where(column.ilike(f"%{value.strip()}%"))

    if date_start_certificate is not None:
        query = query.where(Doctor.date_of_certificate >= date_start_certificate)
    if date_end_certificate is not None:
        query = query.where(Doctor.date_of_certificate <= date_end_certificate)

    if number_start_consultants != 0:
        query = query.where(Doctor.number_of_consultants >= number_start_consultants)
    if number_end_consultants != 0:
        query = query.where(Doctor.number_of_consultants <= number_end_consultants)

    if start_rating != 0:
        query = query.where(Doctor.rating >= start_rating)
    if end_rating != 0:
        query = query.where(Doctor.rating <= end_rating)

    if is_verify == 1:
        query = query.where(Doctor.is_verify.is_(True))
    elif is_verify == -1:
        query = query.where(Doctor.is_verify.is_(False))

    result = await db.execute(query)
    return result.scalars().all()


async def get_doctor(db: AsyncSession, doctor_id: int) -> Optional[Doctor]:
    result = await db.execute(
        select(Doctor).where(Doctor.id == doctor_id).execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def is_duplicated_email(db: AsyncSession, email: str) -> bool:
    query = select(func.count(Doctor.id)).where(func.lower(Doctor.email) == email.strip().lower())
    return (await db.execute(query)).scalar_one() > 0


async def is_duplicated_certificate_code(db: AsyncSession, certificate_code: str) -> bool:
    query = select(func.count(Doctor.id)).where(Doctor.certificate_code == normalize_certificate_code(certificate_code))
    return (await db.execute(query)).scalar_one() > 0


async def create_doctor(db: AsyncSession, data: DoctorCreate) -> Doctor:
    doctor = Doctor(
        email=data.email.strip(),
        practising_certificate=data.practising_certificate.strip(),
        certificate_code=normalize_certificate_code(data.certificate_code),
        place_of_certificate=data.place_of_certificate.strip(),
        date_of_certificate=data.date_of_certificate,
        scope_of_practice=data.scope_of_practice.strip(),
        description=data.description.strip() if data.description else None,
        number_of_consultants=0,
        rating=0,
        is_verify=False,
        hospital_doctors=[HospitalDoctor(**h.model_dump()) for h in data.hospital_doctors],
        major_doctors=[MajorDoctor(**m.model_dump()) for m in data.major_doctors],
        certification_doctors=[CertificationDoctor(**c.model_dump()) for c in data.certification_doctors],
    )
    db.add(doctor)
    await db.flush()
    logger.info("Created doctor %s (%s)", doctor.id, doctor.certificate_code)
    return await get_doctor(db, doctor.id)


async def update_doctor(db: AsyncSession, doctor: Doctor, data: DoctorUpdate) -> Doctor:
    doctor.practising_certificate = data.practising_certificate.strip()
    doctor.certificate_code = normalize_certificate_code(data.certificate_code)
    doctor.place_of_certificate = data.place_of_certificate.strip()
    doctor.date_of_certificate = data.date_of_certificate
    doctor.scope_of_practice = data.scope_of_practice.strip()
    doctor.description = data.description.strip() if data.description else None
    await db.flush()
    logger.info("Updated doctor %s", doctor.id)
    return await get_doctor(db, doctor.id)


async def set_verified(db: AsyncSession, doctor: Doctor, verified: bool) -> Doctor:
    doctor.is_verify = verified
    await db.flush()
    logger.info("Doctor %s is_verify=%s", doctor.id, verified)
    return await get_doctor(db, doctor.id)
