import logging
from collections.abc import Sequence
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.patients.models import Patient
from telemedicine.patients.schemas import PatientCreate, PatientUpdate

logger = logging.getLogger(__name__)


async def get_patients(
    db: AsyncSession,
    email: Optional[str] = None,
    name: Optional[str] = None,
    blood_group: Optional[str] = None,
    is_active: Optional[bool] = None,
) -> Sequence[Patient]:
    query = select(Patient)

    if email and email.strip():
        query = query.where(Patient.email.ilike(f"%{email.strip()}%"))
    if name and name.strip():
        query = query.where(Patient.name.ilike(f"%{name.strip()}%"))
    if blood_group and blood_group.strip():
        query = query.where(func.upper(Patient.blood_group) == blood_group.strip().upper())
    if is_active is not None:
        query = query.where(Patient.is_active == is_active)

    result = await db.execute(query)
    return result.scalars().all()


async def get_patient(db: AsyncSession, patient_id: int) -> Optional[Patient]:
    return await db.get(Patient, patient_id)


async def is_duplicated_email(db: AsyncSession, email: str) -> bool:
    query = select(func.count(Patient.id)).where(func.lower(Patient.email) == email.strip().lower())
    return (await db.execute(query)).scalar_one() > 0


async def create_patient(db: AsyncSession, data: PatientCreate) -> Patient:
    patient = Patient(**data.model_dump(), is_active=True)
    db.add(patient)
    await db.flush()
    await db.refresh(patient)
    logger.info("Created patient %s", patient.id)
    return patient


async def update_patient(db: AsyncSession, patient: Patient, data: PatientUpdate) -> Patient:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(patient, field, value)
    await db.flush()
    await db.refresh(patient)
    logger.info("Updated patient %s", patient.id)
    return patient


async def deactivate_patient(db: AsyncSession, patient: Patient) -> Patient:
    patient.is_active = False
    await db.flush()
    await db.refresh(patient)
    logger.info("Deactivated patient %s", patient.id)
    return patient
