import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.hospitals.models import Hospital
from telemedicine.hospitals.schemas import HospitalCreate, HospitalUpdate

logger = logging.getLogger(__name__)


async def get_hospitals(
    db: AsyncSession,
    hospital_code: Optional[str] = None,
    name: Optional[str] = None,
    address: Optional[str] = None,
    is_active: Optional[bool] = None,
) -> Sequence[Hospital]:
    query = select(Hospital)

    if hospital_code and hospital_code.strip():
        query = query.where(Hospital.hospital_code.ilike(f"%{hospital_code.strip()}%"))
    if name and name.strip():
        query = query.where(Hospital.name.ilike(f"%{name.strip()}%"))
    if address and address.strip():
        query = query.where(Hospital.address.ilike(f"%{address.strip()}%"))
    if is_active is not None:
        query = query.where(Hospital.is_active == is_active)

    result = await db.execute(query)
    return result.scalars().all()


async def get_hospital(db: AsyncSession, hospital_id: int) -> Optional[Hospital]:
    return await db.get(Hospital, hospital_id)


async def is_duplicated_code(db: AsyncSession, hospital_code: str) -> bool:
    query = select(func.count(Hospital.id)).where(Hospital.hospital_code == hospital_code.strip().upper())
    return (await db.execute(query)).scalar_one() > 0


async def missing_hospital_ids(db: AsyncSession, hospital_ids: Iterable[int]) -> set[int]:
    """Return the subset of ``hospital_ids`` with no matching hospital."""
    wanted = set(hospital_ids)
    if not wanted:
        return set()
    result = await db.execute(select(Hospital.id).where(Hospital.id.in_(wanted)))
    return wanted - set(result.scalars().all())


async def create_hospital(db: AsyncSession, data: HospitalCreate) -> Hospital:
    hospital = Hospital(**data.model_dump(), is_active=True)
    hospital.hospital_code = hospital.hospital_code.strip().upper()
    db.add(hospital)
    await db.flush()
    await db.refresh(hospital)
    logger.info("Created hospital %s (%s)", hospital.id, hospital.hospital_code)
    return hospital


async def update_hospital(db: AsyncSession, hospital: Hospital, data: HospitalUpdate) -> Hospital:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(hospital, field, value)
    if data.hospital_code is not None:
        hospital.hospital_code = data.hospital_code.strip().upper()
    await db.flush()
    await db.refresh(hospital)
    logger.info("Updated hospital %s", hospital.id)
    return hospital


async def deactivate_hospital(db: AsyncSession, hospital: Hospital) -> Hospital:
    hospital.is_active = False
    await db.flush()
    await db.refresh(hospital)
    logger.info("Deactivated hospital %s", hospital.id)
    return hospital
