import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.certifications.models import Certification
from telemedicine.certifications.schemas import CertificationCreate, CertificationUpdate

logger = logging.getLogger(__name__)


async def get_certifications(
    db: AsyncSession,
    name: Optional[str] = None,
    is_active: Optional[bool] = None,
) -> Sequence[Certification]:
    query = select(Certification)
    if name and name.strip():
        query = query.where(Certification.name.ilike(f"%{name.strip()}%"))
    if is_active is not None:
        query = query.where(Certification.is_active == is_active)
    result = await db.execute(query)
    return result.scalars().all()


async def get_certification(db: AsyncSession, certification_id: int) -> Optional[Certification]:
    return await db.get(Certification, certification_id)


async def is_duplicated(db: AsyncSession, name: str) -> bool:
    query = select(func.count(Certification.id)).where(func.upper(Certification.name) == name.strip().upper())
    return (await db.execute(query)).scalar_one() > 0


async def missing_certification_ids(db: AsyncSession, certification_ids: Iterable[int]) -> set[int]:
    wanted = set(certification_ids)
    if not wanted:
        return set()
    result = await db.execute(select(Certification.id).where(Certification.id.in_(wanted)))
    return wanted - set(result.scalars().all())


async def create_certification(db: AsyncSession, data: CertificationCreate) -> Certification:
    certification = Certification(name=data.name.strip(), description=data.description, is_active=True)
    db.add(certification)
    await db.flush()
    await db.refresh(certification)
    logger.info("Created certification %s", certification.id)
    return certification


async def update_certification(
    db: AsyncSession, certification: Certification, data: CertificationUpdate
) -> Certification:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(certification, field, value.strip() if field == "name" and value else value)
    await db.flush()
    await db.refresh(certification)
    logger.info("Updated certification %s", certification.id)
    return certification


async def deactivate_certification(db: AsyncSession, certification: Certification) -> Certification:
    certification.is_active = False
    await db.flush()
    await db.refresh(certification)
    logger.info("Deactivated certification %s", certification.id)
    return certification
