import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.majors.models import Major
from telemedicine.majors.schemas import MajorCreate, MajorUpdate

logger = logging.getLogger(__name__)


async def get_majors(db: AsyncSession, name: Optional[str] = None, is_active: Optional[bool] = None) -> Sequence[Major]:
    query = select(Major)
    if name and name.strip():
        query = query.where(Major.name.ilike(f"%{name.strip()}%"))
    if is_active is not None:
        query = query.where(Major.is_active == is_active)
    result = await db.execute(query)
    return result.scalars().all()


async def get_major(db: AsyncSession, major_id: int) -> Optional[Major]:
    return await db.get(Major, major_id)


async def is_duplicated(db: AsyncSession, name: str) -> bool:
    query = select(func.count(Major.id)).where(func.upper(Major.name) == name.strip().upper())
    return (await db.execute(query)).scalar_one() > 0


async def missing_major_ids(db: AsyncSession, major_ids: Iterable[int]) -> set[int]:
    wanted = set(major_ids)
    if not wanted:
        return set()
    result = await db.execute(select(Major.id).where(Major.id.in_(wanted)))
    return wanted - set(result.scalars().all())


async def create_major(db: AsyncSession, data: MajorCreate) -> Major:
    major = Major(name=data.name.strip(), description=data.description, is_active=True)
    db.add(major)
    await db.flush()
    await db.refresh(major)
    logger.info("Created major %s", major.id)
    return major


async def update_major(db: AsyncSession, major: Major, data: MajorUpdate) -> Major:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(major, field, value.strip() if field == "name" and value else value)
    await db.flush()
    await db.refresh(major)
    logger.info("Updated major %s", major.id)
    return major


async def deactivate_major(db: AsyncSession, major: Major) -> Major:
    major.is_active = False
    await db.flush()
    await db.refresh(major)
    logger.info("Deactivated major %s", major.id)
    return major
