import logging
from collections.abc import Sequence
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.roles.models import Role
from telemedicine.roles.schemas import RoleCreate

logger = logging.getLogger(__name__)


async def get_roles(db: AsyncSession, name: Optional[str] = None) -> Sequence[Role]:
    query = select(Role)
    if name and name.strip():
        query = query.where(Role.name.ilike(f"%{name.strip()}%"))
    result = await db.execute(query)
    return result.scalars().all()


async def get_role(db: AsyncSession, role_id: int) -> Optional[Role]:
    return await db.get(Role, role_id)


async def is_duplicated(db: AsyncSession, name: str) -> bool:
    result = await db.execute(select(func.count(Role.id)).where(func.upper(Role.name) == name.strip().upper()))
    return result.scalar_one() > 0


async def create_role(db: AsyncSession, data: RoleCreate) -> Role:
    role = Role(name=data.name.strip().upper())
    db.add(role)
    await db.flush()
    await db.refresh(role)
    logger.info("Created role %s (%s)", role.id, role.name)
    return role


async def rename_role(db: AsyncSession, role: Role, name: str) -> Role:
    role.name = name.strip().upper()
    await db.flush()
    await db.refresh(role)
    logger.info("Renamed role %s to %s", role.id, role.name)
    return role


async def delete_role(db: AsyncSession, role: Role) -> None:
    role_id = role.id
    await db.delete(role)
    await db.flush()
    logger.info("Deleted role %s", role_id)
