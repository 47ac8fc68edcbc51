import logging
from collections.abc import Sequence
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.drug_types.models import DrugType
from telemedicine.drug_types.schemas import DrugTypeCreate, DrugTypeUpdate

logger = logging.getLogger(__name__)


async def get_drug_types(db: AsyncSession, name: Optional[str] = None) -> Sequence[DrugType]:
    query = select(DrugType)
    if name and name.strip():
        query = query.where(DrugType.name.ilike(f"%{name.strip()}%"))
    result = await db.execute(query)
    return result.scalars().all()


async def get_drug_type(db: AsyncSession, drug_type_id: int) -> Optional[DrugType]:
    return await db.get(DrugType, drug_type_id)


async def create_drug_type(db: AsyncSession, data: DrugTypeCreate) -> DrugType:
    drug_type = DrugType(**data.model_dump())
    db.add(drug_type)
    await db.flush()
    await db.refresh(drug_type)
    logger.info("Created drug type %s", drug_type.id)
    return drug_type


async def update_drug_type(db: AsyncSession, drug_type: DrugType, data: DrugTypeUpdate) -> DrugType:
    drug_type.name = data.name
    drug_type.description = data.description
    await db.flush()
    await db.refresh(drug_type)
    logger.info("Updated drug type %s", drug_type.id)
    return drug_type


async def delete_drug_type(db: AsyncSession, drug_type: DrugType) -> None:
    drug_type_id = drug_type.id
    await db.delete(drug_type)
    await db.flush()
    logger.info("Deleted drug type %s", drug_type_id)
