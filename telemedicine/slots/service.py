import logging
from collections.abc import Sequence
from datetime import date, time
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.doctors.models import Doctor
from telemedicine.slots.models import Slot
from telemedicine.slots.schemas import SlotCreate, SlotUpdate

logger = logging.getLogger(__name__)


async def get_slots(
    db: AsyncSession,
    doctor_id: Optional[int] = None,
    assigned_date: Optional[date] = None,
    start_time: Optional[time] = None,
    end_time: Optional[time] = None,
    is_booked: Optional[bool] = None,
) -> Sequence[Slot]:
    query = select(Slot)

    if doctor_id is not None:
        query = query.where(Slot.doctor_id == doctor_id)
    if assigned_date is not None:
        query = query.where(Slot.assigned_date == assigned_date)
    if start_time is not None:
        query = query.where(Slot.start_time >= start_time)
    if end_time is not None:
        query = query.where(Slot.end_time <= end_time)
    if is_booked is True:
        query = query.where(Slot.health_check_id.is_not(None))
    elif is_booked is False:
        query = query.where(Slot.health_check_id.is_(None))

    result = await db.execute(query)
    return result.scalars().all()


async def get_slot(db: AsyncSession, slot_id: int) -> Optional[Slot]:
    return await db.get(Slot, slot_id)


async def doctor_exists(db: AsyncSession, doctor_id: int) -> bool:
    result = await db.execute(select(Doctor.id).where(Doctor.id == doctor_id))
    return result.scalar_one_or_none() is not None


async def create_slot(db: AsyncSession, data: SlotCreate) -> Slot:
    slot = Slot(**data.model_dump())
    db.add(slot)
    await db.flush()
    await db.refresh(slot)
    logger.info("Created slot %s for doctor %s", slot.id, slot.doctor_id)
    return slot


async def update_slot(db: AsyncSession, slot: Slot, data: SlotUpdate) -> Slot:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(slot, field, value)
    await db.flush()
    await db.refresh(slot)
    logger.info("Updated slot %s", slot.id)
    return slot


async def delete_slot(db: AsyncSession, slot: Slot) -> None:
    slot_id = slot.id
    await db.delete(slot)
    await db.flush()
    logger.info("Deleted slot %s", slot_id)
