from datetime import date, time
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.common.pagination import ASCENDING, Paged, Paginator
from telemedicine.common.schemas import MessageResponse
from telemedicine.config import settings
from telemedicine.database import get_db
from telemedicine.slots.schemas import SlotCreate, SlotResponse, SlotUpdate
from telemedicine.slots.service import create_slot, delete_slot, doctor_exists, get_slot, get_slots, update_slot

router = APIRouter()


@router.get("", response_model=Paged[SlotResponse])
async def list_slots(
    db: Annotated[AsyncSession, Depends(get_db)],
    doctor_id: Annotated[Optional[int], Query(alias="doctor-id")] = None,
    assigned_date: Annotated[Optional[date], Query(alias="assigned-date")] = None,
    start_time: Annotated[Optional[time], Query(alias="start-time")] = None,
    end_time: Annotated[Optional[time], Query(alias="end-time")] = None,
    is_booked: Annotated[Optional[bool], Query(alias="is-booked")] = None,
    offset: int = 1,
    limit: int = settings.default_page_limit,
):
    slots = await get_slots(db, doctor_id, assigned_date, start_time, end_time, is_booked)
    return (
        Paginator.from_source(slots)
        .get_range(offset, limit, lambda s: s.id, ASCENDING)
        .paginate(SlotResponse.model_validate)
    )


@router.get("/{slot_id}", response_model=SlotResponse)
async def get_slot_detail(slot_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    slot = await get_slot(db, slot_id)
    if slot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")
    return slot


@router.post("", response_model=SlotResponse, status_code=status.HTTP_201_CREATED)
async def create_new_slot(data: SlotCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    if not await doctor_exists(db, data.doctor_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Doctor does not exist")
    return await create_slot(db, data)


@router.put("/{slot_id}", response_model=SlotResponse)
async def update_existing_slot(slot_id: int, data: SlotUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    slot = await get_slot(db, slot_id)
    if slot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")
    start_time = data.start_time if data.start_time is not None else slot.start_time
    end_time = data.end_time if data.end_time is not None else slot.end_time
    if end_time <= start_time:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="end_time must be after start_time")
    return await update_slot(db, slot, data)


@router.delete("/{slot_id}", response_model=MessageResponse)
async def delete_existing_slot(slot_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    slot = await get_slot(db, slot_id)
    if slot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")
    await delete_slot(db, slot)
    return MessageResponse(message="Success")
