from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from telemedicine.common.pagination import ASCENDING, Paged, Paginator
from telemedicine.common.schemas import MessageResponse
from telemedicine.config import settings
from telemedicine.database import get_db
from telemedicine.drug_types.schemas import DrugTypeCreate, DrugTypeResponse, DrugTypeUpdate
from telemedicine.drug_types.service import (
    create_drug_type,
    delete_drug_type,
    get_drug_type,
    get_drug_types,
    update_drug_type,
)

router = APIRouter()


@router.get("", response_model=Paged[DrugTypeResponse])
async def list_drug_types(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: Optional[str] = None,
    limit: int = settings.default_page_limit,
    offset: int = 1,
):
    drug_types = await get_drug_types(db, name)
    return (
        Paginator.from_source(drug_types)
        .get_range(offset, limit, lambda d: d.id, ASCENDING)
        .paginate(DrugTypeResponse.model_validate)
    )


@router.get("/{drug_type_id}", response_model=DrugTypeResponse)
async def get_drug_type_detail(drug_type_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    drug_type = await get_drug_type(db, drug_type_id)
    if drug_type is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Drug type not found")
    return drug_type


@router.post("", response_model=DrugTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_new_drug_type(data: DrugTypeCreate, db: Annotated[AsyncSession, Depends(get_db)]):
    return await create_drug_type(db, data)


@router.put("", response_model=DrugTypeResponse)
async def update_existing_drug_type(data: DrugTypeUpdate, db: Annotated[AsyncSession, Depends(get_db)]):
    drug_type = await get_drug_type(db, data.id)
    if drug_type is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Drug type not found")
    return await update_drug_type(db, drug_type, data)


@router.delete("/{drug_type_id}", response_model=MessageResponse)
async def delete_existing_drug_type(drug_type_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    drug_type = await get_drug_type(db, drug_type_id)
    if drug_type is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Drug type not found")
    await delete_drug_type(db, drug_type)
    return MessageResponse(message="success")
