"""
Service record routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.database import get_db
from smartpark.dependencies import get_current_user
from smartpark.schemas.base import Message
from smartpark.schemas.service_record import (
    ServiceRecordCreate,
    ServiceRecordDetail,
    ServiceRecordEcho,
    ServiceRecordMessage,
    ServiceRecordUpdate,
)
from smartpark.services import service_records as record_service

router = APIRouter(prefix="/services", tags=["services"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ServiceRecordDetail])
async def get_service_records(db: AsyncSession = Depends(get_db)):
    """
    Get all service records with their car and package.
    """
    return await record_service.list_records(db)


@router.get("/{record_id}", response_model=ServiceRecordDetail)
async def get_service_record(record_id: int, db: AsyncSession = Depends(get_db)):
    """
    Get a service record with its car and package.
    """
    return await record_service.get_record_detail(db, record_id)


@router.post("", response_model=ServiceRecordMessage, status_code=status.HTTP_201_CREATED)
async def create_service_record(record: ServiceRecordCreate, db: AsyncSession = Depends(get_db)):
    """
    Record a package performed on a car.
    """
    db_record = await record_service.create_record(db, record)
    return ServiceRecordMessage(
        message="Service record added successfully",
        service_package=ServiceRecordEcho.model_validate(db_record),
    )


@router.put("/{record_id}", response_model=ServiceRecordMessage)
async def update_service_record(
    record_id: int,
    record_update: ServiceRecordUpdate,
    db: AsyncSession = Depends(get_db),
):
    db_record = await record_service.update_record(db, record_id, record_update)
    return ServiceRecordMessage(
        message="Service record updated successfully",
        service_package=ServiceRecordEcho.model_validate(db_record),
    )


@router.delete("/{record_id}", response_model=Message)
async def delete_service_record(record_id: int, db: AsyncSession = Depends(get_db)):
    await record_service.delete_record(db, record_id)
    return Message(message="Service record deleted successfully")
