"""
Car routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.database import get_db
from smartpark.dependencies import get_current_user
from smartpark.schemas.base import Message
from smartpark.schemas.car import Car as CarSchema, CarCreate, CarEcho, CarMessage, CarUpdate
from smartpark.services import cars as car_service

router = APIRouter(prefix="/cars", tags=["cars"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[CarSchema])
async def get_cars(db: AsyncSession = Depends(get_db)):
    """
    Get all cars.
    """
    return await car_service.list_cars(db)


@router.get("/{plate_number}", response_model=CarSchema)
async def get_car(plate_number: str, db: AsyncSession = Depends(get_db)):
    """
    Get a car by plate number.
    """
    return await car_service.get_car(db, plate_number)


@router.post("", response_model=CarMessage, status_code=status.HTTP_201_CREATED)
async def create_car(car: CarCreate, db: AsyncSession = Depends(get_db)):
    """
    Register a new car.
    """
    db_car = await car_service.create_car(db, car)
    return CarMessage(message="Car added successfully", car=CarEcho.model_validate(db_car))


@router.put("/{plate_number}", response_model=CarMessage)
async def update_car(plate_number: str, car_update: CarUpdate, db: AsyncSession = Depends(get_db)):
    """
    Update a car. The plate number itself cannot change.
    """
    db_car = await car_service.update_car(db, plate_number, car_update)
    return CarMessage(message="Car updated successfully", car=CarEcho.model_validate(db_car))


@router.delete("/{plate_number}", response_model=Message)
async def delete_car(plate_number: str, db: AsyncSession = Depends(get_db)):
    """
    Delete a car.
    """
    await car_service.delete_car(db, plate_number)
    return Message(message="Car deleted successfully")
