"""
Car registration and maintenance.
"""
from typing import Sequence

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.errors import ConflictError, NotFoundError, ValidationError
from smartpark.models.car import Car, CarSize
from smartpark.models.service_record import ServiceRecord
from smartpark.schemas.car import CarCreate, CarUpdate
from smartpark.services.common import clean, require_fields

UPDATABLE_FIELDS = ("car_type", "car_size", "driver_name", "phone_number")
DUPLICATE_PLATE = "Car with this plate number already exists"


def _check_size(value: str) -> str:
    value = clean(value)
    try:
        return CarSize(value).value
    except ValueError:
        allowed = ", ".join(size.value for size in CarSize)
        raise ValidationError(f"Car size must be one of: {allowed}")


async def _plate_taken(db: AsyncSession, plate_number: str) -> bool:
    result = await db.execute(select(Car.plate_number).where(Car.plate_number == plate_number))
    return result.scalar_one_or_none() is not None


async def list_cars(db: AsyncSession) -> Sequence[Car]:
    result = await db.execute(select(Car).order_by(Car.plate_number))
    return result.scalars().all()


async def get_car(db: AsyncSession, plate_number: str) -> Car:
    result = await db.execute(select(Car).where(Car.plate_number == clean(plate_number)))
    car = result.scalar_one_or_none()
    if car is None:
        raise NotFoundError("Car not found")
    return car


async def create_car(db: AsyncSession, payload: CarCreate) -> Car:
    """
    Register a car.

    The duplicate-plate lookup is best effort; a concurrent insert of the
    same plate is caught by the primary key and reported the same way.
    """
    require_fields(payload, ("plate_number",) + UPDATABLE_FIELDS)
    car_size = _check_size(payload.car_size)
    plate_number = clean(payload.plate_number)

    if await _plate_taken(db, plate_number):
        logger.warning("Duplicate plate {} rejected", plate_number)
        raise ConflictError(DUPLICATE_PLATE)

    car = Car(
        plate_number=plate_number,
        car_type=clean(payload.car_type),
        car_size=car_size,
        driver_name=clean(payload.driver_name),
        phone_number=clean(payload.phone_number),
    )
    db.add(car)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning("Duplicate plate {} rejected by the store", plate_number)
        raise ConflictError(DUPLICATE_PLATE)

    logger.info("Car {} added", plate_number)
    return car


async def update_car(db: AsyncSession, plate_number: str, payload: CarUpdate) -> Car:
    """Replace the mutable fields of a car. The plate number never changes."""
    require_fields(payload, UPDATABLE_FIELDS)
    car_size = _check_size(payload.car_size)

    car = await get_car(db, plate_number)
    car.car_type = clean(payload.car_type)
    car.car_size = car_size
    car.driver_name = clean(payload.driver_name)
    car.phone_number = clean(payload.phone_number)

    await db.commit()
    await db.refresh(car)

    logger.info("Car {} updated", plate_number)
    return car


async def delete_car(db: AsyncSession, plate_number: str) -> None:
    """Delete a car that no service record refers to."""
    car = await get_car(db, plate_number)

    result = await db.execute(
        select(func.count())
        .select_from(ServiceRecord)
        .where(ServiceRecord.plate_number == car.plate_number)
    )
    if result.scalar_one() > 0:
        raise ConflictError("Car has service records and cannot be deleted")

    await db.delete(car)
    await db.commit()

    logger.info("Car {} deleted", plate_number)
