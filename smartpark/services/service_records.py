"""
Service records: a package performed on a car on a date.

Reads are joined with the car and the package so callers get a
denormalized row per record.
"""
from typing import List

from loguru import logger
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.errors import ConflictError, NotFoundError, ValidationError
from smartpark.models.car import Car
from smartpark.models.package import Package
from smartpark.models.payment import Payment
from smartpark.models.service_record import ServiceRecord
from smartpark.schemas.service_record import ServiceRecordCreate, ServiceRecordUpdate
from smartpark.services.common import clean, require_fields

FIELDS = ("service_date", "plate_number", "package_number")


def detail_query() -> Select:
    return (
        select(
            ServiceRecord.record_number.label("record_number"),
            ServiceRecord.service_date.label("service_date"),
            Car.plate_number.label("plate_number"),
            Car.driver_name.label("driver_name"),
            Car.car_type.label("car_type"),
            Car.car_size.label("car_size"),
            Package.package_number.label("package_number"),
            Package.package_name.label("package_name"),
            Package.package_description.label("package_description"),
            Package.package_price.label("package_price"),
        )
        .select_from(ServiceRecord)
        .join(Car, ServiceRecord.plate_number == Car.plate_number)
        .join(Package, ServiceRecord.package_number == Package.package_number)
    )


async def list_records(db: AsyncSession) -> List[dict]:
    result = await db.execute(detail_query().order_by(ServiceRecord.record_number))
    return [dict(row) for row in result.mappings().all()]


async def get_record_detail(db: AsyncSession, record_number: int) -> dict:
    result = await db.execute(detail_query().where(ServiceRecord.record_number == record_number))
    row = result.mappings().first()
    if row is None:
        raise NotFoundError("Service record not found")
    return dict(row)


async def get_record(db: AsyncSession, record_number: int) -> ServiceRecord:
    result = await db.execute(select(ServiceRecord).where(ServiceRecord.record_number == record_number))
    record = result.scalar_one_or_none()
    if record is None:
        raise NotFoundError("Service record not found")
    return record


async def _check_references(db: AsyncSession, plate_number: str, package_number: int) -> None:
    if await db.get(Car, plate_number) is None:
        raise ValidationError(f"Car {plate_number} does not exist")
    if await db.get(Package, package_number) is None:
        raise ValidationError(f"Package {package_number} does not exist")


async def create_record(db: AsyncSession, payload: ServiceRecordCreate) -> ServiceRecord:
    require_fields(payload, FIELDS)
    plate_number = clean(payload.plate_number)
    await _check_references(db, plate_number, payload.package_number)

    record = ServiceRecord(
        service_date=payload.service_date,
        plate_number=plate_number,
        package_number=payload.package_number,
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)

    logger.info(
        "Service record {} added for {} (package {})",
        record.record_number, plate_number, payload.package_number,
    )
    return record


async def update_record(
    db: AsyncSession, record_number: int, payload: ServiceRecordUpdate
) -> ServiceRecord:
    require_fields(payload, FIELDS)
    record = await get_record(db, record_number)
    plate_number = clean(payload.plate_number)
    await _check_references(db, plate_number, payload.package_number)

    record.service_date = payload.service_date
    record.plate_number = plate_number
    record.package_number = payload.package_number

    await db.commit()
    await db.refresh(record)

    logger.info("Service record {} updated", record_number)
    return record


async def delete_record(db: AsyncSession, record_number: int) -> None:
    """Delete an unpaid service record."""
    record = await get_record(db, record_number)

    result = await db.execute(
        select(func.count()).select_from(Payment).where(Payment.record_number == record_number)
    )
    if result.scalar_one() > 0:
        raise ConflictError("Service record has a payment and cannot be deleted")

    await db.delete(record)
    await db.commit()

    logger.info("Service record {} deleted", record_number)
