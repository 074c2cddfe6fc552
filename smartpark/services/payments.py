"""
Payments and bills.
"""
from typing import List

from loguru import logger
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.config import Settings
from smartpark.errors import ConflictError, NotFoundError
from smartpark.models.car import Car
from smartpark.models.package import Package
from smartpark.models.payment import Payment
from smartpark.models.service_record import ServiceRecord
from smartpark.schemas.payment import PaymentCreate
from smartpark.services.common import check_amount, naive_utc, require_fields
from smartpark.services.service_records import get_record

FIELDS = ("amount_paid", "payment_date", "record_number")


def detail_query() -> Select:
    return (
        select(
            Payment.payment_number.label("payment_number"),
            Payment.amount_paid.label("amount_paid"),
            Payment.payment_date.label("payment_date"),
            Payment.record_number.label("record_number"),
            ServiceRecord.service_date.label("service_date"),
            Car.plate_number.label("plate_number"),
            Car.driver_name.label("driver_name"),
            Package.package_name.label("package_name"),
            Package.package_price.label("package_price"),
        )
        .select_from(Payment)
        .join(ServiceRecord, Payment.record_number == ServiceRecord.record_number)
        .join(Car, ServiceRecord.plate_number == Car.plate_number)
        .join(Package, ServiceRecord.package_number == Package.package_number)
    )


async def list_payments(db: AsyncSession) -> List[dict]:
    result = await db.execute(
        detail_query().order_by(Payment.payment_date.desc(), Payment.payment_number.desc())
    )
    return [dict(row) for row in result.mappings().all()]


async def get_payment(db: AsyncSession, payment_number: int) -> dict:
    result = await db.execute(detail_query().where(Payment.payment_number == payment_number))
    row = result.mappings().first()
    if row is None:
        raise NotFoundError("Payment not found")
    return dict(row)


async def create_payment(db: AsyncSession, payload: PaymentCreate, settings: Settings) -> Payment:
    """
    Record the payment of a service record.

    A record can be paid once. The amount may differ from the package
    price, for discounts and adjustments.
    """
    require_fields(payload, FIELDS)
    amount = check_amount(payload.amount_paid, "Amount paid", settings.max_amount)
    await get_record(db, payload.record_number)

    result = await db.execute(
        select(Payment.payment_number).where(Payment.record_number == payload.record_number)
    )
    if result.first() is not None:
        logger.warning("Second payment for service record {} rejected", payload.record_number)
        raise ConflictError("Service record is already paid")

    payment = Payment(
        amount_paid=amount,
        payment_date=naive_utc(payload.payment_date),
        record_number=payload.record_number,
    )
    db.add(payment)
    await db.commit()
    await db.refresh(payment)

    logger.info(
        "Payment {} of {} recorded for service record {}",
        payment.payment_number, amount, payload.record_number,
    )
    return payment


async def get_bill(db: AsyncSession, record_number: int) -> dict:
    """Composite receipt view of a service record, paid or not."""
    query = (
        select(
            Car.plate_number.label("plate_number"),
            Car.driver_name.label("driver_name"),
            Car.phone_number.label("phone_number"),
            Car.car_type.label("car_type"),
            Car.car_size.label("car_size"),
            Package.package_name.label("package_name"),
            Package.package_description.label("package_description"),
            Package.package_price.label("package_price"),
            ServiceRecord.service_date.label("service_date"),
            ServiceRecord.record_number.label("record_number"),
            Payment.payment_number.label("payment_number"),
            Payment.amount_paid.label("amount_paid"),
            Payment.payment_date.label("payment_date"),
        )
        .select_from(ServiceRecord)
        .join(Car, ServiceRecord.plate_number == Car.plate_number)
        .join(Package, ServiceRecord.package_number == Package.package_number)
        .outerjoin(Payment, ServiceRecord.record_number == Payment.record_number)
        .where(ServiceRecord.record_number == record_number)
    )
    result = await db.execute(query)
    row = result.mappings().first()
    if row is None:
        raise NotFoundError("Service record not found")
    return dict(row)
