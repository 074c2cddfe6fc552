"""
Reporting over payments.
"""
from datetime import date, datetime, time, timedelta

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.models.car import Car
from smartpark.models.package import Package
from smartpark.models.payment import Payment
from smartpark.models.service_record import ServiceRecord
from smartpark.schemas.report import DailyReport, ReportRow, Summary


def report_query() -> Select:
    return (
        select(
            Car.plate_number.label("plate_number"),
            Package.package_name.label("package_name"),
            Package.package_description.label("package_description"),
            Payment.amount_paid.label("amount_paid"),
            Payment.payment_date.label("payment_date"),
        )
        .select_from(Payment)
        .join(ServiceRecord, Payment.record_number == ServiceRecord.record_number)
        .join(Car, ServiceRecord.plate_number == Car.plate_number)
        .join(Package, ServiceRecord.package_number == Package.package_number)
        .order_by(Payment.payment_date.desc(), Payment.payment_number.desc())
    )


async def daily_report(db: AsyncSession, day: date) -> DailyReport:
    """Payments made on ``day`` (time of day ignored), newest first."""
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)

    result = await db.execute(
        report_query().where(Payment.payment_date >= start, Payment.payment_date < end)
    )
    records = [ReportRow.model_validate(dict(row)) for row in result.mappings().all()]

    return DailyReport(
        report_date=day,
        total_amount=sum(record.amount_paid for record in records),
        records=records,
        count=len(records),
    )


async def all_payments(db: AsyncSession) -> list[ReportRow]:
    result = await db.execute(report_query())
    return [ReportRow.model_validate(dict(row)) for row in result.mappings().all()]


async def summary(db: AsyncSession) -> Summary:
    """
    Dashboard figures.

    The four aggregates are read in one statement so they describe the
    same snapshot.
    """
    query = select(
        select(func.count()).select_from(Car).scalar_subquery().label("car_count"),
        select(func.count()).select_from(ServiceRecord).scalar_subquery().label("service_count"),
        select(func.coalesce(func.sum(Payment.amount_paid), 0)).scalar_subquery().label("total_revenue"),
        select(func.count()).select_from(Package).scalar_subquery().label("package_count"),
    )
    result = await db.execute(query)
    row = result.mappings().one()

    return Summary(
        car_count=row["car_count"],
        service_count=row["service_count"],
        total_revenue=float(row["total_revenue"] or 0),
        package_count=row["package_count"],
    )
