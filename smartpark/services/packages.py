"""
Service package catalog.
"""
from typing import Sequence

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.config import Settings
from smartpark.errors import ConflictError, NotFoundError
from smartpark.models.package import Package
from smartpark.models.service_record import ServiceRecord
from smartpark.schemas.package import PackageCreate, PackageUpdate
from smartpark.services.common import check_amount, clean, require_fields

FIELDS = ("package_name", "package_description", "package_price")


async def list_packages(db: AsyncSession) -> Sequence[Package]:
    result = await db.execute(select(Package).order_by(Package.package_number))
    return result.scalars().all()


async def get_package(db: AsyncSession, package_number: int) -> Package:
    result = await db.execute(select(Package).where(Package.package_number == package_number))
    package = result.scalar_one_or_none()
    if package is None:
        raise NotFoundError("Package not found")
    return package


async def create_package(db: AsyncSession, payload: PackageCreate, settings: Settings) -> Package:
    require_fields(payload, FIELDS)
    price = check_amount(payload.package_price, "Package price", settings.max_amount)

    package = Package(
        package_name=clean(payload.package_name),
        package_description=clean(payload.package_description),
        package_price=price,
    )
    db.add(package)
    await db.commit()
    await db.refresh(package)

    logger.info("Package {} ({}) added", package.package_number, package.package_name)
    return package


async def update_package(
    db: AsyncSession, package_number: int, payload: PackageUpdate, settings: Settings
) -> Package:
    require_fields(payload, FIELDS)
    price = check_amount(payload.package_price, "Package price", settings.max_amount)

    package = await get_package(db, package_number)
    package.package_name = clean(payload.package_name)
    package.package_description = clean(payload.package_description)
    package.package_price = price

    await db.commit()
    await db.refresh(package)

    logger.info("Package {} updated", package_number)
    return package


async def delete_package(db: AsyncSession, package_number: int) -> None:
    """Delete a package that no service record refers to."""
    package = await get_package(db, package_number)

    result = await db.execute(
        select(func.count())
        .select_from(ServiceRecord)
        .where(ServiceRecord.package_number == package_number)
    )
    if result.scalar_one() > 0:
        raise ConflictError("Package is used by service records and cannot be deleted")

    await db.delete(package)
    await db.commit()

    logger.info("Package {} deleted", package_number)
