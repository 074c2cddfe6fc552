"""
Package routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.config import Settings, get_settings
from smartpark.database import get_db
from smartpark.dependencies import get_current_user
from smartpark.schemas.base import Message
from smartpark.schemas.package import (
    Package as PackageSchema,
    PackageCreate,
    PackageEcho,
    PackageMessage,
    PackageUpdate,
)
from smartpark.services import packages as package_service

router = APIRouter(prefix="/packages", tags=["packages"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[PackageSchema])
async def get_packages(db: AsyncSession = Depends(get_db)):
    """
    Get all packages.
    """
    return await package_service.list_packages(db)


@router.get("/{package_id}", response_model=PackageSchema)
async def get_package(package_id: int, db: AsyncSession = Depends(get_db)):
    return await package_service.get_package(db, package_id)


@router.post("", response_model=PackageMessage, status_code=status.HTTP_201_CREATED)
async def create_package(
    package: PackageCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Add a package to the catalog. The package number is generated.
    """
    db_package = await package_service.create_package(db, package, settings)
    return PackageMessage(
        message="Package added successfully", package=PackageEcho.model_validate(db_package)
    )


@router.put("/{package_id}", response_model=PackageMessage)
async def update_package(
    package_id: int,
    package_update: PackageUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    db_package = await package_service.update_package(db, package_id, package_update, settings)
    return PackageMessage(
        message="Package updated successfully", package=PackageEcho.model_validate(db_package)
    )


@router.delete("/{package_id}", response_model=Message)
async def delete_package(package_id: int, db: AsyncSession = Depends(get_db)):
    await package_service.delete_package(db, package_id)
    return Message(message="Package deleted successfully")
