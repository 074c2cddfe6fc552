"""
Pydantic schemas for Package.
"""
from typing import Optional

from smartpark.schemas.base import EchoModel, RequestModel, RowModel


class PackageCreate(RequestModel):
    """Schema for creating a package."""
    package_name: Optional[str] = None
    package_description: Optional[str] = None
    package_price: Optional[float] = None


class PackageUpdate(PackageCreate):
    """Schema for updating a package. All fields are replaced."""
    pass


class Package(RowModel):
    """Schema for package responses."""
    package_number: int
    package_name: str
    package_description: str
    package_price: float


class PackageEcho(EchoModel):
    package_number: int
    package_name: str
    package_description: str
    package_price: float


class PackageMessage(EchoModel):
    message: str
    package: PackageEcho
