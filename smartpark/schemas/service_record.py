"""
Pydantic schemas for ServiceRecord.
"""
from datetime import date
from typing import Optional

from smartpark.schemas.base import EchoModel, RequestModel, RowModel


class ServiceRecordCreate(RequestModel):
    """Schema for creating a service record."""
    service_date: Optional[date] = None
    plate_number: Optional[str] = None
    package_number: Optional[int] = None


class ServiceRecordUpdate(ServiceRecordCreate):
    """Schema for updating a service record. All fields are replaced."""
    pass


class ServiceRecordDetail(RowModel):
    """Service record joined with its car and package."""
    record_number: int
    service_date: date
    plate_number: str
    driver_name: str
    car_type: str
    car_size: str
    package_number: int
    package_name: str
    package_description: str
    package_price: float


class ServiceRecordEcho(EchoModel):
    record_number: int
    service_date: date
    plate_number: str
    package_number: int


class ServiceRecordMessage(EchoModel):
    message: str
    service_package: ServiceRecordEcho
