"""
Pydantic schemas for Car.
"""
from typing import Optional

from smartpark.schemas.base import EchoModel, RequestModel, RowModel


class CarUpdate(RequestModel):
    """Schema for updating a car. The plate number comes from the path."""
    car_type: Optional[str] = None
    car_size: Optional[str] = None
    driver_name: Optional[str] = None
    phone_number: Optional[str] = None


class CarCreate(CarUpdate):
    """Schema for registering a car."""
    plate_number: Optional[str] = None


class Car(RowModel):
    """Schema for car responses."""
    plate_number: str
    car_type: str
    car_size: str
    driver_name: str
    phone_number: str


class CarEcho(EchoModel):
    plate_number: str
    car_type: str
    car_size: str
    driver_name: str
    phone_number: str


class CarMessage(EchoModel):
    message: str
    car: CarEcho
