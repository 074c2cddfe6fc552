"""
Pydantic schemas for Payment and Bill.
"""
from datetime import date, datetime
from typing import Optional

from smartpark.schemas.base import EchoModel, RequestModel, RowModel


class PaymentCreate(RequestModel):
    """Schema for recording a payment."""
    amount_paid: Optional[float] = None
    payment_date: Optional[datetime] = None
    record_number: Optional[int] = None


class PaymentDetail(RowModel):
    """Payment joined with its service record, car and package."""
    payment_number: int
    amount_paid: float
    payment_date: datetime
    record_number: int
    service_date: date
    plate_number: str
    driver_name: str
    package_name: str
    package_price: float


class PaymentEcho(EchoModel):
    payment_number: int
    amount_paid: float
    payment_date: datetime
    record_number: int


class PaymentMessage(EchoModel):
    message: str
    payment: PaymentEcho


class Bill(RowModel):
    """
    Composite receipt view of a service record.

    Payment fields are None while the record is unpaid.
    """
    plate_number: str
    driver_name: str
    phone_number: str
    car_type: str
    car_size: str
    package_name: str
    package_description: str
    package_price: float
    service_date: date
    record_number: int
    payment_number: Optional[int] = None
    amount_paid: Optional[float] = None
    payment_date: Optional[datetime] = None
