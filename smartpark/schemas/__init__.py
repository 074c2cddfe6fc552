"""
Pydantic schemas for request/response validation.
"""
from smartpark.schemas.base import Message
from smartpark.schemas.user import RegisterRequest, LoginRequest, UserPublic, AuthResponse, SessionStatus
from smartpark.schemas.car import CarCreate, CarUpdate, Car, CarEcho, CarMessage
from smartpark.schemas.package import PackageCreate, PackageUpdate, Package, PackageEcho, PackageMessage
from smartpark.schemas.service_record import (
    ServiceRecordCreate, ServiceRecordUpdate, ServiceRecordDetail, ServiceRecordEcho, ServiceRecordMessage,
)
from smartpark.schemas.payment import PaymentCreate, PaymentDetail, PaymentEcho, PaymentMessage, Bill
from smartpark.schemas.report import ReportRow, DailyReport, Summary

__all__ = [
    "Message",
    "RegisterRequest", "LoginRequest", "UserPublic", "AuthResponse", "SessionStatus",
    "CarCreate", "CarUpdate", "Car", "CarEcho", "CarMessage",
    "PackageCreate", "PackageUpdate", "Package", "PackageEcho", "PackageMessage",
    "ServiceRecordCreate", "ServiceRecordUpdate", "ServiceRecordDetail", "ServiceRecordEcho",
    "ServiceRecordMessage",
    "PaymentCreate", "PaymentDetail", "PaymentEcho", "PaymentMessage", "Bill",
    "ReportRow", "DailyReport", "Summary",
]
