"""
SQLAlchemy database models.
"""
from smartpark.models.user import User
from smartpark.models.car import Car, CarSize
from smartpark.models.package import Package
from smartpark.models.service_record import ServiceRecord
from smartpark.models.payment import Payment

__all__ = ["User", "Car", "CarSize", "Package", "ServiceRecord", "Payment"]
