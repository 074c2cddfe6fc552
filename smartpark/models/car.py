"""
Car model for database.
"""
import enum

from sqlalchemy import Column, String

from smartpark.database import Base


class CarSize(str, enum.Enum):
    """Car size enumeration."""
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class Car(Base):
    """Car database model, keyed by its plate number."""

    __tablename__ = "cars"

    plate_number = Column("PlateNumber", String(20), primary_key=True)
    car_type = Column("CarType", String(50), nullable=False)
    car_size = Column("CarSize", String(10), nullable=False)
    driver_name = Column("DriverName", String(100), nullable=False)
    phone_number = Column("PhoneNumber", String(20), nullable=False)
