"""
Service record model for database.
"""
from sqlalchemy import Column, Date, ForeignKey, Integer, String

from smartpark.database import Base


class ServiceRecord(Base):
    """A package performed on a car on a given date."""

    __tablename__ = "servicePackages"

    record_number = Column("RecordNumber", Integer, primary_key=True, autoincrement=True)
    service_date = Column("ServiceDate", Date, nullable=False)
    plate_number = Column(
        "PlateNumber", String(20), ForeignKey("cars.PlateNumber"), nullable=False, index=True
    )
    package_number = Column(
        "PackageNumber", Integer, ForeignKey("packages.PackageNumber"), nullable=False, index=True
    )
