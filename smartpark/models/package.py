"""
Package model for database.
"""
from sqlalchemy import Column, Float, Integer, String

from smartpark.database import Base


class Package(Base):
    """Wash package offered to customers."""

    __tablename__ = "packages"

    package_number = Column("PackageNumber", Integer, primary_key=True, autoincrement=True)
    package_name = Column("PackageName", String(100), nullable=False)
    package_description = Column("PackageDescription", String(500), nullable=False)
    package_price = Column("PackagePrice", Float, nullable=False)
