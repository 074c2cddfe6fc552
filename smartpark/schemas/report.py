"""
Pydantic schemas for reports.
"""
from datetime import date, datetime
from typing import List

from pydantic import Field

from smartpark.schemas.base import EchoModel, RowModel


class ReportRow(RowModel):
    plate_number: str
    package_name: str
    package_description: str
    amount_paid: float
    payment_date: datetime


class DailyReport(EchoModel):
    """Payments of one calendar day and their total."""
    report_date: date = Field(alias="date")
    total_amount: float
    records: List[ReportRow]
    count: int


class Summary(EchoModel):
    """Dashboard figures."""
    car_count: int
    service_count: int
    total_revenue: float
    package_count: int
