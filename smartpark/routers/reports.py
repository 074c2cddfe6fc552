"""
Report routes.
"""
from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.database import get_db
from smartpark.dependencies import get_current_user
from smartpark.schemas.report import DailyReport, ReportRow, Summary
from smartpark.services import reports as report_service

router = APIRouter(prefix="/reports", tags=["reports"], dependencies=[Depends(get_current_user)])


@router.get("/daily/{report_date}", response_model=DailyReport)
async def get_daily_report(report_date: date, db: AsyncSession = Depends(get_db)):
    """
    Payments of one day with their total.
    """
    return await report_service.daily_report(db, report_date)


@router.get("/payments", response_model=List[ReportRow])
async def get_payments_report(db: AsyncSession = Depends(get_db)):
    return await report_service.all_payments(db)


@router.get("/summary", response_model=Summary)
async def get_summary(db: AsyncSession = Depends(get_db)):
    """
    Car, service and package counts and total revenue.
    """
    return await report_service.summary(db)
