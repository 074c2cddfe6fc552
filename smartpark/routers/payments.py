"""
Payment routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.config import Settings, get_settings
from smartpark.database import get_db
from smartpark.dependencies import get_current_user
from smartpark.schemas.payment import Bill, PaymentCreate, PaymentDetail, PaymentEcho, PaymentMessage
from smartpark.services import payments as payment_service

router = APIRouter(prefix="/payments", tags=["payments"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[PaymentDetail])
async def get_payments(db: AsyncSession = Depends(get_db)):
    """
    Get all payments, newest first.
    """
    return await payment_service.list_payments(db)


# Declared before /{payment_id} so "bill" is never parsed as an id
@router.get("/bill/{record_number}", response_model=Bill)
async def get_bill(record_number: int, db: AsyncSession = Depends(get_db)):
    """
    Get the bill of a service record. Payment fields are null while unpaid.
    """
    return await payment_service.get_bill(db, record_number)


@router.get("/{payment_id}", response_model=PaymentDetail)
async def get_payment(payment_id: int, db: AsyncSession = Depends(get_db)):
    return await payment_service.get_payment(db, payment_id)


@router.post("", response_model=PaymentMessage, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment: PaymentCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Record the payment of a service record.
    """
    db_payment = await payment_service.create_payment(db, payment, settings)
    return PaymentMessage(
        message="Payment added successfully", payment=PaymentEcho.model_validate(db_payment)
    )
