"""
Payment model for database.
"""
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer

from smartpark.database import Base


class Payment(Base):
    """Payment made for a service record.

    At most one payment per record; enforced by the payment service,
    not by the schema.
    """

    __tablename__ = "payments"

    payment_number = Column("PaymentNumber", Integer, primary_key=True, autoincrement=True)
    amount_paid = Column("AmountPaid", Float, nullable=False)
    payment_date = Column("PaymentDate", DateTime, nullable=False, index=True)
    record_number = Column(
        "RecordNumber", Integer, ForeignKey("servicePackages.RecordNumber"), nullable=False, index=True
    )
