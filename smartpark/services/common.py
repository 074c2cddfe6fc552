"""
Validation helpers shared by the domain services.
"""
import math
from datetime import datetime, timezone
from typing import Iterable, Optional

from loguru import logger
from pydantic import BaseModel

from smartpark.errors import ValidationError


def is_missing(value) -> bool:
    """Absent, null, blank strings and zero numbers all count as missing."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def require_fields(
    payload: BaseModel,
    fields: Iterable[str],
    message: str = "All fields are required",
) -> None:
    """Raise ValidationError unless every named field of ``payload`` is present."""
    missing = [field for field in fields if is_missing(getattr(payload, field, None))]
    if missing:
        logger.warning("Rejected request with missing fields: {}", ", ".join(missing))
        raise ValidationError(message)


def check_amount(value: float, label: str, max_amount: float) -> float:
    """Amounts must be finite, positive and below ``max_amount``."""
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{label} must be a positive number")
    if value > max_amount:
        raise ValidationError(f"{label} must be less than {max_amount:,.0f}")
    return value


def clean(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


def naive_utc(value: datetime) -> datetime:
    """Timestamps are stored without an offset, in UTC when one was given."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
