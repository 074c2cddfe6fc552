"""
Client-side form checks.

These mirror what the web forms check before submitting. They are a
convenience for callers; the server validates every request again and
its answer is the one that counts.
"""
import re
from datetime import date, datetime
from typing import Iterable, Mapping, Optional, Union

from smartpark.errors import ValidationError
from smartpark.models.car import CarSize

MAX_AMOUNT = 1_000_000

FULL_NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")
USERNAME_PATTERN = re.compile(r"^[a-zA-Z]+$")
PACKAGE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s]+$")


def validate_required_fields(data: Mapping, required_fields: Iterable[str]) -> None:
    """Check if all required fields are present"""
    missing_fields = [field for field in required_fields if not data.get(field)]
    if missing_fields:
        raise ValidationError("All fields are required")


def validate_registration(full_name: str, username: str, password: str, confirm_password: str) -> None:
    validate_required_fields(
        {"fullName": full_name, "username": username, "password": password, "confirmPassword": confirm_password},
        ("fullName", "username", "password", "confirmPassword"),
    )
    name = full_name.strip()
    if not FULL_NAME_PATTERN.match(name):
        raise ValidationError("Full name must contain only letters and spaces")
    if len(name) < 2:
        raise ValidationError("Full name must be at least 2 characters long")

    if not USERNAME_PATTERN.match(username):
        raise ValidationError("Username must contain only letters")
    if not 3 <= len(username) <= 20:
        raise ValidationError("Username must be between 3 and 20 characters long")

    if len(password) < 6:
        raise ValidationError("Password must be at least 6 characters long")
    if len(password) > 50:
        raise ValidationError("Password must be less than 50 characters long")
    if not (re.search(r"[a-zA-Z]", password) and re.search(r"\d", password)):
        raise ValidationError("Password must contain at least one letter and one number")

    if password != confirm_password:
        raise ValidationError("Passwords do not match")


def is_duplicate_plate(plate_number: str, cars: Iterable[Mapping]) -> bool:
    """Case-insensitive match against already loaded car rows."""
    wanted = plate_number.strip().lower()
    return any(car["PlateNumber"].lower() == wanted for car in cars)


def validate_car(
    plate_number: str,
    car_type: str,
    car_size: str,
    driver_name: str,
    phone_number: str,
    cars: Iterable[Mapping] = (),
    editing: bool = False,
) -> None:
    validate_required_fields(
        {
            "plateNumber": plate_number,
            "carType": car_type,
            "carSize": car_size,
            "driverName": driver_name,
            "phoneNumber": phone_number,
        },
        ("plateNumber", "carType", "carSize", "driverName", "phoneNumber"),
    )
    if car_size not in {size.value for size in CarSize}:
        raise ValidationError("Car size must be Small, Medium or Large")
    if not editing and is_duplicate_plate(plate_number, cars):
        raise ValidationError("Car with this plate number already exists")


def _parse_amount(value: Union[str, float, int], label: str) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} must be a positive number")
    if amount != amount or amount <= 0:  # NaN or non-positive
        raise ValidationError(f"{label} must be a positive number")
    if amount > MAX_AMOUNT:
        raise ValidationError(f"{label} must be less than 1,000,000 RWF")
    return amount


def validate_package(name: str, description: str, price: Union[str, float, int]) -> float:
    """Check a package form and return the parsed price."""
    validate_required_fields(
        {"packageName": name, "packageDescription": description, "packagePrice": price},
        ("packageName", "packageDescription", "packagePrice"),
    )
    if not PACKAGE_NAME_PATTERN.match(name.strip()):
        raise ValidationError("Package name must contain only letters, numbers, and spaces")
    if len(name.strip()) < 2:
        raise ValidationError("Package name must be at least 2 characters long")

    if len(description.strip()) < 10:
        raise ValidationError("Package description must be at least 10 characters long")
    if len(description.strip()) > 500:
        raise ValidationError("Package description must be less than 500 characters long")

    return _parse_amount(price, "Package price")


def _one_year_before(day: date) -> date:
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        # 29 February
        return day.replace(year=day.year - 1, day=28)


def validate_payment(
    amount_paid: Union[str, float, int],
    payment_date: Union[str, date],
    record_number: Union[str, int],
    unpaid_records: Iterable[Mapping],
    today: Optional[date] = None,
) -> float:
    """
    Check a payment form and return the parsed amount.

    ``unpaid_records`` are the service record rows that have no payment
    yet; the chosen record must be one of them.
    """
    validate_required_fields(
        {"amountPaid": amount_paid, "paymentDate": payment_date, "recordNumber": record_number},
        ("amountPaid", "paymentDate", "recordNumber"),
    )
    amount = _parse_amount(amount_paid, "Amount paid")

    if isinstance(payment_date, str):
        try:
            payment_date = datetime.fromisoformat(payment_date).date()
        except ValueError:
            raise ValidationError("Payment date is not a valid date")
    elif isinstance(payment_date, datetime):
        payment_date = payment_date.date()

    today = today or date.today()
    if payment_date > today:
        raise ValidationError("Payment date cannot be in the future")
    if payment_date < _one_year_before(today):
        raise ValidationError("Payment date cannot be more than 1 year ago")

    if not any(str(record["RecordNumber"]) == str(record_number) for record in unpaid_records):
        raise ValidationError("Selected service record does not exist or is already paid")

    return amount
