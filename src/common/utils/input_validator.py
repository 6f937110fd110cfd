"""Field validation rules shared by the application services.

Every rule returns the normalized value or raises ``ValidationError`` with a
message that can be shown to the user. Checks run in a fixed order
(required, then format, then length or range) and the first failure wins.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from src.common.exceptions.custom_exceptions import ValidationError

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]{3,20}$")
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
SKU_PATTERN = re.compile(r"^[A-Z0-9-]{3,50}$")
FULL_NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")

MAX_EMAIL_LENGTH = 100
# bcrypt only reads the first 72 bytes
MAX_PASSWORD_BYTES = 72
MAX_PRICE = Decimal("999999.99")
MAX_STOCK = 1_000_000
PRICE_QUANTUM = Decimal("0.01")


def require_not_empty(value: Optional[str], message: str) -> str:
    """Rejects None and the empty string, returns the trimmed value."""
    if value is None or value == "":
        raise ValidationError(message)
    return value.strip()


def validate_string(
    value: Optional[str], field_name: str, min_length: int, max_length: int, allow_empty: bool
) -> str:
    """Validates a free text field against custom length constraints."""
    if value is None:
        raise ValidationError(f"{field_name} cannot be null")

    trimmed = value.strip()

    if not allow_empty and not trimmed:
        raise ValidationError(f"{field_name} cannot be empty")

    if len(trimmed) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")

    if len(trimmed) > max_length:
        raise ValidationError(f"{field_name} is too long (max {max_length} characters)")

    return trimmed


def validate_username(username: Optional[str]) -> str:
    username = require_not_empty(username, "Username cannot be empty")

    if not USERNAME_PATTERN.match(username):
        raise ValidationError("Username must be 3-20 alphanumeric characters or underscores")

    return username


def validate_password(password: Optional[str]) -> str:
    """Enforces the password policy: 8+ chars with upper, lower and digit."""
    password = require_not_empty(password, "Password cannot be empty")

    if len(password) < 8:
        raise ValidationError("Password must be at least 8 characters")

    if not re.search(r"[A-Z]", password):
        raise ValidationError("Password must contain at least one uppercase letter")

    if not re.search(r"[a-z]", password):
        raise ValidationError("Password must contain at least one lowercase letter")

    if not re.search(r"[0-9]", password):
        raise ValidationError("Password must contain at least one number")

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password is too long (max {MAX_PASSWORD_BYTES} bytes)")

    return password


def validate_email(email: Optional[str]) -> str:
    email = require_not_empty(email, "Email cannot be empty").lower()

    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format")

    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(f"Email is too long (max {MAX_EMAIL_LENGTH} characters)")

    return email


def validate_full_name(full_name: Optional[str]) -> str:
    full_name = require_not_empty(full_name, "Full name cannot be empty")

    if len(full_name) < 2:
        raise ValidationError("Full name must be at least 2 characters")

    if len(full_name) > 100:
        raise ValidationError("Full name is too long (max 100 characters)")

    if not FULL_NAME_PATTERN.match(full_name):
        raise ValidationError("Full name can only contain letters and spaces")

    return full_name


def validate_sku(sku: Optional[str]) -> str:
    sku = require_not_empty(sku, "SKU cannot be empty").upper()

    if not SKU_PATTERN.match(sku):
        raise ValidationError("SKU must be 3-50 uppercase alphanumeric characters or hyphens")

    return sku


def validate_price(price: int | float | str | Decimal) -> Decimal:
    """
    Validates a unit price and rounds it half up to two decimal places.

    Floats go through ``str`` first so that 99.995 rounds to 100.00 instead of
    following its binary representation.
    """
    if isinstance(price, bool):
        raise ValidationError("Price must be a number")
    try:
        amount = price if isinstance(price, Decimal) else Decimal(str(price))
    except (InvalidOperation, ValueError):
        raise ValidationError("Price must be a number")
    if not amount.is_finite():
        raise ValidationError("Price must be a number")

    if amount < 0:
        raise ValidationError("Price cannot be negative")

    if amount > MAX_PRICE:
        raise ValidationError("Price is too large (max 999,999.99)")

    return amount.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


def validate_stock(stock: int) -> int:
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise ValidationError("Stock must be a whole number")

    if stock < 0:
        raise ValidationError("Stock cannot be negative")

    if stock > MAX_STOCK:
        raise ValidationError("Stock quantity is too large (max 1,000,000)")

    return stock
