"""Conversions between MySQL column values and domain values."""

from datetime import datetime
from typing import Any


def parse_db_datetime(value: Any) -> datetime:
    """Returns a DATETIME column as ``datetime``; accepts ISO strings from text protocols."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        # Handle both Z and +00:00 for UTC
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise ValueError(f"Expected a datetime value, got {value!r}")


def parse_db_bool(value: Any) -> bool:
    """Returns a TINYINT(1) flag as ``bool``; only 0 and 1 are accepted."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return value == 1
    raise ValueError(f"Expected a 0/1 flag, got {value!r}")


def to_db_bool(value: bool) -> int:
    return 1 if value else 0
