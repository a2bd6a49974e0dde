"""
repositories/coercion.py
------------------------
Value conversion at the database boundary.

``to_parameter`` prepares a domain value for binding; the ``*_from_column``
functions turn a fetched column value back into a domain value. ``None`` is
the DB-API null marker in both directions.
"""

from datetime import date, datetime
from typing import Any, Optional

from repositories.exceptions import RowMappingError

# Dates are persisted as text in this exact, locale-independent format.
DATE_FORMAT = "%Y-%m-%d"


def to_parameter(value: Any) -> Any:
    """
    Convert a domain value to a bindable parameter value.

    Raises:
        ValueError: If ``value`` is a ``datetime``. Only the calendar date is
            persisted, so a time part would be lost.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        raise ValueError(f"expected a date without time, got {value!r}")
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    return value


def string_from_column(column: str, raw: Any) -> Optional[str]:
    if raw is None:
        return None
    if isinstance(raw, (bytes, bytearray)):
        raise RowMappingError(column, "expected text, got binary data")
    return str(raw)


def int_from_column(column: str, raw: Any) -> Optional[int]:
    """Accept integers and integer text; fractional values are rejected, not truncated."""
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise RowMappingError(column, f"expected an integer, got {raw!r}")


def date_from_column(column: str, raw: Any) -> Optional[date]:
    """
    Parse a text-encoded date.

    Raises:
        RowMappingError: If the text does not match DATE_FORMAT.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        raise RowMappingError(column, f"expected date text, got {raw!r}")
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        raise RowMappingError(
            column, f"{raw!r} does not match date format {DATE_FORMAT}"
        ) from None
