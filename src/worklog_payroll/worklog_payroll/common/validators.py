from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.constants import MAX_HOURS, MIN_HOURS
from ..core.enums import WorkStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def parse_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not result.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    return result


def require_non_negative(value: Any, field_name: str) -> Decimal:
    result = parse_decimal(value, field_name)
    if result < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return result


def parse_hours(value: Any) -> Decimal:
    """Parse an hours value, rejecting anything outside [0, 24].

    Out-of-range input is rejected rather than clamped so that typing errors
    are not silently turned into plausible numbers.
    """

    hours = parse_decimal(value, "Hours")
    if hours < MIN_HOURS or hours > MAX_HOURS:
        raise ValidationError(f"Hours must be between {MIN_HOURS} and {MAX_HOURS}, got {hours}")
    # Stored as DECIMAL(6, 2); more precision would never compare equal after a round trip.
    if hours != hours.quantize(Decimal("0.01")):
        raise ValidationError(f"Hours can have at most 2 decimal places, got {hours}")
    return hours


def parse_status(value: Any) -> WorkStatus:
    if isinstance(value, WorkStatus):
        return value
    try:
        return WorkStatus(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in WorkStatus)
        raise ValidationError(f"Invalid status {value!r} (allowed: {allowed})")


def require_date_range(start: date, end: date) -> None:
    if start > end:
        raise ValidationError(
            f"Start date {start.isoformat()} must be before or equal to end date {end.isoformat()}"
        )
