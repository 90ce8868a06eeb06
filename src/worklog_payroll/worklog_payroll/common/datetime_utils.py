from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def parse_optional_time(value: Any) -> Optional[time]:
    if isinstance(value, time):
        return value
    if value is None or not str(value).strip():
        return None
    raw = str(value).strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(raw, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time: {value!r} (expected HH:MM)")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return date.today()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month."""
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month}")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def month_prefix(day: date) -> str:
    """ISO ``YYYY-MM`` prefix used by the rollups."""
    return day.isoformat()[:7]
