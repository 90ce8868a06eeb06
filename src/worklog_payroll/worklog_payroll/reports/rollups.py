"""Dashboard statistics recomputed from the full work-log set on every call.

"Today" and "this month" are matched by prefix on the ISO date string, so any
row exposing ``work_date``, ``status`` and ``total_hours`` works.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Iterable

from ..common.datetime_utils import month_prefix
from ..core.constants import STANDARD_DAY_HOURS
from ..core.enums import WorkStatus


def _iso(value: Any) -> str:
    return value.isoformat() if isinstance(value, date) else str(value)


def present_today(rows: Iterable[Any], today: date) -> int:
    key = today.isoformat()
    return sum(1 for r in rows if _iso(r.work_date) == key and r.status == WorkStatus.PRESENT)


def total_hours_this_month(rows: Iterable[Any], today: date) -> Decimal:
    prefix = month_prefix(today)
    return sum((Decimal(r.total_hours) for r in rows if _iso(r.work_date).startswith(prefix)), Decimal("0"))


def overtime_hours(rows: Iterable[Any], today: date, *, standard_day: Decimal = STANDARD_DAY_HOURS) -> Decimal:
    """Hours beyond a standard day, summed over this month's overtime logs."""

    prefix = month_prefix(today)
    total = Decimal("0")
    for r in rows:
        if r.status == WorkStatus.OVERTIME and _iso(r.work_date).startswith(prefix):
            total += max(Decimal("0"), Decimal(r.total_hours) - standard_day)
    return total
