from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import month_bounds
from .model import WorkLogRow


@dataclass(frozen=True)
class CalendarDay:
    day: date
    is_today: bool
    is_current_month: bool
    logs: tuple[WorkLogRow, ...] = ()

    @property
    def work_log(self) -> Optional[WorkLogRow]:
        return self.logs[0] if self.logs else None

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "is_today": self.is_today,
            "is_current_month": self.is_current_month,
            "status": self.work_log.status.value if self.work_log else None,
            "logs": [r.to_dict() for r in self.logs],
        }


def build_month(
    year: int,
    month: int,
    rows: Iterable[WorkLogRow],
    *,
    today: date,
    employee_id: Optional[int] = None,
) -> list[CalendarDay]:
    """Sunday-first month grid.

    Leading cells from the previous month fill the first week and carry no logs.
    """

    first, last = month_bounds(year, month)

    by_day: dict[date, list[WorkLogRow]] = {}
    for r in rows:
        if employee_id is not None and r.employee_id != employee_id:
            continue
        if first <= r.work_date <= last:
            by_day.setdefault(r.work_date, []).append(r)

    leading = (first.weekday() + 1) % 7
    cells = [
        CalendarDay(day=first - timedelta(days=leading - i), is_today=False, is_current_month=False)
        for i in range(leading)
    ]

    day = first
    while day <= last:
        cells.append(
            CalendarDay(
                day=day,
                is_today=day == today,
                is_current_month=True,
                logs=tuple(sorted(by_day.get(day, []), key=lambda r: r.employee_name)),
            )
        )
        day += timedelta(days=1)
    return cells
