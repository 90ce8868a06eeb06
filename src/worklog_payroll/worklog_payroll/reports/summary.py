from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from ..core.constants import STANDARD_DAY_HOURS
from ..core.enums import WorkStatus
from ..worklogs.model import WorkLogRow


@dataclass
class StatusTally:
    total_hours: Decimal = Decimal("0")
    present_days: int = 0
    absent_days: int = 0
    holiday_days: int = 0
    overtime_hours: Decimal = Decimal("0")

    def add(self, row: WorkLogRow, standard_day: Decimal) -> None:
        self.total_hours += Decimal(row.total_hours)
        if row.status == WorkStatus.PRESENT:
            self.present_days += 1
        elif row.status == WorkStatus.OVERTIME:
            # an overtime day is also a day worked
            self.present_days += 1
            self.overtime_hours += max(Decimal("0"), Decimal(row.total_hours) - standard_day)
        elif row.status == WorkStatus.ABSENT:
            self.absent_days += 1
        elif row.status == WorkStatus.HOLIDAY:
            self.holiday_days += 1

    def to_dict(self) -> dict:
        return {
            "total_hours": str(self.total_hours),
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "holiday_days": self.holiday_days,
            "overtime_hours": str(self.overtime_hours),
        }


@dataclass
class ReportSummary:
    overall: StatusTally = field(default_factory=StatusTally)
    per_employee: dict[str, StatusTally] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            **self.overall.to_dict(),
            "employees": {name: t.to_dict() for name, t in sorted(self.per_employee.items())},
        }


def build_summary(rows: Iterable[WorkLogRow], *, standard_day: Decimal = STANDARD_DAY_HOURS) -> ReportSummary:
    summary = ReportSummary()
    for r in rows:
        summary.overall.add(r, standard_day)
        summary.per_employee.setdefault(r.employee_name or "Unknown", StatusTally()).add(r, standard_day)
    return summary
