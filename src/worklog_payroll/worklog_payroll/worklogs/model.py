from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from ..core.enums import WorkStatus


def _fmt_time(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


@dataclass(frozen=True)
class WorkLog:
    """Domain entity: one attendance record for one employee on one date."""

    log_id: int
    employee_id: int
    work_date: date
    total_hours: Decimal
    status: WorkStatus
    created_by: str
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.log_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "total_hours": str(self.total_hours),
            "status": self.status.value,
            "start_time": _fmt_time(self.start_time),
            "end_time": _fmt_time(self.end_time),
            "notes": self.notes or "",
            "created_by": self.created_by,
        }


@dataclass(frozen=True)
class WorkLogRow:
    """Read-model for lists, reports and exports (log joined with its employee).

    ``hourly_rate`` is the employee's current rate, not the rate at log time.
    """

    log_id: int
    employee_id: int
    employee_name: str
    hourly_rate: Decimal
    work_date: date
    total_hours: Decimal
    status: WorkStatus
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    notes: Optional[str] = None
    created_by: str = ""
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.log_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.work_date.isoformat(),
            "total_hours": str(self.total_hours),
            "status": self.status.value,
            "start_time": _fmt_time(self.start_time),
            "end_time": _fmt_time(self.end_time),
            "notes": self.notes or "",
        }
