from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.validators import require_date_range
from ..core.constants import RECENT_ACTIVITY_LIMIT, STANDARD_DAY_HOURS
from ..core.enums import WorkStatus
from ..employees.repository import EmployeeRepository
from ..worklogs.model import WorkLogRow
from ..worklogs.repository import WorkLogRepository
from .export import export_filename, rows_to_csv
from .rollups import overtime_hours, present_today, total_hours_this_month
from .summary import ReportSummary, build_summary


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    present_today: int
    total_hours_this_month: Decimal
    overtime_hours: Decimal
    recent_activity: tuple[WorkLogRow, ...]

    def to_dict(self) -> dict:
        return {
            "total_employees": self.total_employees,
            "present_today": self.present_today,
            "total_hours_this_month": str(self.total_hours_this_month),
            "overtime_hours": str(self.overtime_hours),
            "recent_activity": [r.to_dict() for r in self.recent_activity],
        }


@dataclass(frozen=True)
class ReportData:
    start_date: date
    end_date: date
    rows: list[WorkLogRow]
    summary: ReportSummary

    def to_dict(self) -> dict:
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "rows": [r.to_dict() for r in self.rows],
            "summary": self.summary.to_dict(),
        }


class DashboardService:
    def __init__(
        self,
        worklogs: WorkLogRepository,
        employees: EmployeeRepository,
        *,
        standard_day: Decimal = STANDARD_DAY_HOURS,
    ):
        self._worklogs = worklogs
        self._employees = employees
        self._standard_day = Decimal(standard_day)

    def stats(self, today: date) -> DashboardStats:
        rows = list(self._worklogs.list_rows())
        recent = sorted(
            rows,
            key=lambda r: (r.created_at is not None, r.created_at or 0, r.log_id),
            reverse=True,
        )[:RECENT_ACTIVITY_LIMIT]
        return DashboardStats(
            total_employees=len(self._employees.list_active()),
            present_today=present_today(rows, today),
            total_hours_this_month=total_hours_this_month(rows, today),
            overtime_hours=overtime_hours(rows, today, standard_day=self._standard_day),
            recent_activity=tuple(recent),
        )


class ReportService:
    def __init__(self, worklogs: WorkLogRepository, *, standard_day: Decimal = STANDARD_DAY_HOURS):
        self._worklogs = worklogs
        self._standard_day = Decimal(standard_day)

    def build_report(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
        status: Optional[WorkStatus] = None,
    ) -> ReportData:
        require_date_range(start, end)
        rows = list(
            self._worklogs.list_rows(
                start_date=start,
                end_date=end,
                employee_id=employee_id,
                statuses=[status] if status else None,
            )
        )
        return ReportData(
            start_date=start,
            end_date=end,
            rows=rows,
            summary=build_summary(rows, standard_day=self._standard_day),
        )

    def export_csv(self, report: ReportData) -> tuple[str, bytes]:
        return export_filename(report.start_date, report.end_date), rows_to_csv(report.rows)
