from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..audit.service import AuditLogger
from ..common.datetime_utils import parse_iso_date, parse_optional_time
from ..common.validators import parse_hours, parse_status
from ..core.enums import AuditAction, WorkStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import WorkLog, WorkLogRow
from .repository import WorkLogRepository


class WorkLogService:
    """Use case: add / edit / delete single work logs (time tracking screen)."""

    def __init__(self, worklogs: WorkLogRepository, employees: EmployeeRepository, audit: AuditLogger):
        self._worklogs = worklogs
        self._employees = employees
        self._audit = audit

    def list_logs(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[WorkStatus] = None,
        search: str = "",
    ) -> list[WorkLogRow]:
        rows = self._worklogs.list_rows(
            start_date=start_date,
            end_date=end_date,
            employee_id=employee_id,
            statuses=[status] if status else None,
        )
        needle = (search or "").strip().lower()
        if needle:
            rows = [r for r in rows if needle in r.employee_name.lower()]
        return list(rows)

    def get(self, log_id: int) -> WorkLog:
        log = self._worklogs.get_by_id(int(log_id))
        if not log:
            raise NotFoundError(f"Work log {log_id} not found")
        return log

    def _employee_name(self, employee_id: int) -> str:
        employee = self._employees.get_by_id(employee_id)
        return employee.name if employee else f"#{employee_id}"

    def add_log(
        self,
        *,
        employee_id: Any,
        work_date: Any,
        total_hours: Any,
        status: Any,
        actor: str,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> WorkLog:
        try:
            employee_id = int(employee_id)
        except (TypeError, ValueError):
            raise ValidationError("Employee is required")
        employee = self._employees.get_by_id(employee_id)
        if not employee or not employee.is_active:
            raise ValidationError("Work can only be logged for active employees")

        day = work_date if isinstance(work_date, date) else parse_iso_date(work_date)
        hours = parse_hours(total_hours)
        st = parse_status(status)

        if self._worklogs.find_for_employee_and_date(employee_id, day):
            raise ValidationError(f"{employee.name} already has a work log on {day.isoformat()}")

        log_id = self._worklogs.insert(
            employee_id=employee_id,
            work_date=day,
            total_hours=hours,
            status=st,
            created_by=actor,
            start_time=parse_optional_time(start_time),
            end_time=parse_optional_time(end_time),
            notes=(notes or "").strip() or None,
        )
        self._audit.record(AuditAction.ADD_WORKLOG, f"Added work log for {employee.name} on {day.isoformat()}", actor)
        return self.get(log_id)

    def update_log(
        self,
        log_id: int,
        *,
        work_date: Any,
        total_hours: Any,
        status: Any,
        actor: str,
        start_time: Any = None,
        end_time: Any = None,
        notes: Optional[str] = None,
    ) -> WorkLog:
        current = self.get(log_id)
        day = work_date if isinstance(work_date, date) else parse_iso_date(work_date)
        hours = parse_hours(total_hours)
        st = parse_status(status)

        if day != current.work_date:
            clash = [
                log
                for log in self._worklogs.find_for_employee_and_date(current.employee_id, day)
                if log.log_id != current.log_id
            ]
            if clash:
                raise ValidationError(f"A work log already exists for this employee on {day.isoformat()}")

        if not self._worklogs.update_log(
            current.log_id,
            work_date=day,
            total_hours=hours,
            status=st,
            modified_by=actor,
            start_time=parse_optional_time(start_time),
            end_time=parse_optional_time(end_time),
            notes=(notes or "").strip() or None,
        ):
            raise NotFoundError(f"Work log {log_id} not found")

        name = self._employee_name(current.employee_id)
        self._audit.record(AuditAction.UPDATE_WORKLOG, f"Updated work log for {name} on {day.isoformat()}", actor)
        return self.get(current.log_id)

    def delete_log(self, log_id: int, *, actor: str) -> None:
        current = self.get(log_id)
        if not self._worklogs.delete(current.log_id):
            raise NotFoundError(f"Work log {log_id} not found")
        name = self._employee_name(current.employee_id)
        self._audit.record(
            AuditAction.DELETE_WORKLOG,
            f"Deleted work log for {name} on {current.work_date.isoformat()}",
            actor,
        )

    def rows_between(self, start: date, end: date, *, employee_id: Optional[int] = None) -> Sequence[WorkLogRow]:
        return self._worklogs.list_rows(start_date=start, end_date=end, employee_id=employee_id)
