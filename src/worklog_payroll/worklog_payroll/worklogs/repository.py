from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Collection, Optional, Protocol, Sequence

from ..core.enums import WorkStatus
from .model import WorkLog, WorkLogRow


class WorkLogRepository(Protocol):
    def get_by_id(self, log_id: int) -> Optional[WorkLog]:
        raise NotImplementedError

    def find_for_employee_and_date(self, employee_id: int, work_date: date) -> Sequence[WorkLog]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[WorkLog]:
        raise NotImplementedError

    def list_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[int] = None,
        statuses: Optional[Collection[WorkStatus]] = None,
    ) -> Sequence[WorkLogRow]:
        """Rows joined with employees, newest date first. Bounds are inclusive."""

        raise NotImplementedError

    def insert(
        self,
        *,
        employee_id: int,
        work_date: date,
        total_hours: Decimal,
        status: WorkStatus,
        created_by: str,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        notes: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update_hours_status(
        self,
        log_id: int,
        *,
        total_hours: Decimal,
        status: WorkStatus,
        modified_by: str,
    ) -> bool:
        """Returns False when the record no longer exists."""

        raise NotImplementedError

    def update_log(
        self,
        log_id: int,
        *,
        work_date: date,
        total_hours: Decimal,
        status: WorkStatus,
        modified_by: str,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        notes: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, log_id: int) -> bool:
        raise NotImplementedError
