from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Collection, Optional

from src.worklog_payroll.worklog_payroll.audit.model import AdminLog
from src.worklog_payroll.worklog_payroll.core.enums import SalaryStatus, WorkStatus
from src.worklog_payroll.worklog_payroll.core.exceptions import StoreError
from src.worklog_payroll.worklog_payroll.employees.model import Employee
from src.worklog_payroll.worklog_payroll.payroll.model import SalaryCalculation
from src.worklog_payroll.worklog_payroll.worklogs.model import WorkLog, WorkLogRow

BASE_TIME = datetime(2024, 3, 1, 9, 0, 0)


class Clock:
    """Monotonic fake timestamps so ordering by created/updated time is stable."""

    def __init__(self):
        self._ticks = 0

    def now(self) -> datetime:
        self._ticks += 1
        return BASE_TIME + timedelta(seconds=self._ticks)


class InMemoryEmployees:
    def __init__(self, clock: Optional[Clock] = None):
        self.items: dict[int, Employee] = {}
        self._id = 0
        self._clock = clock or Clock()

    def add(self, name: str, rate, *, active: bool = True, joining_date: date = date(2023, 1, 1)) -> Employee:
        employee_id = self.create(name=name, hourly_rate=Decimal(str(rate)), joining_date=joining_date)
        if not active:
            self.set_active(employee_id, is_active=False)
        return self.items[employee_id]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.items.get(int(employee_id))

    def list_active(self):
        return sorted((e for e in self.items.values() if e.is_active), key=lambda e: e.name)

    def create(self, *, name, hourly_rate, joining_date, gender=None) -> int:
        self._id += 1
        now = self._clock.now()
        self.items[self._id] = Employee(
            employee_id=self._id,
            name=name,
            hourly_rate=hourly_rate,
            joining_date=joining_date,
            gender=gender,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        return self._id

    def update(self, *, employee_id, name, hourly_rate, joining_date, gender=None) -> bool:
        current = self.items.get(int(employee_id))
        if not current:
            return False
        self.items[current.employee_id] = Employee(
            employee_id=current.employee_id,
            name=name,
            hourly_rate=hourly_rate,
            joining_date=joining_date,
            gender=gender,
            is_active=current.is_active,
            created_at=current.created_at,
            updated_at=self._clock.now(),
        )
        return True

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        current = self.items.get(int(employee_id))
        if not current:
            return False
        self.items[current.employee_id] = Employee(
            employee_id=current.employee_id,
            name=current.name,
            hourly_rate=current.hourly_rate,
            joining_date=current.joining_date,
            gender=current.gender,
            is_active=is_active,
            created_at=current.created_at,
            updated_at=self._clock.now(),
        )
        return True


class InMemoryWorkLogs:
    """Work-log store joined against an ``InMemoryEmployees`` for read models.

    ``fail_on_write`` makes the n-th write (1-based) raise StoreError.
    """

    def __init__(self, employees: InMemoryEmployees, clock: Optional[Clock] = None):
        self._employees = employees
        self._clock = clock or Clock()
        self.items: dict[int, WorkLog] = {}
        self._id = 0
        self.writes: list[tuple] = []
        self.reads = 0
        self.fail_on_write: Optional[int] = None

    def _check_failure(self) -> None:
        if self.fail_on_write is not None and len(self.writes) + 1 >= self.fail_on_write:
            raise StoreError("connection reset by peer")

    def seed(self, employee_id: int, work_date: date, hours, status: WorkStatus = WorkStatus.PRESENT, **kwargs) -> WorkLog:
        self._id += 1
        now = self._clock.now()
        log = WorkLog(
            log_id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            total_hours=Decimal(str(hours)),
            status=status,
            created_by=kwargs.pop("created_by", "seed"),
            created_at=now,
            updated_at=now,
            **kwargs,
        )
        self.items[self._id] = log
        return log

    def get_by_id(self, log_id: int) -> Optional[WorkLog]:
        return self.items.get(int(log_id))

    def find_for_employee_and_date(self, employee_id: int, work_date: date):
        found = [l for l in self.items.values() if l.employee_id == employee_id and l.work_date == work_date]
        return sorted(found, key=lambda l: (l.updated_at, l.log_id), reverse=True)

    def list_for_date(self, work_date: date):
        self.reads += 1
        return [l for l in self.items.values() if l.work_date == work_date]

    def list_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[int] = None,
        statuses: Optional[Collection[WorkStatus]] = None,
    ):
        self.reads += 1
        rows = []
        for l in self.items.values():
            if start_date is not None and l.work_date < start_date:
                continue
            if end_date is not None and l.work_date > end_date:
                continue
            if employee_id is not None and l.employee_id != employee_id:
                continue
            if statuses is not None and l.status not in statuses:
                continue
            employee = self._employees.get_by_id(l.employee_id)
            rows.append(
                WorkLogRow(
                    log_id=l.log_id,
                    employee_id=l.employee_id,
                    employee_name=employee.name if employee else "Unknown",
                    hourly_rate=employee.hourly_rate if employee else Decimal("0"),
                    work_date=l.work_date,
                    total_hours=l.total_hours,
                    status=l.status,
                    start_time=l.start_time,
                    end_time=l.end_time,
                    notes=l.notes,
                    created_by=l.created_by,
                    created_at=l.created_at,
                )
            )
        rows.sort(key=lambda r: (r.work_date, r.employee_name), reverse=True)
        return rows

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
        self._check_failure()
        log = self.seed(
            employee_id,
            work_date,
            total_hours,
            status,
            created_by=created_by,
            start_time=start_time,
            end_time=end_time,
            notes=notes,
        )
        self.writes.append(("insert", log.log_id, employee_id))
        return log.log_id

    def _replace(self, log_id: int, **changes) -> bool:
        current = self.items.get(int(log_id))
        if not current:
            return False
        data = {**current.__dict__, **changes, "updated_at": self._clock.now()}
        self.items[current.log_id] = WorkLog(**data)
        return True

    def update_hours_status(self, log_id: int, *, total_hours, status, modified_by) -> bool:
        self._check_failure()
        ok = self._replace(log_id, total_hours=total_hours, status=status, created_by=modified_by)
        if ok:
            self.writes.append(("update", int(log_id), self.items[int(log_id)].employee_id))
        return ok

    def update_log(self, log_id: int, *, work_date, total_hours, status, modified_by, start_time=None, end_time=None, notes=None) -> bool:
        self._check_failure()
        ok = self._replace(
            log_id,
            work_date=work_date,
            total_hours=total_hours,
            status=status,
            created_by=modified_by,
            start_time=start_time,
            end_time=end_time,
            notes=notes,
        )
        if ok:
            self.writes.append(("update", int(log_id), self.items[int(log_id)].employee_id))
        return ok

    def delete(self, log_id: int) -> bool:
        self._check_failure()
        removed = self.items.pop(int(log_id), None)
        if removed:
            self.writes.append(("delete", removed.log_id, removed.employee_id))
        return removed is not None


class InMemoryAdminLogs:
    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or Clock()
        self.entries: list[AdminLog] = []

    def append(self, *, action: str, details: str, admin_id: str) -> int:
        log = AdminLog(
            log_id=len(self.entries) + 1,
            action=action,
            details=details,
            admin_id=admin_id,
            created_at=self._clock.now(),
        )
        self.entries.append(log)
        return log.log_id

    def list_recent(self, limit: int):
        return sorted(self.entries, key=lambda e: (e.created_at, e.log_id), reverse=True)[:limit]


class InMemorySalaries:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.items: dict[int, SalaryCalculation] = {}

    def insert(self, *, employee_id, start_date, end_date, total_hours, hourly_rate, total_pay, calculated_on) -> int:
        calculation_id = len(self.items) + 1
        employee = self._employees.get_by_id(employee_id)
        self.items[calculation_id] = SalaryCalculation(
            calculation_id=calculation_id,
            employee_id=employee_id,
            employee_name=employee.name if employee else None,
            start_date=start_date,
            end_date=end_date,
            total_hours=total_hours,
            hourly_rate=hourly_rate,
            total_pay=total_pay,
            status=SalaryStatus.PENDING,
            calculated_on=calculated_on,
        )
        return calculation_id

    def get_by_id(self, calculation_id: int):
        return self.items.get(int(calculation_id))

    def list_calculations(self, *, employee_id=None, status=None, limit=200):
        out = [
            c
            for c in self.items.values()
            if (employee_id is None or c.employee_id == employee_id) and (status is None or c.status == status)
        ]
        return sorted(out, key=lambda c: c.calculation_id, reverse=True)[:limit]

    def set_status(self, calculation_id: int, *, status: SalaryStatus) -> bool:
        current = self.items.get(int(calculation_id))
        if not current:
            return False
        self.items[current.calculation_id] = SalaryCalculation(**{**current.__dict__, "status": status})
        return True
