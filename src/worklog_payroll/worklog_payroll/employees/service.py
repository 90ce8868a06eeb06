from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..audit.service import AuditLogger
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import AuditAction
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage the employee roster (admin)."""

    def __init__(self, employees: EmployeeRepository, audit: AuditLogger):
        self._employees = employees
        self._audit = audit

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def search(self, term: str) -> list[Employee]:
        needle = (term or "").strip().lower()
        return [e for e in self._employees.list_active() if needle in e.name.lower()]

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _clean(self, *, name: str, hourly_rate: Any, joining_date: Any, gender: Optional[str]):
        name = require_non_empty(name, "Name")
        rate = require_non_negative(hourly_rate, "Hourly rate")
        if not joining_date:
            raise ValidationError("Joining date is required")
        joined = joining_date if isinstance(joining_date, date) else parse_iso_date(joining_date)
        gender = gender.strip().lower() if gender and gender.strip() else None
        return name, rate, joined, gender

    def add_employee(
        self,
        *,
        name: str,
        hourly_rate: Any,
        joining_date: Any,
        actor: str,
        gender: Optional[str] = None,
    ) -> Employee:
        name, rate, joined, gender = self._clean(
            name=name, hourly_rate=hourly_rate, joining_date=joining_date, gender=gender
        )
        employee_id = self._employees.create(name=name, hourly_rate=rate, joining_date=joined, gender=gender)
        self._audit.record(AuditAction.ADD_EMPLOYEE, f"Added new employee: {name}", actor)
        return self.get(employee_id)

    def update_employee(
        self,
        employee_id: int,
        *,
        name: str,
        hourly_rate: Any,
        joining_date: Any,
        actor: str,
        gender: Optional[str] = None,
    ) -> Employee:
        self.get(employee_id)
        name, rate, joined, gender = self._clean(
            name=name, hourly_rate=hourly_rate, joining_date=joining_date, gender=gender
        )
        if not self._employees.update(
            employee_id=int(employee_id), name=name, hourly_rate=rate, joining_date=joined, gender=gender
        ):
            raise NotFoundError(f"Employee {employee_id} not found")
        self._audit.record(AuditAction.UPDATE_EMPLOYEE, f"Updated employee: {name}", actor)
        return self.get(employee_id)

    def deactivate_employee(self, employee_id: int, *, actor: str) -> None:
        employee = self.get(employee_id)
        if not employee.is_active:
            raise ValidationError(f"Employee {employee.name} is already deactivated")
        if not self._employees.set_active(employee.employee_id, is_active=False):
            raise NotFoundError(f"Employee {employee_id} not found")
        self._audit.record(AuditAction.DELETE_EMPLOYEE, f"Deactivated employee: {employee.name}", actor)
