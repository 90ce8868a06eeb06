from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional, Sequence

from ..audit.service import AuditLogger
from ..common.datetime_utils import today_local
from ..common.validators import parse_status, require_date_range
from ..core.enums import AuditAction, SalaryStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..worklogs.model import WorkLogRow
from ..worklogs.repository import WorkLogRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollResult, PayrollRow, SalaryCalculation
from .policy import PayablePolicy
from .repository import SalaryCalculationRepository

logger = logging.getLogger(__name__)


@dataclass
class _Totals:
    name: str
    hourly_rate: Decimal
    hours: Decimal = Decimal("0")
    days: int = 0


def aggregate(rows: Iterable[WorkLogRow], calculator: PayrollCalculator) -> tuple[PayrollRow, ...]:
    """Group rows by employee and price their payable hours.

    Employees without rows do not appear. Output is sorted by name, then id,
    so it does not depend on the order of ``rows``.
    """

    totals: dict[int, _Totals] = {}
    for r in rows:
        t = totals.get(r.employee_id)
        if t is None:
            t = _Totals(name=r.employee_name, hourly_rate=Decimal(r.hourly_rate))
            totals[r.employee_id] = t
        t.hours += calculator.payable_hours(r)
        t.days += 1

    out = [
        PayrollRow(
            employee_id=employee_id,
            name=t.name,
            total_hours=t.hours,
            hourly_rate=t.hourly_rate,
            total_pay=t.hours * t.hourly_rate,
            days=t.days,
        )
        for employee_id, t in totals.items()
    ]
    out.sort(key=lambda p: (p.name.lower(), p.employee_id))
    return tuple(out)


class PayrollService:
    """Use case: salary for a date range, plus optional persisted snapshots."""

    def __init__(
        self,
        worklogs: WorkLogRepository,
        salaries: SalaryCalculationRepository,
        audit: AuditLogger,
        *,
        policy: Optional[PayablePolicy] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._worklogs = worklogs
        self._salaries = salaries
        self._audit = audit
        self._policy = policy or PayablePolicy()
        self._calculator = calculator or StandardPayrollCalculator(self._policy)

    @property
    def policy(self) -> PayablePolicy:
        return self._policy

    def calculate(self, start: date, end: date, *, statuses: Optional[Iterable[Any]] = None) -> PayrollResult:
        require_date_range(start, end)
        wanted = frozenset(parse_status(s) for s in statuses) if statuses else self._policy.payable_statuses
        if not wanted:
            raise ValidationError("At least one payable status is required")

        rows = self._worklogs.list_rows(start_date=start, end_date=end, statuses=wanted)
        payroll_rows = aggregate(rows, self._calculator)

        total_hours = sum((p.total_hours for p in payroll_rows), Decimal("0"))
        grand_total = sum((p.total_pay for p in payroll_rows), Decimal("0"))
        logger.debug(
            "payroll %s..%s: %d employees, %s hours", start.isoformat(), end.isoformat(), len(payroll_rows), total_hours
        )
        return PayrollResult(
            start_date=start,
            end_date=end,
            statuses=wanted,
            rows=payroll_rows,
            total_hours=total_hours,
            grand_total=grand_total,
        )

    def save_snapshot(self, result: PayrollResult, *, actor: str, calculated_on: Optional[date] = None) -> list[int]:
        if not result.rows:
            raise ValidationError("Nothing to save: no payable hours in this period")

        on = calculated_on or today_local()
        ids = [
            self._salaries.insert(
                employee_id=row.employee_id,
                start_date=result.start_date,
                end_date=result.end_date,
                total_hours=row.total_hours,
                hourly_rate=row.hourly_rate,
                total_pay=row.total_pay,
                calculated_on=on,
            )
            for row in result.rows
        ]
        self._audit.record(
            AuditAction.SALARY_CALCULATION,
            f"Calculated salary for {len(ids)} employees from {result.start_date.isoformat()} "
            f"to {result.end_date.isoformat()}",
            actor,
        )
        return ids

    def list_snapshots(
        self,
        *,
        employee_id: Optional[int] = None,
        status: Optional[SalaryStatus] = None,
    ) -> Sequence[SalaryCalculation]:
        return self._salaries.list_calculations(employee_id=employee_id, status=status)

    def mark_paid(self, calculation_id: int, *, actor: str) -> SalaryCalculation:
        calc = self._salaries.get_by_id(int(calculation_id))
        if not calc:
            raise NotFoundError(f"Salary calculation {calculation_id} not found")
        if calc.status == SalaryStatus.PAID:
            raise ValidationError("Salary calculation is already paid")
        if not self._salaries.set_status(calc.calculation_id, status=SalaryStatus.PAID):
            raise NotFoundError(f"Salary calculation {calculation_id} not found")
        self._audit.record(
            AuditAction.SALARY_PAID,
            f"Marked salary #{calc.calculation_id} ({calc.employee_name or calc.employee_id}) as paid",
            actor,
        )
        return self._salaries.get_by_id(calc.calculation_id) or calc
