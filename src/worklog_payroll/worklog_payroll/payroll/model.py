from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.money import round_money
from ..core.enums import SalaryStatus, WorkStatus


@dataclass(frozen=True)
class PayrollRow:
    employee_id: int
    name: str
    total_hours: Decimal
    hourly_rate: Decimal
    total_pay: Decimal
    days: int

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "total_hours": str(self.total_hours),
            "hourly_rate": str(self.hourly_rate),
            "total_pay": str(round_money(self.total_pay)),
            "days": self.days,
        }


@dataclass(frozen=True)
class PayrollResult:
    """Aggregated pay for a closed date range.

    Values keep full precision; ``to_dict`` rounds money for display.
    """

    start_date: date
    end_date: date
    statuses: frozenset[WorkStatus]
    rows: tuple[PayrollRow, ...]
    total_hours: Decimal
    grand_total: Decimal

    def to_dict(self) -> dict:
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "statuses": sorted(s.value for s in self.statuses),
            "rows": [r.to_dict() for r in self.rows],
            "total_hours": str(self.total_hours),
            "grand_total": str(round_money(self.grand_total)),
        }


@dataclass(frozen=True)
class SalaryCalculation:
    """Persisted snapshot of one payroll row. A cache, not a source of truth."""

    calculation_id: int
    employee_id: int
    start_date: date
    end_date: date
    total_hours: Decimal
    hourly_rate: Decimal
    total_pay: Decimal
    status: SalaryStatus
    calculated_on: date
    employee_name: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.calculation_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "total_hours": str(self.total_hours),
            "hourly_rate": str(self.hourly_rate),
            "total_pay": str(round_money(self.total_pay)),
            "status": self.status.value,
            "calculated_on": self.calculated_on.isoformat(),
        }
