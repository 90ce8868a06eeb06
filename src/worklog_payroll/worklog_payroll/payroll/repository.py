from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import SalaryStatus
from .model import SalaryCalculation


class SalaryCalculationRepository(Protocol):
    def insert(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        total_hours: Decimal,
        hourly_rate: Decimal,
        total_pay: Decimal,
        calculated_on: date,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, calculation_id: int) -> Optional[SalaryCalculation]:
        raise NotImplementedError

    def list_calculations(
        self,
        *,
        employee_id: Optional[int] = None,
        status: Optional[SalaryStatus] = None,
        limit: int = 200,
    ) -> Sequence[SalaryCalculation]:
        raise NotImplementedError

    def set_status(self, calculation_id: int, *, status: SalaryStatus) -> bool:
        raise NotImplementedError
