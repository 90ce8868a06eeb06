from __future__ import annotations

from decimal import Decimal

from ...core.enums import WorkStatus
from ...worklogs.model import WorkLogRow
from ..policy import PayablePolicy
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: logged hours; overtime logs capped at the policy's daily cap."""

    def __init__(self, policy: PayablePolicy | None = None):
        self._policy = policy or PayablePolicy()

    def payable_hours(self, row: WorkLogRow) -> Decimal:
        hours = max(Decimal(row.total_hours), Decimal("0"))
        cap = self._policy.overtime_daily_cap
        if row.status == WorkStatus.OVERTIME and cap is not None:
            return min(hours, cap)
        return hours
