from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...worklogs.model import WorkLogRow


class PayrollCalculator(ABC):
    """Turns one work log into payable hours.

    Rows reach the calculator already filtered to payable statuses; pay is
    ``payable_hours * hourly_rate`` summed per employee.
    """

    @abstractmethod
    def payable_hours(self, row: WorkLogRow) -> Decimal:
        """Hours of ``row`` that are paid. Never negative."""
        raise NotImplementedError
