from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the roster.

    Note: employees are never physically removed; ``is_active=False`` marks a
    deactivated employee whose historical work logs stay valid.
    """

    employee_id: int
    name: str
    hourly_rate: Decimal
    joining_date: date
    gender: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "hourly_rate": str(self.hourly_rate),
            "joining_date": self.joining_date.isoformat(),
            "gender": self.gender,
            "is_active": self.is_active,
        }
