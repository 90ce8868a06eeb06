from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Optional, Union

from ..common.validators import parse_status, require_non_negative
from ..core.enums import WorkStatus


def _default_statuses() -> frozenset[WorkStatus]:
    return frozenset({WorkStatus.PRESENT, WorkStatus.OVERTIME})


@dataclass(frozen=True)
class PayablePolicy:
    """Which log statuses count toward pay, and how much overtime per day.

    ``overtime_daily_cap`` limits the payable hours of one overtime log; None
    pays every logged hour. Overtime is paid at the standard hourly rate.
    """

    payable_statuses: frozenset[WorkStatus] = field(default_factory=_default_statuses)
    overtime_daily_cap: Optional[Decimal] = Decimal("12")

    @classmethod
    def from_settings(
        cls,
        statuses: Union[str, Iterable[Any], None] = None,
        overtime_daily_cap: Any = None,
    ) -> "PayablePolicy":
        items = statuses.split(",") if isinstance(statuses, str) else list(statuses or ())
        # unset or blank setting means the default statuses, never an empty policy
        parsed = frozenset(parse_status(s) for s in items if str(s).strip()) or _default_statuses()
        cap = None
        if overtime_daily_cap not in (None, ""):
            cap = require_non_negative(overtime_daily_cap, "Overtime daily cap")
        return cls(payable_statuses=parsed, overtime_daily_cap=cap)
