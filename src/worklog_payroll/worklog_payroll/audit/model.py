from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AdminLog:
    """Immutable record of one administrative action."""

    log_id: int
    action: str
    details: str
    admin_id: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.log_id,
            "action": self.action,
            "details": self.details,
            "admin_id": self.admin_id,
            "timestamp": self.created_at.isoformat(),
        }
