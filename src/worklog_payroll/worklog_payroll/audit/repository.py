from __future__ import annotations

from typing import Protocol, Sequence

from .model import AdminLog


class AdminLogRepository(Protocol):
    """Append-only store for admin actions.

    Note: there is intentionally no update/delete on this interface.
    """

    def append(self, *, action: str, details: str, admin_id: str) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[AdminLog]:
        """Newest first."""

        raise NotImplementedError
