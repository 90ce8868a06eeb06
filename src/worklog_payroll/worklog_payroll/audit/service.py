from __future__ import annotations

import logging
from collections import OrderedDict
from datetime import date
from typing import Iterable, Sequence, Union

from ..core.constants import DEFAULT_AUDIT_LIMIT
from ..core.enums import AuditAction
from ..core.exceptions import ValidationError
from .model import AdminLog
from .repository import AdminLogRepository

logger = logging.getLogger(__name__)


class AuditLogger:
    """Use case: record and browse administrative actions."""

    def __init__(self, logs: AdminLogRepository, *, default_limit: int = DEFAULT_AUDIT_LIMIT):
        self._logs = logs
        self._default_limit = int(default_limit)

    def record(self, action: Union[AuditAction, str], details: str, admin_id: str) -> int:
        tag = action.value if isinstance(action, AuditAction) else str(action)
        log_id = self._logs.append(action=tag, details=details, admin_id=admin_id)
        logger.info("audit %s by %s: %s", tag, admin_id, details)
        return log_id

    def recent(self, limit: int | None = None) -> Sequence[AdminLog]:
        limit = self._default_limit if limit is None else int(limit)
        if limit < 1:
            raise ValidationError(f"limit must be at least 1, got {limit}")
        return self._logs.list_recent(limit)

    def search(self, term: str, *, limit: int | None = None) -> list[AdminLog]:
        entries = self.recent(limit)
        needle = (term or "").strip().lower()
        if not needle:
            return list(entries)
        return [
            e
            for e in entries
            if needle in e.action.lower() or needle in e.details.lower() or needle in e.admin_id.lower()
        ]

    @staticmethod
    def counts(entries: Iterable[AdminLog]) -> dict[str, int]:
        out = {"add": 0, "update": 0, "delete": 0, "other": 0}
        for e in entries:
            if "ADD" in e.action:
                out["add"] += 1
            elif "UPDATE" in e.action:
                out["update"] += 1
            elif "DELETE" in e.action:
                out["delete"] += 1
            else:
                out["other"] += 1
        return out

    @staticmethod
    def group_by_day(entries: Iterable[AdminLog]) -> "OrderedDict[date, list[AdminLog]]":
        """Group entries by calendar day, newest day first."""

        grouped: dict[date, list[AdminLog]] = {}
        for e in entries:
            grouped.setdefault(e.created_at.date(), []).append(e)
        return OrderedDict(sorted(grouped.items(), key=lambda kv: kv[0], reverse=True))
