from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AdminLog
from .repository import AdminLogRepository


class MySQLAdminLogRepository(AdminLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, *, action: str, details: str, admin_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO admin_logs(action, details, admin_id) VALUES(%s,%s,%s)",
                (action, details, admin_id),
            )
            return int(cur.lastrowid)

    def list_recent(self, limit: int) -> Sequence[AdminLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, action, details, admin_id, created_at
                FROM admin_logs
                ORDER BY created_at DESC, log_id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                AdminLog(
                    log_id=int(r["log_id"]),
                    action=r["action"],
                    details=r["details"],
                    admin_id=r["admin_id"],
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
