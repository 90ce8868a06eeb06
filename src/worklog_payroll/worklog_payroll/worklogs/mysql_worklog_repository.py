from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Collection, Optional, Sequence

from ..core.enums import WorkStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time, to_decimal
from .model import WorkLog, WorkLogRow
from .repository import WorkLogRepository

_LOG_COLUMNS = (
    "log_id, employee_id, work_date, total_hours, status, created_by, "
    "start_time, end_time, notes, created_at, updated_at"
)


def _to_log(r: dict) -> WorkLog:
    return WorkLog(
        log_id=int(r["log_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        total_hours=to_decimal(r["total_hours"]),
        status=WorkStatus(r["status"]),
        created_by=r["created_by"],
        start_time=normalize_mysql_time(r.get("start_time")),
        end_time=normalize_mysql_time(r.get("end_time")),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLWorkLogRepository(WorkLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, log_id: int) -> Optional[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_LOG_COLUMNS} FROM work_logs WHERE log_id=%s", (int(log_id),))
            row = fetchone(cur)
            return _to_log(row) if row else None

    def find_for_employee_and_date(self, employee_id: int, work_date: date) -> Sequence[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_LOG_COLUMNS}
                FROM work_logs
                WHERE employee_id=%s AND work_date=%s
                ORDER BY updated_at DESC, log_id DESC
                """,
                (int(employee_id), work_date),
            )
            return [_to_log(r) for r in fetchall(cur)]

    def list_for_date(self, work_date: date) -> Sequence[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_LOG_COLUMNS} FROM work_logs WHERE work_date=%s ORDER BY employee_id, log_id",
                (work_date,),
            )
            return [_to_log(r) for r in fetchall(cur)]

    def list_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[int] = None,
        statuses: Optional[Collection[WorkStatus]] = None,
    ) -> Sequence[WorkLogRow]:
        clauses = ["1=1"]
        params: list[object] = []

        if start_date is not None:
            clauses.append("wl.work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("wl.work_date <= %s")
            params.append(end_date)
        if employee_id is not None:
            clauses.append("wl.employee_id=%s")
            params.append(int(employee_id))
        if statuses is not None:
            if not statuses:
                return []
            clauses.append(f"wl.status IN ({', '.join(['%s'] * len(statuses))})")
            params.extend(WorkStatus(s).value for s in statuses)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    wl.log_id, wl.employee_id, e.name AS employee_name, e.hourly_rate,
                    wl.work_date, wl.total_hours, wl.status, wl.start_time, wl.end_time,
                    wl.notes, wl.created_by, wl.created_at
                FROM work_logs wl
                JOIN employees e ON e.employee_id = wl.employee_id
                WHERE {where}
                ORDER BY wl.work_date DESC, e.name ASC
                """,
                tuple(params),
            )
            return [
                WorkLogRow(
                    log_id=int(r["log_id"]),
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    hourly_rate=to_decimal(r["hourly_rate"]),
                    work_date=r["work_date"],
                    total_hours=to_decimal(r["total_hours"]),
                    status=WorkStatus(r["status"]),
                    start_time=normalize_mysql_time(r.get("start_time")),
                    end_time=normalize_mysql_time(r.get("end_time")),
                    notes=r.get("notes"),
                    created_by=r.get("created_by") or "",
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]

    def insert(
        self,
        *,
        employee_id: int,
        work_date: date,
        total_hours: Decimal,
        status: WorkStatus,
        created_by: str,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        notes: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_logs(employee_id, work_date, total_hours, status, created_by, start_time, end_time, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), work_date, total_hours, status.value, created_by, start_time, end_time, notes),
            )
            return int(cur.lastrowid)

    def update_hours_status(
        self,
        log_id: int,
        *,
        total_hours: Decimal,
        status: WorkStatus,
        modified_by: str,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_logs
                SET total_hours=%s, status=%s, created_by=%s, updated_at=NOW()
                WHERE log_id=%s
                """,
                (total_hours, status.value, modified_by, int(log_id)),
            )
            return cur.rowcount > 0

    def update_log(
        self,
        log_id: int,
        *,
        work_date: date,
        total_hours: Decimal,
        status: WorkStatus,
        modified_by: str,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        notes: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_logs
                SET work_date=%s, total_hours=%s, status=%s, created_by=%s,
                    start_time=%s, end_time=%s, notes=%s, updated_at=NOW()
                WHERE log_id=%s
                """,
                (work_date, total_hours, status.value, modified_by, start_time, end_time, notes, int(log_id)),
            )
            return cur.rowcount > 0

    def delete(self, log_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_logs WHERE log_id=%s", (int(log_id),))
            return cur.rowcount > 0
