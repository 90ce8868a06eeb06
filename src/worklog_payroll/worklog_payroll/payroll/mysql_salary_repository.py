from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import SalaryStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from .model import SalaryCalculation
from .repository import SalaryCalculationRepository

_SELECT = """
    SELECT sc.calculation_id, sc.employee_id, e.name AS employee_name,
           sc.start_date, sc.end_date, sc.total_hours, sc.hourly_rate, sc.total_pay,
           sc.status, sc.calculated_on, sc.created_at
    FROM salary_calculations sc
    JOIN employees e ON e.employee_id = sc.employee_id
"""


def _to_calculation(r: dict) -> SalaryCalculation:
    return SalaryCalculation(
        calculation_id=int(r["calculation_id"]),
        employee_id=int(r["employee_id"]),
        employee_name=r.get("employee_name"),
        start_date=r["start_date"],
        end_date=r["end_date"],
        total_hours=to_decimal(r["total_hours"]),
        hourly_rate=to_decimal(r["hourly_rate"]),
        total_pay=to_decimal(r["total_pay"]),
        status=SalaryStatus(r["status"]),
        calculated_on=r["calculated_on"],
        created_at=r.get("created_at"),
    )


class MySQLSalaryCalculationRepository(SalaryCalculationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_calculations(
                    employee_id, start_date, end_date, total_hours, hourly_rate, total_pay, status, calculated_on
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    start_date,
                    end_date,
                    total_hours,
                    hourly_rate,
                    total_pay,
                    SalaryStatus.PENDING.value,
                    calculated_on,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, calculation_id: int) -> Optional[SalaryCalculation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE sc.calculation_id=%s", (int(calculation_id),))
            row = fetchone(cur)
            return _to_calculation(row) if row else None

    def list_calculations(
        self,
        *,
        employee_id: Optional[int] = None,
        status: Optional[SalaryStatus] = None,
        limit: int = 200,
    ) -> Sequence[SalaryCalculation]:
        clauses = ["1=1"]
        params: list[object] = []
        if employee_id is not None:
            clauses.append("sc.employee_id=%s")
            params.append(int(employee_id))
        if status is not None:
            clauses.append("sc.status=%s")
            params.append(status.value)
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE {' AND '.join(clauses)} ORDER BY sc.created_at DESC, sc.calculation_id DESC LIMIT %s",
                tuple(params),
            )
            return [_to_calculation(r) for r in fetchall(cur)]

    def set_status(self, calculation_id: int, *, status: SalaryStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE salary_calculations SET status=%s, updated_at=NOW() WHERE calculation_id=%s",
                (status.value, int(calculation_id)),
            )
            return cur.rowcount > 0
