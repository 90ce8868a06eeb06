from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from src.worklog_payroll.worklog_payroll.core.enums import WorkStatus
from src.worklog_payroll.worklog_payroll.reports.rollups import overtime_hours, present_today, total_hours_this_month

TODAY = date(2024, 3, 15)


def _r(day, hours, status=WorkStatus.PRESENT):
    return SimpleNamespace(work_date=day, total_hours=Decimal(hours), status=status)


def test_present_today_counts_only_present_rows_for_today():
    rows = [
        _r(TODAY, "8"),
        _r(TODAY, "10", WorkStatus.OVERTIME),
        _r(TODAY, "0", WorkStatus.ABSENT),
        _r(date(2024, 3, 14), "8"),
    ]
    assert present_today(rows, TODAY) == 1


def test_total_hours_this_month_ignores_other_months():
    rows = [_r(date(2024, 3, 1), "8"), _r(TODAY, "2.5", WorkStatus.HOLIDAY), _r(date(2024, 2, 29), "8")]
    assert total_hours_this_month(rows, TODAY) == Decimal("10.5")


def test_overtime_counts_only_hours_beyond_standard_day():
    rows = [
        _r(TODAY, "10", WorkStatus.OVERTIME),
        _r(date(2024, 3, 2), "6", WorkStatus.OVERTIME),
        _r(date(2024, 3, 3), "12", WorkStatus.PRESENT),
        _r(date(2023, 3, 3), "12", WorkStatus.OVERTIME),
    ]
    assert overtime_hours(rows, TODAY) == Decimal("2")


def test_rollups_accept_iso_strings():
    rows = [_r("2024-03-15", "9", WorkStatus.OVERTIME)]
    assert total_hours_this_month(rows, TODAY) == Decimal("9")
    assert overtime_hours(rows, TODAY) == Decimal("1")


def test_empty_input():
    assert present_today([], TODAY) == 0
    assert total_hours_this_month([], TODAY) == 0
    assert overtime_hours([], TODAY) == 0
