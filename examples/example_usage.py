"""Use the service layer directly, without Flask.

Prints this month's payroll and dashboard numbers from the configured database.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.worklog_payroll.worklog_payroll.common.money import format_money
from src.worklog_payroll.worklog_payroll.main import container_from_settings


def main():
    settings = importlib.import_module(get_settings_module())
    container = container_from_settings(settings)

    today = container.today()
    result = container.payroll_service.calculate(date(today.year, today.month, 1), today)
    for row in result.rows:
        print(f"{row.name:<24} {row.total_hours:>8} h  {format_money(row.total_pay):>12}")
    print(f"{'Total':<24} {result.total_hours:>8} h  {format_money(result.grand_total):>12}")

    stats = container.dashboard_service.stats(today)
    print(f"present today: {stats.present_today}, overtime this month: {stats.overtime_hours} h")


if __name__ == "__main__":
    main()
