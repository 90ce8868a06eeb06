from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Optional

from .audit.mysql_admin_log_repository import MySQLAdminLogRepository
from .audit.repository import AdminLogRepository
from .audit.service import AuditLogger
from .auth.service import AuthService
from .auth.verifier import CredentialVerifier
from .common.datetime_utils import today_local
from .core.constants import DEFAULT_AUDIT_LIMIT, STANDARD_DAY_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.mysql_salary_repository import MySQLSalaryCalculationRepository
from .payroll.policy import PayablePolicy
from .payroll.repository import SalaryCalculationRepository
from .payroll.service import PayrollService
from .reports.service import DashboardService, ReportService
from .worklogs.mysql_worklog_repository import MySQLWorkLogRepository
from .worklogs.reconciler import AttendanceReconciler
from .worklogs.repository import WorkLogRepository
from .worklogs.service import WorkLogService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    worklogs_repo: WorkLogRepository
    admin_logs_repo: AdminLogRepository
    salaries_repo: SalaryCalculationRepository

    audit_logger: AuditLogger
    auth_service: AuthService
    employee_service: EmployeeService
    worklog_service: WorkLogService
    reconciler: AttendanceReconciler
    payroll_service: PayrollService
    dashboard_service: DashboardService
    report_service: ReportService

    today: Callable[[], date] = today_local
    conn: Optional[DatabaseConnection] = None


def assemble_container(
    *,
    employees_repo: EmployeeRepository,
    worklogs_repo: WorkLogRepository,
    admin_logs_repo: AdminLogRepository,
    salaries_repo: SalaryCalculationRepository,
    verifier: CredentialVerifier,
    policy: Optional[PayablePolicy] = None,
    standard_day: Any = STANDARD_DAY_HOURS,
    audit_limit: int = DEFAULT_AUDIT_LIMIT,
    today: Callable[[], date] = today_local,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""

    standard_day = Decimal(str(standard_day))
    audit_logger = AuditLogger(admin_logs_repo, default_limit=audit_limit)

    return Container(
        employees_repo=employees_repo,
        worklogs_repo=worklogs_repo,
        admin_logs_repo=admin_logs_repo,
        salaries_repo=salaries_repo,
        audit_logger=audit_logger,
        auth_service=AuthService(verifier, audit_logger),
        employee_service=EmployeeService(employees_repo, audit_logger),
        worklog_service=WorkLogService(worklogs_repo, employees_repo, audit_logger),
        reconciler=AttendanceReconciler(worklogs_repo, employees_repo, audit_logger),
        payroll_service=PayrollService(worklogs_repo, salaries_repo, audit_logger, policy=policy),
        dashboard_service=DashboardService(worklogs_repo, employees_repo, standard_day=standard_day),
        report_service=ReportService(worklogs_repo, standard_day=standard_day),
        today=today,
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    verifier: CredentialVerifier,
    policy: Optional[PayablePolicy] = None,
    standard_day: Any = STANDARD_DAY_HOURS,
    audit_limit: int = DEFAULT_AUDIT_LIMIT,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return assemble_container(
        employees_repo=MySQLEmployeeRepository(conn),
        worklogs_repo=MySQLWorkLogRepository(conn),
        admin_logs_repo=MySQLAdminLogRepository(conn),
        salaries_repo=MySQLSalaryCalculationRepository(conn),
        verifier=verifier,
        policy=policy,
        standard_day=standard_day,
        audit_limit=audit_limit,
        conn=conn,
    )
