from __future__ import annotations

from datetime import date

import pytest

from src.worklog_payroll.worklog_payroll.audit.service import AuditLogger
from src.worklog_payroll.worklog_payroll.auth.verifier import StaticCredentialVerifier
from src.worklog_payroll.worklog_payroll.container import assemble_container

from tests.fakes import Clock, InMemoryAdminLogs, InMemoryEmployees, InMemorySalaries, InMemoryWorkLogs

ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
def employees(clock) -> InMemoryEmployees:
    return InMemoryEmployees(clock)


@pytest.fixture
def worklogs(employees, clock) -> InMemoryWorkLogs:
    return InMemoryWorkLogs(employees, clock)


@pytest.fixture
def admin_logs(clock) -> InMemoryAdminLogs:
    return InMemoryAdminLogs(clock)


@pytest.fixture
def salaries(employees) -> InMemorySalaries:
    return InMemorySalaries(employees)


@pytest.fixture
def audit(admin_logs) -> AuditLogger:
    return AuditLogger(admin_logs)


@pytest.fixture
def container(employees, worklogs, admin_logs, salaries, fixed_today):
    return assemble_container(
        employees_repo=employees,
        worklogs_repo=worklogs,
        admin_logs_repo=admin_logs,
        salaries_repo=salaries,
        verifier=StaticCredentialVerifier.from_plain_password(username="admin", password=ADMIN_PASSWORD),
        today=lambda: fixed_today,
    )


@pytest.fixture
def app(container):
    from src.worklog_payroll.worklog_payroll.main import create_app

    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    resp = client.post("/api/login", json={"username": "admin", "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client
