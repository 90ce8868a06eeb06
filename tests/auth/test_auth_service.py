import pytest

from src.worklog_payroll.worklog_payroll.auth.model import AdminSession
from src.worklog_payroll.worklog_payroll.auth.service import AuthService
from src.worklog_payroll.worklog_payroll.auth.verifier import StaticCredentialVerifier
from src.worklog_payroll.worklog_payroll.core.exceptions import AuthenticationError


@pytest.fixture
def service(audit):
    verifier = StaticCredentialVerifier.from_plain_password(username="admin", password="pw", admin_id="admin-7")
    return AuthService(verifier, audit)


def test_login_success_audits(service, admin_logs):
    admin = service.login(" admin ", "pw")

    assert admin.admin_id == "admin-7"
    assert admin_logs.entries[-1].action == "LOGIN"


@pytest.mark.parametrize("username,password", [("admin", "nope"), ("root", "pw"), ("", "")])
def test_login_failure(service, admin_logs, username, password):
    with pytest.raises(AuthenticationError):
        service.login(username, password)
    assert admin_logs.entries == []


def test_placeholder_hash_never_verifies():
    verifier = StaticCredentialVerifier(username="admin", password_hash="CHANGE_ME")
    assert verifier.verify("admin", "CHANGE_ME") is None


def test_session_round_trip():
    admin = AdminSession(admin_id="admin-1", username="admin", name="Admin")
    assert AdminSession.from_session({AdminSession.SESSION_KEY: admin.to_session()}) == admin
    assert AdminSession.from_session({}) is None
