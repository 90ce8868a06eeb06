from __future__ import annotations

from ..audit.service import AuditLogger
from ..core.enums import AuditAction
from ..core.exceptions import AuthenticationError
from .model import AdminSession
from .verifier import CredentialVerifier


class AuthService:
    """Use case: authenticate the administrator (login/logout)."""

    def __init__(self, verifier: CredentialVerifier, audit: AuditLogger):
        self._verifier = verifier
        self._audit = audit

    def login(self, username: str, password: str) -> AdminSession:
        admin = self._verifier.verify(username, password)
        if admin is None:
            raise AuthenticationError("Invalid username or password")
        self._audit.record(AuditAction.LOGIN, f"{admin.username} signed in", admin.admin_id)
        return admin

    def logout(self, admin: AdminSession) -> None:
        self._audit.record(AuditAction.LOGOUT, f"{admin.username} signed out", admin.admin_id)
