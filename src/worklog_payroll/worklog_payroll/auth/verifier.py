from __future__ import annotations

from typing import Optional, Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from .model import AdminSession


class CredentialVerifier(Protocol):
    """Pluggable credential check; returns the session identity or None."""

    def verify(self, username: str, password: str) -> Optional[AdminSession]:
        raise NotImplementedError


class StaticCredentialVerifier:
    """Single configured administrator account."""

    def __init__(self, *, username: str, password_hash: str, admin_id: str = "admin-1", name: str = "Administrator"):
        self._username = username
        self._password_hash = password_hash
        self._identity = AdminSession(admin_id=admin_id, username=username, name=name)

    @classmethod
    def from_plain_password(cls, *, username: str, password: str, **kwargs) -> "StaticCredentialVerifier":
        return cls(username=username, password_hash=generate_password_hash(password), **kwargs)

    def verify(self, username: str, password: str) -> Optional[AdminSession]:
        if (username or "").strip() != self._username:
            return None
        try:
            ok = check_password_hash(self._password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False
        return self._identity if ok else None
