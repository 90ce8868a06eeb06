from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class AdminSession:
    """What we store into the Flask session after login.

    ``admin_id`` is stamped on every write (``created_by``) and audit entry.
    """

    admin_id: str
    username: str
    name: str

    SESSION_KEY = "admin"

    def to_session(self) -> dict:
        return asdict(self)

    @classmethod
    def from_session(cls, data: Mapping[str, Any]) -> Optional["AdminSession"]:
        raw = data.get(cls.SESSION_KEY)
        if not raw or not raw.get("admin_id"):
            return None
        return cls(admin_id=str(raw["admin_id"]), username=str(raw.get("username", "")), name=str(raw.get("name", "")))
