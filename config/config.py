"""Settings shared by every environment (overridable through env vars / .env)."""

import os


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "worklog_db"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
}

# Single administrator account; prefer ADMIN_PASSWORD_HASH (werkzeug format) outside development.
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")
ADMIN_ID = os.getenv("ADMIN_ID", "admin-1")
ADMIN_NAME = os.getenv("ADMIN_NAME", "System Administrator")

# Payroll: statuses whose hours are paid, and the payable cap for one overtime day (empty = no cap)
PAYABLE_STATUSES = os.getenv("PAYABLE_STATUSES", "present,overtime")
OVERTIME_DAILY_CAP = os.getenv("OVERTIME_DAILY_CAP", "12")
STANDARD_DAY_HOURS = os.getenv("STANDARD_DAY_HOURS", "8")

AUDIT_LOG_LIMIT = int(os.getenv("AUDIT_LOG_LIMIT", "100"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
