from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .audit.controller import register as register_audit
from .auth.controller import register as register_auth
from .auth.verifier import StaticCredentialVerifier
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .payroll.policy import PayablePolicy
from .reports.controller import register as register_reports
from .worklogs.controller import register as register_worklogs

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def verifier_from_settings(settings: ModuleType) -> StaticCredentialVerifier:
    kwargs = dict(
        username=getattr(settings, "ADMIN_USERNAME", "admin"),
        admin_id=getattr(settings, "ADMIN_ID", "admin-1"),
        name=getattr(settings, "ADMIN_NAME", "System Administrator"),
    )
    password_hash = getattr(settings, "ADMIN_PASSWORD_HASH", "")
    if password_hash:
        return StaticCredentialVerifier(password_hash=password_hash, **kwargs)
    return StaticCredentialVerifier.from_plain_password(password=getattr(settings, "ADMIN_PASSWORD"), **kwargs)


def container_from_settings(settings: ModuleType) -> Container:
    return build_container(
        db_config=getattr(settings, "DB_CONFIG"),
        verifier=verifier_from_settings(settings),
        policy=PayablePolicy.from_settings(
            getattr(settings, "PAYABLE_STATUSES", None),
            getattr(settings, "OVERTIME_DAILY_CAP", None),
        ),
        standard_day=getattr(settings, "STANDARD_DAY_HOURS", "8"),
        audit_limit=int(getattr(settings, "AUDIT_LOG_LIMIT", 100)),
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(days=7)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            app.logger.info("demo seed ready")

        container = container_from_settings(settings)

    app.extensions["worklog_payroll"] = container

    register_auth(app, container)
    register_employees(app, container)
    register_worklogs(app, container)
    register_payroll(app, container)
    register_reports(app, container)
    register_audit(app, container)

    @app.route("/api/health", endpoint="health")
    def health():
        return jsonify({"success": True, "status": "ok"})

    return app
