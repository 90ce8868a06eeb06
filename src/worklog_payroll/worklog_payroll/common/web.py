"""Flask helpers shared by the feature controllers."""

from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import g, jsonify, request, session

from ..auth.model import AdminSession
from ..core.exceptions import (
    AuthenticationError,
    BatchSaveError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        admin = AdminSession.from_session(session)
        if admin is None:
            return jsonify({"success": False, "message": "Please sign in to continue"}), 401
        g.admin = admin
        return view(*args, **kwargs)

    return wrapper


def current_admin() -> AdminSession:
    return g.admin


def error_response(exc: Exception):
    """Map an exception to a JSON error response."""

    body: dict[str, Any] = {"success": False, "message": str(exc)}
    if isinstance(exc, ValidationError):
        return jsonify(body), 400
    if isinstance(exc, AuthenticationError):
        return jsonify(body), 401
    if isinstance(exc, NotFoundError):
        return jsonify(body), 404
    if isinstance(exc, BatchSaveError):
        body.update(
            date=exc.work_date.isoformat(),
            inserted=exc.inserted,
            updated=exc.updated,
            failed_employee_id=exc.employee_id,
        )
        return jsonify(body), 502
    if isinstance(exc, StoreError):
        return jsonify(body), 502
    if isinstance(exc, DomainError):
        return jsonify(body), 400
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({"success": False, "message": "Internal error"}), 500


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data


def date_arg(name: str, default: Optional[date] = None) -> Optional[date]:
    raw = request.args.get(name, "").strip()
    return parse_iso_date(raw) if raw else default


def int_arg(name: str) -> Optional[int]:
    raw = request.args.get(name, "").strip()
    if not raw or raw == "all":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Invalid {name}: {raw!r}")
