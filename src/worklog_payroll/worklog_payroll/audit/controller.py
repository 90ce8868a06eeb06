from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import error_response, int_arg, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin-logs", endpoint="admin_logs")
    @login_required
    def admin_logs():
        try:
            entries = container.audit_logger.search(request.args.get("q", ""), limit=int_arg("limit"))
            return jsonify(
                {
                    "success": True,
                    "logs": [e.to_dict() for e in entries],
                    "counts": container.audit_logger.counts(entries),
                    "days": [
                        {"date": day.isoformat(), "logs": [e.to_dict() for e in items]}
                        for day, items in container.audit_logger.group_by_day(entries).items()
                    ],
                }
            )
        except Exception as e:
            return error_response(e)
