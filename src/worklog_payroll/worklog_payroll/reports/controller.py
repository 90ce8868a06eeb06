from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.validators import parse_status
from ..common.web import date_arg, error_response, int_arg, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _report():
        today = container.today()
        status_raw = request.args.get("status", "")
        return container.report_service.build_report(
            start=date_arg("start", date(today.year, today.month, 1)),
            end=date_arg("end", today),
            employee_id=int_arg("employee_id"),
            status=parse_status(status_raw) if status_raw and status_raw != "all" else None,
        )

    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            stats = container.dashboard_service.stats(container.today())
            return jsonify({"success": True, **stats.to_dict()})
        except Exception as e:
            return error_response(e)

    @app.route("/api/reports", endpoint="reports")
    @login_required
    def reports():
        try:
            return jsonify({"success": True, **_report().to_dict()})
        except Exception as e:
            return error_response(e)

    @app.route("/api/reports/export", endpoint="reports_export")
    @login_required
    def reports_export():
        try:
            filename, payload = container.report_service.export_csv(_report())
        except Exception as e:
            return error_response(e)
        return app.response_class(
            payload,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
