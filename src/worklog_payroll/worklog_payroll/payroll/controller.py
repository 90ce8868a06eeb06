from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import current_admin, date_arg, error_response, int_arg, json_body, login_required
from ..container import Container
from ..core.enums import SalaryStatus
from ..core.exceptions import ValidationError


def _statuses(raw) -> list[str] | None:
    if not raw:
        return None
    if isinstance(raw, str):
        return [s for s in raw.split(",") if s.strip()]
    return list(raw)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="payroll")
    @login_required
    def payroll():
        try:
            today = container.today()
            result = container.payroll_service.calculate(
                date_arg("start", today),
                date_arg("end", today),
                statuses=_statuses(request.args.get("status", "")),
            )
            return jsonify({"success": True, **result.to_dict()})
        except Exception as e:
            return error_response(e)

    @app.route("/api/payroll/snapshots", methods=["POST"], endpoint="save_payroll_snapshot")
    @login_required
    def save_payroll_snapshot():
        try:
            data = json_body()
            if not data.get("start") or not data.get("end"):
                raise ValidationError("Please select both start and end dates")
            result = container.payroll_service.calculate(
                parse_iso_date(data["start"]),
                parse_iso_date(data["end"]),
                statuses=_statuses(data.get("statuses")),
            )
            ids = container.payroll_service.save_snapshot(
                result, actor=current_admin().admin_id, calculated_on=container.today()
            )
            return jsonify({"success": True, "ids": ids, **result.to_dict()}), 201
        except Exception as e:
            return error_response(e)

    @app.route("/api/payroll/snapshots", methods=["GET"], endpoint="list_payroll_snapshots")
    @login_required
    def list_payroll_snapshots():
        try:
            status_raw = request.args.get("status", "")
            try:
                status = SalaryStatus(status_raw) if status_raw else None
            except ValueError:
                raise ValidationError(f"Invalid salary status: {status_raw!r}")
            snapshots = container.payroll_service.list_snapshots(employee_id=int_arg("employee_id"), status=status)
            return jsonify({"success": True, "snapshots": [s.to_dict() for s in snapshots]})
        except Exception as e:
            return error_response(e)

    @app.route("/api/payroll/snapshots/<int:calculation_id>/paid", methods=["POST"], endpoint="mark_salary_paid")
    @login_required
    def mark_salary_paid(calculation_id: int):
        try:
            calc = container.payroll_service.mark_paid(calculation_id, actor=current_admin().admin_id)
            return jsonify({"success": True, "snapshot": calc.to_dict()})
        except Exception as e:
            return error_response(e)
