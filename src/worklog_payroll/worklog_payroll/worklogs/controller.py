from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_bounds, parse_iso_date
from ..common.validators import parse_status
from ..common.web import current_admin, date_arg, error_response, int_arg, json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError
from .calendar import build_month


def register(app: Flask, container: Container) -> None:
    @app.route("/api/worklogs", methods=["GET"], endpoint="list_worklogs")
    @login_required
    def list_worklogs():
        try:
            status_raw = request.args.get("status", "")
            rows = container.worklog_service.list_logs(
                employee_id=int_arg("employee_id"),
                start_date=date_arg("start"),
                end_date=date_arg("end"),
                status=parse_status(status_raw) if status_raw and status_raw != "all" else None,
                search=request.args.get("q", ""),
            )
            return jsonify({"success": True, "logs": [r.to_dict() for r in rows]})
        except Exception as e:
            return error_response(e)

    @app.route("/api/worklogs", methods=["POST"], endpoint="add_worklog")
    @login_required
    def add_worklog():
        try:
            data = json_body()
            log = container.worklog_service.add_log(
                employee_id=data.get("employee_id"),
                work_date=data.get("date") or container.today().isoformat(),
                total_hours=data.get("total_hours", 0),
                status=data.get("status", "present"),
                start_time=data.get("start_time"),
                end_time=data.get("end_time"),
                notes=data.get("notes"),
                actor=current_admin().admin_id,
            )
            return jsonify({"success": True, "log": log.to_dict()}), 201
        except Exception as e:
            return error_response(e)

    @app.route("/api/worklogs/<int:log_id>", methods=["PUT"], endpoint="update_worklog")
    @login_required
    def update_worklog(log_id: int):
        try:
            data = json_body()
            current = container.worklog_service.get(log_id)
            log = container.worklog_service.update_log(
                log_id,
                work_date=data.get("date") or current.work_date,
                total_hours=data.get("total_hours", current.total_hours),
                status=data.get("status", current.status),
                start_time=data.get("start_time", current.start_time),
                end_time=data.get("end_time", current.end_time),
                notes=data.get("notes", current.notes),
                actor=current_admin().admin_id,
            )
            return jsonify({"success": True, "log": log.to_dict()})
        except Exception as e:
            return error_response(e)

    @app.route("/api/worklogs/<int:log_id>", methods=["DELETE"], endpoint="delete_worklog")
    @login_required
    def delete_worklog(log_id: int):
        try:
            container.worklog_service.delete_log(log_id, actor=current_admin().admin_id)
            return jsonify({"success": True, "message": "Work log deleted"})
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/<day>", methods=["GET"], endpoint="attendance_grid")
    @login_required
    def attendance_grid(day: str):
        try:
            work_date = parse_iso_date(day)
            return jsonify(
                {
                    "success": True,
                    "date": work_date.isoformat(),
                    "employees": container.reconciler.day_grid(work_date),
                }
            )
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/<day>", methods=["POST"], endpoint="attendance_save")
    @login_required
    def attendance_save(day: str):
        try:
            work_date = parse_iso_date(day)
            edits = json_body().get("edits")
            if not isinstance(edits, dict):
                raise ValidationError("'edits' must map employee ids to {hours, status}")
            result = container.reconciler.save_day(work_date, edits, actor=current_admin().admin_id)
            return jsonify({"success": True, **result.to_dict()})
        except Exception as e:
            return error_response(e)

    @app.route("/api/calendar/<int:year>/<int:month>", methods=["GET"], endpoint="calendar_month")
    @login_required
    def calendar_month(year: int, month: int):
        try:
            first, last = month_bounds(year, month)
            employee_id = int_arg("employee_id")
            rows = container.worklog_service.rows_between(first, last, employee_id=employee_id)
            cells = build_month(year, month, rows, today=container.today(), employee_id=employee_id)
            return jsonify({"success": True, "year": year, "month": month, "days": [c.to_dict() for c in cells]})
        except Exception as e:
            return error_response(e)
