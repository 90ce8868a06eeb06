from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_admin, error_response, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        try:
            term = request.args.get("q", "")
            employees = container.employee_service.search(term) if term else container.employee_service.list_active()
            return jsonify({"success": True, "employees": [e.to_dict() for e in employees]})
        except Exception as e:
            return error_response(e)

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        try:
            data = json_body()
            employee = container.employee_service.add_employee(
                name=data.get("name", ""),
                hourly_rate=data.get("hourly_rate", 0),
                joining_date=data.get("joining_date"),
                gender=data.get("gender"),
                actor=current_admin().admin_id,
            )
            return jsonify({"success": True, "employee": employee.to_dict()}), 201
        except Exception as e:
            return error_response(e)

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @login_required
    def update_employee(employee_id: int):
        try:
            data = json_body()
            employee = container.employee_service.update_employee(
                employee_id,
                name=data.get("name", ""),
                hourly_rate=data.get("hourly_rate", 0),
                joining_date=data.get("joining_date"),
                gender=data.get("gender"),
                actor=current_admin().admin_id,
            )
            return jsonify({"success": True, "employee": employee.to_dict()})
        except Exception as e:
            return error_response(e)

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="deactivate_employee")
    @login_required
    def deactivate_employee(employee_id: int):
        try:
            container.employee_service.deactivate_employee(employee_id, actor=current_admin().admin_id)
            return jsonify({"success": True, "message": "Employee deactivated"})
        except Exception as e:
            return error_response(e)
