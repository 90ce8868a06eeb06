from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import current_admin, error_response, json_body, login_required
from ..container import Container
from .model import AdminSession


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        try:
            data = json_body()
            admin = container.auth_service.login(str(data.get("username", "")), str(data.get("password", "")))

            session.clear()
            session.permanent = bool(data.get("remember_me"))
            session[AdminSession.SESSION_KEY] = admin.to_session()

            return jsonify({"success": True, "admin": admin.to_session()})
        except Exception as e:
            return error_response(e)

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    @login_required
    def logout():
        try:
            container.auth_service.logout(current_admin())
        except Exception as e:
            return error_response(e)
        finally:
            session.clear()
        return jsonify({"success": True, "message": "Signed out"})

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return jsonify({"success": True, "admin": current_admin().to_session()})
