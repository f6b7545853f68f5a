from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import error_response, make_guards
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError, ValidationError
from .store_repository import user_to_doc


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            try:
                role = Role(str(data.get("role", "")).upper())
            except ValueError:
                raise ValidationError("Invalid role")
            user = container.auth_service.login(data.get("email", ""), role)
        except DomainError as e:
            return error_response(e)
        container.scan_debouncer.reset()
        return jsonify({"success": True, "user": user_to_doc(user)}), 200

    @app.route("/api/login/choices", methods=["GET"], endpoint="login_choices")
    def login_choices():
        return jsonify([user_to_doc(u) for u in container.auth_service.list_login_choices()])

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        container.scan_debouncer.reset()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(user_to_doc(g.user))

    @app.route("/api/teachers", methods=["GET"], endpoint="list_teachers")
    @admin_required
    def list_teachers():
        return jsonify([user_to_doc(u) for u in container.user_service.list_teachers()])

    @app.route("/api/teachers", methods=["POST"], endpoint="save_teacher")
    @app.route("/api/teachers/<user_id>", methods=["PUT"], endpoint="update_teacher")
    @admin_required
    def save_teacher(user_id: str | None = None):
        data = request.get_json(silent=True) or {}
        try:
            teacher = container.user_service.save_teacher(
                acting_user=g.user,
                name=data.get("name", ""),
                email=data.get("email", ""),
                grade_assigned=data.get("gradeAssigned"),
                user_id=user_id,
            )
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True, "user": user_to_doc(teacher)}), 200

    @app.route("/api/users/<user_id>", methods=["DELETE"], endpoint="delete_user")
    @admin_required
    def delete_user(user_id: str):
        try:
            container.user_service.delete_user(acting_user=g.user, user_id=user_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True})
