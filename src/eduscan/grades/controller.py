from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import error_response, make_guards
from ..container import Container
from ..core.exceptions import DomainError
from .store_repository import grade_to_doc


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container)

    @app.route("/api/grades", methods=["GET"], endpoint="list_grades")
    @login_required
    def list_grades():
        return jsonify([grade_to_doc(gr) for gr in container.grade_service.list_grades()])

    @app.route("/api/grades", methods=["POST"], endpoint="save_grade")
    @app.route("/api/grades/<grade_id>", methods=["PUT"], endpoint="update_grade")
    @admin_required
    def save_grade(grade_id: str | None = None):
        data = request.get_json(silent=True) or {}
        try:
            grade = container.grade_service.save_grade(
                acting_user=g.user,
                name=data.get("name", ""),
                subjects=data.get("subjects", ""),
                grade_id=grade_id,
            )
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True, "grade": grade_to_doc(grade)})

    @app.route("/api/grades/<grade_id>", methods=["DELETE"], endpoint="delete_grade")
    @admin_required
    def delete_grade(grade_id: str):
        try:
            container.grade_service.delete_grade(acting_user=g.user, grade_id=grade_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True})

    @app.route("/api/grades/dangling", methods=["GET"], endpoint="dangling_grades")
    @admin_required
    def dangling_grades():
        found = container.grade_service.find_dangling_references(
            students=container.students_repo.list_all(),
            users=container.users_repo.list_all(),
        )
        return jsonify([{"kind": d.kind, "id": d.entity_id, "grade": d.grade_name} for d in found])
