from __future__ import annotations

from flask import Flask, g, jsonify, request, send_file

from ..common.web import error_response, make_guards
from ..container import Container
from ..core.exceptions import DomainError
from ..scanning.qr import render_qr_png
from .store_repository import student_to_doc


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container)

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @login_required
    def list_students():
        items = container.student_service.list_visible(g.user, search=request.args.get("q", ""))
        return jsonify([student_to_doc(s) for s in items])

    @app.route("/api/students", methods=["POST"], endpoint="save_student")
    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="update_student")
    @login_required
    def save_student(student_id: str | None = None):
        data = request.get_json(silent=True) or {}
        try:
            student = container.student_service.save_student(
                acting_user=g.user,
                name=data.get("name", ""),
                father_name=data.get("fatherName", ""),
                grade=data.get("grade", ""),
                section=data.get("section", ""),
                roll_no=data.get("rollNo", ""),
                contact=data.get("contact", ""),
                student_id=student_id or data.get("id"),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True, "student": student_to_doc(student)})

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @login_required
    def delete_student(student_id: str):
        try:
            container.student_service.delete_student(acting_user=g.user, student_id=student_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True})

    @app.route("/api/students/<student_id>/qr", methods=["GET"], endpoint="student_qr_image")
    @login_required
    def student_qr_image(student_id: str):
        """PNG QR code carrying the student's id."""
        student = container.student_service.get_visible(g.user, student_id)
        if not student:
            return jsonify({"success": False, "message": "Student not found"}), 404
        return send_file(render_qr_png(student.student_id), mimetype="image/png")
