from __future__ import annotations

from contextlib import closing

from flask import Flask, g, jsonify, request

from ..common.web import error_response, make_guards
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, ValidationError
from ..scanning.image_source import ImageScanSource
from ..scanning.session import ScanEvent, ScanSession
from ..students.store_repository import student_to_doc
from .model import AttendanceOutcome
from .store_repository import record_to_doc


def outcome_to_json(outcome: AttendanceOutcome) -> dict:
    return {
        "success": True,
        "student": student_to_doc(outcome.student),
        "status": outcome.status.value,
        "time": outcome.marked_at,
        "message": f"Marked {outcome.status.value} at {outcome.marked_at}",
        "record": record_to_doc(outcome.record),
    }


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container)

    # One scanner per device: the debounce window spans requests.
    debouncer = container.scan_debouncer

    def _event_response(event: ScanEvent | None):
        if event is None:
            return jsonify({"success": True, "duplicate": True}), 200
        if event.error is not None:
            if isinstance(event.error, DomainError):
                return error_response(event.error)
            return jsonify({"success": False, "error": "decode", "message": str(event.error)}), 400
        return jsonify(outcome_to_json(event.outcome)), 200

    @app.route("/api/attendance/scan", methods=["POST"], endpoint="api_attendance_scan")
    @login_required
    def api_attendance_scan():
        """Decoded text from the browser scanner, or a typed ID with ``"source": "manual"``.

        Typed IDs bypass the re-scan debounce.
        """
        data = request.get_json(silent=True) or {}
        code = str(data.get("code", "")).strip()
        if not code:
            return error_response(ValidationError("Student ID is required"))

        if str(data.get("source", "")).lower() == "manual":
            try:
                outcome = container.attendance_service.record_attendance(code, g.user)
            except DomainError as e:
                return error_response(e)
            return jsonify(outcome_to_json(outcome)), 200

        session = ScanSession(container.attendance_service, g.user, debouncer=debouncer)
        return _event_response(session.handle(code))

    @app.route("/api/attendance/scan/image", methods=["POST"], endpoint="api_attendance_scan_image")
    @login_required
    def api_attendance_scan_image():
        """Decode an uploaded image and mark the first code found."""
        if "image" not in request.files:
            return error_response(ValidationError("Image file is missing"))

        session = ScanSession(container.attendance_service, g.user, debouncer=debouncer)
        source = ImageScanSource([request.files["image"].stream])
        with closing(session.run(source)) as events:
            event = next(events, None)
        if event is None:
            return jsonify({"success": True, "duplicate": True}), 200
        return _event_response(event)

    @app.route("/api/attendance/manual", methods=["POST"], endpoint="api_attendance_manual")
    @login_required
    def api_attendance_manual():
        """List mode: explicit PRESENT / LATE / ABSENT for one student."""
        data = request.get_json(silent=True) or {}
        try:
            try:
                status = AttendanceStatus(str(data.get("status", "")).upper())
            except ValueError:
                raise ValidationError("Invalid status")
            outcome = container.attendance_service.mark_manual(data.get("studentId", ""), status, g.user)
        except DomainError as e:
            return error_response(e)
        return jsonify(outcome_to_json(outcome)), 200

    @app.route("/api/attendance/roster", methods=["GET"], endpoint="api_attendance_roster")
    @login_required
    def api_attendance_roster():
        grade = (request.args.get("grade") or g.user.grade_assigned or "").strip()
        if not grade:
            return error_response(ValidationError("Grade is required"))
        try:
            rows = container.attendance_service.roster(g.user, grade)
        except DomainError as e:
            return error_response(e)
        return jsonify(
            {
                "grade": grade,
                "students": [
                    {"student": student_to_doc(r.student), "status": r.status.value if r.status else None}
                    for r in rows
                ],
            }
        )
