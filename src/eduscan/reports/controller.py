from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import make_guards
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container)

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        data = container.report_service.dashboard(g.user)
        return jsonify(
            {
                "totalStudents": data.total_students,
                "presentToday": data.today.present,
                "lateToday": data.today.late,
                "absentToday": data.today.absent,
                "gradeAssigned": g.user.grade_assigned,
                "window": [
                    {"date": p.date.isoformat(), "present": p.present_count, "absent": p.absent_count}
                    for p in data.window
                ],
            }
        )

    @app.route("/api/reports/students", methods=["GET"], endpoint="report_students")
    @login_required
    def report_students():
        return jsonify(
            [
                {
                    "id": row.student.student_id,
                    "name": row.student.name,
                    "grade": row.student.grade,
                    "total": row.summary.total,
                    "present": row.summary.present,
                    "absent": row.summary.absent,
                    "late": row.summary.late,
                    "percentage": row.summary.percentage,
                }
                for row in container.report_service.student_rows(g.user)
            ]
        )

    @app.route("/api/reports/export.csv", methods=["GET"], endpoint="report_csv")
    @login_required
    def report_csv():
        export = container.report_service.export_csv(g.user)
        return app.response_class(
            export.content.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/api/reports/ai-summary", methods=["POST"], endpoint="report_ai_summary")
    @login_required
    def report_ai_summary():
        students, records = container.report_service.snapshot(g.user)
        text = container.summary_service.generate_report(students, records)
        return jsonify({"configured": container.summary_service.is_configured, "summary": text})
