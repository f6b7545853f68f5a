from __future__ import annotations

from eduscan.store.document_store import ATTENDANCE


def login(client, email="teacher@school.com", role="TEACHER"):
    return client.post("/api/login", json={"email": email, "role": role})


def test_requires_login(client):
    assert client.get("/api/dashboard").status_code == 401
    assert client.post("/api/attendance/scan", json={"code": "ST-2024-001"}).status_code == 401


def test_login_with_wrong_role_fails(client):
    resp = login(client, email="teacher@school.com", role="ADMIN")
    assert resp.status_code == 401


def test_teacher_scan_flow(client, container):
    assert login(client).status_code == 200

    ok = client.post("/api/attendance/scan", json={"code": "ST-2024-001"})
    assert ok.status_code == 200
    body = ok.get_json()
    assert body["student"]["id"] == "ST-2024-001"
    assert body["status"] in ("PRESENT", "LATE")
    assert body["record"]["markedBy"] == "teacher1"

    again = client.post("/api/attendance/scan", json={"code": "ST-2024-001"})
    assert again.get_json() == {"success": True, "duplicate": True}

    denied = client.post("/api/attendance/scan", json={"code": "ST-2024-003"})
    assert denied.status_code == 403
    assert denied.get_json()["message"] == "RESTRICTED: You are assigned to Grade 10. This student is in Grade 9."

    unknown = client.post("/api/attendance/scan", json={"code": "XYZ"})
    assert unknown.status_code == 400
    assert unknown.get_json()["message"] == "Invalid Student ID: XYZ"

    assert len(container.store.list(ATTENDANCE)) == 1


def test_manual_override_replaces_scan(client, container):
    login(client, email="admin@school.com", role="ADMIN")
    client.post("/api/attendance/scan", json={"code": "ST-2024-003"})

    resp = client.post("/api/attendance/manual", json={"studentId": "ST-2024-003", "status": "absent"})

    assert resp.status_code == 200
    docs = container.store.list(ATTENDANCE)
    assert [(d["studentId"], d["status"]) for d in docs] == [("ST-2024-003", "ABSENT")]


def test_manual_rejects_bad_status(client):
    login(client)
    resp = client.post("/api/attendance/manual", json={"studentId": "ST-2024-001", "status": "SICK"})
    assert resp.status_code == 400


def test_roster_defaults_to_assigned_grade(client):
    login(client)
    body = client.get("/api/attendance/roster").get_json()
    assert body["grade"] == "Grade 10"
    assert [row["student"]["id"] for row in body["students"]] == ["ST-2024-001", "ST-2024-002"]

    assert client.get("/api/attendance/roster?grade=Grade%209").status_code == 403


def test_dashboard_and_csv_are_scoped(client):
    login(client)
    dashboard = client.get("/api/dashboard").get_json()
    assert dashboard["totalStudents"] == 2
    assert len(dashboard["window"]) == 5

    resp = client.get("/api/reports/export.csv")
    assert resp.mimetype == "text/csv"
    assert "Attendance_Report_" in resp.headers["Content-Disposition"]
    lines = resp.get_data(as_text=True).splitlines()
    assert lines[0] == "Student ID, Name, Grade, Total Days, Present, Absent, Late"
    assert len(lines) == 3


def test_ai_summary_without_key(client):
    login(client)
    body = client.post("/api/reports/ai-summary").get_json()
    assert body["configured"] is False
    assert body["summary"].startswith("API Key not configured")


def test_teacher_cannot_manage_teachers(client):
    login(client)
    assert client.get("/api/teachers").status_code == 403


def test_logout_clears_session(client):
    login(client)
    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401


def test_typed_id_repeat_is_recorded(client, container):
    login(client)

    first = client.post("/api/attendance/scan", json={"code": "ST-2024-001", "source": "manual"})
    second = client.post("/api/attendance/scan", json={"code": "ST-2024-001", "source": "manual"})

    assert first.status_code == 200
    assert second.status_code == 200
    assert "duplicate" not in second.get_json()
    assert second.get_json()["record"]["id"] != first.get_json()["record"]["id"]
    assert [d["id"] for d in container.store.list(ATTENDANCE)] == [second.get_json()["record"]["id"]]


def test_typed_id_errors_are_reported(client):
    login(client)
    resp = client.post("/api/attendance/scan", json={"code": "ST-2024-003", "source": "manual"})
    assert resp.status_code == 403


def test_user_switch_clears_rescan_window(client, container):
    login(client)
    client.post("/api/attendance/scan", json={"code": "ST-2024-001"})
    client.post("/api/logout")
    login(client, email="admin@school.com", role="ADMIN")

    resp = client.post("/api/attendance/scan", json={"code": "ST-2024-001"})

    body = resp.get_json()
    assert "duplicate" not in body
    assert body["record"]["markedBy"] == "admin1"
    assert [d["markedBy"] for d in container.store.list(ATTENDANCE)] == ["admin1"]


def test_admin_roster_needs_a_grade(client):
    login(client, email="admin@school.com", role="ADMIN")

    resp = client.get("/api/attendance/roster")

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Grade is required"
    assert client.get("/api/attendance/roster?grade=Grade%209").status_code == 200
