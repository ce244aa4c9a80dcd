from __future__ import annotations

from datetime import date

import pytest

from hrms_lite.main import create_app


@pytest.fixture
def make_client(database_url, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    apps = []

    def _make(**overrides):
        config = {"DATABASE_URL": database_url, "AUTO_INIT_DB": True, "AUTO_SEED_DB": False}
        config.update(overrides)
        app = create_app(config)
        app.config["TESTING"] = True
        apps.append(app)
        return app.test_client()

    yield _make

    for app in apps:
        app.extensions["hrms_container"].conn.dispose()


@pytest.fixture
def client(make_client):
    return make_client()


def _add_employee(client, employee_id="EMP001", email="john.smith@ethara.ai", department="Engineering"):
    return client.post(
        "/api/employees",
        json={"employee_id": employee_id, "full_name": "John Smith", "email": email, "department": department},
    )


def test_health_check(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"running" in resp.data


def test_cors_headers_on_every_response(client):
    resp = client.get("/api/employees", headers={"Origin": "http://localhost:5173"})

    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_add_and_list_employees(client):
    resp = _add_employee(client)

    assert resp.status_code == 201
    created = resp.get_json()
    assert created["employee_id"] == "EMP001"
    listed = client.get("/api/employees").get_json()
    assert [e["id"] for e in listed] == [created["id"]]


def test_add_employee_missing_fields(client):
    resp = client.post("/api/employees", json={"employee_id": "EMP001"})

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "All fields are required."}


def test_duplicate_employee_defaults_to_400(client):
    _add_employee(client)

    resp = _add_employee(client, email="other@ethara.ai")

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Employee ID or Email already exists."


def test_conflict_status_is_configurable(make_client):
    client = make_client(CONFLICT_STATUS_CODE=409)
    _add_employee(client)

    assert _add_employee(client).status_code == 409


def test_attendance_flow(client):
    emp = _add_employee(client).get_json()

    resp = client.post("/api/attendance", json={"employeeId": emp["id"], "date": "2024-01-01", "status": "Present"})
    assert resp.status_code == 201
    assert resp.get_json()["status"] == "Present"

    dup = client.post("/api/attendance", json={"employeeId": emp["id"], "date": "2024-01-01", "status": "Absent"})
    assert dup.status_code == 400

    records = client.get(f"/api/attendance/{emp['id']}").get_json()
    assert [r["date"] for r in records] == ["2024-01-01"]


def test_attendance_errors(client):
    emp = _add_employee(client).get_json()

    unknown = client.post("/api/attendance", json={"employeeId": "ghost", "date": "2024-01-01", "status": "Present"})
    bad_date = client.post("/api/attendance", json={"employeeId": emp["id"], "date": "2024/01/01", "status": "Present"})
    bad_status = client.post("/api/attendance", json={"employeeId": emp["id"], "date": "2024-01-01", "status": "Late"})

    assert unknown.status_code == 404
    assert bad_date.status_code == 400
    assert bad_status.status_code == 400
    assert client.get("/api/attendance/ghost").status_code == 404


def test_leave_flow_overwrites_status(client):
    emp = _add_employee(client).get_json()

    resp = client.post(
        "/api/leaves",
        json={"employeeId": emp["id"], "start_date": "2024-03-01", "end_date": "2024-03-02", "reason": "Trip"},
    )
    assert resp.status_code == 201
    leave = resp.get_json()
    assert leave["status"] == "Pending"

    patched = client.patch(f"/api/leaves/{leave['id']}", json={"status": "Approved"})
    assert patched.status_code == 200

    listed = client.get("/api/leaves").get_json()
    assert len(listed) == 1
    assert listed[0]["status"] == "Approved"
    assert listed[0]["employee"] == {"full_name": "John Smith", "employee_id": "EMP001"}


def test_leave_errors(client):
    emp = _add_employee(client).get_json()

    backwards = client.post(
        "/api/leaves",
        json={"employeeId": emp["id"], "start_date": "2024-03-05", "end_date": "2024-03-01", "reason": "Trip"},
    )
    assert backwards.status_code == 400
    assert client.patch("/api/leaves/missing", json={"status": "Approved"}).status_code == 404
    assert client.patch("/api/leaves/missing", json={"status": "Done"}).status_code == 400


def test_strict_leave_policy(make_client):
    client = make_client(LEAVE_TRANSITION_POLICY="strict")
    emp = _add_employee(client).get_json()
    leave = client.post(
        "/api/leaves",
        json={"employeeId": emp["id"], "start_date": "2024-03-01", "end_date": "2024-03-01", "reason": "Trip"},
    ).get_json()

    assert client.patch(f"/api/leaves/{leave['id']}", json={"status": "Approved"}).status_code == 200
    assert client.patch(f"/api/leaves/{leave['id']}", json={"status": "Pending"}).status_code == 400


def test_dashboard_stats_live_count(client):
    emp = _add_employee(client).get_json()
    client.post("/api/attendance", json={"employeeId": emp["id"], "date": date.today().isoformat(), "status": "Present"})
    client.post(
        "/api/leaves",
        json={"employeeId": emp["id"], "start_date": "2024-03-01", "end_date": "2024-03-01", "reason": "Trip"},
    )

    stats = client.get("/api/dashboard/stats").get_json()

    assert stats == {"totalEmployees": 1, "presentToday": 1, "pendingLeaves": 1}


def test_dashboard_placeholder(make_client):
    client = make_client(DASHBOARD_PRESENT_TODAY=10)

    assert client.get("/api/dashboard/stats").get_json()["presentToday"] == 10


def test_reports_endpoint(client):
    ids = []
    for employee_id, email, dept in (
        ("EMP001", "a@ethara.ai", "Engineering"),
        ("EMP002", "b@ethara.ai", "Engineering"),
        ("EMP003", "c@ethara.ai", "HR"),
    ):
        ids.append(_add_employee(client, employee_id, email, dept).get_json()["id"])
    for emp_id, day, status in ((ids[0], "2024-01-01", "Present"), (ids[1], "2024-01-01", "Absent"), (ids[2], "2024-02-01", "Present")):
        client.post("/api/attendance", json={"employeeId": emp_id, "date": day, "status": status})

    report = client.get("/api/reports?startDate=2024-01-01&endDate=2024-02-28&department=all").get_json()

    assert report["totalAttendance"] == 3
    assert report["attendanceRate"] == 66.67
    assert report["monthlyTrend"] == [
        {"month": "2024-01", "count": 2, "present": 1},
        {"month": "2024-02", "count": 1, "present": 1},
    ]

    empty = client.get("/api/reports?department=Legal").get_json()
    assert empty["totalEmployees"] == 0
    assert empty["departmentStats"] == []

    one = client.get(f"/api/reports/employee?employeeId={ids[0]}").get_json()
    assert one["presentDays"] == 1


def test_report_errors(client):
    assert client.get("/api/reports?startDate=yesterday&endDate=2024-01-01").status_code == 400
    assert client.get("/api/reports/employee").status_code == 400
    assert client.get("/api/reports/employee?employeeId=ghost").status_code == 404


def test_delete_employee_cascades(client):
    emp = _add_employee(client).get_json()
    client.post("/api/attendance", json={"employeeId": emp["id"], "date": "2024-01-01", "status": "Present"})

    resp = client.delete(f"/api/employees/{emp['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Employee deleted successfully."}
    assert client.get(f"/api/attendance/{emp['id']}").status_code == 404
    assert client.delete(f"/api/employees/{emp['id']}").status_code == 404


def test_unknown_route_is_json(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert "message" in resp.get_json()


def test_cors_origin_list_echoes_only_the_matching_origin(make_client):
    client = make_client(CORS_ORIGINS="http://a.example, http://b.example")

    allowed = client.get("/api/employees", headers={"Origin": "http://a.example"})
    other = client.get("/api/employees", headers={"Origin": "http://evil.example"})

    assert allowed.headers["Access-Control-Allow-Origin"] == "http://a.example"
    assert "Access-Control-Allow-Origin" not in other.headers


def test_cors_preflight(make_client):
    client = make_client(CORS_ORIGINS="http://a.example,http://b.example")

    resp = client.options(
        "/api/leaves/some-id",
        headers={"Origin": "http://b.example", "Access-Control-Request-Method": "PATCH"},
    )

    assert resp.headers["Access-Control-Allow-Origin"] == "http://b.example"
    assert "PATCH" in resp.headers["Access-Control-Allow-Methods"]


@pytest.mark.parametrize("field", ["employee_id", "full_name", "department"])
def test_add_employee_rejects_non_string_fields(client, field):
    body = {"employee_id": "EMP001", "full_name": "John Smith", "email": "john.smith@ethara.ai", "department": "HR"}
    body[field] = ["x"]

    resp = client.post("/api/employees", json=body)

    assert resp.status_code == 400
    assert client.get("/api/employees").get_json() == []


def test_attendance_rejects_object_employee_id(client):
    resp = client.post("/api/attendance", json={"employeeId": {"id": "x"}, "date": "2024-01-01", "status": "Present"})

    assert resp.status_code == 400
