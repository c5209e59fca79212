from __future__ import annotations

from dataclasses import replace
from datetime import date, time

import pytest

from src.geo_attendance.geo_attendance.container import assemble
from src.geo_attendance.geo_attendance.core.enums import Role
from src.geo_attendance.geo_attendance.employees.model import Employee
from src.geo_attendance.geo_attendance.geo.model import AreaConfig, Coordinate
from src.geo_attendance.geo_attendance.main import create_app

AREA = AreaConfig(center=Coordinate(lat=13.7563, lng=100.5018), radius_km=0.5)


class MemoryEmployees:
    def __init__(self, *employees):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id):
        return self._by_id.get(employee_id)

    def list_all(self):
        return list(self._by_id.values())


class MemoryAttendance:
    def __init__(self):
        self.records = []

    def append(self, record):
        self.records.append(record)

    def list_between(self, *, start_date, end_date, employee_id=None):
        return [
            r for r in self.records
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == employee_id)
        ]


class MemoryLeaves:
    def __init__(self):
        self.items = {}

    def create(self, request):
        self.items[request.request_id] = request

    def get(self, request_id):
        return self.items.get(request_id)

    def list_requests(self, *, status=None, employee_id=None, limit=200):
        rows = [
            r for r in self.items.values()
            if (status is None or r.status == status) and (employee_id is None or r.employee_id == employee_id)
        ]
        return rows[:limit]

    def list_overlapping(self, *, start_date, end_date, status=None):
        return [
            r for r in self.items.values()
            if r.start_date <= end_date and r.end_date >= start_date and (status is None or r.status == status)
        ]

    def count_by_status(self, status):
        return sum(1 for r in self.items.values() if r.status == status)

    def transition(self, *, request_id, expected, status, approver_id=None):
        req = self.items.get(request_id)
        if not req or req.status != expected:
            return False
        self.items[request_id] = replace(req, status=status, approver_id=approver_id or req.approver_id)
        return True


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = assemble(
        employees_repo=MemoryEmployees(
            Employee(employee_id="E001", name="Staff", role=Role.EMP, department="IT", start_date=date(2020, 1, 1)),
            Employee(employee_id="E002", name="Peer", role=Role.EMP, department="IT", start_date=date(2020, 1, 1)),
            Employee(employee_id="M001", name="Boss", role=Role.DM, department="IT", start_date=date(2015, 1, 1)),
        ),
        attendance_repo=MemoryAttendance(),
        leave_repo=MemoryLeaves(),
        area=AREA,
        late_threshold=time(8, 30),
    )
    app = create_app(container=container)
    return app.test_client()


def _personal_leave(client, **overrides):
    body = {
        "employee_id": "E001",
        "type": "PERSONAL",
        "start_date": "2030-05-04",
        "end_date": "2030-05-06",
        "reason": "moving house",
        "days_count": 99,
    }
    body.update(overrides)
    return client.post("/api/leaves", json=body)


def test_area_config(client):
    resp = client.get("/api/area")

    assert resp.status_code == 200
    assert resp.get_json()["radius_km"] == 0.5


def test_area_check(client):
    resp = client.post("/api/area/check", json={"lat": 13.7565, "lng": 100.5020})

    assert resp.status_code == 200
    assert resp.get_json()["inside"] is True


def test_area_check_needs_numbers(client):
    resp = client.post("/api/area/check", json={"lat": "north", "lng": 100.5})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_record_check_in_and_history(client):
    resp = client.post("/api/attendance", json={"employee_id": "E001", "type": "check_in", "lat": 13.7565, "lng": 100.5020})

    assert resp.status_code == 201
    assert resp.get_json()["record"]["location"]["inside"] is True

    history = client.get("/api/attendance/E001?period=today").get_json()
    assert len(history["records"]) == 1


def test_off_site_check_in_without_evidence(client):
    resp = client.post("/api/attendance", json={"employee_id": "E001", "type": "CHECK_IN", "lat": 14.0, "lng": 101.0})

    assert resp.status_code == 400


def test_check_in_for_unknown_employee(client):
    resp = client.post("/api/attendance", json={"employee_id": "X", "type": "CHECK_IN", "lat": 13.7565, "lng": 100.5020})

    assert resp.status_code == 404


def test_submit_leave_uses_server_day_count(client):
    resp = _personal_leave(client)

    assert resp.status_code == 201
    leave = resp.get_json()["leave"]
    assert leave["status"] == "PENDING"
    assert leave["days_count"] == 3


def test_rejected_leave_carries_reason_code(client):
    resp = _personal_leave(client, type="SICK", start_date="2030-05-04", end_date="2030-05-07")

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "medical_certificate_required"


def test_unknown_leave_type(client):
    assert _personal_leave(client, type="HOLIDAY").status_code == 400


def test_approve_then_decide_again_conflicts(client):
    leave_id = _personal_leave(client).get_json()["leave"]["id"]

    first = client.post(f"/api/leaves/{leave_id}/approve", json={"approver_id": "M001"})
    second = client.post(f"/api/leaves/{leave_id}/reject", json={"approver_id": "M001"})

    assert first.status_code == 200
    assert first.get_json()["leave"]["status"] == "APPROVED"
    assert second.status_code == 409
    assert client.get(f"/api/leaves/{leave_id}").get_json()["leave"]["status"] == "APPROVED"


def test_non_manager_cannot_approve(client):
    leave_id = _personal_leave(client).get_json()["leave"]["id"]

    resp = client.post(f"/api/leaves/{leave_id}/approve", json={"approver_id": "E002"})

    assert resp.status_code == 403


def test_cancel_by_someone_else_is_forbidden(client):
    leave_id = _personal_leave(client).get_json()["leave"]["id"]

    assert client.post(f"/api/leaves/{leave_id}/cancel", json={"employee_id": "E002"}).status_code == 403
    assert client.post(f"/api/leaves/{leave_id}/cancel", json={"employee_id": "E001"}).status_code == 200


def test_missing_leave_is_404(client):
    assert client.get("/api/leaves/LEAVE-none").status_code == 404


def test_list_pending_leaves(client):
    _personal_leave(client)

    rows = client.get("/api/leaves?status=pending").get_json()["leaves"]

    assert [r["employee_id"] for r in rows] == ["E001"]


def test_daily_report(client):
    client.post("/api/attendance", json={"employee_id": "E001", "type": "CHECK_IN", "lat": 13.7565, "lng": 100.5020})

    body = client.get("/api/reports/daily?date=2030-01-01").get_json()

    assert body["summary"] == {"present": 0, "late": 0, "absent": 3, "leave": 0, "total": 3}
    assert len(body["not_scanned"]) == 3


def test_trend_report_validates_days(client):
    assert client.get("/api/reports/trend?end=2030-01-07&days=abc").status_code == 400
    assert client.get("/api/reports/trend?end=2030-01-07&days=0").status_code == 400
    assert client.get("/api/reports/trend?end=2030-01-07&days=1000000000").status_code == 400

    series = client.get("/api/reports/trend?end=2030-01-07&days=3").get_json()["series"]
    assert [d["date"] for d in series] == ["2030-01-05", "2030-01-06", "2030-01-07"]


def test_insights_report(client):
    _personal_leave(client)

    counts = client.get("/api/reports/insights?date=2030-01-01").get_json()["counts"]

    assert counts == {"total": 3, "present": 0, "late": 0, "pending_leaves": 1}


def test_area_check_for_the_antipode(client):
    resp = client.post("/api/area/check", json={"lat": -13.7563, "lng": -79.4982})

    assert resp.status_code == 200
    assert resp.get_json()["inside"] is False
