from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

import pytest

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord
from src.geo_attendance.geo_attendance.attendance.service import AttendanceService
from src.geo_attendance.geo_attendance.core.enums import AttendanceType, Role
from src.geo_attendance.geo_attendance.core.exceptions import NotFound, ValidationError
from src.geo_attendance.geo_attendance.employees.model import Employee
from src.geo_attendance.geo_attendance.geo.model import AreaConfig, Coordinate

AREA = AreaConfig(center=Coordinate(lat=13.7563, lng=100.5018), radius_km=0.5)
ON_SITE = (13.7565, 100.5020)
OFF_SITE = (13.8000, 100.6000)


@dataclass
class InMemoryEmployees:
    by_id: dict[str, Employee]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.by_id.get(employee_id)

    def list_all(self):
        return list(self.by_id.values())


class InMemoryAttendance:
    def __init__(self):
        self.records: list[AttendanceRecord] = []

    def append(self, record: AttendanceRecord) -> None:
        self.records.append(record)

    def list_between(self, *, start_date: date, end_date: date, employee_id: Optional[str] = None):
        items = [r for r in self.records if start_date <= r.work_date <= end_date]
        if employee_id is not None:
            items = [r for r in items if r.employee_id == employee_id]
        return sorted(items, key=lambda r: r.timestamp)


def _service():
    emp = Employee(employee_id="E001", name="Somchai", role=Role.EMP, department="IT", start_date=date(2024, 1, 1))
    repo = InMemoryAttendance()
    return AttendanceService(repo, InMemoryEmployees({"E001": emp}), AREA), repo


def test_on_site_check_in_is_tagged_inside():
    svc, repo = _service()

    rec = svc.record_event("E001", AttendanceType.CHECK_IN, lat=ON_SITE[0], lng=ON_SITE[1], now=datetime(2026, 3, 2, 8, 10))

    assert rec.location.inside is True
    assert rec.event_type == AttendanceType.CHECK_IN
    assert repo.records == [rec]


def test_off_site_check_in_requires_photo_and_reason():
    svc, repo = _service()

    with pytest.raises(ValidationError):
        svc.record_event("E001", AttendanceType.CHECK_IN, lat=OFF_SITE[0], lng=OFF_SITE[1], note="client visit")
    with pytest.raises(ValidationError):
        svc.record_event("E001", AttendanceType.CHECK_IN, lat=OFF_SITE[0], lng=OFF_SITE[1], photo_ref="img://1")

    assert repo.records == []


def test_off_site_check_in_with_evidence_is_accepted():
    svc, repo = _service()

    rec = svc.record_event(
        "E001",
        AttendanceType.CHECK_IN,
        lat=OFF_SITE[0],
        lng=OFF_SITE[1],
        note="client visit",
        photo_ref="img://1",
        now=datetime(2026, 3, 2, 9, 0),
    )

    assert rec.location.inside is False
    assert rec.note == "client visit"
    assert len(repo.records) == 1


def test_unknown_employee_is_not_found():
    svc, _ = _service()

    with pytest.raises(NotFound):
        svc.record_event("E999", AttendanceType.CHECK_IN, lat=ON_SITE[0], lng=ON_SITE[1])


def test_history_filters_by_period_newest_first():
    svc, _ = _service()
    for ts in [datetime(2025, 12, 30, 8, 0), datetime(2026, 3, 1, 8, 0), datetime(2026, 3, 20, 8, 0), datetime(2026, 3, 24, 8, 0)]:
        svc.record_event("E001", AttendanceType.CHECK_IN, lat=ON_SITE[0], lng=ON_SITE[1], now=ts)

    today = date(2026, 3, 24)

    assert [r.timestamp.day for r in svc.history("E001", period="today", today=today)] == [24]
    assert [r.timestamp.day for r in svc.history("E001", period="week", today=today)] == [24, 20]
    assert len(svc.history("E001", period="month", today=today)) == 3
    assert len(svc.history("E001", period="year", today=today)) == 3
    assert len(svc.history("E001", period="all", today=today)) == 4


def test_history_rejects_unknown_period():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.history("E001", period="decade", today=date(2026, 3, 24))
