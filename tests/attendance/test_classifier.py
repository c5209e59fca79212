from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.geo_attendance.geo_attendance.attendance.classifier import AttendanceClassifier
from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord
from src.geo_attendance.geo_attendance.core.enums import AttendanceType, DayStatus, LeaveCategory, LeaveStatus, Role
from src.geo_attendance.geo_attendance.core.exceptions import ValidationError
from src.geo_attendance.geo_attendance.employees.model import Employee
from src.geo_attendance.geo_attendance.geo.model import GeoTag
from src.geo_attendance.geo_attendance.leave.model import LeaveRequest

DAY = date(2026, 3, 2)


def _emp(eid: str, dept: str = "IT") -> Employee:
    return Employee(employee_id=eid, name=eid, role=Role.EMP, department=dept, start_date=date(2024, 1, 1))


def _rec(eid: str, hh: int, mm: int, event: AttendanceType = AttendanceType.CHECK_IN, rid: str = "") -> AttendanceRecord:
    return AttendanceRecord(
        record_id=rid or f"ATT-{eid}-{hh}{mm}-{event.value}",
        employee_id=eid,
        timestamp=datetime.combine(DAY, time(hh, mm)),
        event_type=event,
        location=GeoTag(lat=13.75, lng=100.5, inside=True),
    )


def _leave(eid: str, status: LeaveStatus = LeaveStatus.APPROVED, start: date = DAY, end: date = DAY) -> LeaveRequest:
    return LeaveRequest(
        request_id=f"LEAVE-{eid}-{status.value}",
        employee_id=eid,
        category=LeaveCategory.PERSONAL,
        start_date=start,
        end_date=end,
        reason="family",
        status=status,
        days_count=(end - start).days + 1,
    )


def test_late_check_in_after_threshold():
    clf = AttendanceClassifier(late_threshold=time(8, 30))

    assert clf.classify_day(_emp("E1"), [_rec("E1", 8, 45)], []) == DayStatus.LATE


def test_on_time_check_in_is_present():
    clf = AttendanceClassifier(late_threshold=time(8, 30))

    assert clf.classify_day(_emp("E1"), [_rec("E1", 8, 30)], []) == DayStatus.PRESENT


def test_no_leave_and_no_check_in_is_absent():
    clf = AttendanceClassifier()

    assert clf.classify_day(_emp("E1"), [], []) == DayStatus.ABSENT
    assert clf.classify_day(_emp("E1"), [_rec("E1", 17, 0, AttendanceType.CHECK_OUT)], []) == DayStatus.ABSENT


@pytest.mark.parametrize("records", [[], [_rec("E1", 7, 50)], [_rec("E1", 10, 0)], [_rec("E1", 8, 0), _rec("E1", 9, 0)]])
def test_approved_leave_overrides_any_check_in(records):
    clf = AttendanceClassifier()

    assert clf.classify_day(_emp("E1"), records, [_leave("E1")], day=DAY) == DayStatus.LEAVE


def test_pending_or_rejected_leave_is_ignored():
    clf = AttendanceClassifier()
    leaves = [_leave("E1", LeaveStatus.PENDING), _leave("E1", LeaveStatus.REJECTED), _leave("E1", LeaveStatus.CANCELLED)]

    assert clf.classify_day(_emp("E1"), [], leaves, day=DAY) == DayStatus.ABSENT


def test_leave_not_covering_the_day_is_ignored_when_day_given():
    clf = AttendanceClassifier()
    leave = _leave("E1", start=date(2026, 3, 3), end=date(2026, 3, 5))

    assert clf.classify_day(_emp("E1"), [_rec("E1", 8, 0)], [leave], day=DAY) == DayStatus.PRESENT


def test_earliest_check_in_decides():
    clf = AttendanceClassifier(late_threshold=time(8, 30))
    records = [_rec("E1", 9, 15), _rec("E1", 8, 10), _rec("E1", 12, 0, AttendanceType.CHECK_OUT)]

    assert clf.classify_day(_emp("E1"), records, []) == DayStatus.PRESENT


def test_check_out_records_do_not_count():
    clf = AttendanceClassifier(late_threshold=time(8, 30))
    records = [_rec("E1", 8, 0, AttendanceType.CHECK_OUT), _rec("E1", 9, 0)]

    assert clf.classify_day(_emp("E1"), records, []) == DayStatus.LATE


def test_threshold_is_configurable():
    clf = AttendanceClassifier(late_threshold=time(9, 0))

    assert clf.classify_day(_emp("E1"), [_rec("E1", 8, 45)], []) == DayStatus.PRESENT


def test_classify_roster_covers_every_employee():
    clf = AttendanceClassifier(late_threshold=time(8, 30))
    roster = [_emp("E1"), _emp("E2"), _emp("E3"), _emp("E4")]
    records = [_rec("E2", 8, 0), _rec("E3", 9, 0), _rec("E1", 8, 0)]
    leaves = [_leave("E1")]

    result = clf.classify_roster(roster, records, leaves, day=DAY)

    assert result == {
        "E1": DayStatus.LEAVE,
        "E2": DayStatus.PRESENT,
        "E3": DayStatus.LATE,
        "E4": DayStatus.ABSENT,
    }


def test_classify_roster_rejects_duplicate_employee():
    clf = AttendanceClassifier()

    with pytest.raises(ValidationError):
        clf.classify_roster([_emp("E1"), _emp("E1")], [], [])


def test_decide_day_keeps_check_in_time():
    clf = AttendanceClassifier()

    decision = clf.decide_day(_emp("E1"), [_rec("E1", 8, 5)], [])

    assert decision.status == DayStatus.PRESENT
    assert decision.check_in_time == datetime.combine(DAY, time(8, 5))
