from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text
from ..core.enums import AttendanceType
from ..core.exceptions import NotFound, ValidationError
from ..employees.repository import EmployeeRepository
from ..geo.model import AreaConfig
from ..geo.policy import tag_location
from .model import AttendanceRecord
from .repository import AttendanceRepository

HISTORY_PERIODS = ("today", "week", "month", "year", "all")


class AttendanceService:
    """Use case: record check-in/check-out events and read them back."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        area: AreaConfig,
    ):
        self._attendance = attendance
        self._employees = employees
        self._area = area

    @property
    def area(self) -> AreaConfig:
        return self._area

    def record_event(
        self,
        employee_id: str,
        event_type: AttendanceType,
        *,
        lat: float,
        lng: float,
        note: Optional[str] = None,
        photo_ref: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        now = now or now_local()

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFound(f"Employee {employee_id} does not exist")

        location = tag_location(lat, lng, self._area)
        note = optional_text(note)
        photo_ref = optional_text(photo_ref)

        # Off-site events stay allowed but must be explained.
        if not location.inside and (not photo_ref or not note):
            raise ValidationError("Outside the work area: a photo and a reason are required")

        record = AttendanceRecord(
            record_id=f"ATT-{uuid.uuid4().hex[:12]}",
            employee_id=employee.employee_id,
            timestamp=now,
            event_type=AttendanceType(event_type),
            location=location,
            note=note,
            photo_ref=photo_ref,
        )
        self._attendance.append(record)
        return record

    def history(self, employee_id: str, *, period: str = "all", today: Optional[date] = None) -> Sequence[AttendanceRecord]:
        today = today or now_local().date()

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFound(f"Employee {employee_id} does not exist")

        if period == "today":
            start = today
        elif period == "week":
            start = today - timedelta(days=7)
        elif period == "month":
            start = today.replace(day=1)
        elif period == "year":
            start = today.replace(month=1, day=1)
        elif period == "all":
            start = min(employee.start_date, today)
        else:
            raise ValidationError(f"Unknown period {period!r}, expected one of {', '.join(HISTORY_PERIODS)}")

        rows = self._attendance.list_between(start_date=start, end_date=today, employee_id=employee.employee_id)
        return sorted(rows, key=lambda r: r.timestamp, reverse=True)
