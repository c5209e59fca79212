from __future__ import annotations

from typing import Optional

from ...core.enums import DayStatus
from ...leave.model import LeaveRequest
from ..model import AttendanceRecord
from .base import DayStatusStrategy, StatusDecision


class AbsentStrategy(DayStatusStrategy):
    """No leave and no check-in."""

    def decide(self, *, first_check_in: Optional[AttendanceRecord], leave: Optional[LeaveRequest]) -> StatusDecision:
        return StatusDecision(status=DayStatus.ABSENT)
