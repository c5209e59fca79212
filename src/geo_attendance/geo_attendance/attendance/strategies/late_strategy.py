from __future__ import annotations

from typing import Optional

from ...core.enums import DayStatus
from ...leave.model import LeaveRequest
from ..model import AttendanceRecord
from .base import DayStatusStrategy, StatusDecision


class LateStrategy(DayStatusStrategy):
    """First check-in after the late threshold."""

    def decide(self, *, first_check_in: Optional[AttendanceRecord], leave: Optional[LeaveRequest]) -> StatusDecision:
        return StatusDecision(
            status=DayStatus.LATE,
            check_in_time=first_check_in.timestamp if first_check_in else None,
        )
