from __future__ import annotations

from typing import Optional

from ...core.enums import DayStatus
from ...leave.model import LeaveRequest
from ..model import AttendanceRecord
from .base import DayStatusStrategy, StatusDecision


class LeaveStrategy(DayStatusStrategy):
    """Approved leave covers the day; check-ins are ignored."""

    def decide(self, *, first_check_in: Optional[AttendanceRecord], leave: Optional[LeaveRequest]) -> StatusDecision:
        return StatusDecision(status=DayStatus.LEAVE, leave_id=leave.request_id if leave else None)
