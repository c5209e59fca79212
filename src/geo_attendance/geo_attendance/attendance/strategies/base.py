from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import DayStatus
from ...leave.model import LeaveRequest
from ..model import AttendanceRecord


@dataclass(frozen=True)
class StatusDecision:
    status: DayStatus
    check_in_time: Optional[datetime] = None
    leave_id: Optional[str] = None


class DayStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a daily attendance status."""

    @abstractmethod
    def decide(self, *, first_check_in: Optional[AttendanceRecord], leave: Optional[LeaveRequest]) -> StatusDecision:
        raise NotImplementedError
