from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..common.datetime_utils import minutes_of_day
from ..leave.model import LeaveRequest
from .model import AttendanceRecord
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayStatusStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.leave_strategy import LeaveStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class DayStatusStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules.

    Order is fixed: approved leave, then missing check-in, then check-in time.
    """

    def for_day(
        self,
        *,
        first_check_in: Optional[AttendanceRecord],
        approved_leave: Optional[LeaveRequest],
        late_threshold: time,
    ) -> DayStatusStrategy:
        if approved_leave is not None:
            return LeaveStrategy()
        if first_check_in is None:
            return AbsentStrategy()
        if minutes_of_day(first_check_in.timestamp) > minutes_of_day(late_threshold):
            return LateStrategy()
        return PresentStrategy()
