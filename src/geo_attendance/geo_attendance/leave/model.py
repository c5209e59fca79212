from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import covers, inclusive_days
from ..core.enums import LeaveCategory, LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    category: LeaveCategory
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    days_count: int
    approver_id: Optional[str] = None
    attachment_ref: Optional[str] = None

    def covers(self, day: date) -> bool:
        return covers(self.start_date, self.end_date, day)

    @property
    def is_approved(self) -> bool:
        return self.status == LeaveStatus.APPROVED


@dataclass(frozen=True)
class LeaveCandidate:
    """A leave submission before it is accepted.

    The day count is always derived from the dates, never taken from the caller.
    """

    category: LeaveCategory
    start_date: date
    end_date: date
    reason: str
    has_attachment: bool = False
    attachment_ref: Optional[str] = None

    @property
    def days_count(self) -> int:
        return inclusive_days(self.start_date, self.end_date)

    @property
    def attached(self) -> bool:
        return self.has_attachment or bool(self.attachment_ref)
