from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import DayStatus
from ..leave.model import LeaveRequest


@dataclass(frozen=True)
class StatusCounts:
    present: int = 0
    late: int = 0
    absent: int = 0
    leave: int = 0

    @property
    def total(self) -> int:
        return self.present + self.late + self.absent + self.leave

    def as_dict(self) -> dict:
        return {"present": self.present, "late": self.late, "absent": self.absent, "leave": self.leave}


@dataclass(frozen=True)
class OrgSummary:
    """Organization totals; the four counts always sum to `total`."""

    present: int
    late: int
    absent: int
    leave: int
    total: int

    def as_dict(self) -> dict:
        return {
            "present": self.present,
            "late": self.late,
            "absent": self.absent,
            "leave": self.leave,
            "total": self.total,
        }


@dataclass(frozen=True)
class DailySummary:
    day: date
    summary: OrgSummary


@dataclass(frozen=True)
class DaySnapshot:
    """Everything the classifier needs for one day."""

    records: Sequence[AttendanceRecord] = field(default_factory=tuple)
    leaves: Sequence[LeaveRequest] = field(default_factory=tuple)


@dataclass(frozen=True)
class VerdictRow:
    employee_id: str
    name: str
    department: str
    status: DayStatus
    check_in_time: Optional[str] = None
    leave_id: Optional[str] = None


@dataclass(frozen=True)
class InsightCounts:
    """Aggregate numbers handed to the summary-text service. No per-employee data."""

    total: int
    present: int
    late: int
    pending_leaves: int

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "late": self.late,
            "pending_leaves": self.pending_leaves,
        }
