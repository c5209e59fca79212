from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Mapping, Optional, Sequence

from ..attendance.classifier import AttendanceClassifier
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .model import DailySummary, DaySnapshot, OrgSummary, StatusCounts


def _counts(statuses) -> StatusCounts:
    c = Counter(DayStatus(s) for s in statuses)
    return StatusCounts(
        present=c[DayStatus.PRESENT],
        late=c[DayStatus.LATE],
        absent=c[DayStatus.ABSENT],
        leave=c[DayStatus.LEAVE],
    )


class AttendanceAggregator:
    """Rolls per-employee verdicts into department and organization summaries."""

    def __init__(self, classifier: Optional[AttendanceClassifier] = None):
        self._classifier = classifier or AttendanceClassifier()

    def aggregate_department(
        self,
        employees: Sequence[Employee],
        day_statuses: Mapping[str, DayStatus],
    ) -> dict[str, StatusCounts]:
        by_department: dict[str, list[DayStatus]] = {}
        for emp in employees:
            if emp.employee_id not in day_statuses:
                raise ValidationError(f"No status for employee {emp.employee_id}")
            by_department.setdefault(emp.department, []).append(day_statuses[emp.employee_id])
        return {dept: _counts(statuses) for dept, statuses in by_department.items()}

    def aggregate_org(self, day_statuses: Mapping[str, DayStatus]) -> OrgSummary:
        counts = _counts(day_statuses.values())
        return OrgSummary(
            present=counts.present,
            late=counts.late,
            absent=counts.absent,
            leave=counts.leave,
            total=len(day_statuses),
        )

    def aggregate_range(
        self,
        employees: Sequence[Employee],
        snapshots: Mapping[date, DaySnapshot],
        days: Sequence[date],
    ) -> list[DailySummary]:
        """One organization summary per day, in the order `days` is given.

        A day missing from `snapshots` has no records and no leaves.
        """
        out: list[DailySummary] = []
        for day in days:
            snap = snapshots.get(day) or DaySnapshot()
            statuses = self._classifier.classify_roster(employees, snap.records, snap.leaves, day=day)
            out.append(DailySummary(day=day, summary=self.aggregate_org(statuses)))
        return out
