from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..attendance.classifier import AttendanceClassifier
from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_TREND_DAYS, MAX_TREND_DAYS
from ..core.enums import DayStatus, LeaveStatus
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..leave.repository import LeaveRepository
from .aggregator import AttendanceAggregator
from .model import DailySummary, DaySnapshot, InsightCounts, OrgSummary, StatusCounts, VerdictRow


@dataclass(frozen=True)
class DailyOverview:
    day: date
    summary: OrgSummary
    departments: dict[str, StatusCounts]
    rows: list[VerdictRow]

    @property
    def scanned(self) -> list[VerdictRow]:
        return [r for r in self.rows if r.status in (DayStatus.PRESENT, DayStatus.LATE)]

    @property
    def not_scanned(self) -> list[VerdictRow]:
        return [r for r in self.rows if r.status == DayStatus.ABSENT]

    @property
    def on_leave(self) -> list[VerdictRow]:
        return [r for r in self.rows if r.status == DayStatus.LEAVE]


class ReportService:
    """Reads one day (or a range) from the stores, then classifies and aggregates."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        *,
        classifier: Optional[AttendanceClassifier] = None,
        aggregator: Optional[AttendanceAggregator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._classifier = classifier or AttendanceClassifier()
        self._aggregator = aggregator or AttendanceAggregator(self._classifier)

    def _snapshots(self, start: date, end: date) -> dict[date, DaySnapshot]:
        records = self._attendance.list_between(start_date=start, end_date=end)
        leaves = self._leaves.list_overlapping(start_date=start, end_date=end, status=LeaveStatus.APPROVED)

        out: dict[date, DaySnapshot] = {}
        day = start
        while day <= end:
            out[day] = DaySnapshot(
                records=tuple(r for r in records if r.work_date == day),
                leaves=tuple(lv for lv in leaves if lv.covers(day)),
            )
            day += timedelta(days=1)
        return out

    def day_statuses(self, day: date) -> dict[str, DayStatus]:
        employees = self._employees.list_all()
        snap = self._snapshots(day, day)[day]
        return self._classifier.classify_roster(employees, snap.records, snap.leaves, day=day)

    def daily_overview(self, day: date) -> DailyOverview:
        employees = self._employees.list_all()
        snap = self._snapshots(day, day)[day]

        rows: list[VerdictRow] = []
        statuses: dict[str, DayStatus] = {}
        for emp in employees:
            decision = self._classifier.decide_day(emp, snap.records, snap.leaves, day=day)
            statuses[emp.employee_id] = decision.status
            rows.append(
                VerdictRow(
                    employee_id=emp.employee_id,
                    name=emp.name,
                    department=emp.department,
                    status=decision.status,
                    check_in_time=decision.check_in_time.strftime("%H:%M") if decision.check_in_time else None,
                    leave_id=decision.leave_id,
                )
            )

        return DailyOverview(
            day=day,
            summary=self._aggregator.aggregate_org(statuses),
            departments=self._aggregator.aggregate_department(employees, statuses),
            rows=rows,
        )

    def trend(self, end: date, *, days: int = DEFAULT_TREND_DAYS) -> list[DailySummary]:
        if int(days) <= 0:
            raise ValidationError("days must be positive")
        if int(days) > MAX_TREND_DAYS:
            raise ValidationError(f"days must be at most {MAX_TREND_DAYS}")
        start = end - timedelta(days=int(days) - 1)
        snapshots = self._snapshots(start, end)
        return self._aggregator.aggregate_range(self._employees.list_all(), snapshots, sorted(snapshots))

    def insight_counts(self, day: date) -> InsightCounts:
        summary = self._aggregator.aggregate_org(self.day_statuses(day))
        return InsightCounts(
            total=summary.total,
            present=summary.present + summary.late,
            late=summary.late,
            pending_leaves=self._leaves.count_by_status(LeaveStatus.PENDING),
        )
