from __future__ import annotations

from collections import defaultdict
from datetime import date, time
from typing import Iterable, Optional, Sequence

from ..core.constants import DEFAULT_LATE_THRESHOLD
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..leave.model import LeaveRequest
from .factory import DayStatusStrategyFactory
from .model import AttendanceRecord
from .strategies.base import StatusDecision


class AttendanceClassifier:
    """Daily verdicts from supplied records and leaves.

    Pure: nothing is read from or written to a store, so calls for different
    employees or days can run in parallel.
    """

    def __init__(
        self,
        *,
        late_threshold: time = DEFAULT_LATE_THRESHOLD,
        strategy_factory: DayStatusStrategyFactory | None = None,
    ):
        self._late_threshold = late_threshold
        self._factory = strategy_factory or DayStatusStrategyFactory()

    @property
    def late_threshold(self) -> time:
        return self._late_threshold

    def decide_day(
        self,
        employee: Employee,
        records_for_day: Iterable[AttendanceRecord],
        leaves_for_day: Iterable[LeaveRequest],
        *,
        day: Optional[date] = None,
    ) -> StatusDecision:
        """Like `classify_day` but keeps the check-in time / leave id used."""

        leave = self._approved_leave(employee, leaves_for_day, day)
        first_check_in = self._first_check_in(employee, records_for_day)
        strategy = self._factory.for_day(
            first_check_in=first_check_in,
            approved_leave=leave,
            late_threshold=self._late_threshold,
        )
        return strategy.decide(first_check_in=first_check_in, leave=leave)

    def classify_day(
        self,
        employee: Employee,
        records_for_day: Iterable[AttendanceRecord],
        leaves_for_day: Iterable[LeaveRequest],
        *,
        day: Optional[date] = None,
    ) -> DayStatus:
        """Return the verdict for one employee on one day.

        `day` restricts leaves to the ones covering it; without it the caller is
        trusted to pass only leaves for the queried day.
        """
        return self.decide_day(employee, records_for_day, leaves_for_day, day=day).status

    def classify_roster(
        self,
        employees: Sequence[Employee],
        all_records_for_day: Iterable[AttendanceRecord],
        all_leaves_for_day: Iterable[LeaveRequest],
        *,
        day: Optional[date] = None,
    ) -> dict[str, DayStatus]:
        seen: set[str] = set()
        for emp in employees:
            if emp.employee_id in seen:
                raise ValidationError(f"Employee {emp.employee_id} appears twice in the roster")
            seen.add(emp.employee_id)

        records_by_emp: dict[str, list[AttendanceRecord]] = defaultdict(list)
        for r in all_records_for_day:
            records_by_emp[r.employee_id].append(r)

        leaves_by_emp: dict[str, list[LeaveRequest]] = defaultdict(list)
        for lv in all_leaves_for_day:
            leaves_by_emp[lv.employee_id].append(lv)

        return {
            emp.employee_id: self.classify_day(
                emp,
                records_by_emp.get(emp.employee_id, ()),
                leaves_by_emp.get(emp.employee_id, ()),
                day=day,
            )
            for emp in employees
        }

    @staticmethod
    def _approved_leave(
        employee: Employee, leaves: Iterable[LeaveRequest], day: Optional[date]
    ) -> Optional[LeaveRequest]:
        for lv in leaves:
            if lv.employee_id != employee.employee_id or not lv.is_approved:
                continue
            if day is not None and not lv.covers(day):
                continue
            return lv
        return None

    @staticmethod
    def _first_check_in(employee: Employee, records: Iterable[AttendanceRecord]) -> Optional[AttendanceRecord]:
        check_ins = [r for r in records if r.employee_id == employee.employee_id and r.is_check_in]
        if not check_ins:
            return None
        return min(check_ins, key=lambda r: r.timestamp)
