from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import APPROVER_ROLES, Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object, read-only to this package (onboarding happens elsewhere).
    """

    employee_id: str
    name: str
    role: Role
    department: str
    start_date: date

    @property
    def can_decide_leave(self) -> bool:
        return self.role in APPROVER_ROLES

    def tenure_days(self, today: date) -> int:
        return (today - self.start_date).days
