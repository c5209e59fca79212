"""Leave eligibility rules.

Generic shape rules run first, then the rules registered for the candidate's
category, in order. The first failing rule decides the verdict.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Mapping, Optional, Sequence

from ..core import constants
from ..core.enums import LeaveCategory
from ..employees.model import Employee
from .model import LeaveCandidate


@dataclass(frozen=True)
class PolicyVerdict:
    accepted: bool
    code: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "PolicyVerdict":
        return cls(accepted=True)

    @classmethod
    def rejected(cls, code: str, reason: str) -> "PolicyVerdict":
        return cls(accepted=False, code=code, reason=reason)


@dataclass(frozen=True)
class RuleContext:
    candidate: LeaveCandidate
    employee: Employee
    today: date

    @property
    def days_count(self) -> int:
        return self.candidate.days_count

    @property
    def notice_days(self) -> int:
        return (self.candidate.start_date - self.today).days

    @property
    def tenure_days(self) -> int:
        return self.employee.tenure_days(self.today)


Rule = Callable[[RuleContext], Optional[PolicyVerdict]]


# -------- generic shape --------
def end_not_before_start(ctx: RuleContext) -> Optional[PolicyVerdict]:
    if ctx.candidate.end_date < ctx.candidate.start_date:
        return PolicyVerdict.rejected("invalid_range", "End date must be on or after the start date")
    return None


def reason_present(ctx: RuleContext) -> Optional[PolicyVerdict]:
    if not (ctx.candidate.reason or "").strip():
        return PolicyVerdict.rejected("missing_reason", "A reason is required")
    return None


# -------- category rules --------
def sick_certificate(ctx: RuleContext) -> Optional[PolicyVerdict]:
    if ctx.days_count >= constants.SICK_CERTIFICATE_MIN_DAYS and not ctx.candidate.attached:
        return PolicyVerdict.rejected(
            "medical_certificate_required",
            f"Sick leave of {constants.SICK_CERTIFICATE_MIN_DAYS} or more days requires a medical certificate",
        )
    return None


def annual_tenure(ctx: RuleContext) -> Optional[PolicyVerdict]:
    if ctx.tenure_days < constants.ANNUAL_MIN_TENURE_DAYS:
        return PolicyVerdict.rejected("insufficient_tenure", "Annual leave requires at least one year of service")
    return None


def annual_notice(ctx: RuleContext) -> Optional[PolicyVerdict]:
    if ctx.notice_days < constants.ANNUAL_MIN_NOTICE_DAYS:
        return PolicyVerdict.rejected(
            "insufficient_notice",
            f"Annual leave must be requested at least {constants.ANNUAL_MIN_NOTICE_DAYS} days in advance",
        )
    return None


def annual_cap(ctx: RuleContext) -> Optional[PolicyVerdict]:
    if ctx.days_count > constants.ANNUAL_MAX_DAYS:
        return PolicyVerdict.rejected(
            "annual_cap_exceeded",
            f"Annual leave is limited to {constants.ANNUAL_MAX_DAYS} days",
        )
    return None


def maternity_cap(ctx: RuleContext) -> Optional[PolicyVerdict]:
    if ctx.days_count > constants.MATERNITY_MAX_DAYS:
        return PolicyVerdict.rejected(
            "maternity_cap_exceeded",
            f"Maternity leave cannot exceed {constants.MATERNITY_MAX_DAYS} days",
        )
    return None


def sterilization_certificate(ctx: RuleContext) -> Optional[PolicyVerdict]:
    if not ctx.candidate.attached:
        return PolicyVerdict.rejected(
            "medical_certificate_required",
            "Sterilization leave always requires a medical certificate",
        )
    return None


def not_in_past(ctx: RuleContext) -> Optional[PolicyVerdict]:
    # Same-day requests pass.
    if ctx.notice_days < constants.TRAINING_MIN_NOTICE_DAYS:
        return PolicyVerdict.rejected("insufficient_notice", "Leave must be requested before it starts")
    return None


GENERIC_RULES: Sequence[Rule] = (end_not_before_start, reason_present)

DEFAULT_RULES: Mapping[LeaveCategory, Sequence[Rule]] = {
    LeaveCategory.SICK: (sick_certificate,),
    LeaveCategory.PERSONAL: (),
    LeaveCategory.ANNUAL: (annual_tenure, annual_notice, annual_cap),
    LeaveCategory.MATERNITY: (maternity_cap,),
    LeaveCategory.STERILIZATION: (sterilization_certificate,),
    LeaveCategory.TRAINING: (not_in_past,),
    LeaveCategory.MILITARY: (not_in_past,),
}


class LeavePolicyEngine:
    """Rule table keyed by leave category."""

    def __init__(self, rules: Optional[Mapping[LeaveCategory, Sequence[Rule]]] = None):
        self._rules = dict(rules if rules is not None else DEFAULT_RULES)

    def rules_for(self, category: LeaveCategory) -> Sequence[Rule]:
        return tuple(GENERIC_RULES) + tuple(self._rules.get(LeaveCategory(category), ()))

    def validate(self, candidate: LeaveCandidate, employee: Employee, today: date) -> PolicyVerdict:
        ctx = RuleContext(candidate=candidate, employee=employee, today=today)
        for rule in self.rules_for(candidate.category):
            verdict = rule(ctx)
            if verdict is not None:
                return verdict
        return PolicyVerdict.ok()
