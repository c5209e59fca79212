from __future__ import annotations

from ..core.enums import LeaveStatus
from ..core.exceptions import InvalidTransition

TRANSITIONS: dict[LeaveStatus, frozenset[LeaveStatus]] = {
    LeaveStatus.PENDING: frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED, LeaveStatus.CANCELLED}),
    LeaveStatus.APPROVED: frozenset(),
    LeaveStatus.REJECTED: frozenset(),
    LeaveStatus.CANCELLED: frozenset(),
}

INITIAL_STATUS = LeaveStatus.PENDING


def is_terminal(status: LeaveStatus) -> bool:
    return not TRANSITIONS[LeaveStatus(status)]


def ensure_transition(current: LeaveStatus, target: LeaveStatus) -> None:
    if LeaveStatus(target) not in TRANSITIONS[LeaveStatus(current)]:
        raise InvalidTransition(f"Cannot move a {LeaveStatus(current).value} request to {LeaveStatus(target).value}")
