from __future__ import annotations

import threading
import uuid
from contextlib import contextmanager
from dataclasses import replace
from datetime import date
from typing import Iterator, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty
from ..core.enums import LeaveStatus
from ..core.exceptions import AuthorizationError, InvalidTransition, NotFound, ValidationRejected
from ..employees.repository import EmployeeRepository
from .model import LeaveCandidate, LeaveRequest
from .policy import LeavePolicyEngine
from .repository import LeaveRepository
from .state_machine import INITIAL_STATUS, ensure_transition


class LeaveService:
    """Use case: submit leave requests and move them through their lifecycle.

    Transitions out of PENDING are serialized per request id inside the
    process, and the store applies them as a compare-and-swap on status, so
    exactly one concurrent approve/reject/cancel wins.
    """

    def __init__(
        self,
        requests: LeaveRepository,
        employees: EmployeeRepository,
        *,
        policy: Optional[LeavePolicyEngine] = None,
    ):
        self._requests = requests
        self._employees = employees
        self._policy = policy or LeavePolicyEngine()
        # request id -> [lock, holders + waiters]; dropped when unused
        self._locks: dict[str, list] = {}
        self._locks_guard = threading.Lock()

    @property
    def policy(self) -> LeavePolicyEngine:
        return self._policy

    @contextmanager
    def _request_lock(self, request_id: str) -> Iterator[None]:
        with self._locks_guard:
            entry = self._locks.get(request_id)
            if entry is None:
                entry = self._locks[request_id] = [threading.Lock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[request_id]

    def submit(self, employee_id: str, candidate: LeaveCandidate, *, today: Optional[date] = None) -> LeaveRequest:
        today = today or now_local().date()

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFound(f"Employee {employee_id} does not exist")

        verdict = self._policy.validate(candidate, employee, today)
        if not verdict.accepted:
            raise ValidationRejected(verdict.reason or "Leave request rejected", code=verdict.code or "rejected")

        request = LeaveRequest(
            request_id=f"LEAVE-{uuid.uuid4().hex[:12]}",
            employee_id=employee.employee_id,
            category=candidate.category,
            start_date=candidate.start_date,
            end_date=candidate.end_date,
            reason=candidate.reason.strip(),
            status=INITIAL_STATUS,
            days_count=candidate.days_count,
            attachment_ref=optional_text(candidate.attachment_ref),
        )
        self._requests.create(request)
        return request

    def approve(self, request_id: str, approver_id: str) -> LeaveRequest:
        return self._decide(request_id, approver_id, LeaveStatus.APPROVED)

    def reject(self, request_id: str, approver_id: str) -> LeaveRequest:
        return self._decide(request_id, approver_id, LeaveStatus.REJECTED)

    def cancel(self, request_id: str, employee_id: str) -> LeaveRequest:
        employee_id = require_non_empty(employee_id, "Employee id")
        with self._request_lock(str(request_id)):
            req = self._get_or_raise(request_id)
            if req.employee_id != employee_id:
                raise AuthorizationError("Only the requesting employee can cancel a leave request")
            return self._transition(req, LeaveStatus.CANCELLED, approver_id=None)

    def get(self, request_id: str) -> LeaveRequest:
        return self._get_or_raise(request_id)

    def list_for_employee(self, employee_id: str, *, limit: int = 200) -> Sequence[LeaveRequest]:
        return self._requests.list_requests(employee_id=str(employee_id), limit=limit)

    def list_pending(self, *, limit: int = 500) -> Sequence[LeaveRequest]:
        return self._requests.list_requests(status=LeaveStatus.PENDING, limit=limit)

    def list_requests(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[str] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        return self._requests.list_requests(status=status, employee_id=employee_id, limit=limit)

    def _decide(self, request_id: str, approver_id: str, target: LeaveStatus) -> LeaveRequest:
        approver_id = require_non_empty(approver_id, "Approver id")
        with self._request_lock(str(request_id)):
            req = self._get_or_raise(request_id)
            ensure_transition(req.status, target)

            approver = self._employees.get_by_id(approver_id)
            if not approver:
                raise NotFound(f"Employee {approver_id} does not exist")
            if not approver.can_decide_leave:
                raise AuthorizationError("Only managers can decide leave requests")

            return self._transition(req, target, approver_id=approver.employee_id)

    def _transition(self, req: LeaveRequest, target: LeaveStatus, *, approver_id: Optional[str]) -> LeaveRequest:
        ensure_transition(req.status, target)
        swapped = self._requests.transition(
            request_id=req.request_id,
            expected=req.status,
            status=target,
            approver_id=approver_id,
        )
        if not swapped:
            # Another process changed the status between read and write.
            raise InvalidTransition(f"Leave request {req.request_id} is no longer {req.status.value}")
        return replace(req, status=target, approver_id=approver_id if approver_id else req.approver_id)

    def _get_or_raise(self, request_id: str) -> LeaveRequest:
        req = self._requests.get(str(request_id))
        if not req:
            raise NotFound(f"Leave request {request_id} does not exist")
        return req
