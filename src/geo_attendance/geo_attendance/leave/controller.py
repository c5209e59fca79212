from __future__ import annotations

from flask import Flask, request

from ..common.http import date_arg, error_response, ok
from ..core.enums import LeaveCategory, LeaveStatus
from ..core.exceptions import ValidationError
from ..container import Container
from .model import LeaveCandidate, LeaveRequest


def leave_to_json(r: LeaveRequest) -> dict:
    return {
        "id": r.request_id,
        "employee_id": r.employee_id,
        "type": r.category.value,
        "start_date": r.start_date.isoformat(),
        "end_date": r.end_date.isoformat(),
        "reason": r.reason,
        "status": r.status.value,
        "days_count": r.days_count,
        "approver_id": r.approver_id,
        "attachment_ref": r.attachment_ref,
    }


def _category(value) -> LeaveCategory:
    try:
        return LeaveCategory(str(value or "").upper())
    except ValueError:
        raise ValidationError("Unknown leave type")


def _status(value) -> LeaveStatus | None:
    if not value:
        return None
    try:
        return LeaveStatus(str(value).upper())
    except ValueError:
        raise ValidationError("Unknown leave status")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["POST"], endpoint="submit_leave")
    def submit_leave():
        try:
            data = request.get_json(silent=True) or {}
            attachment_ref = data.get("attachment_ref")
            # client days_count is never stored
            candidate = LeaveCandidate(
                category=_category(data.get("type")),
                start_date=date_arg(data.get("start_date"), "start_date"),
                end_date=date_arg(data.get("end_date"), "end_date"),
                reason=str(data.get("reason") or ""),
                has_attachment=bool(data.get("has_attachment")) or bool(attachment_ref),
                attachment_ref=attachment_ref,
            )
            created = container.leave_service.submit(str(data.get("employee_id") or ""), candidate)
            return ok(leave=leave_to_json(created)), 201
        except Exception as e:
            return error_response(e)

    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    def list_leaves():
        try:
            rows = container.leave_service.list_requests(
                status=_status(request.args.get("status")),
                employee_id=request.args.get("employee_id") or None,
            )
            return ok(leaves=[leave_to_json(r) for r in rows])
        except Exception as e:
            return error_response(e)

    @app.route("/api/leaves/<request_id>", methods=["GET"], endpoint="get_leave")
    def get_leave(request_id: str):
        try:
            return ok(leave=leave_to_json(container.leave_service.get(request_id)))
        except Exception as e:
            return error_response(e)

    @app.route("/api/leaves/<request_id>/approve", methods=["POST"], endpoint="approve_leave")
    def approve_leave(request_id: str):
        try:
            data = request.get_json(silent=True) or {}
            updated = container.leave_service.approve(request_id, str(data.get("approver_id") or ""))
            return ok(leave=leave_to_json(updated))
        except Exception as e:
            return error_response(e)

    @app.route("/api/leaves/<request_id>/reject", methods=["POST"], endpoint="reject_leave")
    def reject_leave(request_id: str):
        try:
            data = request.get_json(silent=True) or {}
            updated = container.leave_service.reject(request_id, str(data.get("approver_id") or ""))
            return ok(leave=leave_to_json(updated))
        except Exception as e:
            return error_response(e)

    @app.route("/api/leaves/<request_id>/cancel", methods=["POST"], endpoint="cancel_leave")
    def cancel_leave(request_id: str):
        try:
            data = request.get_json(silent=True) or {}
            updated = container.leave_service.cancel(request_id, str(data.get("employee_id") or ""))
            return ok(leave=leave_to_json(updated))
        except Exception as e:
            return error_response(e)
