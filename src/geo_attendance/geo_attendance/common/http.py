from __future__ import annotations

from datetime import date
from typing import Any, Optional

from flask import current_app, jsonify

from ..core.exceptions import (
    AuthorizationError,
    DomainError,
    InvalidTransition,
    NotFound,
    ValidationError,
    ValidationRejected,
)
from .datetime_utils import parse_iso_date

_STATUS_BY_ERROR = (
    (ValidationRejected, 400),
    (ValidationError, 400),
    (AuthorizationError, 403),
    (NotFound, 404),
    (InvalidTransition, 409),
)


def ok(**payload: Any):
    return jsonify({"success": True, **payload})


def fail(message: str, status: int, **extra: Any):
    return jsonify({"success": False, "message": message, **extra}), status


def error_response(exc: Exception):
    """Translate a domain error into a JSON response; anything else is a 500."""
    if isinstance(exc, DomainError):
        for error_type, status in _STATUS_BY_ERROR:
            if isinstance(exc, error_type):
                extra = {"code": exc.code} if isinstance(exc, ValidationRejected) else {}
                return fail(str(exc), status, **extra)
    current_app.logger.exception("Unhandled error: %s", exc)
    return fail("Internal error", 500)


def date_arg(value: Optional[str], field_name: str, *, default: Optional[date] = None) -> date:
    v = (value or "").strip()
    if not v:
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return default
    try:
        return parse_iso_date(v)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def float_arg(value: Any, field_name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
