from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import date_arg, error_response, ok
from ..core.constants import DEFAULT_TREND_DAYS
from ..core.exceptions import ValidationError
from ..container import Container
from .model import VerdictRow


def _row_to_json(r: VerdictRow) -> dict:
    return {
        "employee_id": r.employee_id,
        "name": r.name,
        "department": r.department,
        "status": r.status.value,
        "check_in_time": r.check_in_time,
        "leave_id": r.leave_id,
    }


def _int_arg(value, field_name: str, default: int) -> int:
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/daily", methods=["GET"], endpoint="daily_report")
    def daily_report():
        try:
            day = date_arg(request.args.get("date"), "date", default=now_local().date())
            overview = container.report_service.daily_overview(day)
            return ok(
                date=day.isoformat(),
                summary=overview.summary.as_dict(),
                departments={name: counts.as_dict() for name, counts in overview.departments.items()},
                scanned=[_row_to_json(r) for r in overview.scanned],
                not_scanned=[_row_to_json(r) for r in overview.not_scanned],
                on_leave=[_row_to_json(r) for r in overview.on_leave],
            )
        except Exception as e:
            return error_response(e)

    @app.route("/api/reports/trend", methods=["GET"], endpoint="trend_report")
    def trend_report():
        try:
            end = date_arg(request.args.get("end"), "end", default=now_local().date())
            days = _int_arg(request.args.get("days"), "days", DEFAULT_TREND_DAYS)
            series = container.report_service.trend(end, days=days)
            return ok(series=[{"date": d.day.isoformat(), **d.summary.as_dict()} for d in series])
        except Exception as e:
            return error_response(e)

    @app.route("/api/reports/insights", methods=["GET"], endpoint="insight_counts")
    def insight_counts():
        try:
            day = date_arg(request.args.get("date"), "date", default=now_local().date())
            return ok(date=day.isoformat(), counts=container.report_service.insight_counts(day).as_dict())
        except Exception as e:
            return error_response(e)
