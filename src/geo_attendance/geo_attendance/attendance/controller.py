from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import error_response, float_arg, ok
from ..core.enums import AttendanceType
from ..core.exceptions import ValidationError
from ..geo.model import Coordinate
from ..geo.policy import distance_km, is_in_range
from ..container import Container
from .model import AttendanceRecord


def record_to_json(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "employee_id": r.employee_id,
        "timestamp": r.timestamp.isoformat(),
        "type": r.event_type.value,
        "location": {"lat": r.location.lat, "lng": r.location.lng, "inside": r.location.inside},
        "note": r.note,
        "photo_ref": r.photo_ref,
    }


def _event_type(value) -> AttendanceType:
    try:
        return AttendanceType(str(value or "").upper())
    except ValueError:
        raise ValidationError("type must be CHECK_IN or CHECK_OUT")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/area", methods=["GET"], endpoint="area_config")
    def area_config():
        area = container.area
        return ok(center={"lat": area.center.lat, "lng": area.center.lng}, radius_km=area.radius_km)

    @app.route("/api/area/check", methods=["POST"], endpoint="area_check")
    def area_check():
        try:
            data = request.get_json(silent=True) or {}
            point = Coordinate(lat=float_arg(data.get("lat"), "lat"), lng=float_arg(data.get("lng"), "lng"))
            return ok(
                distance_km=round(distance_km(point, container.area.center), 3),
                inside=is_in_range(point, container.area),
            )
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        try:
            data = request.get_json(silent=True) or {}
            record = container.attendance_service.record_event(
                str(data.get("employee_id") or ""),
                _event_type(data.get("type")),
                lat=float_arg(data.get("lat"), "lat"),
                lng=float_arg(data.get("lng"), "lng"),
                note=data.get("note"),
                photo_ref=data.get("photo_ref"),
                now=now_local(),
            )
            return ok(record=record_to_json(record)), 201
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/<employee_id>", methods=["GET"], endpoint="attendance_history")
    def attendance_history(employee_id: str):
        try:
            rows = container.attendance_service.history(employee_id, period=request.args.get("period", "all"))
            return ok(records=[record_to_json(r) for r in rows])
        except Exception as e:
            return error_response(e)
