from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, as_float, day_bounds, db_cursor, fetchall
from ..geo.model import GeoTag
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(r["record_id"]),
        employee_id=str(r["employee_id"]),
        timestamp=r["recorded_at"],
        event_type=AttendanceType(r["event_type"]),
        location=GeoTag(lat=as_float(r["lat"]), lng=as_float(r["lng"]), inside=as_bool(r["inside_area"])),
        note=r.get("note"),
        photo_ref=r.get("photo_ref"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    record_id, employee_id, recorded_at, event_type, lat, lng, inside_area, note, photo_ref
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.record_id,
                    record.employee_id,
                    record.timestamp,
                    record.event_type.value,
                    record.location.lat,
                    record.location.lng,
                    1 if record.location.inside else 0,
                    record.note,
                    record.photo_ref,
                ),
            )

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        lower, upper = day_bounds(start_date, end_date)
        clauses = ["recorded_at >= %s", "recorded_at < %s"]
        params: list[object] = [lower, upper]

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT record_id, employee_id, recorded_at, event_type, lat, lng, inside_area, note, photo_ref
                FROM attendance_records
                WHERE {where}
                ORDER BY recorded_at ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
