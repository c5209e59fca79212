from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceType
from ..geo.model import GeoTag


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in or check-out event (append-only)."""

    record_id: str
    employee_id: str
    timestamp: datetime
    event_type: AttendanceType
    location: GeoTag
    note: Optional[str] = None
    photo_ref: Optional[str] = None

    @property
    def work_date(self) -> date:
        return self.timestamp.date()

    @property
    def is_check_in(self) -> bool:
        return self.event_type == AttendanceType.CHECK_IN
