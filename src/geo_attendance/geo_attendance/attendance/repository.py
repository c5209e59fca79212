from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def append(self, record: AttendanceRecord) -> None:
        """Store a new record. Records are never updated or deleted."""

        raise NotImplementedError

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records whose timestamp falls on [start_date, end_date], oldest first."""

        raise NotImplementedError
