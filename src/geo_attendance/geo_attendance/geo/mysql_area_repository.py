from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchone
from .model import AreaConfig, Coordinate
from .repository import AreaConfigRepository


class MySQLAreaConfigRepository(AreaConfigRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> Optional[AreaConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT center_lat, center_lng, radius_km
                FROM app_config
                ORDER BY config_id
                LIMIT 1
                """
            )
            r = fetchone(cur)
            if not r:
                return None
            return AreaConfig(
                center=Coordinate(lat=as_float(r["center_lat"]), lng=as_float(r["center_lng"])),
                radius_km=as_float(r["radius_km"]),
            )
