"""Create the GeoAttendance database and its four tables.

Safe to re-run: every statement in database/schema.sql is CREATE ... IF NOT EXISTS.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.geo_attendance.geo_attendance.database.bootstrap import apply_schema, list_tables

EXPECTED_TABLES = {"employees", "app_config", "attendance_records", "leave_requests"}


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")

    missing = EXPECTED_TABLES - set(list_tables(db_config))
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    if missing:
        raise SystemExit(f"Schema applied to {target} but tables are missing: {', '.join(sorted(missing))}")
    print(f"OK: GeoAttendance schema ready on {target}")


if __name__ == "__main__":
    main()
