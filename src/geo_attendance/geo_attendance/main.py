from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import parse_clock
from .core.constants import DEFAULT_AREA_RADIUS_KM, DEFAULT_LATE_THRESHOLD
from .database.bootstrap import apply_schema, list_tables
from .container import Container, build_container
from .geo.model import AreaConfig, Coordinate
from .attendance.controller import register as register_attendance
from .leave.controller import register as register_leave
from .reporting.controller import register as register_reporting


def area_from_settings(settings) -> AreaConfig:
    return AreaConfig(
        center=Coordinate(
            lat=float(getattr(settings, "AREA_CENTER_LAT", 0.0)),
            lng=float(getattr(settings, "AREA_CENTER_LNG", 0.0)),
        ),
        radius_km=float(getattr(settings, "AREA_RADIUS_KM", DEFAULT_AREA_RADIUS_KM)),
    )


def late_threshold_from_settings(settings):
    value = getattr(settings, "LATE_THRESHOLD", None)
    return parse_clock(value) if value else DEFAULT_LATE_THRESHOLD


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        if app.config["DEBUG"]:
            app.logger.info(
                "settings=%s db=%s@%s:%s/%s",
                settings_module,
                db_config.get("user"),
                db_config.get("host"),
                db_config.get("port", 3306),
                db_config.get("database"),
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            default_area=area_from_settings(settings),
            late_threshold=late_threshold_from_settings(settings),
        )

    app.logger.info(
        "work area center=(%.6f, %.6f) radius=%.3fkm late after %s",
        container.area.center.lat,
        container.area.center.lng,
        container.area.radius_km,
        container.classifier.late_threshold.strftime("%H:%M"),
    )

    register_attendance(app, container)
    register_leave(app, container)
    register_reporting(app, container)

    return app
