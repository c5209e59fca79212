"""Drive the service layer directly, without Flask.

Controllers stay thin; everything below goes through the same services the HTTP routes use.
"""

import importlib
from datetime import timedelta

from config import get_settings_module

from src.geo_attendance.geo_attendance.common.datetime_utils import now_local
from src.geo_attendance.geo_attendance.container import build_container
from src.geo_attendance.geo_attendance.core.enums import AttendanceType, LeaveCategory
from src.geo_attendance.geo_attendance.leave.model import LeaveCandidate
from src.geo_attendance.geo_attendance.main import area_from_settings, late_threshold_from_settings


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        default_area=area_from_settings(settings),
        late_threshold=late_threshold_from_settings(settings),
    )

    center = container.area.center
    record = container.attendance_service.record_event(
        "E001", AttendanceType.CHECK_IN, lat=center.lat, lng=center.lng, now=now_local()
    )
    print(record)

    today = now_local().date()
    leave = container.leave_service.submit(
        "E003",
        LeaveCandidate(
            category=LeaveCategory.PERSONAL,
            start_date=today + timedelta(days=7),
            end_date=today + timedelta(days=8),
            reason="Moving house",
        ),
    )
    print(container.leave_service.approve(leave.request_id, "M001"))

    print(container.report_service.daily_overview(today).summary.as_dict())


if __name__ == "__main__":
    main()
