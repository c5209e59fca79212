from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .attendance.classifier import AttendanceClassifier
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .geo.model import AreaConfig
from .geo.mysql_area_repository import MySQLAreaConfigRepository
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.policy import LeavePolicyEngine
from .leave.repository import LeaveRepository
from .leave.service import LeaveService
from .reporting.aggregator import AttendanceAggregator
from .reporting.service import ReportService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    leave_repo: LeaveRepository

    area: AreaConfig
    classifier: AttendanceClassifier

    attendance_service: AttendanceService
    leave_service: LeaveService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def assemble(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    leave_repo: LeaveRepository,
    area: AreaConfig,
    late_threshold: time,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    classifier = AttendanceClassifier(late_threshold=late_threshold)
    aggregator = AttendanceAggregator(classifier)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        area=area,
        classifier=classifier,
        attendance_service=AttendanceService(attendance_repo, employees_repo, area),
        leave_service=LeaveService(leave_repo, employees_repo, policy=LeavePolicyEngine()),
        report_service=ReportService(
            employees_repo,
            attendance_repo,
            leave_repo,
            classifier=classifier,
            aggregator=aggregator,
        ),
        conn=conn,
    )


def build_container(*, db_config: dict, default_area: AreaConfig, late_threshold: time) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    # Loaded once; read-only for the life of the process.
    area = MySQLAreaConfigRepository(conn).load() or default_area

    return assemble(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leave_repo=MySQLLeaveRepository(conn),
        area=area,
        late_threshold=late_threshold,
        conn=conn,
    )
