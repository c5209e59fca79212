from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Employee roles. Manager tiers and CEO may decide leave requests."""

    EMP = "EMP"
    ADMIN = "ADMIN"
    FM = "FM"
    SUP = "SUP"
    OM = "OM"
    PM = "PM"
    CEO = "CEO"
    DM = "DM"


APPROVER_ROLES = frozenset({Role.ADMIN, Role.FM, Role.SUP, Role.OM, Role.PM, Role.CEO, Role.DM})


class AttendanceType(str, Enum):
    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"


class DayStatus(str, Enum):
    """Daily verdict for one employee."""

    PRESENT = "PRESENT"
    LATE = "LATE"
    ABSENT = "ABSENT"
    LEAVE = "LEAVE"


class LeaveStatus(str, Enum):
    """Leave request lifecycle states."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class LeaveCategory(str, Enum):
    SICK = "SICK"
    PERSONAL = "PERSONAL"
    ANNUAL = "ANNUAL"
    MATERNITY = "MATERNITY"
    STERILIZATION = "STERILIZATION"
    TRAINING = "TRAINING"
    MILITARY = "MILITARY"
