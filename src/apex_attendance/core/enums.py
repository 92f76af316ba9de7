from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Session role used for route guards."""

    ADMIN = "admin"
    STAFF = "staff"


class WorkerStatus(str, Enum):
    """Approval state of a staff registration."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class CheckInBlockReason(str, Enum):
    """Why a check-in is not permitted right now (NONE when it is)."""

    NONE = "NONE"
    ALREADY_CHECKED_IN = "ALREADY_CHECKED_IN"
    LOCATION_UNAVAILABLE = "LOCATION_UNAVAILABLE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    OUTSIDE_TIME_WINDOW = "OUTSIDE_TIME_WINDOW"


class DayState(str, Enum):
    NOT_CHECKED_IN = "NOT_CHECKED_IN"
    CHECKED_IN = "CHECKED_IN"
