from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily presence mark stored for an employee."""

    PRESENT = "Present"
    ABSENT = "Absent"


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class LeaveTransitionPolicy(str, Enum):
    LENIENT = "lenient"
    STRICT = "strict"
