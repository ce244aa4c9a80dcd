from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..core.enums import AttendanceStatus, LeaveStatus
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from .model import DashboardStats


class DashboardService:
    """Headline counters for the dashboard.

    "Today" is the server's local calendar date (`today_local`), not UTC, so
    the live count follows the office clock. Inject `today` to override it.

    Note: `present_today` set to an integer pins the figure to that value
    instead of counting today's Present marks.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        leaves: LeaveRepository,
        attendance: AttendanceRepository,
        *,
        present_today: Optional[int] = None,
        today: Callable[[], date] = today_local,
    ):
        self._employees = employees
        self._leaves = leaves
        self._attendance = attendance
        self._present_today = present_today
        self._today = today

    def get_dashboard_stats(self) -> DashboardStats:
        if self._present_today is not None:
            present = int(self._present_today)
        else:
            present = self._attendance.count_for_date(self._today(), status=AttendanceStatus.PRESENT)

        return DashboardStats(
            total_employees=self._employees.count(),
            present_today=present,
            pending_leaves=self._leaves.count_by_status(LeaveStatus.PENDING),
        )
