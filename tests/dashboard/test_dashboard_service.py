from __future__ import annotations

from datetime import date, datetime

from hrms_lite.core.enums import AttendanceStatus, LeaveStatus
from hrms_lite.dashboard.service import DashboardService


class CountingEmployees:
    def __init__(self, n):
        self._n = n

    def count(self):
        return self._n


class CountingLeaves:
    def __init__(self, by_status):
        self._by_status = by_status

    def count_by_status(self, status):
        return self._by_status.get(status, 0)


class CountingAttendance:
    def __init__(self, present_by_date):
        self._present_by_date = present_by_date
        self.asked = []

    def count_for_date(self, work_date, *, status=None):
        self.asked.append((work_date, status))
        return self._present_by_date.get(work_date, 0)


def test_present_today_is_a_live_count_by_default():
    attendance = CountingAttendance({date(2024, 1, 10): 12})
    svc = DashboardService(
        CountingEmployees(15),
        CountingLeaves({LeaveStatus.PENDING: 5, LeaveStatus.APPROVED: 5}),
        attendance,
        today=lambda: date(2024, 1, 10),
    )

    stats = svc.get_dashboard_stats()

    assert stats.to_dict() == {"totalEmployees": 15, "presentToday": 12, "pendingLeaves": 5}
    assert attendance.asked == [(date(2024, 1, 10), AttendanceStatus.PRESENT)]


def test_present_today_can_be_pinned():
    attendance = CountingAttendance({})
    svc = DashboardService(CountingEmployees(3), CountingLeaves({}), attendance, present_today=10)

    stats = svc.get_dashboard_stats()

    assert stats.present_today == 10
    assert stats.pending_leaves == 0
    assert attendance.asked == []


def test_present_today_defaults_to_the_local_calendar_date(monkeypatch):
    monkeypatch.setattr("hrms_lite.common.datetime_utils.now_local", lambda: datetime(2024, 1, 10, 23, 30))
    attendance = CountingAttendance({date(2024, 1, 10): 4})
    svc = DashboardService(CountingEmployees(4), CountingLeaves({}), attendance)

    assert svc.get_dashboard_stats().present_today == 4
    assert attendance.asked == [(date(2024, 1, 10), AttendanceStatus.PRESENT)]
