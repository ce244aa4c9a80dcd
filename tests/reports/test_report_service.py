from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

import pytest

from hrms_lite.attendance.model import AttendanceRecord
from hrms_lite.core.enums import AttendanceStatus
from hrms_lite.core.exceptions import NotFoundError, ValidationError
from hrms_lite.employees.model import Employee
from hrms_lite.reports.model import DepartmentStat
from hrms_lite.reports.service import ReportService


class FakeReportRepo:
    def __init__(self, *, ids=(), employees=0, total=0, present=0, stats=(), months=None, present_months=None):
        self._ids = list(ids)
        self._employees = employees
        self._total = total
        self._present = present
        self._stats = list(stats)
        self._months = months or {}
        self._present_months = present_months or {}
        self.calls: list[tuple] = []

    def resolve_employee_ids(self, flt):
        self.calls.append(("resolve", flt.department))
        return self._ids

    def count_employees(self, flt):
        self.calls.append(("count_employees",))
        return self._employees

    def count_attendance(self, flt, *, employee_ids=None, status=None):
        self.calls.append(("count_attendance", employee_ids, status))
        return self._present if status == AttendanceStatus.PRESENT else self._total

    def department_stats(self, flt):
        self.calls.append(("department_stats",))
        return self._stats

    def monthly_counts(self, flt, *, employee_ids=None, status=None):
        self.calls.append(("monthly_counts", employee_ids, status))
        return self._present_months if status == AttendanceStatus.PRESENT else self._months


@dataclass
class InMemoryEmployees:
    by_id: dict[str, Employee]

    def get_by_id(self, id: str) -> Optional[Employee]:
        return self.by_id.get(id)


class InMemoryAttendance:
    def __init__(self, records):
        self._records = list(records)
        self.last_args = None

    def list_for_employee(self, employee_pk, *, start_date=None, end_date=None):
        self.last_args = {"employee_pk": employee_pk, "start_date": start_date, "end_date": end_date}
        return sorted((r for r in self._records if r.employee_pk == employee_pk), key=lambda r: r.date, reverse=True)


JOHN = Employee(
    id="pk-1",
    employee_id="EMP001",
    full_name="John Smith",
    email="john.smith@ethara.ai",
    department="Engineering",
    created_at=datetime(2024, 1, 1, 9, 0),
)


def _service(repo, records=()):
    return ReportService(repo, InMemoryEmployees({JOHN.id: JOHN}), InMemoryAttendance(records))


def test_unknown_department_short_circuits_to_zero_report():
    repo = FakeReportRepo(ids=[])

    report = _service(repo).get_reports(department="Legal")

    assert report.to_dict() == {
        "totalEmployees": 0,
        "totalAttendance": 0,
        "presentCount": 0,
        "absentCount": 0,
        "attendanceRate": 0,
        "departmentStats": [],
        "monthlyTrend": [],
    }
    assert repo.calls == [("resolve", "Legal")]


def test_all_departments_does_not_resolve_ids():
    repo = FakeReportRepo(employees=15, total=3, present=2)

    report = _service(repo).get_reports(department="all")

    assert report.total_employees == 15
    assert not any(c[0] == "resolve" for c in repo.calls)
    assert ("count_attendance", None, None) in repo.calls


def test_department_filter_passes_resolved_ids():
    repo = FakeReportRepo(ids=["pk-1", "pk-2"], total=4, present=1)

    report = _service(repo).get_reports(department="Engineering")

    assert report.total_employees == 2
    assert ("count_attendance", ["pk-1", "pk-2"], AttendanceStatus.PRESENT) in repo.calls
    assert report.absent_count == 3
    assert report.attendance_rate == 25.0


def test_rate_and_monthly_trend_merge():
    repo = FakeReportRepo(
        employees=3,
        total=3,
        present=2,
        stats=[DepartmentStat("Engineering", 2), DepartmentStat("HR", 1)],
        months={"2024-02": 1, "2024-01": 2, "2024-03": 4},
        present_months={"2024-01": 1, "2024-02": 1},
    )

    report = _service(repo).get_reports(start_date=date(2024, 1, 1), end_date=date(2024, 3, 31)).to_dict()

    assert report["attendanceRate"] == 66.67
    assert report["presentCount"] + report["absentCount"] == report["totalAttendance"]
    assert report["departmentStats"] == [{"name": "Engineering", "total": 2}, {"name": "HR", "total": 1}]
    assert report["monthlyTrend"] == [
        {"month": "2024-01", "count": 2, "present": 1},
        {"month": "2024-02", "count": 1, "present": 1},
        {"month": "2024-03", "count": 4, "present": 0},
    ]


def test_rate_is_zero_without_attendance():
    report = _service(FakeReportRepo(employees=2)).get_reports()

    assert report.attendance_rate == 0
    assert report.total_attendance == 0


def test_employee_report_requires_id():
    with pytest.raises(ValidationError):
        _service(FakeReportRepo()).get_employee_report(employee_id="")


def test_employee_report_unknown_employee():
    with pytest.raises(NotFoundError):
        _service(FakeReportRepo()).get_employee_report(employee_id="pk-404")


def test_employee_report_counts_and_forwards_range():
    records = [
        AttendanceRecord(id="a1", employee_pk="pk-1", date=date(2024, 1, 1), status=AttendanceStatus.PRESENT),
        AttendanceRecord(id="a2", employee_pk="pk-1", date=date(2024, 1, 2), status=AttendanceStatus.ABSENT),
        AttendanceRecord(id="a3", employee_pk="pk-1", date=date(2024, 1, 3), status=AttendanceStatus.PRESENT),
    ]
    attendance = InMemoryAttendance(records)
    svc = ReportService(FakeReportRepo(), InMemoryEmployees({JOHN.id: JOHN}), attendance)

    out = svc.get_employee_report(employee_id="pk-1", start_date=date(2024, 1, 1), end_date=date(2024, 1, 31)).to_dict()

    assert out["employee"]["employee_id"] == "EMP001"
    assert (out["totalDays"], out["presentDays"], out["absentDays"]) == (3, 2, 1)
    assert out["attendanceRate"] == 66.67
    assert [r["date"] for r in out["records"]] == ["2024-01-03", "2024-01-02", "2024-01-01"]
    assert attendance.last_args["start_date"] == date(2024, 1, 1)
