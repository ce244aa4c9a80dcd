from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import AttendanceRecord
from ..employees.model import Employee


def attendance_rate(present: int, total: int) -> float:
    """Present share as a percentage with 2 decimals; 0 when nothing was recorded."""
    if total <= 0:
        return 0
    return round(present / total * 100, 2)


@dataclass(frozen=True)
class DepartmentStat:
    name: str
    total: int

    def to_dict(self) -> dict:
        return {"name": self.name, "total": self.total}


@dataclass(frozen=True)
class MonthlyTrendPoint:
    month: str
    count: int
    present: int = 0

    def to_dict(self) -> dict:
        return {"month": self.month, "count": self.count, "present": self.present}


@dataclass(frozen=True)
class AttendanceReport:
    """Composite dashboard report. Every field has a zero/empty default."""

    total_employees: int = 0
    total_attendance: int = 0
    present_count: int = 0
    absent_count: int = 0
    attendance_rate: float = 0
    department_stats: tuple[DepartmentStat, ...] = field(default_factory=tuple)
    monthly_trend: tuple[MonthlyTrendPoint, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "totalAttendance": self.total_attendance,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "attendanceRate": self.attendance_rate,
            "departmentStats": [d.to_dict() for d in self.department_stats],
            "monthlyTrend": [m.to_dict() for m in self.monthly_trend],
        }


@dataclass(frozen=True)
class EmployeeReport:
    employee: Employee
    records: tuple[AttendanceRecord, ...] = ()
    present_days: int = 0
    absent_days: int = 0
    attendance_rate: float = 0

    @property
    def total_days(self) -> int:
        return len(self.records)

    def to_dict(self) -> dict:
        return {
            "employee": self.employee.identity(),
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "attendanceRate": self.attendance_rate,
            "records": [r.to_dict() for r in self.records],
        }
