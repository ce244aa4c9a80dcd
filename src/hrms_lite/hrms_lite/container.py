from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .attendance.sql_attendance_repository import SqlAttendanceRepository
from .core.enums import LeaveTransitionPolicy
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .employees.sql_employee_repository import SqlEmployeeRepository
from .leaves.service import LeaveService
from .leaves.sql_leave_repository import SqlLeaveRepository
from .reports.service import ReportService
from .reports.sql_report_repository import SqlReportRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: SqlEmployeeRepository
    attendance_repo: SqlAttendanceRepository
    leaves_repo: SqlLeaveRepository
    reports_repo: SqlReportRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    report_service: ReportService
    dashboard_service: DashboardService


def build_container(
    *,
    db_config: dict,
    leave_policy: str = LeaveTransitionPolicy.LENIENT,
    present_today: Optional[int] = None,
) -> Container:
    config = DBConfig(
        url=str(db_config["url"]),
        echo=bool(db_config.get("echo", False)),
    )
    conn = DatabaseConnection(config)

    employees_repo = SqlEmployeeRepository(conn)
    attendance_repo = SqlAttendanceRepository(conn)
    leaves_repo = SqlLeaveRepository(conn)
    reports_repo = SqlReportRepository(conn)

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    leave_service = LeaveService(
        leaves_repo,
        employees_repo,
        policy=LeaveTransitionPolicy(leave_policy),
    )
    report_service = ReportService(reports_repo, employees_repo, attendance_repo)
    dashboard_service = DashboardService(
        employees_repo,
        leaves_repo,
        attendance_repo,
        present_today=int(present_today) if present_today is not None else None,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        reports_repo=reports_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        report_service=report_service,
        dashboard_service=dashboard_service,
    )
