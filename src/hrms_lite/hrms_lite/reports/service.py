from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .filters import ReportFilter
from .model import AttendanceReport, EmployeeReport, MonthlyTrendPoint, attendance_rate
from .repository import ReportRepository

log = logging.getLogger(__name__)


class ReportService:
    """Use case: aggregate attendance/department statistics.

    Department filtering is resolved to a concrete set of employee ids first,
    since attendance rows carry no department of their own. When that set is
    empty the zero report is returned without touching attendance.
    """

    def __init__(
        self,
        reports: ReportRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
    ):
        self._reports = reports
        self._employees = employees
        self._attendance = attendance

    def get_reports(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        department: Optional[str] = None,
    ) -> AttendanceReport:
        flt = ReportFilter(start_date=start_date, end_date=end_date, department=department)

        employee_ids = None
        if flt.has_department:
            employee_ids = list(self._reports.resolve_employee_ids(flt))
            if not employee_ids:
                log.debug("department %r has no employees, returning empty report", department)
                return AttendanceReport()

        total_employees = len(employee_ids) if employee_ids is not None else self._reports.count_employees(flt)
        total = self._reports.count_attendance(flt, employee_ids=employee_ids)
        present = self._reports.count_attendance(flt, employee_ids=employee_ids, status=AttendanceStatus.PRESENT)

        return AttendanceReport(
            total_employees=total_employees,
            total_attendance=total,
            present_count=present,
            absent_count=total - present,
            attendance_rate=attendance_rate(present, total),
            department_stats=tuple(self._reports.department_stats(flt)),
            monthly_trend=self._monthly_trend(flt, employee_ids),
        )

    def _monthly_trend(self, flt: ReportFilter, employee_ids) -> tuple[MonthlyTrendPoint, ...]:
        totals = self._reports.monthly_counts(flt, employee_ids=employee_ids)
        present = self._reports.monthly_counts(flt, employee_ids=employee_ids, status=AttendanceStatus.PRESENT)
        # Months with no Present rows are absent from `present`.
        return tuple(
            MonthlyTrendPoint(month=month, count=totals[month], present=present.get(month, 0))
            for month in sorted(totals)
        )

    def get_employee_report(
        self,
        *,
        employee_id: Optional[str],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> EmployeeReport:
        if not employee_id:
            raise ValidationError("Employee ID is required")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        records = tuple(self._attendance.list_for_employee(employee.id, start_date=start_date, end_date=end_date))
        present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)

        return EmployeeReport(
            employee=employee,
            records=records,
            present_days=present,
            absent_days=len(records) - present,
            attendance_rate=attendance_rate(present, len(records)),
        )
