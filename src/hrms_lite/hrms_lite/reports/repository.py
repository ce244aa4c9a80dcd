from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .filters import ReportFilter
from .model import DepartmentStat


class ReportRepository(Protocol):
    """Aggregate read queries for reporting.

    `employee_ids` of None means "no employee restriction"; callers never pass
    an empty sequence.
    """

    def resolve_employee_ids(self, flt: ReportFilter) -> Sequence[str]:
        raise NotImplementedError

    def count_employees(self, flt: ReportFilter) -> int:
        raise NotImplementedError

    def count_attendance(
        self,
        flt: ReportFilter,
        *,
        employee_ids: Optional[Sequence[str]] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> int:
        raise NotImplementedError

    def department_stats(self, flt: ReportFilter) -> Sequence[DepartmentStat]:
        raise NotImplementedError

    def monthly_counts(
        self,
        flt: ReportFilter,
        *,
        employee_ids: Optional[Sequence[str]] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Mapping[str, int]:
        """Attendance rows per `YYYY-MM`, ascending."""
        raise NotImplementedError
