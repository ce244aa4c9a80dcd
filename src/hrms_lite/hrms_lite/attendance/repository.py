from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def create(self, *, employee_pk: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        """Insert a mark; raises ConflictError if (employee, date) already exists."""
        raise NotImplementedError

    def list_for_employee(
        self,
        employee_pk: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records ordered by date, newest first; range applies only when both bounds are set."""
        raise NotImplementedError

    def count_for_date(self, work_date: date, *, status: Optional[AttendanceStatus] = None) -> int:
        raise NotImplementedError
