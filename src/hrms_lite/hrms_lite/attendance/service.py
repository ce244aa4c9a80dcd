from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import require_iso_date
from ..common.validators import is_blank, require_choice, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def mark_attendance(self, *, employee_id: str, date, status) -> AttendanceRecord:
        if any(is_blank(v) for v in (employee_id, date, status)):
            raise ValidationError("All fields are required.")
        employee_id = require_non_empty(employee_id, "employeeId")

        work_date = require_iso_date(date, "date")
        status = require_choice(status, AttendanceStatus, "status")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found.")

        # Duplicate (employee, date) is rejected by the unique constraint, not pre-checked.
        record = self._attendance.create(employee_pk=employee_id, work_date=work_date, status=status)
        log.info("attendance %s marked for %s on %s", status.value, employee_id, work_date)
        return record

    def get_attendance_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found.")
        return self._attendance.list_for_employee(employee_id)
