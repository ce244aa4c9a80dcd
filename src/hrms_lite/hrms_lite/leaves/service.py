from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import require_iso_date
from ..common.validators import is_blank, require_choice, require_non_empty
from ..core.enums import LeaveStatus, LeaveTransitionPolicy
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeaveRequest
from .repository import LeaveRepository

log = logging.getLogger(__name__)

# Under the strict policy a request may only leave Pending, once.
STRICT_TRANSITIONS = {
    LeaveStatus.PENDING: {LeaveStatus.APPROVED, LeaveStatus.REJECTED},
    LeaveStatus.APPROVED: set(),
    LeaveStatus.REJECTED: set(),
}


class LeaveService:
    def __init__(
        self,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        *,
        policy: LeaveTransitionPolicy = LeaveTransitionPolicy.LENIENT,
    ):
        self._leaves = leaves
        self._employees = employees
        self._policy = LeaveTransitionPolicy(policy)

    def apply_leave(self, *, employee_id: str, start_date, end_date, reason: str) -> LeaveRequest:
        if any(is_blank(v) for v in (employee_id, start_date, end_date, reason)):
            raise ValidationError("All fields are required.")
        employee_id = require_non_empty(employee_id, "employeeId")
        reason = require_non_empty(reason, "reason")

        start = require_iso_date(start_date, "start_date")
        end = require_iso_date(end_date, "end_date")
        if end < start:
            raise ValidationError("end_date cannot be before start_date")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found.")

        leave = self._leaves.create(employee_pk=employee_id, start_date=start, end_date=end, reason=reason)
        log.info("leave %s requested by %s for %d day(s)", leave.id, employee_id, leave.days)
        return leave

    def list_leaves(self) -> Sequence[LeaveRequest]:
        return self._leaves.list_with_employee()

    def update_leave_status(self, id: str, new_status) -> LeaveRequest:
        status = require_choice(new_status, LeaveStatus, "status")

        if self._policy == LeaveTransitionPolicy.STRICT:
            current = self._leaves.get_by_id(id)
            if not current:
                raise NotFoundError("Leave request not found.")
            if status not in STRICT_TRANSITIONS[current.status]:
                raise ValidationError(f"Cannot change a {current.status.value} request to {status.value}")

        updated = self._leaves.set_status(id, status)
        if not updated:
            raise NotFoundError("Leave request not found.")
        log.info("leave %s set to %s", id, status.value)
        return updated

    def count_pending(self) -> int:
        return self._leaves.count_by_status(LeaveStatus.PENDING)
