from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create(self, *, employee_pk: str, start_date: date, end_date: date, reason: str) -> LeaveRequest:
        raise NotImplementedError

    def get_by_id(self, id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_with_employee(self) -> Sequence[LeaveRequest]:
        """All requests, newest first, with the owning employee's identity embedded."""
        raise NotImplementedError

    def set_status(self, id: str, status: LeaveStatus) -> Optional[LeaveRequest]:
        """Overwrite status; returns the updated request or None if it does not exist."""
        raise NotImplementedError

    def count_by_status(self, status: LeaveStatus) -> int:
        raise NotImplementedError
