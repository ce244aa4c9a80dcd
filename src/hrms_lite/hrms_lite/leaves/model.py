from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class EmployeeRef:
    """Minimal employee identity embedded in leave listings."""

    full_name: str
    employee_id: str


@dataclass(frozen=True)
class LeaveRequest:
    id: str
    employee_pk: str
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    created_at: datetime
    updated_at: datetime
    employee: Optional[EmployeeRef] = None

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "employeeId": self.employee_pk,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
        if self.employee is not None:
            out["employee"] = {"full_name": self.employee.full_name, "employee_id": self.employee.employee_id}
        return out
