from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's presence mark for one calendar date."""

    id: str
    employee_pk: str
    date: date
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_pk,
            "date": self.date.isoformat(),
            "status": self.status.value,
        }
