from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee record.

    Note: plain data object, no database access code here.
    """

    id: str
    employee_id: str
    full_name: str
    email: str
    department: str
    created_at: datetime

    def identity(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "email": self.email,
            "department": self.department,
        }

    def to_dict(self) -> dict:
        out = self.identity()
        out["created_at"] = self.created_at.isoformat()
        return out
