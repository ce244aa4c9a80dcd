from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, never on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, employee_id: str, full_name: str, email: str, department: str) -> Employee:
        """Raises ConflictError when employee_id or email is taken."""
        raise NotImplementedError

    def delete_cascade(self, id: str) -> bool:
        """Delete the employee and every attendance/leave row it owns."""
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
