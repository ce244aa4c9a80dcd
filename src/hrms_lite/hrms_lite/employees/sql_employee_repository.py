from __future__ import annotations

import uuid
from typing import Optional, Sequence

from sqlalchemy import text

from ..common.datetime_utils import now_local
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_session, fetchall, fetchone, normalize_datetime, to_db_datetime
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, employee_id, full_name, email, department, created_at"


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        id=str(r["id"]),
        employee_id=r["employee_id"],
        full_name=r["full_name"],
        email=r["email"],
        department=r["department"],
        created_at=normalize_datetime(r["created_at"]),
    )


class SqlEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_session(self._conn_factory) as conn:
            result = conn.execute(text(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at DESC, id"))
            return [_row_to_employee(r) for r in fetchall(result)]

    def get_by_id(self, id: str) -> Optional[Employee]:
        with db_session(self._conn_factory) as conn:
            result = conn.execute(text(f"SELECT {_COLUMNS} FROM employees WHERE id=:id"), {"id": str(id)})
            row = fetchone(result)
            return _row_to_employee(row) if row else None

    def create(self, *, employee_id: str, full_name: str, email: str, department: str) -> Employee:
        employee = Employee(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            full_name=full_name,
            email=email,
            department=department,
            created_at=now_local(),
        )
        with db_session(self._conn_factory, conflict_message="Employee ID or Email already exists.") as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO employees(id, employee_id, full_name, email, department, created_at)
                    VALUES(:id, :employee_id, :full_name, :email, :department, :created_at)
                    """
                ),
                {
                    "id": employee.id,
                    "employee_id": employee.employee_id,
                    "full_name": employee.full_name,
                    "email": employee.email,
                    "department": employee.department,
                    "created_at": to_db_datetime(employee.created_at),
                },
            )
        return employee

    def delete_cascade(self, id: str) -> bool:
        params = {"id": str(id)}
        with db_session(self._conn_factory) as conn:
            conn.execute(text("DELETE FROM attendance_records WHERE employee_pk=:id"), params)
            conn.execute(text("DELETE FROM leave_requests WHERE employee_pk=:id"), params)
            result = conn.execute(text("DELETE FROM employees WHERE id=:id"), params)
            return result.rowcount > 0

    def count(self) -> int:
        with db_session(self._conn_factory) as conn:
            return int(conn.execute(text("SELECT COUNT(*) FROM employees")).scalar_one())
