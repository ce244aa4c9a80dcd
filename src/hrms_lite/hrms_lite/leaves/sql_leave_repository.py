from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from sqlalchemy import text

from ..common.datetime_utils import now_local
from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.sql_base import (
    db_session,
    fetchall,
    fetchone,
    normalize_date,
    normalize_datetime,
    to_db_date,
    to_db_datetime,
)
from .model import EmployeeRef, LeaveRequest
from .repository import LeaveRepository


def _row_to_leave(r: dict) -> LeaveRequest:
    employee = None
    if r.get("full_name") is not None:
        employee = EmployeeRef(full_name=r["full_name"], employee_id=r["employee_id"])
    return LeaveRequest(
        id=str(r["id"]),
        employee_pk=str(r["employee_pk"]),
        start_date=normalize_date(r["start_date"]),
        end_date=normalize_date(r["end_date"]),
        reason=r["reason"],
        status=LeaveStatus(r["status"]),
        created_at=normalize_datetime(r["created_at"]),
        updated_at=normalize_datetime(r["updated_at"]),
        employee=employee,
    )


class SqlLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_pk: str, start_date: date, end_date: date, reason: str) -> LeaveRequest:
        now = now_local()
        leave = LeaveRequest(
            id=str(uuid.uuid4()),
            employee_pk=str(employee_pk),
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=LeaveStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        with db_session(self._conn_factory) as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO leave_requests(id, employee_pk, start_date, end_date, reason, status, created_at, updated_at)
                    VALUES(:id, :employee_pk, :start_date, :end_date, :reason, :status, :created_at, :updated_at)
                    """
                ),
                {
                    "id": leave.id,
                    "employee_pk": leave.employee_pk,
                    "start_date": to_db_date(start_date),
                    "end_date": to_db_date(end_date),
                    "reason": reason,
                    "status": leave.status.value,
                    "created_at": to_db_datetime(now),
                    "updated_at": to_db_datetime(now),
                },
            )
        return leave

    def get_by_id(self, id: str) -> Optional[LeaveRequest]:
        with db_session(self._conn_factory) as conn:
            row = fetchone(
                conn.execute(
                    text(
                        """
                        SELECT id, employee_pk, start_date, end_date, reason, status, created_at, updated_at
                        FROM leave_requests
                        WHERE id=:id
                        """
                    ),
                    {"id": str(id)},
                )
            )
            return _row_to_leave(row) if row else None

    def list_with_employee(self) -> Sequence[LeaveRequest]:
        with db_session(self._conn_factory) as conn:
            result = conn.execute(
                text(
                    """
                    SELECT l.id, l.employee_pk, l.start_date, l.end_date, l.reason,
                           l.status, l.created_at, l.updated_at,
                           e.full_name, e.employee_id
                    FROM leave_requests l
                    JOIN employees e ON e.id = l.employee_pk
                    ORDER BY l.created_at DESC, l.id
                    """
                )
            )
            return [_row_to_leave(r) for r in fetchall(result)]

    def set_status(self, id: str, status: LeaveStatus) -> Optional[LeaveRequest]:
        with db_session(self._conn_factory) as conn:
            result = conn.execute(
                text("UPDATE leave_requests SET status=:status, updated_at=:updated_at WHERE id=:id"),
                {"status": status.value, "updated_at": to_db_datetime(now_local()), "id": str(id)},
            )
            if result.rowcount == 0:
                return None
        return self.get_by_id(id)

    def count_by_status(self, status: LeaveStatus) -> int:
        with db_session(self._conn_factory) as conn:
            return int(
                conn.execute(
                    text("SELECT COUNT(*) FROM leave_requests WHERE status=:status"),
                    {"status": status.value},
                ).scalar_one()
            )
