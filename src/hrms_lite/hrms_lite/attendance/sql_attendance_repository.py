from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from sqlalchemy import text

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_session, fetchall, normalize_date, to_db_date
from .model import AttendanceRecord
from .repository import AttendanceRepository


class SqlAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_pk: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        record = AttendanceRecord(id=str(uuid.uuid4()), employee_pk=str(employee_pk), date=work_date, status=status)
        with db_session(self._conn_factory, conflict_message="Attendance for this date already exists.") as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO attendance_records(id, employee_pk, work_date, status)
                    VALUES(:id, :employee_pk, :work_date, :status)
                    """
                ),
                {
                    "id": record.id,
                    "employee_pk": record.employee_pk,
                    "work_date": to_db_date(work_date),
                    "status": status.value,
                },
            )
        return record

    def list_for_employee(
        self,
        employee_pk: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["employee_pk=:employee_pk"]
        params: dict[str, object] = {"employee_pk": str(employee_pk)}

        if start_date and end_date:
            clauses.append("work_date BETWEEN :start_date AND :end_date")
            params["start_date"] = to_db_date(start_date)
            params["end_date"] = to_db_date(end_date)

        where = " AND ".join(clauses)

        with db_session(self._conn_factory) as conn:
            result = conn.execute(
                text(
                    f"""
                    SELECT id, employee_pk, work_date, status
                    FROM attendance_records
                    WHERE {where}
                    ORDER BY work_date DESC
                    """
                ),
                params,
            )
            return [
                AttendanceRecord(
                    id=str(r["id"]),
                    employee_pk=str(r["employee_pk"]),
                    date=normalize_date(r["work_date"]),
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(result)
            ]

    def count_for_date(self, work_date: date, *, status: Optional[AttendanceStatus] = None) -> int:
        clauses = ["work_date=:work_date"]
        params: dict[str, object] = {"work_date": to_db_date(work_date)}
        if status is not None:
            clauses.append("status=:status")
            params["status"] = status.value

        where = " AND ".join(clauses)
        with db_session(self._conn_factory) as conn:
            return int(conn.execute(text(f"SELECT COUNT(*) FROM attendance_records WHERE {where}"), params).scalar_one())
