"""Demo data and attendance backfill.

Both utilities run in a single explicit transaction. Seeding wraps every row in
a SAVEPOINT so duplicates are skipped and counted instead of aborting the
batch; any other database failure rolls everything back.
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional, Sequence

from sqlalchemy import bindparam, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError

from ..common.datetime_utils import days_before, now_local
from ..core.constants import DEFAULT_BACKFILL_DAYS, DEFAULT_PRESENT_RATIO
from ..core.enums import AttendanceStatus, LeaveStatus
from ..core.exceptions import ValidationError
from .connection import DatabaseConnection
from .sql_base import db_session, is_unique_violation, to_db_date, to_db_datetime

log = logging.getLogger(__name__)

DEMO_EMPLOYEES = (
    ("EMP001", "John Smith", "john.smith@ethara.ai", "Engineering"),
    ("EMP002", "Sarah Johnson", "sarah.johnson@ethara.ai", "HR"),
    ("EMP003", "Michael Chen", "michael.chen@ethara.ai", "Engineering"),
    ("EMP004", "Emily Davis", "emily.davis@ethara.ai", "Marketing"),
    ("EMP005", "David Wilson", "david.wilson@ethara.ai", "Sales"),
    ("EMP006", "Jessica Martinez", "jessica.martinez@ethara.ai", "Engineering"),
    ("EMP007", "Robert Taylor", "robert.taylor@ethara.ai", "HR"),
    ("EMP008", "Amanda Brown", "amanda.brown@ethara.ai", "Marketing"),
    ("EMP009", "James Anderson", "james.anderson@ethara.ai", "Sales"),
    ("EMP010", "Lisa Thompson", "lisa.thompson@ethara.ai", "Engineering"),
    ("EMP011", "Christopher Lee", "christopher.lee@ethara.ai", "Engineering"),
    ("EMP012", "Michelle White", "michelle.white@ethara.ai", "HR"),
    ("EMP013", "Daniel Harris", "daniel.harris@ethara.ai", "Sales"),
    ("EMP014", "Jennifer Clark", "jennifer.clark@ethara.ai", "Marketing"),
    ("EMP015", "Matthew Lewis", "matthew.lewis@ethara.ai", "Engineering"),
)

# (employee index, start offset, end offset, reason, status); offsets in days from today
DEMO_LEAVES = (
    (0, 5, 7, "Family vacation", LeaveStatus.PENDING),
    (2, 10, 12, "Personal work", LeaveStatus.PENDING),
    (5, 3, 4, "Medical appointment", LeaveStatus.PENDING),
    (8, 15, 17, "Wedding", LeaveStatus.PENDING),
    (11, 8, 9, "Family emergency", LeaveStatus.PENDING),
    (1, -5, -3, "Sick leave", LeaveStatus.APPROVED),
    (3, -10, -8, "Holiday", LeaveStatus.APPROVED),
    (6, -2, -1, "Personal day", LeaveStatus.APPROVED),
    (9, -7, -6, "Medical checkup", LeaveStatus.APPROVED),
    (12, -12, -10, "Family event", LeaveStatus.APPROVED),
    (4, 20, 25, "Long vacation", LeaveStatus.REJECTED),
    (7, 6, 8, "Personal", LeaveStatus.REJECTED),
    (10, 4, 5, "Casual leave", LeaveStatus.REJECTED),
)

DEMO_ATTENDANCE_DAYS = 7


@dataclass
class BatchCounts:
    created: int = 0
    skipped: int = 0


@dataclass
class SeedResult:
    employees: BatchCounts = field(default_factory=BatchCounts)
    leaves: BatchCounts = field(default_factory=BatchCounts)
    attendance: BatchCounts = field(default_factory=BatchCounts)


@dataclass
class BackfillResult:
    dates: list[date]
    deleted: int = 0
    created: int = 0
    present: int = 0


def demo_status(index: int, day_offset: int) -> AttendanceStatus:
    """Deterministic ~70% Present pattern over employee index and day offset."""
    return AttendanceStatus.PRESENT if (index + day_offset) % 10 < 7 else AttendanceStatus.ABSENT


def _insert_employee(conn: Connection, employee_id: str, full_name: str, email: str, department: str) -> str:
    pk = str(uuid.uuid4())
    conn.execute(
        text(
            """
            INSERT INTO employees(id, employee_id, full_name, email, department, created_at)
            VALUES(:id, :employee_id, :full_name, :email, :department, :created_at)
            """
        ),
        {
            "id": pk,
            "employee_id": employee_id,
            "full_name": full_name,
            "email": email,
            "department": department,
            "created_at": to_db_datetime(now_local()),
        },
    )
    return pk


def _insert_attendance(conn: Connection, employee_pk: str, work_date: date, status: AttendanceStatus) -> None:
    conn.execute(
        text(
            """
            INSERT INTO attendance_records(id, employee_pk, work_date, status)
            VALUES(:id, :employee_pk, :work_date, :status)
            """
        ),
        {"id": str(uuid.uuid4()), "employee_pk": employee_pk, "work_date": to_db_date(work_date), "status": status.value},
    )


def _find_employee_pk(conn: Connection, employee_id: str) -> Optional[str]:
    row = conn.execute(text("SELECT id FROM employees WHERE employee_id=:employee_id"), {"employee_id": employee_id}).first()
    return str(row[0]) if row else None


def _clear_all(conn: Connection) -> None:
    for table in ("attendance_records", "leave_requests", "employees"):
        conn.execute(text(f"DELETE FROM {table}"))


def seed_demo_data(conn_factory: DatabaseConnection, today: date, *, clear: bool = True) -> SeedResult:
    result = SeedResult()

    with db_session(conn_factory) as conn:
        if clear:
            _clear_all(conn)

        employee_pks: list[Optional[str]] = []
        for employee_id, full_name, email, department in DEMO_EMPLOYEES:
            try:
                with conn.begin_nested():
                    pk = _insert_employee(conn, employee_id, full_name, email, department)
                result.employees.created += 1
            except IntegrityError as e:
                if not is_unique_violation(e):
                    raise
                pk = _find_employee_pk(conn, employee_id)
                result.employees.skipped += 1
                log.info("employee %s already present, reusing", employee_id)
            employee_pks.append(pk)

        now = to_db_datetime(now_local())
        for index, start_offset, end_offset, reason, status in DEMO_LEAVES:
            pk = employee_pks[index]
            if pk is None:
                result.leaves.skipped += 1
                continue
            conn.execute(
                text(
                    """
                    INSERT INTO leave_requests(id, employee_pk, start_date, end_date, reason, status, created_at, updated_at)
                    VALUES(:id, :employee_pk, :start_date, :end_date, :reason, :status, :created_at, :updated_at)
                    """
                ),
                {
                    "id": str(uuid.uuid4()),
                    "employee_pk": pk,
                    "start_date": to_db_date(today + timedelta(days=start_offset)),
                    "end_date": to_db_date(today + timedelta(days=end_offset)),
                    "reason": reason,
                    "status": status.value,
                    "created_at": now,
                    "updated_at": now,
                },
            )
            result.leaves.created += 1

        for day_offset in range(-(DEMO_ATTENDANCE_DAYS - 1), 1):
            work_date = today + timedelta(days=day_offset)
            for index, pk in enumerate(employee_pks):
                if pk is None:
                    continue
                try:
                    with conn.begin_nested():
                        _insert_attendance(conn, pk, work_date, demo_status(index, day_offset))
                    result.attendance.created += 1
                except IntegrityError as e:
                    if not is_unique_violation(e):
                        raise
                    result.attendance.skipped += 1

    log.info(
        "seeded employees=%d/%d leaves=%d attendance=%d (skipped %d)",
        result.employees.created,
        len(DEMO_EMPLOYEES),
        result.leaves.created,
        result.attendance.created,
        result.attendance.skipped,
    )
    return result


def backfill_attendance(
    conn_factory: DatabaseConnection,
    today: date,
    *,
    days: int = DEFAULT_BACKFILL_DAYS,
    present_ratio: float = DEFAULT_PRESENT_RATIO,
    rng: Optional[random.Random] = None,
) -> BackfillResult:
    """Replace attendance for every employee on the `days` dates before today."""
    if days <= 0:
        raise ValidationError("days must be a positive number")
    if not 0 <= present_ratio <= 1:
        raise ValidationError("present_ratio must be between 0 and 1")

    rng = rng or random.Random()
    dates = days_before(today, days)
    result = BackfillResult(dates=dates)

    with db_session(conn_factory) as conn:
        employee_pks: Sequence[str] = [str(r[0]) for r in conn.execute(text("SELECT id FROM employees ORDER BY employee_id")).all()]
        if not employee_pks:
            raise ValidationError("No employees found. Seed employees first.")

        stmt = text("DELETE FROM attendance_records WHERE work_date IN :dates").bindparams(
            bindparam("dates", expanding=True)
        )
        result.deleted = conn.execute(stmt, {"dates": [to_db_date(d) for d in dates]}).rowcount

        for work_date in dates:
            for pk in employee_pks:
                status = AttendanceStatus.PRESENT if rng.random() < present_ratio else AttendanceStatus.ABSENT
                _insert_attendance(conn, pk, work_date, status)
                result.created += 1
                if status == AttendanceStatus.PRESENT:
                    result.present += 1

    log.info("backfilled %d attendance rows over %d day(s), replaced %d", result.created, len(dates), result.deleted)
    return result
