from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_session, fetchall
from .filters import Predicate, ReportFilter
from .model import DepartmentStat
from .repository import ReportRepository


class SqlReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _attendance_predicate(
        flt: ReportFilter,
        employee_ids: Optional[Sequence[str]],
        status: Optional[AttendanceStatus],
    ) -> Predicate:
        pred = flt.attendance_predicate(employee_ids)
        if status is not None:
            pred = pred.and_("a.status = :status", status=status.value)
        return pred

    def resolve_employee_ids(self, flt: ReportFilter) -> Sequence[str]:
        pred = flt.employee_predicate()
        with db_session(self._conn_factory) as conn:
            result = conn.execute(pred.statement("SELECT e.id FROM employees e {where}"), dict(pred.params))
            return [str(row[0]) for row in result.all()]

    def count_employees(self, flt: ReportFilter) -> int:
        pred = flt.employee_predicate()
        with db_session(self._conn_factory) as conn:
            return int(conn.execute(pred.statement("SELECT COUNT(e.id) FROM employees e {where}"), dict(pred.params)).scalar_one())

    def count_attendance(
        self,
        flt: ReportFilter,
        *,
        employee_ids: Optional[Sequence[str]] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> int:
        pred = self._attendance_predicate(flt, employee_ids, status)
        with db_session(self._conn_factory) as conn:
            stmt = pred.statement("SELECT COUNT(a.id) FROM attendance_records a {where}")
            return int(conn.execute(stmt, dict(pred.params)).scalar_one())

    def department_stats(self, flt: ReportFilter) -> Sequence[DepartmentStat]:
        pred = flt.employee_predicate()
        with db_session(self._conn_factory) as conn:
            result = conn.execute(
                pred.statement(
                    """
                    SELECT e.department AS name, COUNT(e.id) AS total
                    FROM employees e
                    {where}
                    GROUP BY e.department
                    ORDER BY e.department
                    """
                ),
                dict(pred.params),
            )
            return [DepartmentStat(name=r["name"], total=int(r["total"])) for r in fetchall(result)]

    def monthly_counts(
        self,
        flt: ReportFilter,
        *,
        employee_ids: Optional[Sequence[str]] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Mapping[str, int]:
        pred = self._attendance_predicate(flt, employee_ids, status)
        with db_session(self._conn_factory) as conn:
            result = conn.execute(
                pred.statement(
                    """
                    SELECT SUBSTR(a.work_date, 1, 7) AS month, COUNT(a.id) AS count
                    FROM attendance_records a
                    {where}
                    GROUP BY SUBSTR(a.work_date, 1, 7)
                    ORDER BY month
                    """
                ),
                dict(pred.params),
            )
            return {str(r["month"]): int(r["count"]) for r in fetchall(result)}
