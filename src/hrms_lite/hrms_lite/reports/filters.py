"""Composable WHERE clauses for report queries.

Each optional filter contributes zero or one condition to a conjunction.
Employee id sets are bound as expanding IN parameters; an empty set is
never rendered, callers short-circuit before reaching the database.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional, Sequence

from sqlalchemy import bindparam, text
from sqlalchemy.sql.elements import TextClause

from ..core.constants import ALL_DEPARTMENTS
from ..database.sql_base import to_db_date


@dataclass(frozen=True)
class Predicate:
    clauses: tuple[str, ...] = ()
    params: Mapping[str, object] = field(default_factory=dict)
    expanding: tuple[str, ...] = ()

    def and_(self, clause: str, *, expanding: bool = False, **params) -> "Predicate":
        merged = dict(self.params)
        merged.update(params)
        return Predicate(
            clauses=self.clauses + (clause,),
            params=merged,
            expanding=self.expanding + (tuple(params) if expanding else ()),
        )

    @property
    def where(self) -> str:
        if not self.clauses:
            return ""
        return "WHERE " + " AND ".join(self.clauses)

    def statement(self, sql: str) -> TextClause:
        """Build a text() statement; `sql` carries a `{where}` placeholder."""
        stmt = text(sql.replace("{where}", self.where))
        if self.expanding:
            stmt = stmt.bindparams(*(bindparam(name, expanding=True) for name in self.expanding))
        return stmt


@dataclass(frozen=True)
class ReportFilter:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    department: Optional[str] = None

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    @property
    def has_department(self) -> bool:
        return bool(self.department) and self.department != ALL_DEPARTMENTS

    def employee_predicate(self, alias: str = "e") -> Predicate:
        pred = Predicate()
        if self.has_department:
            pred = pred.and_(f"{alias}.department = :department", department=self.department)
        return pred

    def attendance_predicate(self, employee_ids: Optional[Sequence[str]] = None, alias: str = "a") -> Predicate:
        pred = Predicate()
        if self.has_date_range:
            pred = pred.and_(
                f"{alias}.work_date BETWEEN :start_date AND :end_date",
                start_date=to_db_date(self.start_date),
                end_date=to_db_date(self.end_date),
            )
        if employee_ids is not None:
            if not employee_ids:
                raise ValueError("empty employee id set must be short-circuited by the caller")
            pred = pred.and_(f"{alias}.employee_pk IN :employee_ids", expanding=True, employee_ids=list(employee_ids))
        return pred
