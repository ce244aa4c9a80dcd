from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy.engine import Connection, Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..core.exceptions import ConflictError, StorageError
from .connection import DatabaseConnection

log = logging.getLogger(__name__)

_UNIQUE_MARKERS = ("unique constraint", "duplicate entry", "duplicate key")


def is_unique_violation(exc: IntegrityError) -> bool:
    message = str(getattr(exc, "orig", exc)).lower()
    return any(marker in message for marker in _UNIQUE_MARKERS)


@contextmanager
def db_session(
    conn_factory: DatabaseConnection,
    *,
    conflict_message: str = "Record already exists.",
) -> Iterator[Connection]:
    """One transaction; storage failures surface as domain errors."""
    try:
        with conn_factory.connect() as conn:
            yield conn
    except IntegrityError as e:
        if is_unique_violation(e):
            raise ConflictError(conflict_message) from e
        log.error("integrity error: %s", e.orig)
        raise StorageError("Database integrity error") from e
    except SQLAlchemyError as e:
        log.exception("database error")
        raise StorageError("Database error") from e


def fetchone(result: Result) -> Optional[Dict[str, Any]]:
    row = result.mappings().first()
    return dict(row) if row else None


def fetchall(result: Result) -> List[Dict[str, Any]]:
    return [dict(r) for r in result.mappings().all()]


def normalize_date(value: Any) -> Optional[date]:
    """Normalize DATE values across drivers.

    SQLite hands back ISO strings ('2024-01-31'); MySQL returns datetime.date.
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])

    raise TypeError(f"Unsupported DATE value type: {type(value)!r}")


def normalize_datetime(value: Any) -> Optional[datetime]:
    if value is None:
        return None

    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())

    raise TypeError(f"Unsupported DATETIME value type: {type(value)!r}")


def to_db_date(value: date) -> str:
    return value.isoformat()


def to_db_datetime(value: datetime) -> str:
    return value.isoformat(sep=" ")
