from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from sqlalchemy import inspect

from .connection import DatabaseConnection

log = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def _strip_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False

    for ch in sql:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: Optional[Path] = None) -> None:
    schema_path = Path(schema_path or SCHEMA_PATH)
    sql = _strip_comments(schema_path.read_text(encoding="utf-8"))

    with conn_factory.connect() as conn:
        for stmt in _iter_sql_statements(sql):
            conn.exec_driver_sql(stmt)
    log.info("schema applied from %s", schema_path.name)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    return sorted(inspect(conn_factory.engine).get_table_names())
