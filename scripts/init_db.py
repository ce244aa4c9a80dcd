from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "hrms_lite"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from hrms_lite.database.bootstrap import apply_schema, list_tables
from hrms_lite.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    conn = DatabaseConnection(DBConfig(url=db_config["url"]))
    try:
        apply_schema(conn)
        tables = list_tables(conn)
    finally:
        conn.dispose()
    print(f"OK: Applied schema.sql -> {conn.url} (tables={len(tables)})")


if __name__ == "__main__":
    main()
