from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "hrms_lite"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from hrms_lite.common.datetime_utils import today_local
from hrms_lite.core.exceptions import DomainError
from hrms_lite.database.bootstrap import apply_schema
from hrms_lite.database.connection import DBConfig, DatabaseConnection
from hrms_lite.database.seed import seed_demo_data


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo employees, leave requests and attendance.")
    parser.add_argument("--keep", action="store_true", help="do not clear existing rows first")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    conn = DatabaseConnection(DBConfig(url=db_config["url"]))
    try:
        apply_schema(conn)
        result = seed_demo_data(conn, today_local(), clear=not args.keep)
    except DomainError as e:
        raise SystemExit(f"Seeding failed: {e}")
    finally:
        conn.dispose()

    print(f"OK: Seeded database -> {conn.url}")
    print(f"   Employees: created={result.employees.created} reused={result.employees.skipped}")
    print(f"   Leaves: created={result.leaves.created} skipped={result.leaves.skipped}")
    print(f"   Attendance: created={result.attendance.created} skipped={result.attendance.skipped}")


if __name__ == "__main__":
    main()
