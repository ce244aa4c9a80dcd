from __future__ import annotations

import argparse
import importlib
import random
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "hrms_lite"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from hrms_lite.common.datetime_utils import today_local
from hrms_lite.core.constants import DEFAULT_BACKFILL_DAYS, DEFAULT_PRESENT_RATIO
from hrms_lite.core.exceptions import DomainError
from hrms_lite.database.connection import DBConfig, DatabaseConnection
from hrms_lite.database.seed import backfill_attendance


def main() -> None:
    parser = argparse.ArgumentParser(description="Replace attendance for the days before today.")
    parser.add_argument("--days", type=int, default=DEFAULT_BACKFILL_DAYS)
    parser.add_argument("--ratio", type=float, default=DEFAULT_PRESENT_RATIO, help="share of Present marks")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible marks")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    conn = DatabaseConnection(DBConfig(url=db_config["url"]))
    try:
        result = backfill_attendance(
            conn,
            today_local(),
            days=args.days,
            present_ratio=args.ratio,
            rng=random.Random(args.seed),
        )
    except DomainError as e:
        raise SystemExit(f"Backfill failed: {e}")
    finally:
        conn.dispose()

    print(f"OK: Backfilled {result.created} records for {', '.join(d.isoformat() for d in result.dates)}")
    print(f"   Replaced: {result.deleted}  Present: {result.present}  Absent: {result.created - result.present}")


if __name__ == "__main__":
    main()
