from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value, field_name: str) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def optional_iso_date(value, field_name: str) -> Optional[date]:
    if value is None or not str(value).strip():
        return None
    return require_iso_date(value, field_name)


def days_before(today: date, days: int) -> list[date]:
    """The `days` calendar dates before `today`, oldest first."""
    return [today - timedelta(days=i) for i in range(days, 0, -1)]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
