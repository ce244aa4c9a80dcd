"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALL_DEPARTMENTS = "all"

DEFAULT_API_PREFIX = "/api"
DEFAULT_CONFLICT_STATUS_CODE = 400
DEFAULT_BACKFILL_DAYS = 7
DEFAULT_PRESENT_RATIO = 0.8
