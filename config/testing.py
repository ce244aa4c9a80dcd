import os

DB_CONFIG = {
    "url": os.getenv("DATABASE_URL", "sqlite:///hrms_test.db"),
    "echo": False,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

API_PREFIX = "/api"
CORS_ORIGINS = "*"

CONFLICT_STATUS_CODE = 400
LEAVE_TRANSITION_POLICY = "lenient"
DASHBOARD_PRESENT_TODAY = None

HOST = "127.0.0.1"
PORT = 5000

AUTO_INIT_DB = True
AUTO_SEED_DB = False
