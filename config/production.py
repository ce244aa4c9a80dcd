import os

DB_CONFIG = {
    "url": os.getenv("DATABASE_URL", "sqlite:///hrms.db"),
    "echo": False,
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

API_PREFIX = os.getenv("API_PREFIX", "/api")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

CONFLICT_STATUS_CODE = int(os.getenv("CONFLICT_STATUS_CODE", "400"))
LEAVE_TRANSITION_POLICY = os.getenv("LEAVE_TRANSITION_POLICY", "lenient")
DASHBOARD_PRESENT_TODAY = int(os.environ["DASHBOARD_PRESENT_TODAY"]) if os.getenv("DASHBOARD_PRESENT_TODAY") else None

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
