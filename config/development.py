import os

DB_CONFIG = {
    "url": os.getenv("DATABASE_URL", "sqlite:///hrms.db"),
    "echo": bool(int(os.getenv("DB_ECHO", "0"))),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

API_PREFIX = os.getenv("API_PREFIX", "/api")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

# 400 matches what existing clients expect; 409 is the stricter choice
CONFLICT_STATUS_CODE = int(os.getenv("CONFLICT_STATUS_CODE", "400"))
# lenient | strict
LEAVE_TRANSITION_POLICY = os.getenv("LEAVE_TRANSITION_POLICY", "lenient")
# Unset: live count of today's Present marks. An integer pins the figure.
DASHBOARD_PRESENT_TODAY = int(os.environ["DASHBOARD_PRESENT_TODAY"]) if os.getenv("DASHBOARD_PRESENT_TODAY") else None

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
