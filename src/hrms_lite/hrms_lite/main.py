from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import today_local
from .common.http import register_cors, register_error_handlers
from .core.constants import DEFAULT_API_PREFIX, DEFAULT_CONFLICT_STATUS_CODE
from .database.bootstrap import apply_schema, list_tables
from .database.seed import seed_demo_data

from .container import build_container
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .reports.controller import register as register_reports

log = logging.getLogger(__name__)

_SETTINGS_DEFAULTS = {
    "DEBUG": False,
    "LOG_LEVEL": "INFO",
    "API_PREFIX": DEFAULT_API_PREFIX,
    "CORS_ORIGINS": "*",
    "CONFLICT_STATUS_CODE": DEFAULT_CONFLICT_STATUS_CODE,
    "LEAVE_TRANSITION_POLICY": "lenient",
    "DASHBOARD_PRESENT_TODAY": None,
    "AUTO_INIT_DB": False,
    "AUTO_SEED_DB": False,
    "HOST": "127.0.0.1",
    "PORT": 5000,
}


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> tuple[str, dict, dict]:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    values = {key: getattr(settings, key, default) for key, default in _SETTINGS_DEFAULTS.items()}
    db_config = dict(getattr(settings, "DB_CONFIG"))

    overrides = dict(overrides or {})
    if "DATABASE_URL" in overrides:
        db_config["url"] = overrides.pop("DATABASE_URL")
    values.update(overrides)
    return settings_module, values, db_config


def create_app(config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module, settings, db_config = _load_settings(config_overrides)
    app.config.update(settings)
    app.config["DEBUG"] = bool(settings["DEBUG"])
    app.config["CONFLICT_STATUS_CODE"] = int(settings["CONFLICT_STATUS_CODE"])

    logging.basicConfig(
        level=str(settings["LOG_LEVEL"]).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    log.info("settings=%s db=%s", settings_module, db_config["url"])

    container = build_container(
        db_config=db_config,
        leave_policy=settings["LEAVE_TRANSITION_POLICY"],
        present_today=settings["DASHBOARD_PRESENT_TODAY"],
    )
    app.extensions["hrms_container"] = container

    if settings["AUTO_INIT_DB"]:
        apply_schema(container.conn)
        log.info("schema ready (tables=%d)", len(list_tables(container.conn)))
    if settings["AUTO_SEED_DB"]:
        result = seed_demo_data(container.conn, today_local())
        log.info("demo seed ready (employees created=%d)", result.employees.created)

    register_error_handlers(app)
    register_cors(app)

    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return "HRMS Lite API is running"

    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_dashboard(app, container)
    register_reports(app, container)

    return app


def main() -> None:
    app = create_app()
    app.run(host=app.config["HOST"], port=int(app.config["PORT"]), debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
