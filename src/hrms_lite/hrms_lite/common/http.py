from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, DomainError, NotFoundError, StorageError, ValidationError

log = logging.getLogger(__name__)


def json_body() -> dict:
    """Request JSON object, or an empty dict for missing/invalid bodies."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_error_handlers(app: Flask) -> None:
    conflict_status = int(app.config.get("CONFLICT_STATUS_CODE", 400))

    def _server_error(e: Exception):
        body = {"message": "Server Error"}
        if app.config.get("DEBUG"):
            body["error"] = str(e)
        return jsonify(body), 500

    @app.errorhandler(ValidationError)
    def on_validation_error(e: ValidationError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def on_not_found(e: NotFoundError):
        return jsonify({"message": str(e)}), 404

    @app.errorhandler(ConflictError)
    def on_conflict(e: ConflictError):
        return jsonify({"message": str(e)}), conflict_status

    @app.errorhandler(StorageError)
    def on_storage_error(e: StorageError):
        log.error("storage failure on %s %s: %s", request.method, request.path, e.__cause__ or e)
        return _server_error(e)

    @app.errorhandler(DomainError)
    def on_domain_error(e: DomainError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(HTTPException)
    def on_http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def on_unexpected(e: Exception):
        log.exception("unhandled error on %s %s", request.method, request.path)
        return _server_error(e)


def register_cors(app: Flask) -> None:
    """Attach flask-cors; CORS_ORIGINS is "*" or a comma-separated origin list."""
    raw = str(app.config.get("CORS_ORIGINS", "*")).strip() or "*"
    origins = "*" if raw == "*" else [o.strip() for o in raw.split(",") if o.strip()]
    CORS(
        app,
        origins=origins,
        methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
