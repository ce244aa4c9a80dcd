from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        return jsonify(container.dashboard_service.get_dashboard_stats().to_dict())
