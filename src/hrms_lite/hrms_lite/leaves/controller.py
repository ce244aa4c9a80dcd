from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/leaves", methods=["POST"], endpoint="apply_leave")
    def apply_leave():
        data = json_body()
        leave = container.leave_service.apply_leave(
            employee_id=data.get("employeeId"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            reason=data.get("reason"),
        )
        return jsonify(leave.to_dict()), 201

    @app.route(f"{prefix}/leaves", methods=["GET"], endpoint="list_leaves")
    def list_leaves():
        return jsonify([leave.to_dict() for leave in container.leave_service.list_leaves()])

    @app.route(f"{prefix}/leaves/<id>", methods=["PATCH"], endpoint="update_leave_status")
    def update_leave_status(id: str):
        leave = container.leave_service.update_leave_status(id, json_body().get("status"))
        return jsonify(leave.to_dict())
