from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = json_body()
        record = container.attendance_service.mark_attendance(
            employee_id=data.get("employeeId"),
            date=data.get("date"),
            status=data.get("status"),
        )
        return jsonify(record.to_dict()), 201

    @app.route(f"{prefix}/attendance/<employee_id>", methods=["GET"], endpoint="get_attendance")
    def get_attendance(employee_id: str):
        records = container.attendance_service.get_attendance_for_employee(employee_id)
        return jsonify([r.to_dict() for r in records])
