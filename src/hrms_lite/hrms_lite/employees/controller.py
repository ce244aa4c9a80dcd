from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = container.employee_service.list_employees()
        return jsonify([e.to_dict() for e in employees])

    @app.route(f"{prefix}/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = json_body()
        employee = container.employee_service.add_employee(
            employee_id=data.get("employee_id"),
            full_name=data.get("full_name"),
            email=data.get("email"),
            department=data.get("department"),
        )
        return jsonify(employee.to_dict()), 201

    @app.route(f"{prefix}/employees/<id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(id: str):
        container.employee_service.delete_employee(id)
        return jsonify({"message": "Employee deleted successfully."})
