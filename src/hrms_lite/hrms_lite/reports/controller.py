from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import optional_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    def _date_args():
        return (
            optional_iso_date(request.args.get("startDate"), "startDate"),
            optional_iso_date(request.args.get("endDate"), "endDate"),
        )

    @app.route(f"{prefix}/reports", methods=["GET"], endpoint="get_reports")
    def get_reports():
        start, end = _date_args()
        report = container.report_service.get_reports(
            start_date=start,
            end_date=end,
            department=request.args.get("department"),
        )
        return jsonify(report.to_dict())

    @app.route(f"{prefix}/reports/employee", methods=["GET"], endpoint="get_employee_report")
    def get_employee_report():
        start, end = _date_args()
        report = container.report_service.get_employee_report(
            employee_id=request.args.get("employeeId"),
            start_date=start,
            end_date=end,
        )
        return jsonify(report.to_dict())
