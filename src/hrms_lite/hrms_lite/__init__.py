"""HRMS Lite package.

This package is organized by feature modules (employees, attendance, leaves,
reports, dashboard) with a thin Flask controller layer on top of service and
repository layers.
"""
