from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import is_blank, require_email, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

log = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, id: str) -> Employee:
        if not id:
            raise ValidationError("Employee ID is required")
        employee = self._employees.get_by_id(id)
        if not employee:
            raise NotFoundError("Employee not found.")
        return employee

    def add_employee(self, *, employee_id: str, full_name: str, email: str, department: str) -> Employee:
        if any(is_blank(v) for v in (employee_id, full_name, email, department)):
            raise ValidationError("All fields are required.")
        employee_id = require_non_empty(employee_id, "employee_id")
        full_name = require_non_empty(full_name, "full_name")
        department = require_non_empty(department, "department")
        email = require_email(email)

        employee = self._employees.create(
            employee_id=employee_id,
            full_name=full_name,
            email=email,
            department=department,
        )
        log.info("employee %s added (%s)", employee.employee_id, employee.department)
        return employee

    def delete_employee(self, id: str) -> None:
        if not self._employees.delete_cascade(id):
            raise NotFoundError("Employee not found.")
        log.info("employee %s deleted with attendance and leave history", id)

    def count(self) -> int:
        return self._employees.count()
