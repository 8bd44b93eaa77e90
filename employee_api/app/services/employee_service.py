"""
Business logic for employee records.

``EmployeeService`` is the only place where employee rules live:

* an email may belong to at most one employee, checked on creation and
  again on update;
* an update replaces first name, last name and email of an existing
  employee and never its id;
* deletion is idempotent.

Lookups return ``None`` when nothing matches; the API layer maps that
to HTTP 404.  Email clashes raise :class:`EmployeeConflictError`.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from employee_api.app.core.exceptions import EmployeeConflictError
from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service class for managing employees."""

    @classmethod
    async def create_employee(cls, data: EmployeeCreate) -> EmployeeRead:
        """Create an employee and return it with its assigned id.

        Raises ``EmployeeConflictError`` if the email is already taken.
        The pre-check only reports the clash early; the unique index on
        ``email`` is what guarantees it under concurrent requests.
        """
        if EmployeeRepository.find_by_email(data.email) is not None:
            logger.warning("Rejected employee with duplicate email %s", data.email)
            raise EmployeeConflictError(data.email)
        employee = EmployeeRepository.insert(data)
        logger.info("Created employee %s", employee.id)
        return employee

    @classmethod
    async def list_employees(cls) -> List[EmployeeRead]:
        """Return all employees."""
        return EmployeeRepository.find_all()

    @classmethod
    async def get_employee(cls, employee_id: int) -> Optional[EmployeeRead]:
        return EmployeeRepository.find_by_id(employee_id)

    @classmethod
    async def get_employee_by_name(cls, first_name: str, last_name: str) -> Optional[EmployeeRead]:
        return EmployeeRepository.find_by_name(first_name, last_name)

    @classmethod
    async def update_employee(cls, employee_id: int, changes: EmployeeUpdate) -> Optional[EmployeeRead]:
        """Replace the mutable fields of an existing employee.

        Returns ``None`` without writing anything if the employee does
        not exist.  Raises ``EmployeeConflictError`` if the new email
        belongs to a different employee.
        """
        existing = EmployeeRepository.find_by_id(employee_id)
        if existing is None:
            return None
        owner = EmployeeRepository.find_by_email(changes.email)
        if owner is not None and owner.id != employee_id:
            logger.warning("Rejected update of employee %s: email %s in use", employee_id, changes.email)
            raise EmployeeConflictError(changes.email)
        updated = existing.model_copy(
            update={
                "first_name": changes.first_name,
                "last_name": changes.last_name,
                "email": changes.email,
            }
        )
        employee = EmployeeRepository.save(updated)
        logger.info("Updated employee %s", employee_id)
        return employee

    @classmethod
    async def delete_employee(cls, employee_id: int) -> None:
        """Delete an employee.  A missing id is not an error."""
        if EmployeeRepository.delete_by_id(employee_id):
            logger.info("Deleted employee %s", employee_id)
