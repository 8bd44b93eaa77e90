"""
Persistence for employee records.

``EmployeeRepository`` wraps the ``employees`` table.  Every method
opens its own connection and closes it before returning.  All queries
use parameterized statements.

The ``email`` column carries a ``UNIQUE`` constraint; a violation
surfaces as :class:`EmployeeConflictError` so callers never have to
deal with ``sqlite3.IntegrityError`` directly.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from employee_api.app.core.db import get_connection
from employee_api.app.core.exceptions import EmployeeConflictError
from employee_api.app.schemas.employee import EmployeeBase, EmployeeRead

logger = logging.getLogger(__name__)

_COLUMNS = "id, first_name, last_name, email"


class EmployeeRepository:
    """Data access for the ``employees`` table."""

    @classmethod
    def insert(cls, data: EmployeeBase) -> EmployeeRead:
        """Insert a new row and return it with its assigned id."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    "INSERT INTO employees (first_name, last_name, email) VALUES (?, ?, ?)",
                    (data.first_name, data.last_name, data.email),
                )
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                raise EmployeeConflictError(data.email) from exc
            employee_id = cursor.lastrowid
            conn.commit()
            return EmployeeRead(
                id=employee_id,
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
            )
        finally:
            conn.close()

    @classmethod
    def find_by_id(cls, employee_id: int) -> Optional[EmployeeRead]:
        return cls._fetch_one(f"SELECT {_COLUMNS} FROM employees WHERE id = ?", (employee_id,))

    @classmethod
    def find_by_email(cls, email: str) -> Optional[EmployeeRead]:
        return cls._fetch_one(f"SELECT {_COLUMNS} FROM employees WHERE email = ?", (email,))

    @classmethod
    def find_by_name(cls, first_name: str, last_name: str) -> Optional[EmployeeRead]:
        """Return the first employee whose first and last name both match exactly."""
        return cls._fetch_one(
            f"SELECT {_COLUMNS} FROM employees WHERE first_name = ? AND last_name = ? ORDER BY id LIMIT 1",
            (first_name, last_name),
        )

    @classmethod
    def find_all(cls) -> List[EmployeeRead]:
        conn = get_connection()
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY id").fetchall()
            return [cls._row_to_employee(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    def save(cls, employee: EmployeeRead) -> EmployeeRead:
        """Upsert by id.

        An existing row has its three fields replaced; an unknown id is
        inserted as a new row carrying that id.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    """
                    UPDATE employees
                    SET first_name = ?, last_name = ?, email = ?, updated_at = CURRENT_TIMESTAMP
                    WHERE id = ?
                    """,
                    (employee.first_name, employee.last_name, employee.email, employee.id),
                )
                if cursor.rowcount == 0:
                    cursor.execute(
                        "INSERT INTO employees (id, first_name, last_name, email) VALUES (?, ?, ?, ?)",
                        (employee.id, employee.first_name, employee.last_name, employee.email),
                    )
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                raise EmployeeConflictError(employee.email) from exc
            conn.commit()
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE id = ?", (employee.id,)
            ).fetchone()
            return cls._row_to_employee(row)
        finally:
            conn.close()

    @classmethod
    def delete_by_id(cls, employee_id: int) -> bool:
        """Delete a row by id.  Returns ``True`` if a row was removed."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        finally:
            conn.close()

    @classmethod
    def _fetch_one(cls, query: str, params: tuple) -> Optional[EmployeeRead]:
        conn = get_connection()
        try:
            row = conn.execute(query, params).fetchone()
            if not row:
                return None
            return cls._row_to_employee(row)
        finally:
            conn.close()

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> EmployeeRead:
        """Convert a database row to an EmployeeRead schema instance."""
        return EmployeeRead(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )
