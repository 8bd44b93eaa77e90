"""Employee Records API client.

A thin wrapper around the ``/api/employee`` REST endpoints built on the
``requests`` library.  Every public method returns a tuple
``(result, error)``: on success ``error`` is ``None``; on failure
``result`` is empty and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Transport failures are reported the
same way and never raise.

Example::

    client = EmployeeClient(base_url="http://localhost:8080")
    employee, error = client.create_employee(
        {"firstName": "Rei", "lastName": "Dallo", "email": "rd@domain.com"}
    )
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EmployeeClient:
    """Client for the employee records API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/employee",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:8080``.
            prefix: Path of the employee collection.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        JSON responses are decoded; any other non-empty body is returned
        as text.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if "application/json" in response.headers.get("content-type", ""):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def create_employee(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an employee.  A duplicate email yields ``status_code`` 409."""
        return self._request("POST", "", json_body=payload)

    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "")
        if error:
            return [], error
        if not isinstance(data, list):
            logger.warning("Expected a list of employees, got %s", type(data).__name__)
            return [], None
        return data, None

    def get_employee(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/{employee_id}")

    def find_employee(self, first_name: str, last_name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Look up an employee by exact first and last name."""
        return self._request("GET", "/search", params={"firstName": first_name, "lastName": last_name})

    def update_employee(
        self, employee_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace ``firstName``, ``lastName`` and ``email`` of an employee."""
        return self._request("PUT", f"/{employee_id}", json_body=payload)

    def delete_employee(self, employee_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/{employee_id}")
        if error:
            return False, error
        return True, None
