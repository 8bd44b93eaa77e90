from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import requests

from employee_client import EmployeeClient


def _response(status_code: int, body: Any = None, *, text: Optional[str] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode("utf-8")
        response.headers["content-type"] = "text/plain; charset=utf-8"
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["content-type"] = "application/json"
    else:
        response._content = b""
    return response


class StubSession:
    def __init__(self, *responses: Any) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def request(self, **kwargs: Any) -> requests.Response:
        self.calls.append(kwargs)
        result = self._responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


EMPLOYEE = {"id": 1, "firstName": "Rei", "lastName": "Dallo", "email": "rd@domain.com"}


def test_create_employee_posts_to_collection() -> None:
    session = StubSession(_response(201, EMPLOYEE))
    client = EmployeeClient(base_url="http://api.local/", session=session)

    employee, error = client.create_employee({"firstName": "Rei", "lastName": "Dallo", "email": "rd@domain.com"})

    assert error is None
    assert employee == EMPLOYEE
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://api.local/api/employee"
    assert call["json"]["email"] == "rd@domain.com"


def test_conflict_reports_status_and_detail() -> None:
    detail = "An employee already exists with the given email: rd@domain.com"
    session = StubSession(_response(409, {"detail": detail}))
    client = EmployeeClient(base_url="http://api.local", session=session)

    employee, error = client.create_employee(EMPLOYEE)

    assert employee is None
    assert error == {"status_code": 409, "message": detail}


def test_list_employees() -> None:
    session = StubSession(_response(200, [EMPLOYEE]))
    client = EmployeeClient(base_url="http://api.local", session=session)

    employees, error = client.list_employees()

    assert error is None
    assert employees == [EMPLOYEE]


def test_get_missing_employee_returns_404_error() -> None:
    session = StubSession(_response(404, {"detail": "Employee not found"}))
    client = EmployeeClient(base_url="http://api.local", session=session)

    employee, error = client.get_employee(999)

    assert employee is None
    assert error["status_code"] == 404
    assert session.calls[0]["url"] == "http://api.local/api/employee/999"


def test_find_employee_passes_names_as_query() -> None:
    session = StubSession(_response(200, EMPLOYEE))
    client = EmployeeClient(base_url="http://api.local", session=session)

    employee, error = client.find_employee("Rei", "Dallo")

    assert error is None
    assert employee == EMPLOYEE
    assert session.calls[0]["params"] == {"firstName": "Rei", "lastName": "Dallo"}


def test_update_employee_uses_put() -> None:
    updated = {**EMPLOYEE, "firstName": "Oni"}
    session = StubSession(_response(200, updated))
    client = EmployeeClient(base_url="http://api.local", session=session)

    employee, error = client.update_employee(1, {"firstName": "Oni", "lastName": "Dallo", "email": "rd@domain.com"})

    assert error is None
    assert employee == updated
    assert session.calls[0]["method"] == "PUT"


def test_delete_employee_accepts_plain_text() -> None:
    session = StubSession(_response(200, text="Employee deleted successfully!"))
    client = EmployeeClient(base_url="http://api.local", session=session)

    deleted, error = client.delete_employee(1)

    assert deleted is True
    assert error is None


def test_transport_error_is_reported() -> None:
    session = StubSession(requests.ConnectionError("connection refused"))
    client = EmployeeClient(base_url="http://api.local", session=session)

    employees, error = client.list_employees()

    assert employees == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_list_employees_warns_on_non_list_body(caplog) -> None:
    session = StubSession(_response(200, {"items": [EMPLOYEE]}))
    client = EmployeeClient(base_url="http://api.local", session=session)

    with caplog.at_level(logging.WARNING, logger="employee_client"):
        employees, error = client.list_employees()

    assert employees == []
    assert error is None
    assert "Expected a list of employees" in caplog.text
