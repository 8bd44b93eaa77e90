from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.config import settings
from employee_api.app.core.db import init_db
from employee_api.app.main import create_app


@pytest.fixture(autouse=True)
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    db_path = tmp_path / "employees.sqlite3"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture()
def client() -> TestClient:
    with TestClient(create_app()) as test_client:
        yield test_client
