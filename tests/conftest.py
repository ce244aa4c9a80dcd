from __future__ import annotations

import pytest

from hrms_lite.database.bootstrap import apply_schema
from hrms_lite.database.connection import DBConfig, DatabaseConnection


@pytest.fixture
def db(tmp_path):
    conn = DatabaseConnection(DBConfig(url=f"sqlite:///{tmp_path / 'hrms.db'}"))
    apply_schema(conn)
    yield conn
    conn.dispose()


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'api.db'}"
