from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from timesheet.fastapi.core.config import DevSettings
from timesheet.fastapi.main import create_app


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'timesheet.db'}"


@pytest.fixture
def settings(database_url) -> DevSettings:
    return DevSettings(
        ENV_MODE="dev",
        DATABASE_URL=database_url,
        DATABASE_KEY="",
        AUTO_CREATE_TABLES=True,
        CORS_ORIGINS="*",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
