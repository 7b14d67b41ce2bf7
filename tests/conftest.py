from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from task_api import crud
from task_api.db import get_db
from task_api.main import app


@pytest.fixture()
def db():
    """Stand-in AsyncSession; tests configure `execute` per case."""
    session = MagicMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    return session


@pytest.fixture()
def client(db):
    """
    TestClient with the session dependency overridden.

    Used without a `with` block so the lifespan (and its real database
    connection) never runs.
    """
    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def model(monkeypatch):
    """Replace every model function with an AsyncMock."""
    mocks = {}
    for name in ("get_all_tasks", "get_task_by_id", "create_task", "update_task_by_id", "remove_task"):
        mocks[name] = AsyncMock()
        monkeypatch.setattr(crud, name, mocks[name])
    return mocks
