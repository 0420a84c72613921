"""API test fixtures — FastAPI test client over the in-memory test database.

Invariants:
    - get_db dependency overridden to use a session from the test engine
    - Overrides cleared after each test

Design Decisions:
    - Lifespan is not run by ASGITransport, so app.state.db_manager stays unset
      unless a test sets it
"""

import pytest
from httpx import ASGITransport, AsyncClient

from focustools.infrastructure.database import get_db
from focustools.main import app


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_task(client):
    """Create a task through the API and return its JSON body."""
    res = await client.post("/api/tasks", json={"title": "Write spec"})
    assert res.status_code == 201
    return res.json()
