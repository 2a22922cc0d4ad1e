"""API test fixtures: FastAPI test client + token helpers.

Invariants:
    - get_db dependency overridden to use the per-test engine (root conftest)
    - db_manager patched so the readiness probe sees the test engine
    - db_calls records every session handed to a route
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

import task_manager.infrastructure.database as db_module
from task_manager.config import get_settings
from task_manager.infrastructure.database import DatabaseSessionManager, get_db
from task_manager.infrastructure.tokens import build_token_issuer
from task_manager.main import app


@pytest.fixture
def db_calls():
    return []


@pytest.fixture
async def client(test_engine, test_session_factory, db_calls):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        db_calls.append("session")
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def token_issuer():
    return build_token_issuer(get_settings())


@pytest.fixture
def auth_headers(token_issuer):
    """Build Authorization headers for an email, optionally already expired."""
    def _headers(email: str, expired: bool = False) -> dict:
        now = datetime.now(timezone.utc)
        if expired:
            now -= timedelta(days=30)
        return {"Authorization": f"Bearer {token_issuer.issue(email, now=now)}"}
    return _headers
