"""Shared fixtures for API tests.

Authentication uses real tokens from the app's token service, so the JWT
dependency runs for every request. Handlers are replaced per test through
app.dependency_overrides.
"""

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from folio.core.container import get_token_service
from folio.main import app


@pytest.fixture
def account_id():
    """Account the bearer token is issued for."""
    return uuid7()


@pytest.fixture
def auth_headers(account_id):
    """Authorization header with a valid access token."""
    token = get_token_service().generate_access_token(account_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client():
    """Test client (lifespan not started)."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_overrides():
    """Remove dependency overrides after each test."""
    yield
    app.dependency_overrides.clear()
