"""
Name: API Test Fixtures

Responsibilities:
  - TestClient over the real app with fresh in-memory repositories
  - Helpers to obtain bearer headers
"""

import pytest
from fastapi.testclient import TestClient

from paydesk.api.main import app
from paydesk.container import clear_container_caches, get_token_codec
from paydesk.identity.token_codec import TokenClaims
from paydesk.identity.users import UserRole


@pytest.fixture
def client():
    clear_container_caches()
    app.dependency_overrides.clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_container_caches()


@pytest.fixture
def auth_headers(client) -> dict:
    token = get_token_codec().issue(
        TokenClaims(id=1, name="Admin", role=UserRole.ADMIN)
    ).token
    return {"Authorization": f"Bearer {token}"}
