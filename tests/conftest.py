"""Pytest configuration and fixtures for schoolpay.

HTTP tests run against create_app() with an InMemoryRecordStore and a fake
token verifier, through httpx's ASGI transport (no network, no Firebase).
"""

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from schoolpay.core.config import Settings
from schoolpay.infrastructure.memory import InMemoryRecordStore
from schoolpay.main import create_app

VALID_TOKEN = "valid-test-token"


class FakeTokenVerifier:
    """Accepts VALID_TOKEN only."""

    async def verify(self, token: str) -> dict[str, Any]:
        if token != VALID_TOKEN:
            raise ValueError("Invalid token")
        return {"sub": "user-1", "uid": "user-1", "email": "ada@example.com"}


def make_settings(**overrides: Any) -> Settings:
    """Settings for tests: memory backend, no .env file."""
    values: dict[str, Any] = {
        "paystack_public_key": "pk_test_123",
        "database_backend": "memory",
        "firebase_project_id": "schoolpay-test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def app(settings: Settings, store: InMemoryRecordStore):
    return create_app(settings, store=store, token_verifier=FakeTokenVerifier())


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def user_payload() -> dict[str, str]:
    return {
        "surname": "Lovelace",
        "firstname": "Ada",
        "email": "ada@example.com",
        "phone": "+2348000000001",
        "user_id": "uid-ada",
    }
