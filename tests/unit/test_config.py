"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from schoolpay.core.config import Settings


def test_missing_paystack_key_aborts() -> None:
    with pytest.raises(ValidationError, match="PAYSTACK_PUBLIC_KEY"):
        Settings(_env_file=None, paystack_public_key="", database_backend="memory")


def test_firestore_backend_requires_project_id() -> None:
    with pytest.raises(ValidationError, match="PROJECTID"):
        Settings(
            _env_file=None,
            paystack_public_key="pk_test",
            database_backend="firestore",
            firebase_project_id="",
        )


def test_unknown_backend_rejected() -> None:
    with pytest.raises(ValidationError, match="database_backend"):
        Settings(_env_file=None, paystack_public_key="pk_test", database_backend="mongo")


def test_short_firebase_env_names_are_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAYSTACK_PUBLIC_KEY", "pk_test_env")
    monkeypatch.setenv("PROJECTID", "schoolpay-prod")
    monkeypatch.setenv("APIKEY", "web-api-key")
    monkeypatch.setenv("APPID", "1:123:web:abc")
    settings = Settings(_env_file=None)
    assert settings.firebase_project_id == "schoolpay-prod"
    assert settings.firebase_api_key.get_secret_value() == "web-api-key"
    assert settings.firebase_app_id == "1:123:web:abc"
    assert settings.port == 4000


def test_rate_limit_string() -> None:
    settings = Settings(
        _env_file=None,
        paystack_public_key="pk_test",
        database_backend="memory",
        rate_limit_max_requests=100,
        rate_limit_window_seconds=900,
    )
    assert settings.rate_limit == "100 per 900 seconds"


def test_auth_required_needs_project_id() -> None:
    with pytest.raises(ValidationError, match="AUTH_REQUIRED"):
        Settings(
            _env_file=None,
            paystack_public_key="pk_test",
            database_backend="memory",
            auth_required=True,
        )
