"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (PAYSTACK_PUBLIC_KEY, and the Firebase
project id when the Firestore backend is selected) are validated at load time,
so a misconfigured process fails before it accepts connections.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Firebase project fields accept both the FIREBASE_* names and the short
    names used by the web client config (APIKEY, PROJECTID, ...).
    """

    # App
    app_name: str = "schoolpay"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 4000

    # Database: "firestore" (Firestore REST API) or "memory" (process-local, dev/tests)
    database_backend: str = "firestore"

    # Firebase project (web client config)
    firebase_api_key: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("FIREBASE_API_KEY", "APIKEY")
    )
    firebase_auth_domain: str = Field(
        default="", validation_alias=AliasChoices("FIREBASE_AUTH_DOMAIN", "AUTHDOMAIN")
    )
    firebase_project_id: str = Field(
        default="", validation_alias=AliasChoices("FIREBASE_PROJECT_ID", "PROJECTID")
    )
    firebase_storage_bucket: str = Field(
        default="",
        validation_alias=AliasChoices("FIREBASE_STORAGE_BUCKET", "STORAGEBUCKET"),
    )
    firebase_messaging_sender_id: str = Field(
        default="",
        validation_alias=AliasChoices(
            "FIREBASE_MESSAGING_SENDER_ID", "MESSAGESENDERID"
        ),
    )
    firebase_app_id: str = Field(
        default="", validation_alias=AliasChoices("FIREBASE_APP_ID", "APPID")
    )

    # Optional service account: key (JSON string) or path (file). Takes precedence over the API key.
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None

    # Payments
    paystack_public_key: SecretStr | None = None

    # Auth: verify Firebase ID tokens on /api routes
    auth_required: bool = False

    # CORS
    allowed_origins: str = "*"

    # Rate limiting (sliding window per client address)
    rate_limit_max_requests: int = Field(default=100, ge=1)
    rate_limit_window_seconds: int = Field(default=15 * 60, ge=1)
    rate_limit_message: str = "Too many requests from this IP, please try again later."

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env and database backend.

        - PAYSTACK_PUBLIC_KEY is always required.
        - Firestore: PROJECTID (or FIREBASE_PROJECT_ID) required unless a service
          account supplies it.
        - AUTH_REQUIRED: PROJECTID required (token audience).
        """
        if not self.paystack_public_key or not self.paystack_public_key.get_secret_value():
            raise ValueError(
                "PAYSTACK_PUBLIC_KEY is not defined in the environment variables."
            )
        if self.database_backend == "firestore":
            has_service_account = bool(
                (
                    self.firebase_service_account_key
                    and self.firebase_service_account_key.get_secret_value()
                )
                or self.firebase_service_account_path
            )
            if not self.firebase_project_id and not has_service_account:
                raise ValueError(
                    "When database_backend is 'firestore', set PROJECTID (Firebase project id) "
                    "or FIREBASE_SERVICE_ACCOUNT_KEY / FIREBASE_SERVICE_ACCOUNT_PATH."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'firestore' or 'memory', got: {self.database_backend!r}"
            )
        if self.auth_required and not self.firebase_project_id:
            raise ValueError(
                "AUTH_REQUIRED needs PROJECTID: ID tokens are checked against the Firebase project id."
            )
        return self

    @property
    def rate_limit(self) -> str:
        """Limit string for the rate limiter, e.g. '100 per 900 seconds'."""
        return f"{self.rate_limit_max_requests} per {self.rate_limit_window_seconds} seconds"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars, or pass a Settings
    instance straight to create_app().

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
