"""Request dependencies (composition root).

The record store, settings and token verifier live on app.state and are
passed to routes through these dependencies, never imported as globals, so
tests can hand create_app() their own.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.application.services import (
    FeeService,
    MessageService,
    OrganizationService,
    SupportService,
    TransactionService,
    UserService,
)
from schoolpay.domain.exceptions import AuthenticationException

_http_bearer = HTTPBearer(auto_error=False)


def get_record_store(request: Request) -> RecordStore:
    """Return the process-wide record store opened at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Record store not initialized")
    return store


StoreDep = Annotated[RecordStore, Depends(get_record_store)]


def get_user_service(store: StoreDep) -> UserService:
    return UserService(store)


def get_organization_service(store: StoreDep) -> OrganizationService:
    return OrganizationService(store)


def get_fee_service(store: StoreDep) -> FeeService:
    return FeeService(store)


def get_transaction_service(store: StoreDep) -> TransactionService:
    return TransactionService(store)


def get_support_service(store: StoreDep) -> SupportService:
    return SupportService(store)


def get_message_service(store: StoreDep) -> MessageService:
    return MessageService(store)


async def verify_bearer_token(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> dict[str, Any] | None:
    """Verify the Authorization bearer token when AUTH_REQUIRED is set.

    On success the decoded claims are stored on request.state.identity and
    returned. When auth is disabled this is a no-op returning None.

    Raises:
        AuthenticationException: Token missing ("Unauthorized") or rejected ("Invalid token").
    """
    if not request.app.state.settings.auth_required:
        return None
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Unauthorized")
    verifier = request.app.state.token_verifier
    if verifier is None:
        raise RuntimeError("Token verifier not initialized")
    try:
        claims = await verifier.verify(credentials.credentials)
    except ValueError:
        raise AuthenticationException("Invalid token") from None
    request.state.identity = claims
    return claims
