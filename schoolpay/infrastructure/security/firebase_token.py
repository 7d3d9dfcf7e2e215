"""Firebase ID token verification (google-auth, no firebase-admin).

Verifies the signature against Google's public certificates, the issuer and
the audience (Firebase project id), and expiry.
"""

import asyncio
from typing import Any, Protocol

from google.auth.exceptions import GoogleAuthError, TransportError
from google.auth.transport.requests import Request
from google.oauth2 import id_token


class TokenVerifier(Protocol):
    """Anything that turns a bearer token into decoded claims or raises ValueError."""

    async def verify(self, token: str) -> dict[str, Any]:
        ...


class FirebaseTokenVerifier:
    """Verify Firebase Auth ID tokens for one project."""

    def __init__(self, project_id: str) -> None:
        self._project_id = project_id
        self._request = Request()

    def _verify_sync(self, token: str) -> dict[str, Any]:
        return id_token.verify_firebase_token(
            token, self._request, audience=self._project_id
        )

    async def verify(self, token: str) -> dict[str, Any]:
        """Return decoded claims. Certificate fetch is blocking, so it runs in the thread pool.

        Raises:
            ValueError: If the token is malformed, expired or issued for another project.
            TransportError: If Google's public certificates could not be fetched.
        """
        try:
            claims = await asyncio.to_thread(self._verify_sync, token)
        except TransportError:
            raise
        except GoogleAuthError as e:
            raise ValueError(f"Invalid token: {e!s}") from e
        if not claims or not claims.get("sub"):
            raise ValueError("Token missing required claim: sub")
        return claims
