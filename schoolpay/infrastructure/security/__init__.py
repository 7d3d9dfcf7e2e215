"""Identity token verification."""

from schoolpay.infrastructure.security.firebase_token import (
    FirebaseTokenVerifier,
    TokenVerifier,
)

__all__ = ["FirebaseTokenVerifier", "TokenVerifier"]
