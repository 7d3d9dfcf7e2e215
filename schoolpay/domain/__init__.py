"""Domain layer: the error taxonomy shared by services and adapters.

No dependencies on infrastructure or presentation.
"""

from schoolpay.domain.exceptions import (
    AuthenticationException,
    RateLimitException,
    RecordNotFoundException,
    RecordStoreException,
    SchoolPayException,
    ValidationException,
)

__all__ = [
    "AuthenticationException",
    "RateLimitException",
    "RecordNotFoundException",
    "RecordStoreException",
    "SchoolPayException",
    "ValidationException",
]
