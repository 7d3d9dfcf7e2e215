"""API router aggregation.

Each path is registered once. Every resource router requires a verified
bearer token when AUTH_REQUIRED is set; health stays open for probes.
"""

from fastapi import APIRouter, Depends

from schoolpay.api.dependencies import verify_bearer_token
from schoolpay.api.endpoints import (
    fees,
    health,
    messages,
    organizations,
    support,
    transactions,
    users,
)

api_router = APIRouter()

_protected = [Depends(verify_bearer_token)]

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, tags=["users"], dependencies=_protected)
api_router.include_router(
    organizations.router, prefix="/org", tags=["organizations"], dependencies=_protected
)
api_router.include_router(fees.router, prefix="/fees", tags=["fees"], dependencies=_protected)
api_router.include_router(
    transactions.router,
    prefix="/transactions",
    tags=["transactions"],
    dependencies=_protected,
)
api_router.include_router(
    support.router, prefix="/support", tags=["support"], dependencies=_protected
)
api_router.include_router(
    messages.router, prefix="/message", tags=["messages"], dependencies=_protected
)
