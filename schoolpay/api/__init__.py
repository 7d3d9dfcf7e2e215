"""HTTP API: routers, endpoints and request dependencies."""

from schoolpay.api.router import api_router

__all__ = ["api_router"]
