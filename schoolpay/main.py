"""FastAPI application entry point.

Wiring only: settings, lifespan, exception handlers, middleware, routers.
No business logic here. See schoolpay.core.lifespan and
schoolpay.core.exception_handlers.

Settings are loaded inside create_app() so that a missing PAYSTACK_PUBLIC_KEY
or Firebase project aborts startup, and so tests can pass their own Settings,
record store and token verifier.
"""

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schoolpay.api import api_router
from schoolpay.application.interfaces.record_store import RecordStore
from schoolpay.core.config import Settings, get_settings
from schoolpay.core.exception_handlers import register_exception_handlers
from schoolpay.core.lifespan import create_lifespan
from schoolpay.core.limiter import create_limiter, enforce_rate_limit
from schoolpay.infrastructure.security import TokenVerifier
from schoolpay.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from schoolpay.shared.logging import setup_logging


def create_app(
    settings: Settings | None = None,
    *,
    store: RecordStore | None = None,
    token_verifier: TokenVerifier | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        settings: Defaults to get_settings() (environment and .env).
        store: Record store to use; when None the lifespan opens the configured one.
        token_verifier: Bearer token verifier; when None and AUTH_REQUIRED is set,
            the lifespan creates a FirebaseTokenVerifier.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.token_verifier = token_verifier
    app.state.limiter = create_limiter()

    register_exception_handlers(app)

    # Last added = outermost. Request: request ID -> security headers -> CORS -> route.
    # The rate limit is a dependency of every /api route, so 429s pass back through CORS.
    origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(
        api_router, prefix="/api", dependencies=[Depends(enforce_rate_limit)]
    )

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "schoolpay.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
