"""Application lifespan: startup and shutdown.

Startup opens the record store and, when AUTH_REQUIRED is set, the token
verifier, unless create_app() was handed ready-made ones (tests). Shutdown
closes the store's connections.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from schoolpay.infrastructure import create_record_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = app.state.settings

    # ---- Startup ----
    if app.state.store is None:
        app.state.store = create_record_store(settings)
        logger.info("Record store ready (backend=%s)", settings.database_backend)

    if settings.auth_required and app.state.token_verifier is None:
        from schoolpay.infrastructure.security import FirebaseTokenVerifier

        app.state.token_verifier = FirebaseTokenVerifier(settings.firebase_project_id)
        logger.info("Bearer token verification enabled")

    yield

    # ---- Shutdown ----
    if app.state.store is not None:
        await app.state.store.aclose()
        app.state.store = None
        logger.info("Record store closed")
