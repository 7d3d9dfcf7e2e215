"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON responses of the form {"error", "message", "details"?}.
Store and unexpected errors are logged with traceback; clients only see a
generic message unless debug is on.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schoolpay.domain.exceptions import RecordStoreException, SchoolPayException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "RECORD_NOT_FOUND": 404,
    "RATE_LIMITED": 429,
    "RECORD_STORE_ERROR": 500,
}


def _schoolpay_exception_handler(
    request: Request, exc: SchoolPayException
) -> JSONResponse:
    """Return JSON from SchoolPayException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _record_store_exception_handler(
    request: Request, exc: RecordStoreException
) -> JSONResponse:
    """Return 500; the store's own error is logged, never sent."""
    logger.error(
        "Record store %s on %s failed: %r",
        exc.operation,
        exc.collection,
        exc.__cause__,
        exc_info=exc.__cause__ or exc,
    )
    content: dict[str, Any] = {"error": exc.error_code, "message": exc.message}
    if request.app.state.settings.debug and exc.__cause__ is not None:
        content["details"] = str(exc.__cause__)
    return JSONResponse(status_code=500, content=content)


def _field_name(loc: tuple | list) -> str:
    """Dotted field path without the 'body'/'query'/'path' prefix."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "body"


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 listing each failed field and why (also covers malformed JSON)."""
    details = [
        {
            "field": _field_name(err.get("loc", ())),
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type", "value_error"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": details,
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail: Any = str(exc) if request.app.state.settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers are matched on the exception's MRO, so RecordStoreException wins
    over SchoolPayException.
    """
    app.add_exception_handler(RecordStoreException, _record_store_exception_handler)
    app.add_exception_handler(SchoolPayException, _schoolpay_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
