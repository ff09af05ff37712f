"""
API exception handlers.

Every client error has the shape ``{"errors": [{"msg": ...}, ...]}``.
Server errors are logged in full and answered with a plain-text
``Server Error`` so no internal detail reaches the client.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import DevConnectError

logger = logging.getLogger(__name__)

SERVER_ERROR_BODY = "Server Error"


def error_body(*messages: str) -> dict[str, list[dict[str, Any]]]:
    """Build the standard client error payload."""
    return {"errors": [{"msg": message} for message in messages]}


def server_error_response() -> PlainTextResponse:
    return PlainTextResponse(
        SERVER_ERROR_BODY,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _field_name(loc: tuple) -> str:
    # ("body", "email") -> "email"; ("body",) -> "body"
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) if parts else "body"


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """One entry per failed rule, keeping the field name and its message."""
    errors = []
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        errors.append({
            "msg": error.get("msg", "Invalid value"),
            "param": _field_name(loc),
            "location": str(loc[0]) if loc else "body",
        })
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors},
    )


async def handle_app_error(request: Request, exc: DevConnectError):
    """Map module exceptions onto their HTTP status."""
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.code}",
            extra={"error": exc.to_dict()},
            exc_info=exc,
        )
        return server_error_response()

    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message),
        headers=headers,
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return server_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Install all handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(DevConnectError, handle_app_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
