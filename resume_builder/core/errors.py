"""Error taxonomy and exception handlers for the HTTP layer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ResumeBuilderError(Exception):
    """Application error rendered as ``{"message": ...}`` with ``status_code``."""

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationFailed(ResumeBuilderError):
    status_code = 400


class NotFoundError(ResumeBuilderError):
    status_code = 404


class ConflictError(ResumeBuilderError):
    status_code = 409


def _message_body(message: str, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"message": message}
    body.update(extra)
    return body


async def resume_builder_error_handler(_: Request, exc: ResumeBuilderError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=_message_body(exc.message))


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content=_message_body(detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors to a 400 ``{message, errors}`` body."""
    errors = jsonable_encoder(exc.errors())
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", []) if part != "body")
    message = "Invalid request payload"
    if first.get("msg"):
        message = f"{message}: {location + ' ' if location else ''}{first['msg']}".strip()
    return JSONResponse(status_code=400, content=_message_body(message, errors=errors))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_message_body(str(exc) or "Internal server error"))
