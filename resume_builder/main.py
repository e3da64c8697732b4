import logging
import time
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import sentry_sdk

from resume_builder.ai.factory import get_ai_client
from resume_builder.ai.types import AIClient
from resume_builder.api.v1.ai import router as ai_router
from resume_builder.api.v1.health import router as health_router
from resume_builder.api.v1.resumes import router as resumes_router
from resume_builder.api.v1.templates import router as templates_router
from resume_builder.api.v1.users import router as users_router
from resume_builder.core.config import settings
from resume_builder.core.cors import cors_allow_origin_regex, cors_allowed_origins
from resume_builder.core.errors import (
    ResumeBuilderError,
    http_exception_handler,
    resume_builder_error_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from resume_builder.core.lifespan import lifespan
from resume_builder.core.rate_limit import limiter, rate_limit_exceeded_handler
from resume_builder.storage.resume_store import ResumeStore
from resume_builder.utils.events import log_event

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

request_logger = logging.getLogger("resume_builder.requests")


def create_app(
    *,
    store: ResumeStore | None = None,
    ai_client_factory: Callable[[], AIClient | None] = get_ai_client,
) -> FastAPI:
    app = FastAPI(title="Resume Builder API", version="0.1.0", lifespan=lifespan)
    app.state.store = store
    app.state.ai_client_factory = ai_client_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allowed_origins(),
        allow_origin_regex=cors_allow_origin_regex(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_exception_handler(ResumeBuilderError, resume_builder_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        log_event(
            request_logger,
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=int((time.perf_counter() - started) * 1000),
        )
        return response

    app.include_router(health_router, prefix=settings.api_prefix, tags=["Health"])
    app.include_router(users_router, prefix=settings.api_prefix, tags=["Users"])
    app.include_router(templates_router, prefix=settings.api_prefix, tags=["Templates"])
    app.include_router(resumes_router, prefix=settings.api_prefix, tags=["Resumes"])
    app.include_router(ai_router, prefix=settings.api_prefix, tags=["AI"])
    return app


app = create_app()
