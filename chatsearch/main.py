"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers. See
chatsearch.core.lifespan and chatsearch.core.exception_handlers.

Settings are loaded inside create_app() so tests can set env (and clear
the get_settings cache) before building the app.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from chatsearch.api.v1 import api_router
from chatsearch.core.config import get_settings
from chatsearch.core.exception_handlers import register_exception_handlers
from chatsearch.core.lifespan import create_lifespan
from chatsearch.core.limiter import limiter
from chatsearch.middleware import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)
from chatsearch.shared.telemetry import instrument_fastapi


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Last added = outermost: timeout -> request ID -> correlation ID -> security -> CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["Authorization", settings.request_id_header, settings.correlation_id_header],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(CorrelationIDMiddleware, header_name=settings.correlation_id_header)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    if settings.telemetry_enabled:
        instrument_fastapi(app)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
