"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (HTTP users API, JSON-RPC UserService, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database schema bootstrap

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.infrastructure.db import create_schema, wait_for_database
from app.interfaces.health import router as health_router
from app.interfaces.users.dependencies import get_db_engine
from app.interfaces.users.router import router as users_router
from app.interfaces.users.rpc import router as rpc_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


def _bootstrap_database() -> None:
    engine = get_db_engine()
    wait_for_database(
        engine,
        attempts=settings.db_connect_attempts,
        delay=settings.db_connect_retry_seconds,
    )
    create_schema(engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the schema, dispose the pool on exit."""
    if settings.db_auto_create_schema:
        try:
            await run_in_threadpool(_bootstrap_database)
        except Exception:
            logger.warning(
                "Database schema could not be initialized. "
                "Requests will fail until the database is reachable.",
                exc_info=True,
            )

    yield

    get_db_engine().dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(rpc_router, prefix="/api/v1")

    return app


app = create_app()
