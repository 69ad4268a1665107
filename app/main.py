"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, users, wallet, watchlist)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- MongoDB index setup and client shutdown

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.domain.accounts.errors import PersistenceError
from app.infrastructure.accounts.database import close_mongo_client, get_users_collection
from app.infrastructure.accounts.mongo_user_repository import MongoUserRepository
from app.interfaces.accounts.users import router as users_router
from app.interfaces.accounts.wallet import router as wallet_router
from app.interfaces.accounts.watchlist import router as watchlist_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare indexes on startup, close the client on exit.

    An unreachable database does not prevent startup; requests will fail
    with 500 until it becomes available.
    """
    try:
        MongoUserRepository(get_users_collection()).ensure_indexes()
        logger.info("MongoDB indexes ensured on %s.%s", settings.mongo_db, settings.mongo_collection)
    except PersistenceError:
        logger.warning(
            "MongoDB indexes could not be ensured at startup; continuing.",
            exc_info=True,
        )

    yield

    close_mongo_client()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    if not settings.jwt_symmetric_key:
        logger.warning("JWT_SYMMETRIC_KEY is not set; authenticated routes will fail.")

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

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(wallet_router)
    app.include_router(watchlist_router)

    return app


app = create_app()
