"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, request size limit)
- Logging configuration
- Database engine lifecycle

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.infrastructure.links.database import create_engine_from_settings, init_schema
from app.interfaces.health import router as health_router
from app.interfaces.links.router import router as links_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the bundle store, then close it on shutdown."""
    engine = create_engine_from_settings(settings)
    await init_schema(engine)
    app.state.db_engine = engine
    logger.info("%s %s started", settings.project_name, settings.version)

    yield

    await engine.dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Security Middleware ---
    app.add_middleware(
        SecurityHeadersMiddleware,
        max_body_bytes=settings.max_request_size_bytes,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(links_router, prefix="/api/v1")

    return app


app = create_app()
