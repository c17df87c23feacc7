"""
FastAPI application entry point.

This module sets up:
- FastAPI application with middleware
- Exception handlers
- API routes
- Database lifecycle (lifespan)

Run with ``uvicorn haulbook.main:app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from haulbook.infrastructure.adapters.inbound.api.handlers import register_exception_handlers
from haulbook.infrastructure.adapters.inbound.api.middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
)
from haulbook.infrastructure.adapters.inbound.api.routes import fusions, health, partners
from haulbook.infrastructure.config.database import DatabaseConfig
from haulbook.infrastructure.config.logging import setup_logging
from haulbook.infrastructure.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    db_config: Optional[DatabaseConfig] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment if omitted
        db_config: Database to use; built from ``settings`` if omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):  # type: ignore
        logger.info(f"Starting {settings.app_name} v{settings.version}")
        logger.info(f"Environment: {settings.environment}")

        app.state.settings = settings
        app.state.db_config = db_config or DatabaseConfig.from_settings(settings)

        yield

        logger.info("Shutting down application")
        await app.state.db_config.close()

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Added last runs first: request id must be set before the logger sees it
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    v1_router = APIRouter(prefix=settings.api_v1_prefix)
    v1_router.include_router(partners.router)
    v1_router.include_router(fusions.router)

    app.include_router(health.router)
    app.include_router(v1_router)

    return app


def _build_default_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings)
    return create_app(settings)


app = _build_default_app()
