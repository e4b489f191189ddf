"""FastAPI application factory and main app.

This module creates the FastAPI application with all routers and
shared resources configured. Routes are thin wrappers over the
nopasswords core modules.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from nopasswords import __version__
from nopasswords.config import get_settings
from nopasswords.db import create_all_tables, get_engine, get_session_factory
from web.routers import config, generator, health


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager.

    Configures logging, initializes database tables and opens the
    outbound HTTP client on startup; closes the client on shutdown.
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    engine = get_engine(settings.db_url)
    create_all_tables(engine)
    app.state.session_factory = get_session_factory(engine)
    app.state.http_client = httpx.Client()
    try:
        yield
    finally:
        app.state.http_client.close()
        engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    application = FastAPI(
        title="WiFi QR Code Generator",
        description="Generate stylized WiFi QR codes from a text prompt "
        "and share the results",
        version=__version__,
        lifespan=lifespan,
    )

    # Include routers
    application.include_router(health.router, tags=["health"])
    application.include_router(config.router, prefix="/config", tags=["config"])
    application.include_router(generator.router, tags=["generator"])

    return application


# Create the default application instance
app = create_app()
