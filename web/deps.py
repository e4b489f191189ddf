"""Shared dependencies for FastAPI routes.

Provides a database session and the HTTP client to route handlers via
FastAPI dependency injection.

Transaction boundaries are managed here:
- Session is created at request start
- On success (no exception): session is committed automatically
- On exception: session is rolled back automatically
- Session is closed after request completes
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import httpx
from fastapi import Depends, Request
from sqlalchemy.orm import Session, sessionmaker

from nopasswords.config import Settings, get_settings


def get_session_factory(request: Request) -> sessionmaker[Session]:
    """Get session factory from app state.

    Args:
        request: FastAPI request object.

    Returns:
        SQLAlchemy session factory.
    """
    factory: Any = request.app.state.session_factory
    return factory  # type: ignore[no-any-return]


def get_db(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> Generator[Session, None, None]:
    """Provide a database session for a request.

    Yields:
        Database session.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_http_client(request: Request) -> httpx.Client:
    """Get the shared outbound HTTP client from app state.

    Args:
        request: FastAPI request object.

    Returns:
        HTTPX client used for generation, downloads and analytics.
    """
    client: Any = request.app.state.http_client
    return client  # type: ignore[no-any-return]


def get_settings_dep() -> Settings:
    """Get application settings.

    Returns:
        Settings instance.
    """
    return get_settings()
