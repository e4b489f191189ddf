"""Router modules for the FastAPI web app."""

from web.routers import config, generator, health

__all__ = ["config", "generator", "health"]
