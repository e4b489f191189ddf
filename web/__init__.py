"""FastAPI web application for nopasswords.

Server-rendered generator and results pages plus health and config
endpoints. All business logic is delegated to the nopasswords package.
"""

from web.app import app, create_app

__all__ = ["app", "create_app"]
