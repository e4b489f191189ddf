"""Configuration endpoints."""

from typing import Any

from fastapi import APIRouter

from nopasswords.config import get_settings

router = APIRouter()


@router.get("")
def get_config() -> dict[str, Any]:
    """Get effective configuration.

    The database URL is left out since it may carry credentials.

    Returns:
        Current configuration as JSON.
    """
    settings = get_settings()
    return {
        "generate_url": settings.generate_url,
        "analytics_enabled": settings.analytics_url is not None,
        "site_url": settings.site_url,
        "og_image_path": settings.og_image_path,
        "twitter_creator": settings.twitter_creator,
        "log_level": settings.log_level,
        "request_timeout": settings.request_timeout,
        "download_timeout": settings.download_timeout,
    }
