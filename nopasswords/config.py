"""Configuration settings for nopasswords.

Uses pydantic-settings for config parsing from environment variables
and defaults. Configuration precedence: CLI flags > env vars > defaults.
"""

from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_db_url() -> str:
    """Return the default database URL (SQLite)."""
    db_path = Path.home() / ".local" / "share" / "nopasswords" / "kv.sqlite"
    return f"sqlite:///{db_path}"


class Settings(BaseSettings):
    """Application settings.

    Settings are loaded from environment variables with the NOPASSWORDS_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="NOPASSWORDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    db_url: str = Field(
        default_factory=_default_db_url,
        description="Database URL backing the key-value store",
    )

    # Collaborators
    generate_url: str = Field(
        default="http://localhost:3000/api/generate",
        description="Generation endpoint that produces the QR images",
    )
    analytics_url: str | None = Field(
        default=None,
        description="Analytics collector URL (events are only logged if not set)",
    )

    # Page metadata
    site_url: str = Field(
        default="https://nopasswords.xyz",
        description="Public base URL of the site",
    )
    og_image_path: str = Field(
        default="/og-image.png",
        description="Fallback social preview image, relative to site_url",
    )
    twitter_creator: str = Field(
        default="@emergingbits",
        description="Twitter handle credited on result cards",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Timeouts (in seconds)
    request_timeout: float = Field(
        default=120.0,
        ge=1,
        description="Timeout for generation requests",
    )
    download_timeout: float = Field(
        default=30.0,
        ge=1,
        description="Timeout for fetching generated images",
    )

    @property
    def site_host(self) -> str:
        """Host part of site_url, as shown in result descriptions."""
        return urlparse(self.site_url).netloc or self.site_url

    @property
    def fallback_image_url(self) -> str:
        """Absolute URL of the fallback social preview image."""
        return f"{self.site_url.rstrip('/')}/{self.og_image_path.lstrip('/')}"


def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()


def print_settings_json(settings: Settings | None = None) -> str:
    """Render effective settings as JSON.

    Args:
        settings: Optional settings instance; uses default if not provided.

    Returns:
        JSON string of effective settings.
    """
    if settings is None:
        settings = get_settings()
    return settings.model_dump_json(indent=2)


__all__ = ["Settings", "get_settings", "print_settings_json"]
