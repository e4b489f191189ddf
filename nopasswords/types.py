"""Shared type definitions for nopasswords.

This module contains enums, dataclasses, and type aliases shared across
subpackages to avoid circular imports.
"""

from dataclasses import dataclass
from enum import Enum


class Encryption(str, Enum):
    """WiFi security protocol advertised in the QR payload."""

    WPA = "WPA"
    WEP = "WEP"
    NONE = "none"


class FormState(str, Enum):
    """Display state of the generation form."""

    EMPTY = "empty"
    LOADING = "loading"
    ERROR = "error"
    SUBMITTED = "submitted"


class DownloadVariant(str, Enum):
    """Which generated image a download action fetches."""

    PASSWORD = "password"
    DISPLAY = "display"


@dataclass(frozen=True)
class NoResult:
    """No generated QR code to display yet."""


@dataclass(frozen=True)
class GeneratedResult:
    """A generated QR code ready for display and download.

    Attributes:
        id: Record identifier.
        prompt: Prompt the image was generated from.
        wifi_name: SSID encoded in the QR code.
        image_url: QR image without the password (safe to share).
        download_url: Password-bearing QR image, if the backend produced one.
        model_latency_ms: Generation duration in milliseconds.
    """

    id: str
    prompt: str
    wifi_name: str
    image_url: str
    download_url: str | None = None
    model_latency_ms: float = 0.0

    @property
    def display_time(self) -> str:
        """Generation time in seconds with two decimals."""
        return f"{self.model_latency_ms / 1000:.2f}"

    @property
    def results_path(self) -> str:
        """Canonical page path for this result."""
        return f"/results/{self.id}"


ResultView = NoResult | GeneratedResult

NO_RESULT = NoResult()


__all__ = [
    "NO_RESULT",
    "DownloadVariant",
    "Encryption",
    "FormState",
    "GeneratedResult",
    "NoResult",
    "ResultView",
]
