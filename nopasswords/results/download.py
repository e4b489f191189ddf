"""Download helpers for generated QR images.

Images are fetched from their stored URL and handed back under a fixed
file name so both download actions save the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from nopasswords.types import DownloadVariant, GeneratedResult

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = "wifiQrCode"

# Timeout for image downloads (seconds)
DOWNLOAD_TIMEOUT = 30.0

_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
    "image/svg+xml": "svg",
}


class DownloadError(Exception):
    """Raised when a generated image cannot be fetched."""

    def __init__(self, message: str, code: str = "download_error") -> None:
        """Initialize DownloadError.

        Args:
            message: Error description.
            code: Error code for structured error handling.
        """
        super().__init__(message)
        self.code = code


@dataclass
class DownloadedImage:
    """A fetched image ready to be saved or served as an attachment."""

    content: bytes
    media_type: str
    filename: str


def image_url_for(result: GeneratedResult, variant: DownloadVariant) -> str | None:
    """Pick the image URL a download action refers to.

    Args:
        result: Displayed result.
        variant: Password-bearing or display image.

    Returns:
        Image URL, or None if the result has no such image.
    """
    if variant is DownloadVariant.PASSWORD:
        return result.download_url
    return result.image_url


def download_filename(media_type: str) -> str:
    """Fixed download name with an extension matching the media type."""
    extension = _EXTENSIONS.get(media_type.split(";")[0].strip().lower(), "png")
    return f"{DOWNLOAD_FILENAME}.{extension}"


def download_qr_code(
    client: httpx.Client,
    url: str,
    timeout: float = DOWNLOAD_TIMEOUT,
) -> DownloadedImage:
    """Fetch a generated QR image.

    Args:
        client: HTTPX client instance.
        url: Image URL.
        timeout: Request timeout in seconds.

    Returns:
        DownloadedImage with content, media type and file name.

    Raises:
        DownloadError: If the fetch fails.
    """
    logger.debug("Fetching QR image %s", url)

    try:
        response = client.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise DownloadError(
            f"HTTP error downloading {url}: {e.response.status_code}",
            code="http_error",
        ) from e
    except httpx.TimeoutException as e:
        raise DownloadError(
            f"Timeout downloading {url}",
            code="timeout",
        ) from e
    except httpx.RequestError as e:
        raise DownloadError(
            f"Network error downloading {url}: {e}",
            code="network_error",
        ) from e

    media_type = response.headers.get("content-type", "image/png")
    return DownloadedImage(
        content=response.content,
        media_type=media_type.split(";")[0].strip(),
        filename=download_filename(media_type),
    )


__all__ = [
    "DOWNLOAD_FILENAME",
    "DownloadError",
    "DownloadedImage",
    "download_filename",
    "download_qr_code",
    "image_url_for",
]
