"""Client for the external generation endpoint.

The endpoint renders the stylized QR images, persists the record and
answers with its identifier. Only HTTP 200 counts as success.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from nopasswords.generation.schema import QrGenerateRequest, QrGenerateResponse

logger = logging.getLogger(__name__)

# Timeout for generation requests (seconds)
GENERATE_TIMEOUT = 120.0


class GenerationError(Exception):
    """Raised when the generation endpoint does not produce a result."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str = "generation_failed",
    ) -> None:
        """Initialize GenerationError.

        Args:
            message: Error description shown to the user.
            status_code: HTTP status returned by the endpoint, if any.
            code: Error code for structured error handling.
        """
        super().__init__(message)
        self.status_code = status_code
        self.code = code


def request_generation(
    client: httpx.Client,
    url: str,
    request: QrGenerateRequest,
    timeout: float = GENERATE_TIMEOUT,
) -> QrGenerateResponse:
    """POST a generation request and parse the response.

    Args:
        client: HTTPX client instance.
        url: Generation endpoint URL.
        request: Request body.
        timeout: Request timeout in seconds.

    Returns:
        Parsed generation response.

    Raises:
        GenerationError: On a non-200 status, transport failure or
            malformed response body.
    """
    logger.info("Requesting QR code generation for network %r", request.wifi_name)

    try:
        response = client.post(url, json=request.model_dump(), timeout=timeout)
    except httpx.TimeoutException as e:
        raise GenerationError(
            f"Failed to generate QR code: timed out after {timeout:g}s",
            code="timeout",
        ) from e
    except httpx.RequestError as e:
        raise GenerationError(
            f"Failed to generate QR code: {e}",
            code="network_error",
        ) from e

    if response.status_code != httpx.codes.OK:
        logger.warning(
            "Generation endpoint returned %d: %s",
            response.status_code,
            response.text[:200],
        )
        raise GenerationError(
            f"Failed to generate QR code: {response.status_code}, {response.text}",
            status_code=response.status_code,
            code="http_error",
        )

    try:
        result = QrGenerateResponse.model_validate_json(response.content)
    except ValidationError as e:
        raise GenerationError(
            f"Failed to generate QR code: unexpected response: {e.error_count()} "
            "invalid field(s)",
            status_code=response.status_code,
            code="invalid_response",
        ) from e

    logger.info(
        "Generated QR code %s in %.0f ms", result.id, result.model_latency_ms
    )
    return result


__all__ = ["GENERATE_TIMEOUT", "GenerationError", "request_generation"]
