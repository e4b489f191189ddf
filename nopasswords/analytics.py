"""Analytics sinks for generation events.

Events are fire-and-forget: a sink never raises back into the caller.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)

GENERATED_EVENT = "Generated QR Code"
FAILED_EVENT = "Failed to generate"

# Timeout for delivering an event (seconds)
TRACK_TIMEOUT = 5.0


class AnalyticsSink(Protocol):
    """Anything that can record a named event with properties."""

    def track(self, event: str, properties: dict[str, str]) -> None: ...


class LoggingAnalytics:
    """Record events in the application log only."""

    def track(self, event: str, properties: dict[str, str]) -> None:
        logger.info("analytics event %r %s", event, properties)


class HttpAnalytics(LoggingAnalytics):
    """Send events as JSON to a collector URL."""

    def __init__(
        self, client: httpx.Client, url: str, timeout: float = TRACK_TIMEOUT
    ) -> None:
        self.client = client
        self.url = url
        self.timeout = timeout

    def track(self, event: str, properties: dict[str, str]) -> None:
        super().track(event, properties)
        try:
            response = self.client.post(
                self.url,
                json={"name": event, "properties": properties},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Failed to deliver analytics event %r: %s", event, e)


def get_analytics(client: httpx.Client, url: str | None) -> AnalyticsSink:
    """Pick the analytics sink for a configured collector URL.

    Args:
        client: HTTPX client used when a collector is configured.
        url: Collector URL, or None to only log events.

    Returns:
        Analytics sink.
    """
    if url:
        return HttpAnalytics(client, url)
    return LoggingAnalytics()


__all__ = [
    "FAILED_EVENT",
    "GENERATED_EVENT",
    "AnalyticsSink",
    "HttpAnalytics",
    "LoggingAnalytics",
    "get_analytics",
]
