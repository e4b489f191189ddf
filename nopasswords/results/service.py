"""Results loader.

Reads a stored generation record by identifier and derives what the
results page needs: sharable page metadata and the result to display.
Reads never modify the store, so rendering the same record twice
produces the same output.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from nopasswords.results.schema import (
    GenerationRecord,
    OpenGraph,
    OpenGraphImage,
    PageMetadata,
    TwitterCard,
)
from nopasswords.store.service import hgetall
from nopasswords.types import NO_RESULT, GeneratedResult, ResultView

if TYPE_CHECKING:
    from nopasswords.config import Settings

logger = logging.getLogger(__name__)


class ResultNotFoundError(Exception):
    """Raised when no record exists for a result identifier."""

    def __init__(self, result_id: str, code: str = "result_not_found") -> None:
        super().__init__(f"Result not found: {result_id}")
        self.result_id = result_id
        self.code = code


def get_record(session: Session, result_id: str) -> GenerationRecord | None:
    """Get a stored record, or None if the identifier is unknown.

    Args:
        session: SQLAlchemy session.
        result_id: Record identifier.

    Returns:
        GenerationRecord or None.
    """
    data = hgetall(session, result_id)
    if data is None:
        return None
    return GenerationRecord.model_validate(data)


def load_result(session: Session, result_id: str) -> GenerationRecord:
    """Get a stored record by identifier.

    Args:
        session: SQLAlchemy session.
        result_id: Record identifier.

    Returns:
        GenerationRecord.

    Raises:
        ResultNotFoundError: If no record exists.
    """
    record = get_record(session, result_id)
    if record is None:
        logger.info("No stored result for id %s", result_id)
        raise ResultNotFoundError(result_id)
    return record


def build_metadata(record: GenerationRecord, settings: Settings) -> PageMetadata:
    """Derive sharable page metadata from a record.

    Args:
        record: Stored generation record.
        settings: Settings providing the site URL and fallback image.

    Returns:
        PageMetadata with title, description, Open Graph and Twitter card.
    """
    title = f"Wifi Qr Code Generator: {record.prompt}"
    description = (
        f"A QR code generated from {settings.site_host} "
        f"linking to: {record.wifi_name or ''}"
    )
    image = record.display_img or settings.fallback_image_url

    return PageMetadata(
        title=title,
        description=description,
        open_graph=OpenGraph(
            title=title,
            description=description,
            images=[OpenGraphImage(url=image)],
        ),
        twitter=TwitterCard(
            title=title,
            description=description,
            images=[image],
            creator=settings.twitter_creator,
        ),
    )


def record_to_result(result_id: str, record: GenerationRecord) -> ResultView:
    """Convert a stored record into the result shown by the form.

    Args:
        result_id: Record identifier.
        record: Stored generation record.

    Returns:
        GeneratedResult once the display image exists, otherwise NO_RESULT.
    """
    if not record.display_img:
        return NO_RESULT
    return GeneratedResult(
        id=result_id,
        prompt=record.prompt,
        wifi_name=record.wifi_name or "",
        image_url=record.display_img,
        download_url=record.password_img,
        model_latency_ms=record.latency_ms(),
    )


__all__ = [
    "ResultNotFoundError",
    "build_metadata",
    "get_record",
    "load_result",
    "record_to_result",
]
