"""Generation results module.

This module handles:
- Loading stored generation records
- Page metadata for sharable result links
- Downloading the generated images
"""

from nopasswords.results.schema import GenerationRecord, PageMetadata
from nopasswords.results.service import (
    ResultNotFoundError,
    build_metadata,
    get_record,
    load_result,
    record_to_result,
)

__all__ = [
    "GenerationRecord",
    "PageMetadata",
    "ResultNotFoundError",
    "build_metadata",
    "get_record",
    "load_result",
    "record_to_result",
]
