"""QR code generation module.

This module handles:
- Form schema validation
- Requests to the external generation endpoint
- The generation form controller and its display state
"""

from nopasswords.generation.client import GenerationError, request_generation
from nopasswords.generation.form import (
    ENCRYPTION_OPTIONS,
    SUGGESTIONS,
    DownloadAction,
    GenerationForm,
)
from nopasswords.generation.schema import (
    GenerateFormValues,
    QrGenerateRequest,
    QrGenerateResponse,
)

__all__ = [
    "ENCRYPTION_OPTIONS",
    "SUGGESTIONS",
    "DownloadAction",
    "GenerateFormValues",
    "GenerationError",
    "GenerationForm",
    "QrGenerateRequest",
    "QrGenerateResponse",
    "request_generation",
]
