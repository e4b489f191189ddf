"""Pydantic models for the generation form and API payloads.

The form schema enforces the input constraints before any request is
made; the request/response models describe the generation endpoint's
JSON contract.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nopasswords.types import Encryption

PROMPT_MIN_LENGTH = 3
PROMPT_MAX_LENGTH = 160


class GenerateFormValues(BaseModel):
    """Validated generation form input.

    Attributes:
        wifi_name: Network SSID.
        wifi_password: Network password.
        prompt: Description of the image the QR code should look like.
        encryption: Security protocol of the network.
    """

    model_config = ConfigDict(extra="ignore")

    wifi_name: str = Field(min_length=1, description="WiFi network name (SSID)")
    wifi_password: str = Field(min_length=1, description="WiFi password")
    prompt: str = Field(
        min_length=PROMPT_MIN_LENGTH,
        max_length=PROMPT_MAX_LENGTH,
        description="Prompt for the generated image",
    )
    encryption: Encryption = Field(
        default=Encryption.WPA, description="WiFi encryption type"
    )


class QrGenerateRequest(BaseModel):
    """JSON body sent to the generation endpoint."""

    wifi_name: str
    wifi_password: str
    prompt: str
    encryption: str

    @classmethod
    def from_form(cls, values: GenerateFormValues) -> "QrGenerateRequest":
        """Build a request from validated form values."""
        return cls(
            wifi_name=values.wifi_name,
            wifi_password=values.wifi_password,
            prompt=values.prompt,
            encryption=values.encryption.value,
        )


class QrGenerateResponse(BaseModel):
    """JSON body returned by the generation endpoint on success."""

    model_config = ConfigDict(extra="ignore")

    id: str
    image_url: str
    download_url: str
    model_latency_ms: float


def validation_messages(exc: ValidationError) -> dict[str, str]:
    """Map a validation error to one message per form field.

    Args:
        exc: Pydantic validation error.

    Returns:
        Mapping of field name to the first message reported for it.
    """
    messages: dict[str, str] = {}
    for error in exc.errors():
        loc: tuple[Any, ...] = tuple(error.get("loc", ()))
        field = str(loc[0]) if loc else "form"
        messages.setdefault(field, error["msg"])
    return messages


__all__ = [
    "PROMPT_MAX_LENGTH",
    "PROMPT_MIN_LENGTH",
    "GenerateFormValues",
    "QrGenerateRequest",
    "QrGenerateResponse",
    "validation_messages",
]
