"""Pydantic models for stored generation records and page metadata."""

from pydantic import BaseModel, ConfigDict, Field


class GenerationRecord(BaseModel):
    """A generation result as stored in the key-value hash.

    Field names follow the stored hash layout; ``displayImg`` and
    ``passwordImg`` are exposed as ``display_img`` and ``password_img``.

    Attributes:
        prompt: Prompt the image was generated from.
        display_img: QR image URL without the password.
        password_img: Password-bearing QR image URL.
        wifi_name: Network SSID.
        model_latency: Generation duration in milliseconds, as stored.
        encryption: Network encryption type, when the writer stored it.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    prompt: str = ""
    display_img: str | None = Field(default=None, alias="displayImg")
    password_img: str | None = Field(default=None, alias="passwordImg")
    wifi_name: str | None = None
    model_latency: str | None = None
    encryption: str | None = None

    @property
    def is_displayable(self) -> bool:
        """Whether generation finished and the display image exists."""
        return bool(self.display_img)

    def latency_ms(self) -> float:
        """Stored latency as a number; 0 when missing or malformed."""
        if not self.model_latency:
            return 0.0
        try:
            return float(self.model_latency)
        except ValueError:
            return 0.0


class OpenGraphImage(BaseModel):
    """Open Graph image entry."""

    url: str


class OpenGraph(BaseModel):
    """Open Graph block of the page metadata."""

    title: str
    description: str
    images: list[OpenGraphImage]


class TwitterCard(BaseModel):
    """Twitter card block of the page metadata."""

    card: str = "summary_large_image"
    title: str
    description: str
    images: list[str]
    creator: str


class PageMetadata(BaseModel):
    """Sharable metadata rendered into the head of a results page."""

    title: str
    description: str
    open_graph: OpenGraph
    twitter: TwitterCard

    @property
    def image(self) -> str:
        """Preview image URL."""
        return self.open_graph.images[0].url


__all__ = [
    "GenerationRecord",
    "OpenGraph",
    "OpenGraphImage",
    "PageMetadata",
    "TwitterCard",
]
