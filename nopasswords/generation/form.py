"""Generation form controller.

Holds the form values and display state for one rendering of the
generator page. Collaborators are injected so the controller has no
knowledge of HTTP frameworks:

- ``generate``: sends a request to the generation endpoint
- ``analytics``: records success and failure events
- ``navigate``: moves the user to another page path

States: empty -> loading -> (error | submitted). A form built from an
existing result starts in submitted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from nopasswords.analytics import FAILED_EVENT, GENERATED_EVENT, AnalyticsSink
from nopasswords.generation.client import GenerationError
from nopasswords.generation.schema import (
    GenerateFormValues,
    QrGenerateRequest,
    QrGenerateResponse,
    validation_messages,
)
from nopasswords.types import (
    NO_RESULT,
    DownloadVariant,
    Encryption,
    FormState,
    GeneratedResult,
    ResultView,
)

logger = logging.getLogger(__name__)

SUGGESTIONS = [
    "alient planet with rectangles",
    "italian mountains in a James Bond movie",
    "industrial age with plants",
    "spiritual wicked geometry patterns, colorful",
    "rivers and streams in Peruvian forest",
    "waterfall in Bali with palm trees and ocean",
    "minimalist futuristic architecture",
    "futuristic robot creatures",
]

ENCRYPTION_OPTIONS = [
    (Encryption.WPA.value, "WPA"),
    (Encryption.WEP.value, "WEP"),
    (Encryption.NONE.value, "None"),
]

FORM_FIELDS = ("wifi_name", "wifi_password", "prompt", "encryption")

GenerateFn = Callable[[QrGenerateRequest], QrGenerateResponse]
NavigateFn = Callable[[str], None]


@dataclass(frozen=True)
class DownloadAction:
    """A download button for one of the generated images."""

    label: str
    variant: DownloadVariant
    url: str
    primary: bool = False


def default_values() -> dict[str, str]:
    """Return the initial form values."""
    return {
        "wifi_name": "",
        "wifi_password": "",
        "prompt": "",
        "encryption": ENCRYPTION_OPTIONS[0][0],
    }


class GenerationForm:
    """Form values, validation messages and result display for the generator."""

    def __init__(
        self,
        generate: GenerateFn,
        analytics: AnalyticsSink,
        navigate: NavigateFn,
        result: ResultView = NO_RESULT,
    ) -> None:
        self._generate = generate
        self._analytics = analytics
        self._navigate = navigate

        self.values = default_values()
        self.field_errors: dict[str, str] = {}
        self.error: str | None = None
        self.is_loading = False
        self.is_submitted = False
        self.result: ResultView = NO_RESULT

        if isinstance(result, GeneratedResult):
            # Deep link to /results/{id}: show the stored result right away
            self.result = result
            self.is_submitted = True
            self.values["prompt"] = result.prompt
            self.values["wifi_name"] = result.wifi_name

    @property
    def state(self) -> FormState:
        """Current display state."""
        if self.is_loading:
            return FormState.LOADING
        if self.error is not None:
            return FormState.ERROR
        if self.is_submitted:
            return FormState.SUBMITTED
        return FormState.EMPTY

    @property
    def has_result(self) -> bool:
        return isinstance(self.result, GeneratedResult)

    @property
    def submit_label(self) -> str:
        return "Regenerate" if self.has_result else "Generate"

    def select_suggestion(self, suggestion: str) -> None:
        """Overwrite the prompt with a suggestion without submitting."""
        self.values["prompt"] = suggestion
        self.field_errors.pop("prompt", None)

    def download_actions(self) -> list[DownloadAction]:
        """Download buttons for the displayed result, if any."""
        if not isinstance(self.result, GeneratedResult):
            return []
        actions = []
        if self.result.download_url:
            actions.append(
                DownloadAction(
                    label="Download With Password",
                    variant=DownloadVariant.PASSWORD,
                    url=self.result.download_url,
                    primary=True,
                )
            )
        actions.append(
            DownloadAction(
                label="Download Without Password",
                variant=DownloadVariant.DISPLAY,
                url=self.result.image_url,
            )
        )
        return actions

    def submit(self, raw_values: Mapping[str, object]) -> bool:
        """Validate and submit the form.

        Args:
            raw_values: Submitted field values; unknown keys are ignored.

        Returns:
            True if a result was generated and navigation happened.
        """
        for name in FORM_FIELDS:
            if name in raw_values:
                self.values[name] = str(raw_values[name])

        try:
            values = GenerateFormValues.model_validate(self.values)
        except ValidationError as e:
            self.field_errors = validation_messages(e)
            logger.debug("Form rejected: %s", sorted(self.field_errors))
            return False

        self.field_errors = {}
        self.error = None
        self.is_loading = True
        self.result = NO_RESULT
        self.is_submitted = True

        try:
            response = self._generate(QrGenerateRequest.from_form(values))
        except GenerationError as e:
            self._analytics.track(FAILED_EVENT, {"prompt": values.prompt})
            self.error = str(e)
            return False
        finally:
            self.is_loading = False

        self._analytics.track(GENERATED_EVENT, {"prompt": values.prompt})
        self.result = GeneratedResult(
            id=response.id,
            prompt=values.prompt,
            wifi_name=values.wifi_name,
            image_url=response.image_url,
            download_url=response.download_url,
            model_latency_ms=response.model_latency_ms,
        )
        self._navigate(self.result.results_path)
        return True


__all__ = [
    "ENCRYPTION_OPTIONS",
    "SUGGESTIONS",
    "DownloadAction",
    "GenerationForm",
    "default_values",
]
