"""Tests for shared types module."""

import pytest

from nopasswords.types import (
    NO_RESULT,
    DownloadVariant,
    Encryption,
    FormState,
    GeneratedResult,
    NoResult,
)


class TestEnums:
    """Test enum definitions."""

    def test_encryption_values(self) -> None:
        """Encryption should have the three supported protocols."""
        assert Encryption.WPA.value == "WPA"
        assert Encryption.WEP.value == "WEP"
        assert Encryption.NONE.value == "none"
        assert len(Encryption) == 3

    def test_form_state_values(self) -> None:
        """FormState should have expected values."""
        assert FormState.EMPTY.value == "empty"
        assert FormState.LOADING.value == "loading"
        assert FormState.ERROR.value == "error"
        assert FormState.SUBMITTED.value == "submitted"

    def test_download_variant_values(self) -> None:
        """DownloadVariant should have expected values."""
        assert DownloadVariant("password") is DownloadVariant.PASSWORD
        assert DownloadVariant("display") is DownloadVariant.DISPLAY


class TestGeneratedResult:
    """Test GeneratedResult dataclass."""

    def test_display_time_two_decimals(self) -> None:
        """display_time should be seconds with two decimals."""
        result = GeneratedResult(
            id="xyz",
            prompt="italian mountains",
            wifi_name="infinity_5g",
            image_url="https://x/img.png",
            model_latency_ms=4500,
        )
        assert result.display_time == "4.50"

    def test_display_time_zero_latency(self) -> None:
        """A zero latency result is still a result."""
        result = GeneratedResult(
            id="xyz", prompt="p", wifi_name="w", image_url="https://x/img.png"
        )
        assert result.display_time == "0.00"

    def test_results_path(self) -> None:
        """results_path should point at the canonical results page."""
        result = GeneratedResult(
            id="abc123", prompt="p", wifi_name="w", image_url="https://x/img.png"
        )
        assert result.results_path == "/results/abc123"

    def test_frozen(self) -> None:
        """Results should be immutable."""
        result = GeneratedResult(
            id="abc123", prompt="p", wifi_name="w", image_url="https://x/img.png"
        )
        with pytest.raises(AttributeError):
            result.id = "other"  # type: ignore[misc]


class TestNoResult:
    """Test NoResult sentinel."""

    def test_no_result_equality(self) -> None:
        """All NoResult instances should compare equal."""
        assert NO_RESULT == NoResult()
        assert isinstance(NO_RESULT, NoResult)
