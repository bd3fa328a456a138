"""Tests for carousel options."""

import pytest
from pydantic import ValidationError

from virchual.core.errors import ErrorCategory, InvalidOptionsError
from virchual.core.options import CarouselOptions


class TestCarouselOptions:
    """Tests for CarouselOptions validation."""

    def test_defaults(self) -> None:
        """Should match the widget's historical defaults."""
        options = CarouselOptions()
        assert options.speed == 200
        assert options.easing == "ease-out"
        assert options.swipe_distance_threshold == 150
        assert options.flick_velocity_threshold == 0.6
        assert options.flick_power == 600
        assert options.pagination is True
        assert options.window == 1
        assert options.bullets == 5
        assert options.bullet_diameter == 16

    def test_options_are_frozen(self) -> None:
        """Should not allow mutation after construction."""
        options = CarouselOptions()
        with pytest.raises(ValidationError):
            options.window = 3

    def test_negative_window_rejected(self) -> None:
        """Should reject a negative window radius."""
        with pytest.raises(ValidationError):
            CarouselOptions(window=-1)

    def test_zero_bullets_rejected(self) -> None:
        """Should require at least one bullet."""
        with pytest.raises(ValidationError):
            CarouselOptions(bullets=0)


class TestFromMapping:
    """Tests for CarouselOptions.from_mapping."""

    def test_valid_mapping(self) -> None:
        """Should build options from a plain dict."""
        options = CarouselOptions.from_mapping({"window": 2, "speed": 300})
        assert options.window == 2
        assert options.speed == 300

    def test_unknown_option_rejected(self) -> None:
        """Should wrap unknown keys in InvalidOptionsError."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            CarouselOptions.from_mapping({"loop": True})
        assert exc_info.value.category is ErrorCategory.CONFIGURATION
        assert isinstance(exc_info.value.original_error, ValidationError)


class TestFromEnv:
    """Tests for CarouselOptions.from_env."""

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read VIRCHUAL_* variables."""
        monkeypatch.setenv("VIRCHUAL_WINDOW", "2")
        monkeypatch.setenv("VIRCHUAL_PAGINATION", "false")
        options = CarouselOptions.from_env()
        assert options.window == 2
        assert options.pagination is False

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should prefer explicit overrides over the environment."""
        monkeypatch.setenv("VIRCHUAL_BULLETS", "7")
        options = CarouselOptions.from_env(bullets=3)
        assert options.bullets == 3

    def test_invalid_environment_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should raise InvalidOptionsError for values that fail validation."""
        monkeypatch.setenv("VIRCHUAL_SPEED", "fast")
        with pytest.raises(InvalidOptionsError):
            CarouselOptions.from_env()

    def test_custom_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should honour a custom prefix."""
        monkeypatch.setenv("GALLERY_EASING", "linear")
        assert CarouselOptions.from_env(prefix="GALLERY_").easing == "linear"
