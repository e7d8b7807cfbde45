"""Tests for lifxcolor errors and the ValidationError wrappers."""

import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from lifxcolor.exceptions import (
    ColorValueError,
    ConfigError,
    LifxColorError,
    UnknownColorError,
    wrap_color_error,
    wrap_config_error,
)
from lifxcolor.models import AppConfig, Color


def _validation_error(factory, *args):
    with pytest.raises(ValidationError) as exc_info:
        factory(*args)
    return exc_info.value


class TestLifxColorError:
    """Test the base error."""

    @pytest.mark.unit
    def test_message_and_hint(self):
        """Test str() is the user message and the hint is optional."""
        error = LifxColorError("Broken", hint="Fix it")
        assert str(error) == error.message == "Broken"
        assert error.hint == "Fix it"
        assert LifxColorError("Broken").hint is None

    @pytest.mark.unit
    def test_subclasses(self):
        """Test every lifxcolor error can be caught through the base class."""
        errors = [
            ColorValueError("hue", None, "bad"),
            UnknownColorError("mauve", ["red"]),
            ConfigError(Path("config.json"), "bad"),
        ]
        for error in errors:
            assert isinstance(error, LifxColorError)


class TestWrapColorError:
    """Test wrap_color_error."""

    @pytest.mark.unit
    def test_nan_hue(self):
        """Test NaN hue becomes a ColorValueError for 'hue'."""
        error = wrap_color_error(_validation_error(Color.hsb, float("nan"), 1, 1))
        assert isinstance(error, ColorValueError)
        assert error.field == "hue"
        assert math.isnan(error.value)
        assert "degrees" in error.hint
        assert error.message.startswith("Invalid value for 'hue'")

    @pytest.mark.unit
    def test_infinite_brightness(self):
        """Test infinite brightness hint mentions the 0-1 range."""
        error = wrap_color_error(_validation_error(Color.hsb, 0, 1, float("inf")))
        assert error.field == "brightness"
        assert "between 0 and 1" in error.hint

    @pytest.mark.unit
    def test_fractional_kelvin(self):
        """Test a fractional kelvin is reported on 'kelvin'."""
        error = wrap_color_error(_validation_error(Color.hsbk, 0, 0, 1, 3500.5))
        assert error.field == "kelvin"
        assert "whole number" in error.hint

    @pytest.mark.unit
    def test_unknown_keyword(self):
        """Test a misspelled keyword is reported by name without a hint."""
        with pytest.raises(ValidationError) as exc_info:
            Color(10, 0.5, 0.5, kelvn=9000)

        error = wrap_color_error(exc_info.value)
        assert error.field == "kelvn"
        assert error.value == 9000
        assert error.hint is None


class TestWrapConfigError:
    """Test wrap_config_error."""

    @pytest.mark.unit
    def test_invalid_json(self):
        """Test broken JSON names the file and no field."""
        path = Path("/tmp/config.json")
        error = wrap_config_error(_validation_error(AppConfig.model_validate_json, "{not json"), path)
        assert isinstance(error, ConfigError)
        assert error.field is None
        assert error.path == path
        assert error.message.startswith(f"Configuration file {path} is not valid JSON")
        assert str(path) in error.hint

    @pytest.mark.unit
    def test_single_field(self):
        """Test one invalid value names its field."""
        error = wrap_config_error(
            _validation_error(AppConfig.model_validate, {"default_kelvin": 1000}),
            Path("config.json"),
        )
        assert error.field == "default_kelvin"
        assert error.message.startswith("Invalid configuration value for 'default_kelvin'")
        assert "config reset" in error.hint

    @pytest.mark.unit
    def test_multiple_fields(self):
        """Test several invalid values are listed in one message."""
        error = wrap_config_error(
            _validation_error(
                AppConfig.model_validate, {"default_kelvin": 1000, "output_format": "xml"}
            ),
            Path("config.json"),
        )
        assert error.field == "default_kelvin"
        assert "'default_kelvin'" in error.message
        assert "'output_format'" in error.message
