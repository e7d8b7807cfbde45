"""Unit tests for named color presets."""

import pytest

from lifxcolor.colors import COLORS, NAMED_HUES, named
from lifxcolor.exceptions import LifxColorError, UnknownColorError
from lifxcolor.models import Color


class TestNamed:
    """Test named() preset lookup."""

    @pytest.mark.unit
    def test_every_preset_hue(self):
        """Test each preset uses its table hue at full saturation."""
        for name, hue in NAMED_HUES.items():
            color = named(name)
            assert color.to_tuple() == (float(hue), 1.0, 1.0, 3500)

    @pytest.mark.unit
    def test_case_and_whitespace_insensitive(self):
        """Test lookup normalizes the name."""
        assert named("  Orange ").hue == 36.0

    @pytest.mark.unit
    def test_custom_components(self):
        """Test saturation, brightness and kelvin overrides."""
        color = named("blue", saturation=0.5, brightness=0.2, kelvin=6500)
        assert color.to_tuple() == (250.0, 0.5, 0.2, 6500)

    @pytest.mark.unit
    def test_white(self):
        """Test white ignores saturation."""
        color = named("white", saturation=1.0, brightness=0.4, kelvin=2700)
        assert color.to_tuple() == (0.0, 0.0, 0.4, 2700)

    @pytest.mark.unit
    def test_unknown_name(self):
        """Test unknown names raise with a list of valid ones."""
        with pytest.raises(UnknownColorError) as exc_info:
            named("mauve")

        error = exc_info.value
        assert isinstance(error, LifxColorError)
        assert error.name == "mauve"
        assert "white" in error.known
        assert "orange" in error.hint
        assert str(error) == "Unknown color 'mauve'"


class TestPresetConstants:
    """Test COLORS constants."""

    @pytest.mark.unit
    def test_primaries(self):
        """Test constants match the equivalent constructors."""
        assert COLORS.RED == Color.rgb(255, 0, 0)
        assert COLORS.GREEN == Color.rgb(0, 255, 0)
        assert COLORS.WHITE == Color.white()

    @pytest.mark.unit
    def test_off(self):
        """Test OFF is zero-brightness white."""
        assert COLORS.OFF.brightness == 0.0
        assert COLORS.OFF.to_wire().brightness == 0
