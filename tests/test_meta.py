"""Tests for gifmaker.meta module."""

import pytest

from gifmaker.errors import FormatError
from gifmaker.meta import Settings, parse_int, parse_meta


class TestParseMeta:
    """Tests for parse_meta function."""

    @pytest.mark.fast
    def test_empty_meta_uses_defaults(self):
        """Test empty meta input gives scale 1 and delay 1."""
        assert parse_meta("") == Settings(scale=1, delay=1)

    @pytest.mark.fast
    def test_blank_lines_ignored(self):
        """Test whitespace-only lines are skipped."""
        assert parse_meta("\n   \n\t\n") == Settings()

    @pytest.mark.fast
    def test_scale_and_delay(self):
        """Test both recognised keys are parsed."""
        settings = parse_meta("scale:4\n  delay:12  \n")

        assert settings.scale == 4
        assert settings.delay == 12

    @pytest.mark.fast
    def test_later_value_overrides_earlier(self):
        """Test a repeated key keeps its last value."""
        assert parse_meta("scale:2\nscale:3").scale == 3

    @pytest.mark.fast
    @pytest.mark.parametrize("value", ["0", "-1", "-100"])
    def test_values_below_one_are_clamped(self, value):
        """Test zero and negative values are raised to 1."""
        settings = parse_meta(f"scale:{value}\ndelay:{value}")

        assert settings.scale == 1
        assert settings.delay == 1

    @pytest.mark.fast
    def test_unknown_key_quotes_line(self):
        """Test an unrecognised key fails and names the line verbatim."""
        with pytest.raises(FormatError) as exc_info:
            parse_meta("scale:2\nspeed:3")

        assert "`speed:3`" in str(exc_info.value)
        assert exc_info.value.line == "speed:3"

    @pytest.mark.fast
    @pytest.mark.parametrize("line", ["scale:abc", "delay:1.5", "scale:", "delay", "scale: 2"])
    def test_non_integer_value(self, line):
        """Test non-integer values for known keys fail."""
        with pytest.raises(FormatError):
            parse_meta(line)

    @pytest.mark.fast
    def test_settings_are_immutable(self):
        """Test Settings cannot be modified after parsing."""
        settings = parse_meta("scale:2")
        with pytest.raises(AttributeError):
            settings.scale = 5  # type: ignore[misc]


class TestParseInt:
    """Tests for parse_int helper."""

    @pytest.mark.fast
    @pytest.mark.parametrize(
        "text, expected",
        [("7", 7), ("+7", 7), ("-7", -7), ("007", 7), ("", None), ("1_0", None), (" 1", None), ("x", None)],
    )
    def test_parse_int(self, text, expected):
        """Test plain signed decimal integers only."""
        assert parse_int(text) == expected
