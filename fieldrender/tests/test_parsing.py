"""Unit tests for array and boolean string parsing."""

import pytest
from fieldrender.infrastructure.auto_detect import (
    parse_array_string,
    parse_boolean_string,
    stringify_value,
)


class TestParseArrayString:
    """Test string-encoded array parsing."""

    def test_single_quoted_brackets(self):
        """Test single-quoted list converts to JSON."""
        assert parse_array_string("['a', 'b', 'c']") == ["a", "b", "c"]

    def test_double_quoted_brackets(self):
        """Test strict JSON list."""
        assert parse_array_string('["Mountain", "Road"]') == ["Mountain", "Road"]

    def test_comma_separated(self):
        """Test plain comma-separated list."""
        assert parse_array_string("a, b, c") == ["a", "b", "c"]

    def test_comma_separated_drops_empty_items(self):
        """Test empty segments are dropped."""
        assert parse_array_string(" a,, b , ") == ["a", "b"]

    def test_malformed_brackets_fall_back_to_comma_split(self):
        """Test malformed JSON does not raise."""
        assert parse_array_string("['x\"y']") == ["['x\"y']"]

    def test_deep_nesting_falls_back_to_comma_split(self):
        """Test nesting too deep for the JSON decoder does not raise."""
        nested = "[" * 100000 + "]" * 100000

        assert parse_array_string(nested) == [nested]

    def test_json_numbers_are_stringified(self):
        """Test non-string JSON items become strings."""
        assert parse_array_string("[1, 2.0, true]") == ["1", "2", "true"]

    def test_empty_brackets(self):
        """Test empty JSON list."""
        assert parse_array_string("[]") == []

    def test_empty_string(self):
        """Test empty input yields no items."""
        assert parse_array_string("   ") == []


class TestParseBooleanString:
    """Test boolean string coercion."""

    @pytest.mark.parametrize("value", ["true", "TRUE", " yes ", "Yes", "1"])
    def test_truthy(self, value):
        """Test truthy vocabulary."""
        assert parse_boolean_string(value) is True

    @pytest.mark.parametrize("value", ["false", "no", "0", "", "maybe", "2", "y"])
    def test_everything_else_is_false(self, value):
        """Test falsy vocabulary and garbage never raise."""
        assert parse_boolean_string(value) is False


class TestStringifyValue:
    """Test cell value stringification."""

    def test_integral_float(self):
        """Test integral floats drop the fraction."""
        assert stringify_value(3.0) == "3"

    def test_fractional_float(self):
        """Test fractional floats keep the fraction."""
        assert stringify_value(4.5) == "4.5"

    def test_booleans(self):
        """Test booleans use their JSON spelling."""
        assert stringify_value(True) == "true"
        assert stringify_value(False) == "false"
