"""Unit tests for tag attribute parsing."""

import pytest

from messagearray.attributes import parse_attributes


class TestParseAttributes:
    """Test parse_attributes()."""

    @pytest.mark.parametrize("raw", [None, "", "   ", "\n\t "])
    def test_blank_input_gives_empty_mapping(self, raw):
        """Test that missing or blank input yields no attributes."""
        assert parse_attributes(raw) == {}

    def test_quoted_value(self):
        """Test a double-quoted value."""
        assert parse_attributes('param="name"') == {"param": "name"}

    def test_quoted_value_with_spaces(self):
        """Test that a quoted value keeps its inner spaces."""
        atts = parse_attributes('param="first name" lang=en')
        assert atts == {"param": "first name", "lang": "en"}

    def test_whitespace_around_equals(self):
        """Test key = "value" with spaces around the equals sign."""
        assert parse_attributes('title = "a b c"') == {"title": "a b c"}

    def test_unquoted_value(self):
        assert parse_attributes("lang=en") == {"lang": "en"}

    def test_single_quoted_single_token(self):
        """Test that one layer of single quotes is stripped."""
        assert parse_attributes("lang='en'") == {"lang": "en"}

    def test_bare_key_has_no_value(self):
        atts = parse_attributes("checked param=x")
        assert atts == {"checked": None, "param": "x"}

    def test_keys_are_lower_cased(self):
        """Test that attribute names are case-folded, values are not."""
        assert parse_attributes('PARAM="Name"') == {"param": "Name"}

    def test_last_duplicate_wins(self):
        assert parse_attributes("a=1 b=2 A=3") == {"a": "3", "b": "2"}

    def test_only_one_layer_of_quotes_removed(self):
        assert parse_attributes("""v="'x'" """) == {"v": "'x'"}

    def test_value_split_on_first_equals(self):
        """Test that later equals signs stay in the value."""
        assert parse_attributes('expr="a=b"') == {"expr": "a=b"}

    def test_newlines_separate_tokens(self):
        assert parse_attributes('a=1\nb="two\nlines"') == {"a": "1", "b": "two\nlines"}
