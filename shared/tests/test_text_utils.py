"""
Tests for shared text and number helpers.
"""
import pytest

from shared.text_utils import normalize_whitespace, parse_bool, parse_number


@pytest.mark.parametrize("value,expected", [
    (150, 150),
    (99.5, 99.5),
    ("150", 150),
    (" 42 ", 42),
    ("1299,90", 1299.9),
    ("1299.90", 1299.9),
    ("", 0),
    ("n/a", 0),
    (None, 0),
    (True, 0),
    ([1], 0),
])
def test_parse_number(value, expected):
    """Should coerce loosely typed numbers"""
    assert parse_number(value) == expected


def test_parse_number_default():
    """Should return the given default when parsing fails"""
    assert parse_number("", default=None) is None


@pytest.mark.parametrize("value,expected", [
    (True, True),
    (False, False),
    ("true", True),
    ("Sim", True),
    ("x", True),
    ("no", False),
    ("", False),
    (1, True),
    (0, False),
    (None, False),
])
def test_parse_bool(value, expected):
    """Should interpret spreadsheet-style flags"""
    assert parse_bool(value) is expected


class TestNormalization:
    """Test whitespace normalization."""

    def test_normalize_whitespace(self):
        """Should collapse and strip whitespace"""
        assert normalize_whitespace("  Azul   Claro \n") == "Azul Claro"
        assert normalize_whitespace(None) == ""
