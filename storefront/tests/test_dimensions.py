"""
Tests for RAM/Storage parsing, normalization and grouping keys.
"""
import pytest

from storefront.src.dimensions import extract_gb, normalize_ram_and_storage
from storefront.src.keys import generate_group_key, generate_variant_key


@pytest.mark.parametrize("value,expected", [
    ("256GB", 256),
    ("8GB", 8),
    ("8 GB", 8),
    ("8gb", 8),
    ("RAM 12 Gb LPDDR5", 12),
    ("128GB / 8GB", 128),
    ("1TB", 0),
    ("", 0),
    (None, 0),
    ("abc", 0),
])
def test_extract_gb(value, expected):
    """Should read the first integer followed by GB"""
    assert extract_gb(value) == expected


class TestNormalizeRamAndStorage:
    """Test normalize_ram_and_storage."""

    def test_swaps_inverted_values(self):
        """Should swap RAM and Storage when RAM is larger"""
        assert normalize_ram_and_storage("256GB", "8GB") == {"ram": "8GB", "storage": "256GB"}

    def test_keeps_ordered_values(self):
        """Should leave correctly ordered values alone"""
        assert normalize_ram_and_storage("8GB", "256GB") == {"ram": "8GB", "storage": "256GB"}

    def test_missing_values_use_sentinels(self):
        """Should return sentinels when both values are missing"""
        assert normalize_ram_and_storage(None, None) == {"ram": "no-ram", "storage": "no-storage"}

    def test_no_swap_with_single_value(self):
        """Should not swap when only one side is present"""
        assert normalize_ram_and_storage("256GB", None) == {"ram": "256GB", "storage": "no-storage"}
        assert normalize_ram_and_storage(None, "4GB") == {"ram": "no-ram", "storage": "4GB"}

    def test_terabyte_storage_is_unparsed(self):
        """Should treat TB storage as missing"""
        assert normalize_ram_and_storage("12GB", "1TB") == {"ram": "12GB", "storage": "no-storage"}

    def test_reformats_spacing_and_case(self):
        """Should render labels as <n>GB"""
        assert normalize_ram_and_storage("6 gb", " 128 Gb ") == {"ram": "6GB", "storage": "128GB"}

    def test_equal_values_unchanged(self):
        """Should not swap equal values"""
        assert normalize_ram_and_storage("64GB", "64GB") == {"ram": "64GB", "storage": "64GB"}


class TestGroupKey:
    """Test generate_group_key."""

    def test_lowercases_brand_and_model(self):
        """Should join brand and model in lowercase"""
        assert generate_group_key({"brand": "Acme", "model": "X1"}) == "acme_x1"

    def test_replaces_whitespace_runs(self):
        """Should replace whitespace runs with a dash"""
        product = {"brand": "Acme  Corp", "model": "Galaxy S23 \t Ultra"}
        assert generate_group_key(product) == "acme-corp_galaxy-s23-ultra"

    def test_missing_brand_and_model(self):
        """Should fall back to unknown"""
        assert generate_group_key({}) == "unknown_unknown"
        assert generate_group_key({"brand": "", "model": None}) == "unknown_unknown"
        assert generate_group_key({"brand": "Acme"}) == "acme_unknown"


class TestVariantKey:
    """Test generate_variant_key."""

    def test_uses_normalized_values(self):
        """Should build the key from normalized labels"""
        assert generate_variant_key("8GB", "256GB") == "8gb_256gb"

    def test_inverted_values_share_key(self):
        """Should give the same key for swapped input"""
        assert generate_variant_key("128GB", "8GB") == generate_variant_key("8 gb", "128GB")

    def test_sentinels(self):
        """Should use sentinels for missing values"""
        assert generate_variant_key() == "no-ram_no-storage"
