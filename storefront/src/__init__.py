"""Storefront catalog variant grouping."""

__version__ = "1.0.0"

from .availability import filter_available_products
from .dimensions import extract_gb, normalize_ram_and_storage
from .keys import generate_group_key, generate_variant_key
from .grouping import group_products_by_variants
from .lookup import (
    find_product_by_variant,
    find_product_by_color,
    find_product_by_specs,
    get_default_product_from_variant,
)
from .variants import group_products_by_model, extract_variants

__all__ = [
    "filter_available_products",
    "extract_gb",
    "normalize_ram_and_storage",
    "generate_group_key",
    "generate_variant_key",
    "group_products_by_variants",
    "find_product_by_variant",
    "find_product_by_color",
    "find_product_by_specs",
    "get_default_product_from_variant",
    "group_products_by_model",
    "extract_variants",
    "__version__",
]
