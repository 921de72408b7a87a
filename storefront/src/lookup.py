"""
Point lookups into grouped catalog data.

Color names are matched exactly (case-sensitive, no trimming), the same way
the grouping step deduplicates them.
"""

from typing import List, Optional

from storefront.src.models import CatalogProduct, ProductGroup, ProductVariant, get_specs


def find_product_by_variant(
    group: ProductGroup,
    ram: str,
    storage: str,
    color_name: str
) -> Optional[CatalogProduct]:
    """
    Find the product for a RAM/Storage/color selection within a group.

    Args:
        group: Group returned by group_products_by_variants
        ram: Normalized RAM label ("8GB" or "no-ram")
        storage: Normalized storage label ("256GB" or "no-storage")
        color_name: Exact color name

    Returns:
        Matching product, or None
    """
    variant = next((v for v in group.variants if v.ram == ram and v.storage == storage), None)
    if variant is None:
        return None
    return find_product_by_color(variant, color_name)


def find_product_by_color(variant: ProductVariant, color_name: str) -> Optional[CatalogProduct]:
    """Return the first product of the variant with the given color, or None."""
    for product in variant.products:
        if get_specs(product).get("color") == color_name:
            return product
    return None


def get_default_product_from_variant(variant: ProductVariant) -> Optional[CatalogProduct]:
    """First product of the variant in input order, or None when empty."""
    return variant.products[0] if variant.products else None


def find_product_by_specs(
    products: List[CatalogProduct],
    ram: Optional[str] = None,
    storage: Optional[str] = None,
    color: Optional[str] = None
) -> Optional[CatalogProduct]:
    """
    Find the first product whose raw specs match every given criterion.

    Criteria left as None (or empty) match anything. Values are compared
    as stored, without RAM/Storage normalization.

    Args:
        products: Products to search
        ram: Raw RAM value
        storage: Raw storage value
        color: Color name

    Returns:
        First matching product, or None
    """
    for product in products:
        specs = get_specs(product)
        if ram and specs.get("ram") != ram:
            continue
        if storage and specs.get("storage") != storage:
            continue
        if color and specs.get("color") != color:
            continue
        return product
    return None
