"""
Product variant grouping.

Builds the storefront view model from a flat list of catalog products:

    products -> available products
             -> model groups (brand + model)
             -> variants (normalized RAM + Storage)
             -> colors and price ranges

Malformed or missing fields never raise; they fall back to sentinel values
("unknown" in keys, "no-ram"/"no-storage" labels, {0, 0} price ranges) so a
bad row shows up as a placeholder instead of breaking the catalog page.
"""

import logging
from typing import Dict, Iterable, List

from shared.text_utils import parse_number
from storefront.src.availability import filter_available_products
from storefront.src.colors import resolve_color_hex
from storefront.src.dimensions import extract_gb, normalize_ram_and_storage
from storefront.src.keys import generate_group_key, generate_variant_key
from storefront.src.models import (
    CatalogProduct,
    ColorOption,
    PriceRange,
    ProductGroup,
    ProductVariant,
    get_specs,
)


def compute_price_range(products: Iterable[CatalogProduct]) -> PriceRange:
    """
    Min/max of price_retail over products with a positive price.

    Zero or missing prices are left out of the range. Returns {0, 0} when no
    product has a positive price.
    """
    prices = [parse_number(p.get("price_retail")) for p in products]
    prices = [price for price in prices if price > 0]
    if not prices:
        return PriceRange(0, 0)
    return PriceRange(min(prices), max(prices))


def _build_variant(
    variant_products: List[CatalogProduct],
    group_colors: Dict[str, ColorOption]
) -> ProductVariant:
    """Aggregate one RAM/Storage bucket, adding its colors to group_colors."""
    colors: Dict[str, ColorOption] = {}

    for product in variant_products:
        specs = get_specs(product)
        color_name = specs.get("color")
        if not color_name:
            continue
        # Same name twice: the later product's hex wins
        option = ColorOption(name=color_name, hex=resolve_color_hex(color_name, specs.get("color_hex")))
        colors[color_name] = option
        group_colors[color_name] = option

    first_specs = get_specs(variant_products[0])
    normalized = normalize_ram_and_storage(first_specs.get("ram"), first_specs.get("storage"))

    return ProductVariant(
        ram=normalized["ram"],
        storage=normalized["storage"],
        colors=list(colors.values()),
        products=list(variant_products),
        price_range=compute_price_range(variant_products),
    )


def group_products_by_variants(products: List[CatalogProduct]) -> List[ProductGroup]:
    """
    Group available products by brand + model, then by RAM + Storage.

    Args:
        products: Catalog products in display order

    Returns:
        One ProductGroup per brand + model, in order of first appearance.
        Each group's variants are sorted by RAM then Storage (numeric GB,
        sentinels first).
    """
    available = filter_available_products(products)

    model_groups: Dict[str, List[CatalogProduct]] = {}
    for product in available:
        model_groups.setdefault(generate_group_key(product), []).append(product)

    groups: List[ProductGroup] = []
    variant_count = 0

    for group_key, model_products in model_groups.items():
        variant_buckets: Dict[str, List[CatalogProduct]] = {}
        for product in model_products:
            specs = get_specs(product)
            key = generate_variant_key(specs.get("ram"), specs.get("storage"))
            variant_buckets.setdefault(key, []).append(product)

        group_colors: Dict[str, ColorOption] = {}
        variants = [_build_variant(bucket, group_colors) for bucket in variant_buckets.values()]
        variants.sort(key=lambda v: (extract_gb(v.ram), extract_gb(v.storage)))
        variant_count += len(variants)

        representative = model_products[0]
        groups.append(ProductGroup(
            group_key=group_key,
            brand=representative.get("brand") or "",
            model=representative.get("model") or "",
            variants=variants,
            all_colors=list(group_colors.values()),
            global_price_range=compute_price_range(model_products),
            representative_product=representative,
        ))

    logging.debug(
        f"Grouped {len(available)}/{len(products or [])} available products "
        f"into {len(groups)} groups, {variant_count} variants"
    )
    return groups
