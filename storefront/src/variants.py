"""
Per-model variant summaries for product cards.

Unlike group_products_by_variants, these helpers work on raw spec values:
no availability filter, no RAM/Storage normalization and no color table.
"""

from typing import Dict, List

from storefront.src.grouping import compute_price_range
from storefront.src.models import CatalogProduct, ColorOption, ProductVariants, get_specs


def group_products_by_model(products: List[CatalogProduct]) -> Dict[str, List[CatalogProduct]]:
    """
    Bucket products by model_id (falling back to the product id).

    Args:
        products: Catalog products

    Returns:
        Dict of model id -> products, in order of first appearance
    """
    grouped: Dict[str, List[CatalogProduct]] = {}
    for product in products:
        model_id = product.get("model_id") or product.get("id")
        grouped.setdefault(model_id, []).append(product)
    return grouped


def extract_variants(products: List[CatalogProduct]) -> ProductVariants:
    """
    Collect the distinct RAM, storage and color options of a set of products.

    RAM and storage values are returned sorted as plain strings. For colors
    the first product carrying a name decides its hex (which stays None when
    that product has no color_hex).
    """
    rams = set()
    storages = set()
    colors: Dict[str, ColorOption] = {}

    for product in products:
        specs = get_specs(product)
        if specs.get("ram"):
            rams.add(str(specs["ram"]))
        if specs.get("storage"):
            storages.add(str(specs["storage"]))

        color_name = specs.get("color")
        if color_name and color_name not in colors:
            colors[color_name] = ColorOption(name=color_name, hex=specs.get("color_hex") or None)

    return ProductVariants(
        rams=sorted(rams),
        storages=sorted(storages),
        colors=list(colors.values()),
        price_range=compute_price_range(products),
    )
