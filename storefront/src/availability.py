"""
Availability filtering for catalog products.
"""

from typing import List

from shared.text_utils import parse_number
from storefront.src.models import CatalogProduct, ProductStatus


def is_available(product: CatalogProduct) -> bool:
    """
    Check whether a product can be sold.

    A product is available when its status is exactly "active" and, if it
    tracks inventory, its stock quantity (missing = 0) is above zero.
    Untracked products are always available.
    """
    if not isinstance(product, dict):
        return False

    if product.get("status") != ProductStatus.ACTIVE:
        return False

    if product.get("track_inventory") and parse_number(product.get("stock_quantity")) <= 0:
        return False

    return True


def filter_available_products(products: List[CatalogProduct]) -> List[CatalogProduct]:
    """
    Keep only products available for sale, preserving input order.

    Args:
        products: Catalog products

    Returns:
        New list with the available products
    """
    return [p for p in products or [] if is_available(p)]
