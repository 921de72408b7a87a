"""
Grouping keys for catalog products.

Keys are only used to bucket products; they are never displayed.
"""

import re
from typing import Any

from storefront.src.dimensions import normalize_ram_and_storage
from storefront.src.models import CatalogProduct


def generate_group_key(product: CatalogProduct) -> str:
    """
    Build the brand + model key, e.g. "Acme", "X1 Pro" -> "acme_x1-pro".

    Missing brand or model becomes "unknown".
    """
    brand = product.get("brand") or "unknown"
    model = product.get("model") or "unknown"
    return re.sub(r"\s+", "-", f"{brand}_{model}".lower())


def generate_variant_key(ram: Any = None, storage: Any = None) -> str:
    """Build the RAM + Storage key from normalized labels, e.g. "8gb_256gb"."""
    normalized = normalize_ram_and_storage(ram, storage)
    return f"{normalized['ram']}_{normalized['storage']}".lower()
