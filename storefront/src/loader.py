"""
Catalog product loading from export files.

Reads JSON or Excel exports of the products table and coerces each row into
the catalog product shape used by the grouping pipeline. Excel exports are
flat, so spec columns ("ram" or "specs.ram", ...) are folded into a "specs"
dict.
"""

import logging
from typing import Any, Dict, List

from shared.excel_utils import load_records
from shared.text_utils import normalize_whitespace, parse_bool, parse_number
from storefront.src.models import CatalogProduct

SPEC_FIELDS = ("ram", "storage", "color", "color_hex")
NUMERIC_FIELDS = ("price_retail", "stock_quantity")


def normalize_product_row(row: Dict[str, Any]) -> CatalogProduct:
    """
    Coerce one exported row into a catalog product.

    Args:
        row: Raw row from JSON or Excel

    Returns:
        New product dict with a "specs" dict, numeric prices/stock and a
        boolean track_inventory
    """
    product: CatalogProduct = {}
    specs = dict(row["specs"]) if isinstance(row.get("specs"), dict) else {}

    for key, value in row.items():
        if key == "specs":
            continue
        if key.startswith("specs."):
            spec_key = key[len("specs."):]
            if value not in (None, ""):
                specs[spec_key] = value
        elif key in SPEC_FIELDS:
            if value not in (None, "") and not specs.get(key):
                specs[key] = value
        else:
            product[key] = value

    for key in SPEC_FIELDS:
        if isinstance(specs.get(key), (int, float)) and not isinstance(specs.get(key), bool):
            # Excel turns "8" into 8; keep specs textual
            specs[key] = str(specs[key])
        elif isinstance(specs.get(key), str):
            specs[key] = normalize_whitespace(specs[key])

    for key in NUMERIC_FIELDS:
        if key in product:
            product[key] = parse_number(product[key], default=None)

    if "track_inventory" in product:
        product["track_inventory"] = parse_bool(product["track_inventory"])

    if isinstance(product.get("status"), str):
        product["status"] = product["status"].strip()

    product["specs"] = specs
    return product


def load_catalog_products(file_path: str) -> List[CatalogProduct]:
    """
    Load catalog products from a JSON or Excel export.

    Args:
        file_path: Path to .json, .xlsx or .xlsm file

    Returns:
        List of catalog products

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the format is unsupported or rows are not objects
        RuntimeError: If the JSON cannot be parsed
    """
    rows = load_records(file_path)

    products = []
    for index, row in enumerate(rows, start=1):
        if not isinstance(row, dict):
            raise ValueError(f"Row {index} in {file_path} is not an object")
        products.append(normalize_product_row(row))

    logging.info(f"Loaded {len(products)} products from {file_path}")
    return products
