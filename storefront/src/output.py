"""
Output helpers for grouped catalog data.
"""

from typing import Any, Dict, List

from shared.json_utils import save_json_file
from storefront.src.models import ProductGroup


def groups_to_json(groups: List[ProductGroup]) -> List[Dict[str, Any]]:
    """Convert groups to JSON-serializable dicts."""
    return [group.to_dict() for group in groups]


def write_groups(groups: List[ProductGroup], file_path: str) -> None:
    """
    Write grouped catalog data to a JSON file.

    Args:
        groups: Groups from group_products_by_variants
        file_path: Output path
    """
    save_json_file(groups_to_json(groups), file_path)


def summarize_groups(groups: List[ProductGroup]) -> Dict[str, int]:
    """
    Count groups, variants, colors and products.

    Returns:
        Dict with "groups", "variants", "colors" and "products" counts
    """
    return {
        "groups": len(groups),
        "variants": sum(len(g.variants) for g in groups),
        "colors": sum(len(g.all_colors) for g in groups),
        "products": sum(len(v.products) for g in groups for v in g.variants),
    }
