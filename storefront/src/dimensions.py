"""
RAM and Storage normalization.

Catalog specs hold RAM and Storage as free text ("8GB", "8 gb", "256GB").
Both are reduced to whole gigabytes and rendered back as "<n>GB", with
"no-ram" / "no-storage" standing in for missing or unparseable values.

Some products have RAM and Storage entered in each other's field. When both
values are present and RAM is larger than Storage they are swapped. This
assumes RAM <= Storage, which holds for phones and tablets but would misfire
on a device whose RAM exceeds its storage. A product with only one of the two
values is never swapped.
"""

import re
from typing import Any, Dict

NO_RAM = "no-ram"
NO_STORAGE = "no-storage"

_GB_PATTERN = re.compile(r"(\d+)\s*GB", re.IGNORECASE)


def extract_gb(value: Any = None) -> int:
    """
    Extract the gigabyte count from a RAM/Storage string.

    Args:
        value: Text such as "256GB" or "8 gb"

    Returns:
        First integer followed by "GB", or 0 when absent ("1TB" -> 0)

    Examples:
        >>> extract_gb("256GB")
        256
        >>> extract_gb("1TB")
        0
        >>> extract_gb(None)
        0
    """
    if not value:
        return 0
    match = _GB_PATTERN.search(str(value))
    return int(match.group(1)) if match else 0


def normalize_ram_and_storage(ram: Any = None, storage: Any = None) -> Dict[str, str]:
    """
    Normalize RAM and Storage labels, swapping them when inverted.

    Args:
        ram: Raw RAM value from specs
        storage: Raw storage value from specs

    Returns:
        Dict with "ram" and "storage" labels

    Examples:
        >>> normalize_ram_and_storage("256GB", "8GB")
        {'ram': '8GB', 'storage': '256GB'}
        >>> normalize_ram_and_storage(None, None)
        {'ram': 'no-ram', 'storage': 'no-storage'}
    """
    ram_gb = extract_gb(ram)
    storage_gb = extract_gb(storage)

    if ram_gb > 0 and storage_gb > 0 and ram_gb > storage_gb:
        ram_gb, storage_gb = storage_gb, ram_gb

    return {
        "ram": f"{ram_gb}GB" if ram_gb > 0 else NO_RAM,
        "storage": f"{storage_gb}GB" if storage_gb > 0 else NO_STORAGE,
    }
