"""
Data models for the storefront catalog.

Catalog products are plain dictionaries as returned by the backend (or loaded
from an export). This module defines the derived view-model structures built
from them: color options, RAM/Storage variants and brand+model groups.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# A catalog row: id, model_id, brand, model, status, track_inventory,
# stock_quantity, price_retail and a "specs" dict (ram, storage, color, color_hex).
CatalogProduct = Dict[str, Any]


class ProductStatus:
    """Product status value that makes a product sellable."""
    ACTIVE = "active"


@dataclass
class PriceRange:
    """
    Minimum and maximum positive retail price.

    {0, 0} means no product in the range had a positive price.
    """
    min: float = 0
    max: float = 0

    def to_dict(self) -> Dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass
class ColorOption:
    """
    A selectable color.

    Attributes:
        name: Color name as entered on the product (e.g., "Preto")
        hex: Hex code for the swatch (e.g., "#000000")
    """
    name: str
    hex: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"name": self.name, "hex": self.hex}


@dataclass
class ProductVariant:
    """
    One RAM + Storage combination within a brand/model group.

    Attributes:
        ram: Normalized RAM label ("8GB") or "no-ram"
        storage: Normalized storage label ("256GB") or "no-storage"
        colors: Colors available for this combination
        products: Catalog products (one per color, usually) in input order
        price_range: Positive price range across the products
    """
    ram: str
    storage: str
    colors: List[ColorOption] = field(default_factory=list)
    products: List[CatalogProduct] = field(default_factory=list)
    price_range: PriceRange = field(default_factory=PriceRange)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ram": self.ram,
            "storage": self.storage,
            "colors": [c.to_dict() for c in self.colors],
            "products": list(self.products),
            "priceRange": self.price_range.to_dict(),
        }


@dataclass
class ProductGroup:
    """
    All sellable variants of one brand + model.

    Attributes:
        group_key: Lookup key derived from brand and model
        brand: Brand of the representative product
        model: Model of the representative product
        variants: Variants sorted by RAM then Storage
        all_colors: Union of colors across every variant
        global_price_range: Positive price range across the whole model
        representative_product: First product of the model in input order
    """
    group_key: str
    brand: str
    model: str
    variants: List[ProductVariant]
    all_colors: List[ColorOption]
    global_price_range: PriceRange
    representative_product: CatalogProduct

    def to_dict(self) -> Dict[str, Any]:
        """Convert group to the camelCase structure the storefront renders."""
        return {
            "groupKey": self.group_key,
            "brand": self.brand,
            "model": self.model,
            "variants": [v.to_dict() for v in self.variants],
            "allColors": [c.to_dict() for c in self.all_colors],
            "globalPriceRange": self.global_price_range.to_dict(),
            "representativeProduct": self.representative_product,
        }


@dataclass
class ProductVariants:
    """
    Flat summary of the options offered by a set of products.

    Attributes:
        rams: Distinct raw RAM values, sorted
        storages: Distinct raw storage values, sorted
        colors: Distinct colors (hex only when the product carries one)
        price_range: Positive price range
    """
    rams: List[str]
    storages: List[str]
    colors: List[ColorOption]
    price_range: PriceRange

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rams": list(self.rams),
            "storages": list(self.storages),
            "colors": [c.to_dict() for c in self.colors],
            "priceRange": self.price_range.to_dict(),
        }


def get_specs(product: CatalogProduct) -> Dict[str, Any]:
    """Return the product's specs dict, or an empty dict when missing/invalid."""
    specs = product.get("specs") if isinstance(product, dict) else None
    return specs if isinstance(specs, dict) else {}
