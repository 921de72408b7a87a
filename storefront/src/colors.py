"""
Color table for catalog swatches.

Maps the color names used in the catalog to hex codes. Only used as a
fallback when a product does not carry its own color_hex.
"""

from typing import Optional

COLOR_MAP = {
    "Preto": "#000000",
    "Branco": "#FFFFFF",
    "Azul": "#3B82F6",
    "Verde": "#10B981",
    "Vermelho": "#EF4444",
    "Rosa": "#EC4899",
    "Dourado": "#F59E0B",
    "Prata": "#9CA3AF",
    "Cinza": "#6B7280",
    "Roxo": "#8B5CF6",
    "Amarelo": "#EAB308",
    "Laranja": "#F97316",
}

# Neutral gray for unknown colors
DEFAULT_COLOR_HEX = "#9CA3AF"


def resolve_color_hex(name: str, explicit_hex: Optional[str] = None) -> str:
    """
    Pick the swatch hex for a color.

    Order: the product's own color_hex, then COLOR_MAP (exact name), then
    DEFAULT_COLOR_HEX.

    Args:
        name: Color name as entered on the product
        explicit_hex: color_hex from the product specs, if any

    Returns:
        Hex code string
    """
    if explicit_hex:
        return explicit_hex
    return COLOR_MAP.get(name) or DEFAULT_COLOR_HEX
