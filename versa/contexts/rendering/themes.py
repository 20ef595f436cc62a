"""
Theme descriptors for the external renderer.

Each version is themed by a class name (theme_base + version key) and its hex
color. Turning those into stylesheets is the renderer's job; this module only
hands over the data it needs.
"""

from typing import Any, Dict, List, Optional, Tuple

from versa.contexts.templating.defaults import is_hex_color
from versa.contexts.templating.version_data_structures import MergedModel


def hex_to_rgb(color: str) -> Optional[Tuple[int, int, int]]:
    """
    Convert "#rrggbb" or "#rgb" to an (r, g, b) tuple.

    Returns:
        Tuple of ints, or None if color is not a hex color
    """
    if not is_hex_color(color):
        return None

    digits = color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def theme_classes(model: MergedModel) -> List[str]:
    """Theme class for every version, in document order."""
    return [model.theme_class(key) for key in model.version_keys()]


def theme_descriptors(model: MergedModel) -> List[Dict[str, Any]]:
    """
    Everything the renderer needs to build one theme per version.

    Returns:
        List of {version, theme_class, color, rgb} dicts in document order
    """
    return [
        {
            "version": key,
            "theme_class": model.theme_class(key),
            "color": color,
            "rgb": hex_to_rgb(color),
        }
        for key, color in model.theme_pairs()
    ]
