"""Utility functions for SVG parsing and attribute handling."""

import re
from typing import Iterable
from xml.etree import ElementTree as ET

SVG_NS = "http://www.w3.org/2000/svg"

# Namespace prefixes used when writing. The SVG namespace is the default
# namespace so output elements are written as <rect>, not <svg:rect>.
SVG_NAMESPACES = {
    "": SVG_NS,
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "xlink": "http://www.w3.org/1999/xlink",
}

# Graphic elements that can be colorable areas or decoration
SHAPE_ELEMENTS = frozenset(
    [
        "path",
        "rect",
        "circle",
        "ellipse",
        "polygon",
        "line",
    ]
)

# Fills that mark pre-rendered artwork (outlines, shading, highlights)
DEFAULT_DECORATIVE_COLORS = (
    "#000000",
    "#222221",
    "#B5B5B5",
    "#FFFFFF",
    "black",
    "white",
    "gray",
    "grey",
)

AREA_ID_PATTERN = re.compile(r"area-\d+")

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def register_namespaces() -> None:
    """Register SVG namespaces to preserve prefixes when writing."""
    for prefix, uri in SVG_NAMESPACES.items():
        ET.register_namespace(prefix, uri)


def get_local_name(tag: str) -> str:
    """Extract local name from a namespaced tag.

    Args:
        tag: Full tag name, possibly with namespace.

    Returns:
        Local name without namespace prefix.

    Example:
        >>> get_local_name("{http://www.w3.org/2000/svg}rect")
        'rect'
    """
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def is_shape_element(element: ET.Element) -> bool:
    """Check if an element is one of the paintable shape kinds.

    Args:
        element: An XML element.

    Returns:
        True if the element is a shape element.
    """
    if not isinstance(element.tag, str):
        return False
    return get_local_name(element.tag).lower() in SHAPE_ELEMENTS


def parse_number(value: str | None, default: float = 0.0) -> float:
    """Parse the leading number of an attribute value.

    Unit suffixes are ignored ("10px" -> 10.0). Missing or non-numeric
    values return the default.

    Args:
        value: Raw attribute text.
        default: Value used when no number can be read.

    Returns:
        Parsed float.

    Examples:
        >>> parse_number("2.5")
        2.5
        >>> parse_number("10px")
        10.0
        >>> parse_number(None)
        0.0
    """
    if value is None:
        return default
    match = _LEADING_NUMBER.match(value)
    if not match:
        return default
    return float(match.group(1))


def is_decorative_color(
    fill: str | None, colors: Iterable[str] = DEFAULT_DECORATIVE_COLORS
) -> bool:
    """Check if a fill value is one of the decorative colors (case-insensitive)."""
    if not fill:
        return False
    fill_folded = fill.strip().casefold()
    return any(fill_folded == color.casefold() for color in colors)


def is_area_id(value: str | None) -> bool:
    """Check if an id has the colorable area form 'area-<n>'."""
    return value is not None and AREA_ID_PATTERN.fullmatch(value) is not None
