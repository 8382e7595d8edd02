"""Geometry utilities for shape bounds."""

import math
from dataclasses import dataclass
from xml.etree import ElementTree as ET

from .utils import get_local_name, parse_number

# Stand-in box for shapes whose outline is not measured (path, polygon).
# Kept large so the small-area rule does not treat them as accents.
PLACEHOLDER_SIZE = 100.0


@dataclass
class Bounds:
    """Axis-aligned bounding box with the painted area of the shape."""

    x: float
    y: float
    width: float
    height: float
    area: float


def rect_bounds(element: ET.Element) -> Bounds:
    """Bounds of a rect element."""
    x = parse_number(element.get("x"))
    y = parse_number(element.get("y"))
    width = parse_number(element.get("width"))
    height = parse_number(element.get("height"))
    return Bounds(x, y, width, height, width * height)


def circle_bounds(element: ET.Element) -> Bounds:
    """Bounds of a circle element. Area is pi * r^2."""
    cx = parse_number(element.get("cx"))
    cy = parse_number(element.get("cy"))
    r = parse_number(element.get("r"))
    return Bounds(cx - r, cy - r, r * 2, r * 2, math.pi * r * r)


def ellipse_bounds(element: ET.Element) -> Bounds:
    """Bounds of an ellipse element. Area is pi * rx * ry."""
    cx = parse_number(element.get("cx"))
    cy = parse_number(element.get("cy"))
    rx = parse_number(element.get("rx"))
    ry = parse_number(element.get("ry"))
    return Bounds(cx - rx, cy - ry, rx * 2, ry * 2, math.pi * rx * ry)


def line_bounds(element: ET.Element) -> Bounds:
    """Bounds of a line element (box spanned by its endpoints)."""
    x1 = parse_number(element.get("x1"))
    y1 = parse_number(element.get("y1"))
    x2 = parse_number(element.get("x2"))
    y2 = parse_number(element.get("y2"))
    width = abs(x2 - x1)
    height = abs(y2 - y1)
    return Bounds(min(x1, x2), min(y1, y2), width, height, width * height)


def placeholder_bounds() -> Bounds:
    """Fixed bounds used for path and polygon elements."""
    return Bounds(
        0.0,
        0.0,
        PLACEHOLDER_SIZE,
        PLACEHOLDER_SIZE,
        PLACEHOLDER_SIZE * PLACEHOLDER_SIZE,
    )


def calculate_bounds(element: ET.Element) -> Bounds:
    """Calculate the bounds of a shape element from its attributes.

    Missing numeric attributes count as 0. Path and polygon outlines are
    not measured; they get a fixed 100x100 placeholder box.

    Args:
        element: SVG shape element.

    Returns:
        Bounds of the element.
    """
    tag = get_local_name(element.tag).lower()
    if tag == "rect":
        return rect_bounds(element)
    elif tag == "circle":
        return circle_bounds(element)
    elif tag == "ellipse":
        return ellipse_bounds(element)
    elif tag == "line":
        return line_bounds(element)
    else:
        return placeholder_bounds()
