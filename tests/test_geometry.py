"""Tests for svg_adapter.geometry module."""

import math

import pytest
from pathlib import Path
from xml.etree import ElementTree as ET

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_adapter.utils import SVG_NS
from svg_adapter.geometry import Bounds, calculate_bounds


def _elem(tag: str, **attrs: str) -> ET.Element:
    return ET.Element(f"{{{SVG_NS}}}{tag}", attrs)


class TestCalculateBounds:
    """Tests for calculate_bounds function."""

    def test_rect(self):
        bounds = calculate_bounds(_elem("rect", x="5", y="10", width="20", height="30"))
        assert bounds == Bounds(5.0, 10.0, 20.0, 30.0, 600.0)

    def test_rect_missing_attributes(self):
        bounds = calculate_bounds(_elem("rect", width="80", height="80"))
        assert bounds.x == 0.0
        assert bounds.y == 0.0
        assert bounds.area == 6400.0

    def test_rect_with_units(self):
        bounds = calculate_bounds(_elem("rect", width="10px", height="20px"))
        assert bounds.area == 200.0

    def test_circle(self):
        bounds = calculate_bounds(_elem("circle", cx="50", cy="40", r="10"))
        assert bounds.x == 40.0
        assert bounds.y == 30.0
        assert bounds.width == 20.0
        assert bounds.height == 20.0
        assert bounds.area == pytest.approx(math.pi * 100)

    def test_small_circle(self):
        bounds = calculate_bounds(_elem("circle", r="1"))
        assert bounds.area == pytest.approx(math.pi)
        assert bounds.area < 100

    def test_ellipse(self):
        bounds = calculate_bounds(_elem("ellipse", cx="10", cy="10", rx="5", ry="2"))
        assert bounds.x == 5.0
        assert bounds.y == 8.0
        assert bounds.width == 10.0
        assert bounds.height == 4.0
        assert bounds.area == pytest.approx(math.pi * 10)

    def test_line(self):
        bounds = calculate_bounds(_elem("line", x1="30", y1="5", x2="10", y2="25"))
        assert bounds == Bounds(10.0, 5.0, 20.0, 20.0, 400.0)

    def test_horizontal_line_has_zero_area(self):
        bounds = calculate_bounds(_elem("line", x1="0", y1="5", x2="200", y2="5"))
        assert bounds.area == 0.0

    @pytest.mark.parametrize("tag", ["path", "polygon"])
    def test_placeholder_for_unmeasured_shapes(self, tag):
        bounds = calculate_bounds(_elem(tag, d="M0 0 L1 1", points="0,0 1,1"))
        assert bounds == Bounds(0.0, 0.0, 100.0, 100.0, 10000.0)

    def test_missing_numbers_default_to_zero(self):
        bounds = calculate_bounds(_elem("circle"))
        assert bounds == Bounds(0.0, 0.0, 0.0, 0.0, 0.0)

    def test_non_namespaced_element(self):
        bounds = calculate_bounds(ET.Element("rect", {"width": "2", "height": "3"}))
        assert bounds.area == 6.0
