"""Tests for svg_adapter.classifier module."""

import pytest
from pathlib import Path
from xml.etree import ElementTree as ET

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_adapter.config import AdapterConfig
from svg_adapter.geometry import Bounds
from svg_adapter.parser import ElementInfo, parse_svg_text
from svg_adapter.classifier import (
    ClassificationResult,
    classify,
    classify_element,
    format_classification_report,
)


def make_info(area: float = 10000.0, tag: str = "rect", **attrs: str) -> ElementInfo:
    """Create an ElementInfo with the given area and attributes.

    Attribute names use underscores for hyphens (stroke_width -> stroke-width).
    """
    element = ET.Element(tag, {k.replace("_", "-"): v for k, v in attrs.items()})
    return ElementInfo(element=element, tag_name=tag, bounds=Bounds(0, 0, 0, 0, area))


class TestClassifyElement:
    """Tests for classify_element rule order."""

    def test_outline_is_colorable(self):
        assert classify_element(make_info(fill="none", stroke="black")) == "colorable"

    def test_outline_wins_over_small_area(self):
        info = make_info(area=1.0, fill="none", stroke="#000")
        assert classify_element(info) == "colorable"

    def test_small_area_is_decorative(self):
        assert classify_element(make_info(area=99.9)) == "decorative"

    def test_area_threshold_is_exclusive(self):
        assert classify_element(make_info(area=100.0)) == "colorable"

    def test_small_black_circle_is_decorative(self):
        document = parse_svg_text('<svg><circle r="1" fill="black"/></svg>')
        assert classify_element(document.elements[0]) == "decorative"

    @pytest.mark.parametrize(
        "fill",
        ["#000000", "#222221", "#B5B5B5", "#FFFFFF", "black", "white", "gray", "grey"],
    )
    def test_decorative_colors(self, fill):
        assert classify_element(make_info(fill=fill)) == "decorative"

    @pytest.mark.parametrize("fill", ["#ffffff", "#b5b5b5", "BLACK", "Gray"])
    def test_decorative_colors_case_insensitive(self, fill):
        assert classify_element(make_info(fill=fill)) == "decorative"

    def test_filled_and_stroked_is_decorative(self):
        info = make_info(fill="#FF0000", stroke="black")
        assert classify_element(info) == "decorative"

    def test_filled_without_stroke_is_colorable(self):
        assert classify_element(make_info(fill="#FF0000")) == "colorable"

    def test_stroke_without_fill_is_colorable(self):
        assert classify_element(make_info(stroke="black")) == "colorable"

    def test_no_attributes_is_colorable(self):
        assert classify_element(make_info()) == "colorable"

    def test_fill_none_without_stroke_is_colorable(self):
        assert classify_element(make_info(fill="none")) == "colorable"

    def test_empty_stroke_is_not_an_outline(self):
        info = make_info(area=10.0, fill="none", stroke="")
        assert classify_element(info) == "decorative"

    def test_id_is_ignored(self):
        info = make_info(id="area-3", fill="#FF0000", stroke="black")
        assert classify_element(info) == "decorative"

    def test_placeholder_path_is_not_small(self):
        document = parse_svg_text('<svg><path d="M0 0 L1 1" fill="#FFAA00"/></svg>')
        assert classify_element(document.elements[0]) == "colorable"

    def test_custom_min_area(self):
        config = AdapterConfig(min_area=500.0)
        assert classify_element(make_info(area=400.0), config) == "decorative"
        assert classify_element(make_info(area=400.0)) == "colorable"

    def test_custom_decorative_colors(self):
        config = AdapterConfig(decorative_colors=["#123456"])
        assert classify_element(make_info(fill="#123456"), config) == "decorative"
        assert classify_element(make_info(fill="black"), config) == "colorable"


class TestClassify:
    """Tests for classify function."""

    def test_partition_is_total_and_disjoint(self):
        elements = [
            make_info(fill="none", stroke="black"),
            make_info(area=5.0),
            make_info(fill="black"),
            make_info(fill="red", stroke="black"),
            make_info(fill="red"),
        ]
        result = classify(elements)
        assert result.total == len(elements)

        colorable_ids = {id(info) for info in result.colorable}
        decorative_ids = {id(info) for info in result.decorative}
        assert colorable_ids.isdisjoint(decorative_ids)
        assert colorable_ids | decorative_ids == {id(info) for info in elements}

    def test_lists_keep_document_order(self):
        elements = [
            make_info(fill="red", id="a"),
            make_info(fill="black", id="b"),
            make_info(fill="none", stroke="black", id="c"),
            make_info(area=1.0, id="d"),
        ]
        result = classify(elements)
        assert [info.id for info in result.colorable] == ["a", "c"]
        assert [info.id for info in result.decorative] == ["b", "d"]

    def test_empty_input(self):
        result = classify([])
        assert result.colorable == []
        assert result.decorative == []
        assert result.total == 0

    def test_deterministic(self):
        elements = [make_info(fill="red"), make_info(fill="white")]
        first = classify(elements)
        second = classify(elements)
        assert first.colorable == second.colorable
        assert first.decorative == second.decorative


class TestFormatClassificationReport:
    """Tests for format_classification_report function."""

    def test_report_lists_both_groups(self):
        document = parse_svg_text(
            '<svg><rect width="10" height="20" fill="none" stroke="black"/>'
            '<circle r="1" fill="black"/></svg>'
        )
        report = format_classification_report(classify(document.elements))
        assert "Colorable areas (1):" in report
        assert "Decorative elements (1):" in report
        assert "<rect> - 10.0x20.0px (200.0px^2)" in report
        assert 'fill="none", stroke="black"' in report
        assert 'fill="black", no stroke' in report

    def test_empty_report(self):
        report = format_classification_report(ClassificationResult())
        assert "Colorable areas (0):" in report
        assert "Decorative elements (0):" in report
