"""Attribute rewriting for classified elements."""

import logging
from dataclasses import dataclass, field
from xml.etree import ElementTree as ET

from .classifier import ClassificationResult
from .config import AdapterConfig
from .utils import parse_number

logger = logging.getLogger(__name__)

AREA_ID_PREFIX = "area-"


@dataclass
class TransformStats:
    """Counters of attribute writes made by the transform."""

    ids_assigned: int = 0
    strokes_adjusted: int = 0
    fills_cleared: int = 0
    pointer_events_added: int = 0


@dataclass
class TransformResult:
    """Result of transforming a document."""

    svg: ET.Element
    colorable_count: int = 0
    decorative_count: int = 0
    stats: TransformStats = field(default_factory=TransformStats)


def format_stroke_width(value: float) -> str:
    """Format a stroke width without a trailing '.0' (2.0 -> '2')."""
    return f"{value:g}"


def transform_colorable_area(
    element: ET.Element,
    index: int,
    stats: TransformStats,
    config: AdapterConfig | None = None,
) -> None:
    """Rewrite a colorable element so it can be painted.

    Assigns id "area-<index>" (replacing any existing id), clears a set fill,
    raises the stroke width to the configured floor and drops pointer-events.

    Args:
        element: Element to rewrite in place.
        index: 1-based position among colorable elements.
        stats: Counters to update.
        config: Thresholds (defaults when None).
    """
    if config is None:
        config = AdapterConfig()

    element.set("id", f"{AREA_ID_PREFIX}{index}")
    stats.ids_assigned += 1

    fill = element.get("fill")
    if fill is not None and fill != "none":
        element.set("fill", "none")
        stats.fills_cleared += 1

    stroke_width = element.get("stroke-width")
    if stroke_width is None or parse_number(stroke_width) < config.min_stroke_width:
        element.set("stroke-width", format_stroke_width(config.min_stroke_width))
        stats.strokes_adjusted += 1

    # Areas must stay clickable
    if "pointer-events" in element.attrib:
        del element.attrib["pointer-events"]


def transform_decorative_element(element: ET.Element, stats: TransformStats) -> None:
    """Make a decorative element inert to clicks.

    The write and the counter increment happen on every call, including
    repeated calls on the same element.

    Args:
        element: Element to rewrite in place.
        stats: Counters to update.
    """
    element.set("pointer-events", "none")
    stats.pointer_events_added += 1


def transform_svg_tree(
    root: ET.Element,
    classification: ClassificationResult,
    config: AdapterConfig | None = None,
) -> TransformResult:
    """Apply the colorable/decorative rewrites to a document in place.

    Colorable elements are numbered in classification order, which is
    document order.

    Args:
        root: Root SVG element (modified in place).
        classification: Classifier output for the elements under root.
        config: Thresholds (defaults when None).

    Returns:
        TransformResult with counts and accumulated stats.
    """
    stats = TransformStats()

    for index, info in enumerate(classification.colorable, start=1):
        transform_colorable_area(info.element, index, stats, config)

    for info in classification.decorative:
        transform_decorative_element(info.element, stats)

    logger.info(
        "Transformed %d colorable and %d decorative elements "
        "(ids=%d, strokes=%d, fills=%d, pointer-events=%d)",
        len(classification.colorable),
        len(classification.decorative),
        stats.ids_assigned,
        stats.strokes_adjusted,
        stats.fills_cleared,
        stats.pointer_events_added,
    )

    return TransformResult(
        svg=root,
        colorable_count=len(classification.colorable),
        decorative_count=len(classification.decorative),
        stats=stats,
    )
