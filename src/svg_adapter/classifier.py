"""Colorable/decorative classification of graphic elements."""

from dataclasses import dataclass, field
from typing import Literal

from .config import AdapterConfig
from .parser import ElementInfo
from .utils import is_decorative_color

Classification = Literal["colorable", "decorative"]


@dataclass
class ClassificationResult:
    """Partition of the parsed elements. Both lists keep document order."""

    colorable: list[ElementInfo] = field(default_factory=list)
    decorative: list[ElementInfo] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Total number of classified elements."""
        return len(self.colorable) + len(self.decorative)


def classify_element(
    info: ElementInfo, config: AdapterConfig | None = None
) -> Classification:
    """Classify a single element. The first matching rule wins.

    Rules, in order:
        1. fill="none" with a stroke: an outline to paint -> colorable
        2. area below config.min_area: a dot or accent -> decorative
        3. fill is a decorative color -> decorative
        4. filled and stroked: pre-rendered artwork -> decorative
        5. anything else -> colorable

    Args:
        info: Element to classify.
        config: Thresholds (defaults when None).

    Returns:
        "colorable" or "decorative".
    """
    if config is None:
        config = AdapterConfig()

    fill = info.fill
    stroke = info.stroke

    if fill == "none" and stroke:
        return "colorable"

    if info.bounds.area < config.min_area:
        return "decorative"

    if is_decorative_color(fill, config.decorative_colors):
        return "decorative"

    if fill and fill != "none" and stroke:
        return "decorative"

    return "colorable"


def classify(
    elements: list[ElementInfo], config: AdapterConfig | None = None
) -> ClassificationResult:
    """Classify elements as colorable or decorative.

    Args:
        elements: Elements in document order.
        config: Thresholds (defaults when None).

    Returns:
        ClassificationResult containing every element exactly once.
    """
    result = ClassificationResult()
    for info in elements:
        if classify_element(info, config) == "colorable":
            result.colorable.append(info)
        else:
            result.decorative.append(info)
    return result


def _format_element_line(index: int, info: ElementInfo) -> list[str]:
    bounds = info.bounds
    fill = f'fill="{info.fill}"' if info.fill else "no fill"
    stroke = f'stroke="{info.stroke}"' if info.stroke else "no stroke"
    return [
        f"  {index}. <{info.tag_name}> - "
        f"{bounds.width:.1f}x{bounds.height:.1f}px ({bounds.area:.1f}px^2)",
        f"     {fill}, {stroke}",
    ]


def format_classification_report(result: ClassificationResult) -> str:
    """Format a classification result for manual review.

    Args:
        result: Classification result.

    Returns:
        Formatted text.
    """
    lines: list[str] = []
    lines.append("=" * 60)
    lines.append("CLASSIFICATION")
    lines.append("=" * 60)

    lines.append(f"Colorable areas ({len(result.colorable)}):")
    for i, info in enumerate(result.colorable, start=1):
        lines.extend(_format_element_line(i, info))
    lines.append("")

    lines.append(f"Decorative elements ({len(result.decorative)}):")
    for i, info in enumerate(result.decorative, start=1):
        lines.extend(_format_element_line(i, info))

    return "\n".join(lines)
