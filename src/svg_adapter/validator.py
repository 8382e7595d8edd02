"""Structural validation of adapted SVG documents."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator
from xml.etree import ElementTree as ET

from .config import AdapterConfig
from .errors import ParseError
from .parser import parse_svg
from .utils import is_area_id, is_decorative_color

logger = logging.getLogger(__name__)

DUPLICATE_ID_ERROR = "duplicate ID: {id}"
MISSING_POINTER_EVENTS_WARNING = "decorative element {id} missing pointer-events=none"
NO_COLORABLE_AREAS_WARNING = "no colorable areas found"


@dataclass
class ValidationResult:
    """Validation findings for a document.

    Findings are data for display; they never raise.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    colorable_areas: list[str] = field(default_factory=list)
    decorative_elements: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """True when no errors were found. Warnings do not invalidate."""
        return len(self.errors) == 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "valid": self.valid,
            "errors": self.errors,
            "warnings": self.warnings,
            "colorable_areas": self.colorable_areas,
            "decorative_elements": self.decorative_elements,
            "suggestions": self.suggestions,
        }


@dataclass
class DuplicateFixResult:
    """Result of renaming duplicate area ids."""

    fixed: bool = False
    changes: list[str] = field(default_factory=list)


def is_decorative_element(
    element: ET.Element, config: AdapterConfig | None = None
) -> bool:
    """Structural decorative check used for auditing.

    An element is decorative if it is inert to clicks or is filled with a
    decorative color. This is deliberately simpler than the classifier.
    """
    if config is None:
        config = AdapterConfig()
    if element.get("pointer-events") == "none":
        return True
    return is_decorative_color(element.get("fill"), config.decorative_colors)


def iter_area_elements(svg: ET.Element) -> Iterator[ET.Element]:
    """Yield elements whose id has the form 'area-<n>', in document order."""
    for elem in svg.iter():
        if is_area_id(elem.get("id")):
            yield elem


def generate_suggestions(result: ValidationResult) -> list[str]:
    """Build remediation hints for the findings in a validation result.

    Args:
        result: Validation result with errors and warnings filled in.

    Returns:
        Suggestions, at least one per problem category found.
    """
    suggestions: list[str] = []

    if result.errors:
        suggestions.append("Fix the errors before using the SVG")
        if any(error.startswith("duplicate ID") for error in result.errors):
            suggestions.append("Fix duplicate IDs with svg_validate.py --fix")

    if not result.colorable_areas:
        suggestions.append("No colorable areas found - check the classification")
        suggestions.append("Outline paintable shapes with fill=\"none\" and a stroke")

    if result.warnings:
        suggestions.append("Review the warnings to ensure quality")
        if any("pointer-events" in warning for warning in result.warnings):
            suggestions.append(
                "Add pointer-events=\"none\" to decorative elements"
            )

    return suggestions


def validate_svg_tree(
    svg: ET.Element, config: AdapterConfig | None = None
) -> ValidationResult:
    """Validate the structure of an adapted SVG.

    Re-derives the facts from the tree instead of trusting transform
    bookkeeping, so it can also audit documents adapted elsewhere.

    Args:
        svg: Root SVG element.
        config: Thresholds (defaults when None).

    Returns:
        ValidationResult with errors, warnings and suggestions.
    """
    if config is None:
        config = AdapterConfig()

    result = ValidationResult()
    seen_ids: set[str] = set()

    for elem in iter_area_elements(svg):
        elem_id = elem.get("id")

        if elem_id in seen_ids:
            result.errors.append(DUPLICATE_ID_ERROR.format(id=elem_id))
        else:
            seen_ids.add(elem_id)

        if is_decorative_element(elem, config):
            result.decorative_elements.append(elem_id)
            if elem.get("pointer-events") != "none":
                result.warnings.append(MISSING_POINTER_EVENTS_WARNING.format(id=elem_id))
        else:
            result.colorable_areas.append(elem_id)

    if not result.colorable_areas:
        result.warnings.append(NO_COLORABLE_AREAS_WARNING)

    if result.errors or result.warnings:
        result.suggestions = generate_suggestions(result)

    logger.debug(
        "Validation: %d errors, %d warnings, %d colorable, %d decorative",
        len(result.errors),
        len(result.warnings),
        len(result.colorable_areas),
        len(result.decorative_elements),
    )
    return result


def validate_svg_file(
    file_path: Path, config: AdapterConfig | None = None
) -> ValidationResult:
    """Validate an SVG file.

    Files that cannot be loaded are reported as invalid instead of raising.

    Args:
        file_path: Path to the SVG file.
        config: Thresholds (defaults when None).

    Returns:
        ValidationResult for the file.
    """
    try:
        document = parse_svg(file_path)
    except ParseError as e:
        result = ValidationResult(errors=[f"failed to load SVG: {e}"])
        result.suggestions = generate_suggestions(result)
        return result
    return validate_svg_tree(document.element, config)


def fix_duplicate_ids(
    svg: ET.Element, config: AdapterConfig | None = None
) -> DuplicateFixResult:
    """Rename repeated area ids on decorative elements.

    When a repeated id is also held by a colorable element, every
    decorative holder is renamed to 'decorative-<n>', wherever it sits in
    the document. When only decorative elements hold it, the first keeps
    it. Repeated ids on colorable elements are left alone and still
    reported by validation.

    Args:
        svg: Root SVG element (modified in place).
        config: Thresholds (defaults when None).

    Returns:
        DuplicateFixResult listing each rename.
    """
    result = DuplicateFixResult()

    holders: dict[str, list[ET.Element]] = {}
    for elem in iter_area_elements(svg):
        holders.setdefault(elem.get("id"), []).append(elem)

    used_ids = {elem.get("id") for elem in svg.iter() if elem.get("id")}
    next_index = 1

    for elem_id, elements in holders.items():
        if len(elements) < 2:
            continue

        decorative = [elem for elem in elements if is_decorative_element(elem, config)]
        if len(decorative) == len(elements):
            decorative = decorative[1:]

        for elem in decorative:
            while f"decorative-{next_index}" in used_ids:
                next_index += 1
            new_id = f"decorative-{next_index}"
            used_ids.add(new_id)
            elem.set("id", new_id)
            result.changes.append(f"Renamed {elem_id} to {new_id}")
            result.fixed = True

    return result
