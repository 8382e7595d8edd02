"""SVG adaptation pipeline.

This module runs the complete adaptation of an SVG file:
- parse: Read the file and extract graphic elements
- classify: Split elements into colorable areas and decoration
- transform: Assign area ids and normalize fill/stroke/pointer-events
- validate: Optionally audit the transformed document
- generate: Serialize and write the adapted file

The pipeline processes in order: parse -> classify -> transform -> validate -> generate
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from .classifier import classify
from .config import AdapterConfig
from .generator import generate
from .parser import parse_svg
from .transform import transform_svg_tree
from .validator import ValidationResult, validate_svg_tree

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "-adapted"


@dataclass
class AdaptationResult:
    """Outcome of adapting one SVG file."""

    success: bool
    output_path: Path
    colorable_count: int = 0
    decorative_count: int = 0
    ids_assigned: int = 0
    validation: ValidationResult | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "output_path": str(self.output_path),
            "colorable_count": self.colorable_count,
            "decorative_count": self.decorative_count,
            "ids_assigned": self.ids_assigned,
            "validation": self.validation.to_dict() if self.validation else None,
        }


def default_output_path(input_path: Path) -> Path:
    """Build the default output path for an input file.

    The suffix "-adapted" is inserted before the extension and the
    directory is kept: "art/dog.svg" -> "art/dog-adapted.svg".
    """
    input_path = Path(input_path)
    return input_path.with_name(f"{input_path.stem}{OUTPUT_SUFFIX}{input_path.suffix}")


def adapt_svg(
    input_path: Path,
    output_path: Path | None = None,
    validate: bool = False,
    interactive: bool = False,
    config: AdapterConfig | None = None,
) -> AdaptationResult:
    """Adapt an SVG file to the coloring format.

    Validation findings never stop generation; they are returned in the
    result. Parse and generation failures propagate.

    Args:
        input_path: SVG file to adapt.
        output_path: Destination (defaults to '<stem>-adapted<ext>' beside
            the input).
        validate: Run the validator on the transformed document.
        interactive: Accepted for compatibility; manual reclassification is
            not supported.
        config: Thresholds (defaults when None).

    Returns:
        AdaptationResult. ``validation`` is None when validate is False.

    Raises:
        ParseError: If the input cannot be read or parsed.
        GenerationError: If the output cannot be written.
    """
    input_path = Path(input_path)
    if output_path is None:
        output_path = default_output_path(input_path)
    if config is None:
        config = AdapterConfig()

    document = parse_svg(input_path)
    logger.info("Parsed %s: %d graphic elements", input_path, len(document.elements))

    classification = classify(document.elements, config)

    if interactive:
        logger.warning(
            "Interactive reclassification is not supported; "
            "using automatic classification"
        )

    transform_result = transform_svg_tree(document.element, classification, config)

    validation = None
    if validate:
        validation = validate_svg_tree(transform_result.svg, config)

    generation = generate(transform_result.svg, output_path, transform_result)

    return AdaptationResult(
        success=generation.success,
        output_path=generation.output_path,
        colorable_count=generation.stats.colorable_areas,
        decorative_count=generation.stats.decorative_elements,
        ids_assigned=generation.stats.ids_assigned,
        validation=validation,
    )


def format_validation_report(validation: ValidationResult) -> str:
    """Format validation findings as text.

    Args:
        validation: Validation result.

    Returns:
        Formatted text.
    """
    lines: list[str] = []
    if validation.valid and not validation.warnings:
        lines.append("Validation passed - SVG ready to use")
        return "\n".join(lines)

    if validation.valid:
        lines.append("Validation passed with warnings:")
    else:
        lines.append("Validation found problems:")

    for error in validation.errors:
        lines.append(f"  [ERROR] {error}")
    for warning in validation.warnings:
        lines.append(f"  [WARNING] {warning}")

    if validation.suggestions:
        lines.append("")
        lines.append("Suggestions:")
        for suggestion in validation.suggestions:
            lines.append(f"  - {suggestion}")

    return "\n".join(lines)


def format_adaptation_report(result: AdaptationResult) -> str:
    """Format an adaptation result as text.

    Args:
        result: Adaptation result.

    Returns:
        Formatted text.
    """
    lines: list[str] = []
    if not result.success:
        lines.append("Adaptation failed")
        return "\n".join(lines)

    lines.append("SVG adapted successfully")
    lines.append("")
    lines.append("Statistics:")
    lines.append(f"  - Colorable areas: {result.colorable_count}")
    lines.append(f"  - Decorative elements: {result.decorative_count}")
    lines.append(f"  - IDs assigned: {result.ids_assigned}")
    lines.append(f"  - Output file: {result.output_path}")

    if result.validation is not None:
        lines.append("")
        lines.append(format_validation_report(result.validation))

    return "\n".join(lines)
