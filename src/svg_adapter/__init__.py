"""SVG Adapter - Convert SVG artwork into colorable coloring-book SVGs."""

__version__ = "0.1.0"

from .errors import (
    AdapterError,
    ParseError,
    GenerationError,
)
from .config import (
    AdapterConfig,
    parse_config_file,
)
from .parser import (
    ElementInfo,
    SVGDocument,
    parse_svg,
    parse_svg_text,
)
from .classifier import (
    ClassificationResult,
    classify,
    classify_element,
    format_classification_report,
)
from .transform import (
    TransformResult,
    TransformStats,
    transform_svg_tree,
)
from .generator import (
    GenerationResult,
    GenerationStats,
    generate,
)
from .validator import (
    ValidationResult,
    fix_duplicate_ids,
    validate_svg_file,
    validate_svg_tree,
)
from .adapter import (
    AdaptationResult,
    adapt_svg,
    default_output_path,
    format_adaptation_report,
)

__all__ = [
    # Errors
    "AdapterError",
    "ParseError",
    "GenerationError",
    # Config
    "AdapterConfig",
    "parse_config_file",
    # Parse
    "ElementInfo",
    "SVGDocument",
    "parse_svg",
    "parse_svg_text",
    # Classify
    "ClassificationResult",
    "classify",
    "classify_element",
    "format_classification_report",
    # Transform
    "TransformResult",
    "TransformStats",
    "transform_svg_tree",
    # Generate
    "GenerationResult",
    "GenerationStats",
    "generate",
    # Validate
    "ValidationResult",
    "fix_duplicate_ids",
    "validate_svg_file",
    "validate_svg_tree",
    # Adapt (full pipeline)
    "AdaptationResult",
    "adapt_svg",
    "default_output_path",
    "format_adaptation_report",
]
