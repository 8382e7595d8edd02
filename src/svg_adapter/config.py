"""Adapter configuration and YAML config file loading."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .utils import DEFAULT_DECORATIVE_COLORS


@dataclass
class AdapterConfig:
    """Thresholds shared by the classifier, transform engine and validator.

    Attributes:
        min_area: Shapes smaller than this (px^2) are decorative accents.
        decorative_colors: Fill values marking pre-rendered artwork.
        min_stroke_width: Stroke width floor for colorable areas.
    """

    min_area: float = 100.0
    decorative_colors: list[str] = field(
        default_factory=lambda: list(DEFAULT_DECORATIVE_COLORS)
    )
    min_stroke_width: float = 2.0


def parse_config_data(data: dict) -> AdapterConfig:
    """Build an AdapterConfig from a parsed YAML mapping.

    Keys that are not present keep their defaults.

    Args:
        data: Configuration dictionary.

    Returns:
        Parsed AdapterConfig.

    Raises:
        ValueError: If a value has the wrong type or range.
    """
    config = AdapterConfig()

    if "min_area" in data:
        try:
            config.min_area = float(data["min_area"])
        except (TypeError, ValueError):
            raise ValueError(
                f"min_area must be a number, got {data['min_area']!r}"
            ) from None
        if config.min_area < 0:
            raise ValueError(f"min_area must be >= 0, got {config.min_area}")

    if "min_stroke_width" in data:
        try:
            config.min_stroke_width = float(data["min_stroke_width"])
        except (TypeError, ValueError):
            raise ValueError(
                f"min_stroke_width must be a number, got {data['min_stroke_width']!r}"
            ) from None
        if config.min_stroke_width <= 0:
            raise ValueError(
                f"min_stroke_width must be > 0, got {config.min_stroke_width}"
            )

    if "decorative_colors" in data:
        colors = data["decorative_colors"]
        if not isinstance(colors, list):
            raise ValueError("decorative_colors must be a list of color strings")
        config.decorative_colors = [str(color) for color in colors]

    return config


def parse_config_file(config_path: Path) -> AdapterConfig:
    """Parse a YAML adapter configuration file.

    Example file:

        min_area: 150
        min_stroke_width: 2.5
        decorative_colors: ["#000000", "black", "#333333"]

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed AdapterConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the config format is invalid.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return AdapterConfig()

    if not isinstance(data, dict):
        raise ValueError("Config file must be a YAML dictionary")

    return parse_config_data(data)
