"""Serialization and writing of adapted SVG documents."""

import logging
import os
import re
import shutil
from dataclasses import asdict, dataclass, field
from pathlib import Path
from xml.etree import ElementTree as ET

from .errors import GenerationError
from .transform import TransformResult
from .utils import SVG_NS, register_namespaces

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
SVG_XMLNS = f'xmlns="{SVG_NS}"'
TEMP_SUFFIX = ".tmp"

_INTER_TAG_WHITESPACE = re.compile(r">\s+<")
_ROOT_START_TAG = re.compile(r"<svg(?=[\s/>])")
_TAG = re.compile(r"<(/?)[^>]*?(/?)>")
_TEXT_BLOCK = re.compile(r"<text\b[^>]*?(?:/>|>.*?</text>)", re.DOTALL)
_HELD_TEXT_BLOCK = re.compile(r"<\x00(\d+)/>")


@dataclass
class GenerationStats:
    """Transform statistics reported with the generated file."""

    colorable_areas: int = 0
    decorative_elements: int = 0
    ids_assigned: int = 0
    strokes_adjusted: int = 0
    fills_cleared: int = 0
    pointer_events_added: int = 0

    @classmethod
    def from_transform_result(
        cls, transform_result: TransformResult | None
    ) -> "GenerationStats":
        """Copy the counters of a transform result."""
        if transform_result is None:
            return cls()
        stats = transform_result.stats
        return cls(
            colorable_areas=transform_result.colorable_count,
            decorative_elements=transform_result.decorative_count,
            ids_assigned=stats.ids_assigned,
            strokes_adjusted=stats.strokes_adjusted,
            fills_cleared=stats.fills_cleared,
            pointer_events_added=stats.pointer_events_added,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class GenerationResult:
    """Result of writing an adapted SVG."""

    success: bool
    output_path: Path
    stats: GenerationStats = field(default_factory=GenerationStats)


def serialize_svg(svg: ET.Element) -> str:
    """Serialize an SVG element to XML text.

    The SVG namespace declaration is added to the root tag when the
    serializer did not write one (documents parsed without a namespace).

    Args:
        svg: Root SVG element.

    Returns:
        XML text without declaration.
    """
    register_namespaces()
    text = ET.tostring(svg, encoding="unicode")
    # Attribute values are escaped, so the first '>' ends the root start tag
    root_tag = text[: text.find(">") + 1]
    if SVG_XMLNS not in root_tag:
        text = _ROOT_START_TAG.sub(f"<svg {SVG_XMLNS}", text, count=1)
    return text


def _split_tags(xml: str) -> list[str]:
    """Split XML at tag boundaries ('><'), keeping the brackets."""
    parts = xml.split("><")
    lines: list[str] = []
    last = len(parts) - 1
    for i, part in enumerate(parts):
        if i > 0:
            part = "<" + part
        if i < last:
            part = part + ">"
        lines.append(part)
    return lines


def _count_tags(line: str) -> tuple[int, int]:
    """Count the opening and closing tags on a line."""
    opens = closes = 0
    for match in _TAG.finditer(line):
        if match.group(0)[1] in "?!":
            continue
        if match.group(1):
            closes += 1
        elif not match.group(2):
            opens += 1
    return opens, closes


def format_xml(xml: str, indent: str = "  ") -> str:
    """Format XML with one tag per line and nested indentation.

    Lines are only broken between adjacent tags, so text and attribute
    content are never split. <text> elements are written exactly as
    serialized, since whitespace between their tspans is rendered.

    Args:
        xml: XML text.
        indent: Indentation unit per nesting level.

    Returns:
        Formatted XML text.
    """
    text_blocks: list[str] = []

    def hold_text_block(match: re.Match) -> str:
        text_blocks.append(match.group(0))
        return f"<\x00{len(text_blocks) - 1}/>"

    held = _TEXT_BLOCK.sub(hold_text_block, xml.strip())
    collapsed = _INTER_TAG_WHITESPACE.sub("><", held)

    level = 0
    formatted: list[str] = []
    for line in _split_tags(collapsed):
        line = line.strip()
        if not line:
            continue

        opens, closes = _count_tags(line)
        if line.startswith("</"):
            level = max(0, level - 1)
            closes -= 1

        formatted.append(indent * level + line)

        # Tags still open at the end of the line nest the following lines
        level = max(0, level + opens - closes)

    result = "\n".join(formatted)
    if text_blocks:
        result = _HELD_TEXT_BLOCK.sub(lambda m: text_blocks[int(m.group(1))], result)
    return result


def build_svg_document(svg: ET.Element) -> str:
    """Serialize and format a complete SVG document with XML declaration."""
    text = serialize_svg(svg)
    if not text.lstrip().startswith("<?xml"):
        text = XML_DECLARATION + "\n" + text
    return format_xml(text)


def _remove_temporary_file(temp_path: Path) -> None:
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove temporary file %s: %s", temp_path, e)


def write_svg_text(text: str, output_path: Path) -> None:
    """Write SVG text to a file.

    The text goes to a temporary file beside the output, which then
    replaces the output. An existing output is untouched if writing fails.

    Raises:
        GenerationError: If the directory is missing or the file cannot be
            written. The temporary file is removed first.
    """
    output_path = Path(output_path)
    parent = output_path.parent
    if not parent.is_dir():
        raise GenerationError(f"output directory not found: {parent}")

    temp_path = output_path.with_name(f".{output_path.name}{TEMP_SUFFIX}")
    try:
        temp_path.write_text(text, encoding="utf-8")
        if output_path.is_file():
            shutil.copymode(output_path, temp_path)
        os.replace(temp_path, output_path)
    except FileNotFoundError as e:
        _remove_temporary_file(temp_path)
        raise GenerationError(f"output directory not found: {parent}", e) from e
    except PermissionError as e:
        _remove_temporary_file(temp_path)
        raise GenerationError(f"permission denied: {output_path}", e) from e
    except OSError as e:
        _remove_temporary_file(temp_path)
        raise GenerationError(f"cannot write SVG file: {output_path}: {e}", e) from e


def generate(
    svg: ET.Element,
    output_path: Path,
    transform_result: TransformResult | None = None,
) -> GenerationResult:
    """Serialize an adapted SVG and write it to disk.

    Args:
        svg: Root SVG element.
        output_path: Destination file.
        transform_result: Transform result whose counters are reported.

    Returns:
        GenerationResult with the transform counters.

    Raises:
        GenerationError: If the file cannot be written.
    """
    output_path = Path(output_path)
    text = build_svg_document(svg)
    write_svg_text(text, output_path)
    logger.info("Wrote adapted SVG to %s", output_path)

    return GenerationResult(
        success=True,
        output_path=output_path,
        stats=GenerationStats.from_transform_result(transform_result),
    )
