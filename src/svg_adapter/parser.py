"""SVG parsing and graphic element extraction."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from xml.etree import ElementTree as ET

from .errors import ParseError
from .geometry import Bounds, calculate_bounds
from .utils import get_local_name, is_shape_element, register_namespaces

logger = logging.getLogger(__name__)


@dataclass
class ElementInfo:
    """A graphic element found in the document.

    Attribute accessors read the live element, so changes written through
    ``element`` are visible here.
    """

    element: ET.Element
    tag_name: str
    bounds: Bounds

    @property
    def id(self) -> str | None:
        return self.element.get("id")

    @property
    def fill(self) -> str | None:
        return self.element.get("fill")

    @property
    def stroke(self) -> str | None:
        return self.element.get("stroke")

    @property
    def stroke_width(self) -> str | None:
        return self.element.get("stroke-width")

    @property
    def pointer_events(self) -> str | None:
        return self.element.get("pointer-events")


@dataclass
class SVGDocument:
    """Parsed SVG document."""

    element: ET.Element
    elements: list[ElementInfo] = field(default_factory=list)
    document: ET.ElementTree | None = None


def extract_elements(root: ET.Element) -> list[ElementInfo]:
    """Extract all shape elements in document order, including nested ones.

    Args:
        root: Root SVG element.

    Returns:
        ElementInfo for every path, rect, circle, ellipse, polygon and line.
    """
    elements: list[ElementInfo] = []
    for elem in root.iter():
        if elem is root or not is_shape_element(elem):
            continue
        elements.append(
            ElementInfo(
                element=elem,
                tag_name=get_local_name(elem.tag).lower(),
                bounds=calculate_bounds(elem),
            )
        )
    return elements


def parse_svg_text(text: str, source: str = "<string>") -> SVGDocument:
    """Parse SVG markup and extract its graphic elements.

    Args:
        text: SVG document text.
        source: Name used in error messages.

    Returns:
        Parsed SVGDocument.

    Raises:
        ParseError: If the text is empty, malformed or not an SVG document.
    """
    if not text or not text.strip():
        raise ParseError(f"empty SVG file: {source}")

    register_namespaces()
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseError(f"malformed XML: {e}", e) from e

    root_name = get_local_name(root.tag)
    if root_name.lower() != "svg":
        raise ParseError(f"not SVG: {root_name}")

    elements = extract_elements(root)
    logger.debug("Extracted %d graphic elements from %s", len(elements), source)

    return SVGDocument(element=root, elements=elements, document=ET.ElementTree(root))


def read_svg_text(file_path: Path) -> str:
    """Read an SVG file as UTF-8 text.

    Raises:
        ParseError: If the file cannot be read.
    """
    try:
        return Path(file_path).read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise ParseError(f"file not found: {file_path}", e) from e
    except PermissionError as e:
        raise ParseError(f"permission denied: {file_path}", e) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"cannot decode as UTF-8: {file_path}", e) from e
    except OSError as e:
        raise ParseError(f"cannot read SVG file: {file_path}: {e}", e) from e


def parse_svg(file_path: Path) -> SVGDocument:
    """Parse an SVG file and extract its graphic elements.

    Args:
        file_path: Path to the SVG file.

    Returns:
        Parsed SVGDocument.

    Raises:
        ParseError: If the file cannot be read, is empty, is not valid XML
            or has no svg root element.
    """
    text = read_svg_text(file_path)
    return parse_svg_text(text, source=str(file_path))
