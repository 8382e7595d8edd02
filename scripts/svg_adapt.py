#!/usr/bin/env python3
"""Adapt an SVG drawing to the coloring format (area ids, inert decoration)."""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_adapter.adapter import adapt_svg, default_output_path, format_adaptation_report
from svg_adapter.classifier import classify, format_classification_report
from svg_adapter.config import AdapterConfig, parse_config_file
from svg_adapter.errors import AdapterError
from svg_adapter.parser import parse_svg


def print_error_hint(error: AdapterError) -> None:
    """Print a remediation hint for a pipeline error."""
    message = str(error)
    if "not found" in message:
        hint = "Check that the path is correct and the file exists."
    elif "malformed XML" in message or "not SVG" in message:
        hint = "The file does not look like valid SVG. Check the XML syntax."
    elif "permission denied" in message:
        hint = "Check read/write permissions of the file."
    else:
        return
    print(f"Hint: {hint}", file=sys.stderr)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O, parse or write error
        - 2: Config file error
        - 3: Validation reported errors (output is still written)
    """
    parser = argparse.ArgumentParser(
        description="Adapt an SVG drawing to the coloring format.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Adapt to drawing-adapted.svg next to the input
  %(prog)s drawing.svg

  # Explicit output and validation
  %(prog)s drawing.svg adapted.svg --validate

  # Show how each element was classified
  %(prog)s drawing.svg --report
""",
    )
    parser.add_argument("svg_file", type=Path, help="Path to SVG file to adapt")
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        help="Output SVG file (default: <input>-adapted.svg)",
    )
    parser.add_argument(
        "--validate", action="store_true", help="Validate the adapted SVG"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Manual review mode (not supported, classification stays automatic)",
    )
    parser.add_argument(
        "--config", "-c", type=Path, help="Path to YAML adapter config file"
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print the classification of every element",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # Parse config file
    config = AdapterConfig()
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 2
        try:
            config = parse_config_file(args.config)
        except Exception as e:
            print(f"Error: Failed to parse config file: {e}", file=sys.stderr)
            return 2

    output_path = args.output or default_output_path(args.svg_file)

    try:
        if args.report:
            document = parse_svg(args.svg_file)
            print(format_classification_report(classify(document.elements, config)))
            print()

        result = adapt_svg(
            args.svg_file,
            output_path,
            validate=args.validate,
            interactive=args.interactive,
            config=config,
        )
    except AdapterError as e:
        print(f"Error: {e}", file=sys.stderr)
        print_error_hint(e)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_adaptation_report(result))

    if result.validation is not None and not result.validation.valid:
        return 3

    return 0


if __name__ == "__main__":
    sys.exit(main())
