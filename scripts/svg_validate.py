#!/usr/bin/env python3
"""Validate adapted SVG files (area ids, decorative pointer-events)."""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_adapter.config import AdapterConfig, parse_config_file
from svg_adapter.errors import AdapterError
from svg_adapter.generator import build_svg_document, write_svg_text
from svg_adapter.parser import parse_svg
from svg_adapter.validator import (
    ValidationResult,
    fix_duplicate_ids,
    validate_svg_file,
)


def find_svg_files(paths: list[Path]) -> list[Path]:
    """Expand directories into the SVG files they contain (recursively).

    Args:
        paths: Files and directories.

    Returns:
        Sorted list of SVG file paths.
    """
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.rglob("*.svg")))
        else:
            files.append(path)
    return files


def fix_file(svg_file: Path, config: AdapterConfig) -> list[str]:
    """Rename duplicate decorative ids in a file and rewrite it.

    Returns:
        Descriptions of the changes made.
    """
    document = parse_svg(svg_file)
    fix_result = fix_duplicate_ids(document.element, config)
    if fix_result.fixed:
        write_svg_text(build_svg_document(document.element), svg_file)
    return fix_result.changes


def format_file_result(svg_file: Path, result: ValidationResult) -> str:
    """Format the validation result of one file."""
    lines: list[str] = []
    status = "VALID" if result.valid else "INVALID"
    lines.append(f"[{status}] {svg_file}")
    lines.append(
        f"  Colorable areas: {len(result.colorable_areas)}, "
        f"Decorative elements: {len(result.decorative_elements)}"
    )
    for error in result.errors:
        lines.append(f"  [ERROR] {error}")
    for warning in result.warnings:
        lines.append(f"  [WARNING] {warning}")
    for suggestion in result.suggestions:
        lines.append(f"  - {suggestion}")
    return "\n".join(lines)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: All files valid
        - 2: Config file error
        - 3: At least one file invalid
    """
    parser = argparse.ArgumentParser(
        description="Validate adapted SVG files."
    )
    parser.add_argument(
        "paths", type=Path, nargs="+", help="SVG files or directories to validate"
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Rename duplicate ids on decorative elements and rewrite the files",
    )
    parser.add_argument(
        "--config", "-c", type=Path, help="Path to YAML adapter config file"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    config = AdapterConfig()
    if args.config is not None:
        try:
            config = parse_config_file(args.config)
        except Exception as e:
            print(f"Error: Failed to parse config file: {e}", file=sys.stderr)
            return 2

    svg_files = find_svg_files(args.paths)
    if not svg_files:
        print("No SVG files found.", file=sys.stderr)
        return 0

    results: dict[str, dict] = {}
    invalid_count = 0
    warning_count = 0

    for svg_file in svg_files:
        if args.fix:
            try:
                for change in fix_file(svg_file, config):
                    print(f"{svg_file}: {change}")
            except AdapterError as e:
                print(f"Error: Failed to fix {svg_file}: {e}", file=sys.stderr)

        result = validate_svg_file(svg_file, config)
        results[str(svg_file)] = result.to_dict()

        if not result.valid:
            invalid_count += 1
        if result.warnings:
            warning_count += 1

        if not args.json:
            print(format_file_result(svg_file, result))

    if args.json:
        print(json.dumps(results, indent=2))
    else:
        print("")
        print("=" * 60)
        print("SUMMARY")
        print("=" * 60)
        print(f"Files checked: {len(svg_files)}")
        print(f"Valid: {len(svg_files) - invalid_count}")
        print(f"Invalid: {invalid_count}")
        print(f"With warnings: {warning_count}")

    return 3 if invalid_count else 0


if __name__ == "__main__":
    sys.exit(main())
