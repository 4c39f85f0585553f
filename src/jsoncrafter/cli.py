"""Command-line interface for jsoncrafter.

Usage::

    jsoncrafter input.md                     # writes input.json
    jsoncrafter input.md -o output.json      # explicit output path
    jsoncrafter input.md --style vivid       # use vivid preset
    jsoncrafter input.md -o - --indent 2     # pretty JSON on stdout
    jsoncrafter --list-styles                # list available presets
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from jsoncrafter import __version__
from jsoncrafter.converter import Converter
from jsoncrafter.style_manager import StyleManager


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsoncrafter",
        description="Convert Markdown files to chat component JSON.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the Markdown file to convert.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output JSON file path, or '-' for stdout. Defaults to <input>.json.",
    )
    parser.add_argument(
        "-s", "--style",
        default="default",
        choices=StyleManager.PRESETS,
        help="Style preset (default: %(default)s).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print JSON with this indent (default: compact).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the unstyled text instead of JSON.",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="List available style presets and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_styles:
        print("Available style presets:")
        for preset in StyleManager.PRESETS:
            print(f"  - {preset}")
        return 0

    if not args.input:
        parser.error("the following argument is required: input")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        converter = Converter(style_preset=args.style, indent=args.indent)
        if args.plain:
            md_text = input_path.read_text(encoding=args.encoding)
            print(converter.convert_plain(md_text))
            return 0
        if args.output == "-":
            md_text = input_path.read_text(encoding=args.encoding)
            print(converter.convert_text(md_text))
            return 0

        # Determine output path
        if args.output:
            output_path = Path(args.output)
        else:
            output_path = input_path.with_suffix(".json")

        if args.verbose:
            print(f"Input:  {input_path}")
            print(f"Output: {output_path}")
            print(f"Style:  {args.style}")

        converter.convert_file(input_path, output_path, encoding=args.encoding)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Done. {output_path.stat().st_size} bytes written.")
    else:
        print(f"Converted: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
