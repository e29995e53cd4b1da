"""Command-line interface for md2bidi.

Usage::

    md2bidi message.md                    # writes message.html
    md2bidi message.md -o out.html        # explicit output path
    md2bidi message.md --style isolate    # use the isolate wrapper preset
    md2bidi message.md --fragment         # write only the container element
    md2bidi --list-styles                 # list available presets
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from md2bidi import __version__
from md2bidi.converter import Converter
from md2bidi.style_manager import StyleManager


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2bidi",
        description="Render Markdown chat messages to HTML with explicit bidi direction markers.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the Markdown file to render.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output HTML file path. Defaults to <input>.html.",
    )
    parser.add_argument(
        "-s", "--style",
        default="inline-block",
        choices=StyleManager.PRESETS,
        help="Wrapper preset (default: %(default)s).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--allow-raw-html",
        action="store_true",
        help="Pass raw HTML in the message through instead of escaping it.",
    )
    parser.add_argument(
        "--hard-wrap",
        action="store_true",
        help="Render single newlines in the message as line breaks.",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Write only the direction-tagged container, not a full document.",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="List available wrapper presets and exit.",
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

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.list_styles:
        print("Available wrapper presets:")
        for preset in StyleManager.PRESETS:
            print(f"  - {StyleManager(preset).describe()}")
        return 0

    if not args.input:
        parser.error("the following argument is required: input")

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.with_suffix(".html")

    if args.verbose:
        print(f"Input:  {input_path}")
        print(f"Output: {output_path}")
        print(f"Style:  {args.style}")

    try:
        converter = Converter(
            style_preset=args.style,
            allow_raw_html=args.allow_raw_html,
            hard_wrap=args.hard_wrap,
        )
        result = converter.convert_file(
            input_path,
            output_path,
            encoding=args.encoding,
            fragment=args.fragment,
        )
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Direction: {result.direction.value}")
        print(f"Done. {output_path.stat().st_size} bytes written.")
    else:
        print(f"Rendered: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
