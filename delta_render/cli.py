"""
Command-line interface for delta_render.

Usage:
    delta-render document.json --format html --output document.html
    delta-render document.json --format markdown
    delta-render document.json --format tree --flat-lists
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from . import __version__
from .api import parse_quill_delta
from .exceptions import DeltaRenderError, RenderingError
from .renderers.html.quill_html_renderer import QuillHtmlRenderer
from .renderers.markdown_renderer import MarkdownRenderer
from .renderers.text_renderer import TextRenderer
from .utils.logger import VALID_LEVELS, configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSING_INPUT = 1
EXIT_INVALID_INPUT = 2

FORMATS = ("html", "markdown", "text", "tree")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="delta-render",
        description="Render a rich-text Delta (JSON) to HTML, Markdown, plain text or a JSON tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  delta-render document.json --format html --output out.html
  delta-render document.json --format markdown
  delta-render document.json --format tree --flat-lists
        """,
    )
    parser.add_argument("input", help="Input Delta JSON file")
    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path (default: standard output)",
    )
    parser.add_argument(
        "--flat-lists",
        action="store_true",
        help="Keep list items flat instead of nesting them by indent (default for html)",
    )
    parser.add_argument(
        "--soft-line-breaks",
        action="store_true",
        help="Turn newlines inside one text insert into line breaks",
    )
    parser.add_argument(
        "--log-level",
        choices=VALID_LEVELS,
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def render(delta: object, output_format: str, flat_lists: bool = False, soft_line_breaks: bool = False) -> str:
    """
    Parse and render a Delta in one of the CLI output formats.

    Args:
        delta: Decoded Delta JSON
        output_format: One of ``html``, ``markdown``, ``text``, ``tree``
        flat_lists: Use flat list grouping (always on for ``html``)
        soft_line_breaks: Enable soft line breaks in the parser

    Returns:
        Rendered document
    """
    if output_format not in FORMATS:
        raise RenderingError("Unsupported output format", details=output_format)

    root = parse_quill_delta(
        delta,
        soft_line_breaks=soft_line_breaks,
        flat_lists=flat_lists or output_format == "html",
    )

    if output_format == "html":
        return QuillHtmlRenderer().render(root)
    if output_format == "markdown":
        return MarkdownRenderer().render(root)
    if output_format == "text":
        return TextRenderer().render(root)
    return json.dumps(root.to_dict(), indent=2, ensure_ascii=False)


def cmd_render(args: argparse.Namespace, console: Console) -> int:
    input_path = Path(args.input)
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        logger.error(f"Input file not found: {input_path}")
        return EXIT_MISSING_INPUT

    try:
        delta = json.loads(input_path.read_text(encoding="utf-8"))
        output = render(delta, args.format, args.flat_lists, args.soft_line_breaks)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {input_path}: {e}")
        logger.error(f"Invalid JSON in {input_path}: {e}")
        return EXIT_INVALID_INPUT
    except DeltaRenderError as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.error(f"Failed to render {input_path}: {e}")
        return EXIT_INVALID_INPUT

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(output, encoding="utf-8")
        console.print(f"Saved: {output_path}")
        logger.info(f"Wrote {len(output)} characters to {output_path}")
    else:
        sys.stdout.write(output)
        if output and not output.endswith("\n"):
            sys.stdout.write("\n")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    console = Console(stderr=True)
    configure_logging(args.log_level, console=console)
    return cmd_render(args, console)


if __name__ == "__main__":
    sys.exit(main() or 0)
