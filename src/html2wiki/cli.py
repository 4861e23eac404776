#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/cli.py
"""Command-line interface for html2wiki.

Usage::

    html2wiki page.html --out page.wiki --wiki-uri http://en.wikipedia.org/wiki/
    curl -s https://example.org | html2wiki - --base-uri https://example.org/

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Union

from html2wiki.constants import DEFAULT_IMAGE_NAMESPACE, HTML_PARSERS, UNKNOWN_TAGS_MODES
from html2wiki.exceptions import Html2WikiError, ParsingError, ValidationError
from html2wiki.logging_utils import configure_logging
from html2wiki.options.mediawiki import MediaWikiOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_FILE_ERROR = 3


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, (ParsingError, OSError)):
        return EXIT_FILE_ERROR
    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_USAGE_ERROR
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``html2wiki`` command."""
    from html2wiki import __version__

    parser = argparse.ArgumentParser(
        prog="html2wiki",
        description="Convert HTML to MediaWiki markup.",
    )
    parser.add_argument("input", nargs="?", default="-", help="HTML file to convert, or '-' for stdin (default)")
    parser.add_argument("--out", "-o", metavar="FILE", help="Write markup to FILE instead of stdout")

    dialect = parser.add_argument_group("MediaWiki options")
    dialect.add_argument("--preserve-bold", action="store_true", help="Keep <b> as HTML instead of '''bold'''")
    dialect.add_argument("--preserve-italic", action="store_true", help="Keep <i> as HTML instead of ''italic''")
    dialect.add_argument(
        "--wiki-uri",
        action="append",
        default=[],
        metavar="PREFIX",
        help="URL prefix of internal wiki pages (repeatable)",
    )
    dialect.add_argument(
        "--image-namespace",
        default=DEFAULT_IMAGE_NAMESPACE,
        metavar="NS",
        help=f"Namespace for image links (default: {DEFAULT_IMAGE_NAMESPACE})",
    )

    html = parser.add_argument_group("HTML options")
    html.add_argument("--base-uri", metavar="URI", help="Resolve relative links and images against URI")
    html.add_argument("--html-parser", choices=HTML_PARSERS, default="html.parser", help="BeautifulSoup tree builder")
    html.add_argument("--keep-comments", action="store_true", help="Keep HTML comments in the output")
    html.add_argument(
        "--no-escape-entities", action="store_true", help="Do not encode &, < and > found in text content"
    )
    html.add_argument(
        "--unknown-tags",
        choices=UNKNOWN_TAGS_MODES,
        default="passthrough",
        help="Handling of elements without a rule (default: passthrough)",
    )

    output = parser.add_argument_group("Output and logging")
    output.add_argument("--rich", action="store_true", help="Syntax-highlight the markup on a terminal (needs rich)")
    output.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    output.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    output.add_argument("--trace", action="store_true", help="Very verbose debug output with timestamps")
    output.add_argument("--log-file", metavar="FILE", help="Also write log messages to FILE")
    output.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> MediaWikiOptions:
    """Translate parsed arguments into MediaWikiOptions.

    Raises
    ------
    ValueError
        If an option value is rejected by MediaWikiOptions

    """
    return MediaWikiOptions(
        preserve_bold=parsed_args.preserve_bold,
        preserve_italic=parsed_args.preserve_italic,
        wiki_uri=tuple(parsed_args.wiki_uri),
        image_namespace=parsed_args.image_namespace,
        base_uri=parsed_args.base_uri,
        html_parser=parsed_args.html_parser,
        strip_comments=not parsed_args.keep_comments,
        escape_entities=not parsed_args.no_escape_entities,
        unknown_tags=parsed_args.unknown_tags,
    )


def _open_source(input_arg: str) -> Union[bytes, Path]:
    if input_arg == "-":
        return sys.stdin.buffer.read()
    path = Path(input_arg)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {input_arg}")
    return path


def _print_rich(text: str, stream: IO[str]) -> bool:
    """Print ``text`` as highlighted wikitext; return False when rich cannot be used."""
    try:
        from rich.console import Console
        from rich.syntax import Syntax
    except ImportError:
        print("Warning: Rich library not installed. Install with: pip install html2wiki[rich]", file=sys.stderr)
        return False

    try:
        syntax = Syntax(text, "wikitext", theme="monokai", word_wrap=True)
    except Exception:
        # Fallback to plain printing when Rich can't determine lexer
        return False

    Console(file=stream).print(syntax)
    return True


def main(args: list[str] | None = None) -> int:
    """Execute the html2wiki command; return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    from html2wiki.api import html2wiki

    try:
        options = build_options(parsed_args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        source = _open_source(parsed_args.input)
        text = html2wiki(source, options)
    except (Html2WikiError, OSError) as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if parsed_args.out:
        try:
            Path(parsed_args.out).write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: could not write {parsed_args.out}: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info(f"Wrote {parsed_args.out}")
        return EXIT_SUCCESS

    if parsed_args.rich and sys.stdout.isatty() and _print_rich(text, sys.stdout):
        return EXIT_SUCCESS

    print(text)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
