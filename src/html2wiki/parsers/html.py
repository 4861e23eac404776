#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/parsers/html.py
"""Loading HTML input into a BeautifulSoup tree.

Parsing itself is delegated to BeautifulSoup and the tree builder selected
by the ``html_parser`` option; this module only normalizes the accepted
input types and turns loader failures into html2wiki exceptions.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Union

from html2wiki.constants import DEFAULT_HTML_PARSER, DEPS_HTML, DEPS_HTML_PARSER_BACKENDS, HtmlParserType
from html2wiki.exceptions import DependencyError, ParsingError, ValidationError
from html2wiki.utils.decorators import check_dependencies, requires_dependencies

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import Tag

logger = logging.getLogger(__name__)

HtmlSource = Union[str, bytes, Path, IO[str], IO[bytes], "BeautifulSoup", "Tag"]


def _read_source(source: Any) -> Union[str, bytes]:
    if isinstance(source, (str, bytes)):
        return source
    if isinstance(source, Path):
        try:
            return source.read_bytes()
        except OSError as e:
            raise ParsingError(f"Could not read HTML file {source}: {e}", parsing_stage="reading", original_error=e) from e
    if hasattr(source, "read"):
        try:
            return source.read()
        except OSError as e:
            raise ParsingError(f"Could not read HTML stream: {e}", parsing_stage="reading", original_error=e) from e
    raise ValidationError(
        f"Unsupported HTML source type: {type(source).__name__}",
        parameter_name="source",
        parameter_value=type(source),
    )


@requires_dependencies("html", DEPS_HTML)
def load_html(source: HtmlSource, html_parser: HtmlParserType = DEFAULT_HTML_PARSER) -> "BeautifulSoup | Tag":
    """Return a BeautifulSoup tree for ``source``.

    Parameters
    ----------
    source : str, bytes, Path, file-like, BeautifulSoup or Tag
        HTML markup (``str`` is always markup, never a path), raw bytes whose
        encoding BeautifulSoup detects, a file path, a readable stream, or an
        already parsed tree which is returned unchanged
    html_parser : {"html.parser", "lxml", "html5lib"}
        Tree builder passed to BeautifulSoup

    Returns
    -------
    BeautifulSoup or Tag
        Root of the parsed tree

    Raises
    ------
    DependencyError
        If the selected tree builder is not installed
    ParsingError
        If the input cannot be read
    ValidationError
        If ``source`` is of an unsupported type

    """
    from bs4 import BeautifulSoup
    from bs4.element import Tag
    from bs4.exceptions import FeatureNotFound

    if isinstance(source, Tag):
        return source

    check_dependencies("html", DEPS_HTML_PARSER_BACKENDS.get(html_parser, []))

    markup = _read_source(source)
    try:
        soup = BeautifulSoup(markup, html_parser)
    except FeatureNotFound as e:
        missing = [(html_parser, "")] if html_parser != "html.parser" else []
        raise DependencyError(
            converter_name="html",
            missing_packages=missing,
            message=f"BeautifulSoup tree builder '{html_parser}' is not available: {e}",
        ) from e

    logger.debug("Parsed %d bytes of HTML with %s", len(markup), html_parser)
    return soup
