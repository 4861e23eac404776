#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/api.py
"""Public conversion entry points for html2wiki."""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

from html2wiki.exceptions import InvalidOptionsError
from html2wiki.options.base import BaseConverterOptions
from html2wiki.options.mediawiki import MediaWikiOptions
from html2wiki.parsers.html import HtmlSource
from html2wiki.renderers.mediawiki import MediaWikiRenderer
from html2wiki.utils.io_utils import write_text

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=BaseConverterOptions)


def _create_options_from_kwargs(options_class: type[OptionsT], base: Optional[OptionsT], **kwargs: Any) -> OptionsT:
    """Create an options object from keyword arguments.

    Parameters
    ----------
    options_class : type
        Options class to instantiate when ``base`` is None
    base : options instance or None
        Options to start from; keyword arguments override its values
    **kwargs
        Option field values. Names that are not fields of ``options_class``
        are skipped.

    Returns
    -------
    OptionsT
        New options instance

    """
    option_names = {field.name for field in fields(options_class)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown options: {missing}")

    if base is None:
        return options_class(**valid_kwargs)
    if not valid_kwargs:
        return base
    return base.create_updated(**valid_kwargs)


def html2wiki(
    source: HtmlSource,
    options: Optional[MediaWikiOptions] = None,
    *,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> str:
    """Convert HTML to MediaWiki markup.

    Parameters
    ----------
    source : str, bytes, Path, file-like, BeautifulSoup or Tag
        HTML markup (a ``str`` is always markup), raw bytes, a file path, a
        readable stream, or an already parsed tree (modified in place)
    options : MediaWikiOptions, optional
        Conversion options
    output : str, Path or file-like, optional
        Also write the markup to this path or stream
    **kwargs
        Individual option overrides, e.g. ``preserve_bold=True``

    Returns
    -------
    str
        MediaWiki markup

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a MediaWikiOptions instance
    ParsingError
        If the input cannot be read
    DependencyError
        If the selected HTML parser back end is not installed

    Examples
    --------
        >>> html2wiki("<h3>Intro</h3><p>Hello <i>world</i></p>")
        "=== Intro ===\\n\\nHello ''world''"
        >>> html2wiki('<a href="http://w/wiki/Foo_Bar">Foo Bar</a>', wiki_uri="http://w/wiki/")
        '[[Foo Bar]]'

    """
    if options is not None and not isinstance(options, MediaWikiOptions):
        raise InvalidOptionsError(
            converter_name="mediawiki", expected_type=MediaWikiOptions, received_type=type(options)
        )

    options = _create_options_from_kwargs(MediaWikiOptions, options, **kwargs)
    text = MediaWikiRenderer(options).convert(source)
    if output is not None:
        write_text(text, output)
    return text


__all__ = ["html2wiki"]
