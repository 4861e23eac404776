#  Copyright (c) 2025 Tom Villani, Ph.D.
# html2wiki/options/mediawiki.py
"""Configuration options for MediaWiki conversion.

This module defines options for converting HTML trees to MediaWiki markup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Sequence, Union

from html2wiki.constants import (
    DEFAULT_IMAGE_NAMESPACE,
    DEFAULT_PRESERVE_BOLD,
    DEFAULT_PRESERVE_ITALIC,
)
from html2wiki.options.base import BaseConverterOptions

WikiUriSpec = Union[str, "re.Pattern[str]", Callable[[str], Union[str, None]]]


@dataclass(frozen=True)
class MediaWikiOptions(BaseConverterOptions):
    r"""Configuration options for MediaWiki conversion.

    Parameters
    ----------
    preserve_bold : bool, default False
        Keep ``<b>`` elements as raw HTML instead of converting them to
        ``'''bold'''``. ``<strong>`` is always converted.
    preserve_italic : bool, default False
        Keep ``<i>`` elements as raw HTML instead of converting them to
        ``''italic''``. ``<em>`` is always converted.
    wiki_uri : tuple of (str, re.Pattern, callable), default ()
        Recognizers for links that point at pages of the target wiki:
        - str: URL prefix; the remainder of the URL is the page title
        - re.Pattern: searched in the URL; group 1 (or the whole match) is the title
        - callable: receives the URL and returns a title or None
        A single recognizer may be passed instead of a tuple.
    image_namespace : str, default "Image"
        Namespace used for image links, e.g. ``[[Image:pic.png]]``.

    Examples
    --------
    Recognize links into an existing wiki:
        >>> options = MediaWikiOptions(wiki_uri=("http://en.wikipedia.org/wiki/",))
        >>> options.create_updated(preserve_bold=True).preserve_bold
        True

    Match page titles with a pattern:
        >>> import re
        >>> options = MediaWikiOptions(wiki_uri=re.compile(r"/w/index\.php\?title=([^&]+)"))

    """

    preserve_bold: bool = field(
        default=DEFAULT_PRESERVE_BOLD,
        metadata={"help": "Keep <b> as HTML instead of '''bold'''", "cli_name": "preserve-bold", "importance": "core"},
    )
    preserve_italic: bool = field(
        default=DEFAULT_PRESERVE_ITALIC,
        metadata={
            "help": "Keep <i> as HTML instead of ''italic''",
            "cli_name": "preserve-italic",
            "importance": "core",
        },
    )
    wiki_uri: tuple[WikiUriSpec, ...] = field(
        default=(),
        metadata={
            "help": "URL prefixes (or patterns) identifying internal wiki pages",
            "cli_name": "wiki-uri",
            "importance": "core",
        },
    )
    image_namespace: str = field(
        default=DEFAULT_IMAGE_NAMESPACE,
        metadata={"help": "Namespace for image links", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize recognizers and validate the dialect fields."""
        super().__post_init__()

        wiki_uri = self.wiki_uri
        if wiki_uri is None:
            wiki_uri = ()
        elif isinstance(wiki_uri, (str, re.Pattern)) or callable(wiki_uri):
            wiki_uri = (wiki_uri,)
        elif isinstance(wiki_uri, Sequence):
            wiki_uri = tuple(wiki_uri)
        else:
            raise ValueError(f"wiki_uri must be a string, pattern, callable or a sequence of them, got {wiki_uri!r}")

        for spec in wiki_uri:
            if not (isinstance(spec, (str, re.Pattern)) or callable(spec)):
                raise ValueError(f"Unsupported wiki_uri entry: {spec!r}")
        object.__setattr__(self, "wiki_uri", wiki_uri)

        if not self.image_namespace or ":" in self.image_namespace:
            raise ValueError(f"image_namespace must be a non-empty name without ':', got {self.image_namespace!r}")
