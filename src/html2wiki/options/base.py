#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for converter options.

This module defines the foundation classes for the dialect-specific options
used throughout the html2wiki conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2wiki.constants import (
    DEFAULT_ESCAPE_ENTITIES,
    DEFAULT_HTML_PARSER,
    DEFAULT_STRIP_COMMENTS,
    DEFAULT_UNKNOWN_TAGS,
    HTML_PARSERS,
    UNKNOWN_TAGS_MODES,
    HtmlParserType,
    UnknownTagsMode,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseConverterOptions(CloneFrozenMixin):
    """Base class for all wiki dialect options.

    These settings drive the generic tree walk shared by every dialect:
    how the HTML is loaded, which nodes are dropped before rules run and
    what happens to elements the dialect has no rule for.

    Parameters
    ----------
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup tree builder used when the input is not already a tree.
    strip_comments : bool, default True
        Remove HTML comments before conversion. When False they are kept
        verbatim as ``<!--...-->``.
    escape_entities : bool, default True
        Encode ``&``, ``<`` and ``>`` in text so they survive as literal text.
    unknown_tags : {"passthrough", "strip", "preserve"}, default "passthrough"
        Treatment of elements without a rule:
        - "passthrough": drop the tag, keep its converted content
        - "strip": drop the tag and its content
        - "preserve": keep the bare tag around its converted content
    base_uri : str or None, default None
        Base used to resolve relative ``href`` and ``src`` values.

    """

    html_parser: HtmlParserType = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup tree builder: html.parser, lxml, or html5lib",
            "choices": list(HTML_PARSERS),
            "importance": "advanced",
        },
    )
    strip_comments: bool = field(
        default=DEFAULT_STRIP_COMMENTS,
        metadata={"help": "Remove HTML comments from the output", "cli_name": "keep-comments", "importance": "core"},
    )
    escape_entities: bool = field(
        default=DEFAULT_ESCAPE_ENTITIES,
        metadata={
            "help": "Encode &, < and > found in text",
            "cli_name": "no-escape-entities",
            "importance": "core",
        },
    )
    unknown_tags: UnknownTagsMode = field(
        default=DEFAULT_UNKNOWN_TAGS,
        metadata={
            "help": "Elements without a rule: passthrough, strip, or preserve",
            "choices": list(UNKNOWN_TAGS_MODES),
            "importance": "advanced",
        },
    )
    base_uri: str | None = field(
        default=None,
        metadata={"help": "Base URI for resolving relative links and images", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate choice fields.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.html_parser not in HTML_PARSERS:
            raise ValueError(f"html_parser must be one of {HTML_PARSERS}, got {self.html_parser!r}")
        if self.unknown_tags not in UNKNOWN_TAGS_MODES:
            raise ValueError(f"unknown_tags must be one of {UNKNOWN_TAGS_MODES}, got {self.unknown_tags!r}")
