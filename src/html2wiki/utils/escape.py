#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/escape.py
"""Text escaping for MediaWiki output.

Text taken from HTML may contain character sequences that MediaWiki would
read as markup: apostrophe runs become bold or italics, a leading ``*``
starts a list, ``[[`` opens a link. :func:`nowiki_text` detects those
sequences and wraps the text in ``<nowiki>`` so it renders literally.

"""

from __future__ import annotations

import html
import re

from html2wiki.constants import (
    BRACKETED_EXTERNAL_LINK_PATTERN,
    NOWIKI_CLOSE,
    NOWIKI_OPEN,
    WIKITEXT_COLLISION_PATTERNS,
)


def wrap_nowiki(text: str) -> str:
    """Wrap ``text`` in a ``<nowiki>`` pair."""
    return f"{NOWIKI_OPEN}{text}{NOWIKI_CLOSE}"


def find_wikitext_collision(text: str) -> re.Pattern[str] | None:
    """Return the first collision pattern matching ``text``, if any.

    Parameters
    ----------
    text : str
        Raw text content

    Returns
    -------
    re.Pattern or None
        The matching pattern from ``WIKITEXT_COLLISION_PATTERNS``

    """
    for pattern in WIKITEXT_COLLISION_PATTERNS:
        if pattern.search(text):
            return pattern
    return None


def escape_bracketed_links(text: str) -> str:
    """Wrap each literal ``[scheme:url text]`` span of ``text`` in ``<nowiki>``.

    Examples
    --------
        >>> escape_bracketed_links("See [http://x.com Link] now")
        'See <nowiki>[http://x.com Link]</nowiki> now'
        >>> escape_bracketed_links("[not a link]")
        '[not a link]'

    """
    return BRACKETED_EXTERNAL_LINK_PATTERN.sub(lambda match: wrap_nowiki(match.group(0)), text)


def nowiki_text(text: str) -> str:
    """Protect ``text`` from being interpreted as wiki markup.

    If any collision pattern matches, the whole text is wrapped in a single
    ``<nowiki>`` pair. Otherwise only bracketed external-link spans are
    wrapped, one by one, and the rest of the text is left untouched.

    Parameters
    ----------
    text : str
        Raw text content

    Returns
    -------
    str
        Text safe to embed in wiki markup

    Examples
    --------
        >>> nowiki_text("''bold''")
        "<nowiki>''bold''</nowiki>"
        >>> nowiki_text("plain text")
        'plain text'

    """
    if not text:
        return text

    if find_wikitext_collision(text) is not None:
        return wrap_nowiki(text)

    return escape_bracketed_links(text)


def escape_html_entities(text: str) -> str:
    """Encode ``&``, ``<`` and ``>`` so text cannot open a tag or entity.

    Examples
    --------
        >>> escape_html_entities("a < b & c")
        'a &lt; b &amp; c'

    """
    if not text:
        return text

    return html.escape(text, quote=False)


def escape_attribute_value(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return html.escape(value, quote=False).replace('"', "&quot;")
