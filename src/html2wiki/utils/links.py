#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/links.py
"""Hyperlink classification for MediaWiki output.

A link either points at a page of the target wiki, and becomes an internal
``[[Title]]`` link, or anywhere else, and becomes an external ``[url text]``
link. :class:`WikiPageResolver` recognizes internal targets from the
``wiki_uri`` option; :func:`render_link` picks the markup.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence
from urllib.parse import unquote

from html2wiki.options.mediawiki import WikiUriSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WikiPageResolver:
    """Map URLs onto page titles of the target wiki.

    Parameters
    ----------
    wiki_uris : sequence of (str, re.Pattern, callable)
        Recognizers tried in order; the first one yielding a title wins.
        String recognizers are URL prefixes whose remainder (percent-decoded)
        is the title; a URL equal to the prefix is not a page.

    Examples
    --------
        >>> resolver = WikiPageResolver(("http://wiki.example/wiki/",))
        >>> resolver.resolve("http://wiki.example/wiki/Foo_Bar")
        'Foo_Bar'
        >>> resolver.resolve("http://elsewhere.example/") is None
        True

    """

    wiki_uris: Sequence[WikiUriSpec] = ()

    def resolve(self, url: str) -> str | None:
        """Return the raw page title for ``url``, or None for external URLs."""
        if not url:
            return None
        for spec in self.wiki_uris:
            title = self._extract_title(url, spec)
            if title:
                return title
        return None

    @staticmethod
    def _extract_title(url: str, spec: WikiUriSpec) -> str | None:
        if isinstance(spec, str):
            if not spec or not url.startswith(spec) or len(url) <= len(spec):
                return None
            return unquote(url[len(spec) :])
        if isinstance(spec, re.Pattern):
            match = spec.search(url)
            if match is None:
                return None
            return match.group(1) if spec.groups else match.group(0)
        return spec(url)


def normalize_title(title: str) -> str:
    """Convert a URL-form page title to display form (underscores to spaces)."""
    return title.replace("_", " ")


def lower_first(text: str) -> str:
    """Lower-case the first character of ``text`` when it is ASCII.

    Non-ASCII leading characters are compared as-is; no Unicode case
    folding is attempted.
    """
    if not text or not text[0].isascii():
        return text
    return text[0].lower() + text[1:]


def render_link(url: str, title: str | None, text: str) -> str:
    """Choose the markup for a hyperlink.

    Parameters
    ----------
    url : str
        Link target as found in ``href``
    title : str or None
        Page title when ``url`` is internal to the wiki, else None
    text : str
        Already converted link text

    Returns
    -------
    str
        ``[[Title]]``, ``[[text]]``, ``[[Title|text]]``, a bare URL or
        ``[url text]``

    Examples
    --------
        >>> render_link("http://w/wiki/Foo_Bar", "Foo_Bar", "Foo Bar")
        '[[Foo Bar]]'
        >>> render_link("http://w/wiki/Foo_Bar", "Foo_Bar", "foo Bar")
        '[[foo Bar]]'
        >>> render_link("http://w/wiki/Foo_Bar", "Foo_Bar", "Click here")
        '[[Foo Bar|Click here]]'
        >>> render_link("http://x.com", None, "http://x.com")
        'http://x.com'
        >>> render_link("http://x.com", None, "X")
        '[http://x.com X]'

    """
    if title:
        title = normalize_title(title)
        if text == title:
            return f"[[{title}]]"
        # MediaWiki capitalizes the first letter of titles itself
        if text == lower_first(title):
            return f"[[{text}]]"
        return f"[[{title}|{text}]]"

    if url == text:
        return url
    return f"[{url} {text}]"
