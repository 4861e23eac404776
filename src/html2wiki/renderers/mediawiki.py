#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/renderers/mediawiki.py
"""MediaWiki rendering from HTML trees.

This module provides the MediaWikiRenderer class which converts HTML to
MediaWiki markup suitable for Wikipedia and other MediaWiki-based wikis.
Elements MediaWiki has markup for (headings, emphasis, lists, tables,
links, images) are translated; elements its sanitizer accepts as HTML are
preserved with a filtered attribute set; disallowed elements are dropped.

"""

from __future__ import annotations

import logging
import posixpath
import warnings
from types import MappingProxyType
from typing import Mapping
from urllib.parse import urlparse

from bs4.element import PageElement, Tag

from html2wiki.constants import (
    BLOCK_ATTRIBUTES,
    BLOCKQUOTE_ATTRIBUTES,
    COMMON_ATTRIBUTES,
    DISALLOWED_TAGS,
    EDIT_ATTRIBUTES,
    FONT_ATTRIBUTES,
    HEADING_LEVELS,
    LINE_BREAK_ATTRIBUTES,
    PRE_LINE_PREFIX,
    PRESERVED_TAGS,
)
from html2wiki.exceptions import MalformedInputWarning
from html2wiki.options.mediawiki import MediaWikiOptions
from html2wiki.renderers.base import BaseWikiRenderer
from html2wiki.rules import Rule
from html2wiki.utils.cleanup import strip_named_anchor, strip_site_furniture
from html2wiki.utils.escape import find_wikitext_collision, nowiki_text, wrap_nowiki
from html2wiki.utils.links import WikiPageResolver, render_link
from html2wiki.utils.lists import list_item_prefix
from html2wiki.utils.tables import caption_start, cell_start, row_start, table_start
from html2wiki.utils.tree import get_attribute

logger = logging.getLogger(__name__)


def heading_rule(level: int) -> Rule:
    """Return the rule for ``h{level}``: ``level`` equals signs on each side."""
    affix = "=" * level
    return Rule.wrap(f"{affix} ", f" {affix}", block=True, trim="both", line_format="single")


def _build_base_rules() -> dict[str, Rule]:
    rules: dict[str, Rule] = {
        "hr": Rule.replace_with("\n----\n"),
        "br": Rule.preserve(LINE_BREAK_ATTRIBUTES, empty=True),
        "p": Rule.wrap(block=True, trim="both", line_format="multi"),
        "em": Rule.wrap("''", "''", line_format="single"),
        "i": Rule.alias_of("em"),
        "strong": Rule.wrap("'''", "'''", line_format="single"),
        "b": Rule.alias_of("strong"),
        "pre": Rule.wrap(line_prefix=PRE_LINE_PREFIX, block=True),
        "table": Rule.wrap(
            lambda renderer, node, rule: table_start(node), "|}", block=True, line_format="blocks"
        ),
        "tr": Rule.wrap(lambda renderer, node, rule: row_start(node)),
        "td": Rule.wrap(lambda renderer, node, rule: cell_start(node), "\n", trim="both", line_format="blocks"),
        "th": Rule.wrap(lambda renderer, node, rule: cell_start(node), "\n", trim="both", line_format="single"),
        "caption": Rule.wrap(lambda renderer, node, rule: caption_start(node), "\n", line_format="single"),
        "img": Rule.replace_with(lambda renderer, node, rule: renderer.render_image(node)),
        "a": Rule.replace_with(lambda renderer, node, rule: renderer.render_link(node)),
        "ul": Rule.wrap(line_format="multi", block=True),
        "ol": Rule.alias_of("ul"),
        "dl": Rule.alias_of("ul"),
        "li": Rule.wrap(lambda renderer, node, rule: list_item_prefix(node), trim="leading"),
        "dt": Rule.alias_of("li"),
        "dd": Rule.alias_of("li"),
        # Accepted as HTML by MediaWiki's sanitizer
        "div": Rule.preserve(BLOCK_ATTRIBUTES),
        "span": Rule.alias_of("div"),
        "blockquote": Rule.preserve(BLOCKQUOTE_ATTRIBUTES),
        "del": Rule.preserve(EDIT_ATTRIBUTES),
        "ins": Rule.alias_of("del"),
        "font": Rule.preserve(FONT_ATTRIBUTES),
    }
    rules.update({tag: Rule.preserve(COMMON_ATTRIBUTES) for tag in PRESERVED_TAGS})
    rules.update({tag: Rule.delete() for tag in DISALLOWED_TAGS})
    rules.update({f"h{level}": heading_rule(level) for level in HEADING_LEVELS})
    return rules


BASE_RULES: Mapping[str, Rule] = MappingProxyType(_build_base_rules())


class MediaWikiRenderer(BaseWikiRenderer):
    """Render HTML to MediaWiki markup text.

    Parameters
    ----------
    options : MediaWikiOptions or None, default = None
        MediaWiki rendering options

    Examples
    --------
    Basic usage:

        >>> renderer = MediaWikiRenderer()
        >>> renderer.convert("<h2>Title</h2><p>Some <b>bold</b> text</p>")
        "== Title ==\\n\\nSome '''bold''' text"

    Keep ``<b>`` as HTML:

        >>> renderer = MediaWikiRenderer(MediaWikiOptions(preserve_bold=True))
        >>> renderer.convert("<b>x</b>")
        '<b>x</b>'

    """

    dialect_name = "mediawiki"
    options_class = MediaWikiOptions
    options: MediaWikiOptions

    def __init__(self, options: MediaWikiOptions | None = None):
        """Initialize the MediaWiki renderer with options."""
        super().__init__(options)
        self.page_resolver = WikiPageResolver(self.options.wiki_uri)

    def get_rules(self) -> Mapping[str, Rule]:
        """Return the base rules with the session's ``b``/``i`` overrides applied."""
        options = self.options
        rules = dict(BASE_RULES)
        if options.preserve_italic:
            logger.debug("Preserving <i> as HTML")
            rules["i"] = Rule.preserve(COMMON_ATTRIBUTES)
        if options.preserve_bold:
            logger.debug("Preserving <b> as HTML")
            rules["b"] = Rule.preserve(COMMON_ATTRIBUTES)
        return rules

    def preprocess_node(self, node: PageElement) -> None:
        """Drop named anchors and site furniture."""
        if isinstance(node, Tag):
            if strip_named_anchor(node):
                return
            strip_site_furniture(node)

    def guard_text(self, text: str, raw_text: str) -> str:
        """Wrap text in ``<nowiki>`` when it would be read as wiki markup.

        Line-start markers are looked for in ``raw_text`` too, since
        whitespace collapsing joins its lines.
        """
        if find_wikitext_collision(raw_text) is not None:
            return wrap_nowiki(text)
        return nowiki_text(text)

    def postprocess_output(self, output: str) -> str:
        """Turn the preformatted-line placeholder back into a leading space."""
        return output.replace(PRE_LINE_PREFIX, " ")

    def render_link(self, node: Tag) -> str:
        """Render an ``<a>`` element as an internal or external link."""
        url = get_attribute(node, "href") or ""
        if not url:
            warnings.warn("Link without href rendered as an external link", MalformedInputWarning, stacklevel=2)
        text = self.get_elem_contents(node)
        title = self.page_resolver.resolve(url)
        return render_link(url, title, text)

    def render_image(self, node: Tag) -> str:
        """Render an ``<img>`` element as ``[[Image:name]]``.

        The file name is the last segment of the ``src`` URL path, ignoring
        trailing slashes. Images without a usable ``src`` produce no output.
        """
        src = get_attribute(node, "src")
        if not src:
            warnings.warn("Image without src dropped", MalformedInputWarning, stacklevel=2)
            return ""

        filename = posixpath.basename(urlparse(src).path.rstrip("/"))
        if not filename:
            warnings.warn(f"Image src {src!r} has no file name; dropped", MalformedInputWarning, stacklevel=2)
            return ""

        return f"[[{self.options.image_namespace}:{filename}]]"


__all__ = ["BASE_RULES", "MediaWikiRenderer", "heading_rule"]
