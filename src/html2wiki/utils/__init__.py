#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/__init__.py
"""Utility modules for the html2wiki package.

This package contains the per-element decision helpers used by the
MediaWiki rules (lists, links, tables, text escaping, attribute filtering,
noise removal) and the BeautifulSoup tree helpers they share.
"""

from html2wiki.utils.attributes import format_attributes
from html2wiki.utils.escape import escape_html_entities, nowiki_text
from html2wiki.utils.links import WikiPageResolver, render_link
from html2wiki.utils.lists import list_item_prefix, list_markers

__all__ = [
    "WikiPageResolver",
    "escape_html_entities",
    "format_attributes",
    "list_item_prefix",
    "list_markers",
    "nowiki_text",
    "render_link",
]
