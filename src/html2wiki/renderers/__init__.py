#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/html2wiki/renderers/__init__.py
"""Renderers converting HTML trees to wiki markup.

Available renderers:
- MediaWikiRenderer: Render to MediaWiki markup

Examples
--------
    >>> from html2wiki.renderers import MediaWikiRenderer
    >>> MediaWikiRenderer().convert("<ul><li>One</li><li>Two</li></ul>")
    '* One\\n* Two'

"""

from html2wiki.renderers.base import BaseWikiRenderer
from html2wiki.renderers.mediawiki import MediaWikiRenderer

__all__ = ["BaseWikiRenderer", "MediaWikiRenderer"]
