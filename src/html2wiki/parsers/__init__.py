#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input loaders producing the HTML trees the renderers walk."""

from html2wiki.parsers.html import HtmlSource, load_html

__all__ = ["HtmlSource", "load_html"]
