#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/tables.py
"""Table markup prefixes for MediaWiki output.

MediaWiki tables are line oriented::

    {| class="wikitable"
    |+ Caption
    ! Header
    |-
    | Cell
    |}

The functions here build the prefix for each table element from its
allow-listed attributes and, for cells, from the shape of their content.
"""

from __future__ import annotations

from typing import Any

from bs4.element import Tag

from html2wiki.constants import (
    CAPTION_ATTRIBUTES,
    PHRASAL_TAGS,
    TABLE_DATA_ATTRIBUTES,
    TABLE_ROW_ATTRIBUTES,
    TABLE_SECTION_TAGS,
    TABLE_START_ATTRIBUTES,
)
from html2wiki.utils.attributes import format_attributes
from html2wiki.utils.tree import is_text_node, previous_sibling_element, tag_name


def is_phrasal(node: Any) -> bool:
    """Return True if ``node`` can share a line with its cell prefix."""
    return is_text_node(node) or tag_name(node) in PHRASAL_TAGS


def table_start(node: Tag) -> str:
    """Return ``{|`` plus the table's attributes and a newline."""
    prefix = "{|"
    attrs = format_attributes(node, TABLE_START_ATTRIBUTES)
    if attrs:
        prefix += " " + attrs
    return prefix + "\n"


def _has_preceding_row_content(node: Tag) -> bool:
    if previous_sibling_element(node) is not None:
        return True
    # Rows of a later thead/tbody/tfoot still follow the earlier sections
    parent = node.parent
    if isinstance(parent, Tag) and tag_name(parent) in TABLE_SECTION_TAGS:
        return previous_sibling_element(parent) is not None
    return False


def row_start(node: Tag) -> str:
    """Return the ``|-`` row separator, or an empty string for a bare first row.

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> rows = BeautifulSoup("<table><tr><td>a</td></tr><tr><td>b</td></tr></table>", "html.parser")("tr")
        >>> row_start(rows[0]), row_start(rows[1])
        ('', '|-\\n')

    """
    prefix = "|-"
    attrs = format_attributes(node, TABLE_ROW_ATTRIBUTES)
    if attrs:
        prefix += " " + attrs
    if not attrs and not _has_preceding_row_content(node):
        return ""
    return prefix + "\n"


def cell_start(node: Tag) -> str:
    """Return the prefix of a ``td`` or ``th`` cell.

    Data cells start with ``|`` and header cells with ``!``; attributes are
    followed by a `` |`` separator. Content stays on the prefix line when all
    children are phrasal and starts on its own line otherwise.
    """
    prefix = "!" if tag_name(node) == "th" else "|"
    attrs = format_attributes(node, TABLE_DATA_ATTRIBUTES)
    if attrs:
        prefix += " " + attrs + " |"

    separator = " " if all(is_phrasal(child) for child in node.children) else "\n"
    return prefix + separator


def caption_start(node: Tag) -> str:
    """Return the ``|+`` caption prefix with optional attributes."""
    prefix = "|+ "
    attrs = format_attributes(node, CAPTION_ATTRIBUTES)
    if attrs:
        prefix += attrs + " |"
    return prefix
