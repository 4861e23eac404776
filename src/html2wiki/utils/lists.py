#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/lists.py
"""List nesting prefixes for MediaWiki list items.

MediaWiki encodes nesting by repeating markers: ``*`` for bullets, ``#``
for numbers, ``:`` for definitions and ``;`` for definition terms. The
prefix of an item is one marker per enclosing list, outermost first.
"""

from __future__ import annotations

from bs4.element import Tag

from html2wiki.constants import DEFINITION_TERM_MARKER, LIST_CONTAINER_TAGS, LIST_MARKERS
from html2wiki.utils.tree import look_up_ancestors, tag_name


def list_markers(node: Tag) -> str:
    """Return the concatenated nesting markers for a list-item-like node.

    Parameters
    ----------
    node : Tag
        An ``li``, ``dt`` or ``dd`` element

    Returns
    -------
    str
        One marker per enclosing ``ul``/``ol``/``dl``, outermost first.
        Empty when the item is not inside any list.

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> soup = BeautifulSoup("<dl><dd><ol><li><ul><li id='x'>a</li></ul></li></ol></dd></dl>", "html.parser")
        >>> list_markers(soup.find(id="x"))
        ':#*'

    """
    is_term = tag_name(node) == "dt"
    markers: list[str] = []
    for parent in look_up_ancestors(node, LIST_CONTAINER_TAGS):
        parent_tag = tag_name(parent)
        if parent_tag == "dl" and is_term:
            markers.append(DEFINITION_TERM_MARKER)
        else:
            markers.append(LIST_MARKERS[parent_tag])
    return "".join(markers)


def list_item_prefix(node: Tag) -> str:
    """Return the start markup for a list item: newline, markers and a space."""
    return f"\n{list_markers(node)} "
