#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/attributes.py
"""Attribute filtering for generated markup.

Wiki table prefixes and preserved HTML tags carry a subset of the source
element's attributes. Only allow-listed names are copied, in allow-list
order, as ``name="value"`` pairs.
"""

from __future__ import annotations

from typing import Iterable

from bs4.element import Tag

from html2wiki.utils.escape import escape_attribute_value
from html2wiki.utils.tree import get_attribute


def format_attributes(node: Tag, allowed: Iterable[str]) -> str:
    """Build the attribute string for ``node`` restricted to ``allowed`` names.

    Parameters
    ----------
    node : Tag
        Element whose attributes are read
    allowed : iterable of str
        Attribute names to keep, in output order. Repeated names are emitted once.

    Returns
    -------
    str
        Space separated ``name="value"`` pairs, or an empty string when none
        of the allowed attributes are present

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> td = BeautifulSoup('<td colspan="2" onclick="x()">a</td>', "html.parser").td
        >>> format_attributes(td, ("colspan", "onclick"))
        'colspan="2" onclick="x()"'
        >>> format_attributes(td, ("rowspan",))
        ''

    """
    pairs: list[str] = []
    seen: set[str] = set()
    for name in allowed:
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)
        value = get_attribute(node, key)
        if value is None:
            continue
        pairs.append(f'{key}="{escape_attribute_value(value)}"')
    return " ".join(pairs)
