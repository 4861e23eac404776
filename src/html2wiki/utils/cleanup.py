#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/cleanup.py
"""Removal of HTML noise before conversion.

Pages exported from a wiki carry furniture (category boxes, print footers,
"[edit]" section links) and named anchors that have no markup equivalent.
These helpers take them out of the tree before the rules run.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from bs4.element import Tag

from html2wiki.constants import SITE_FURNITURE_PATTERNS
from html2wiki.utils.tree import delete, get_attribute, replace_with_content, tag_name

logger = logging.getLogger(__name__)


def strip_named_anchor(node: Any) -> bool:
    """Replace an ``<a>`` without a usable ``href`` by its content.

    Returns
    -------
    bool
        True if the anchor was removed

    """
    if not isinstance(node, Tag) or tag_name(node) != "a":
        return False
    if get_attribute(node, "href"):
        return False
    logger.debug("Unwrapping named anchor %r", get_attribute(node, "name") or get_attribute(node, "id"))
    replace_with_content(node)
    return True


def is_site_furniture(node: Any, patterns: Mapping[str, re.Pattern[str]] = SITE_FURNITURE_PATTERNS) -> bool:
    """Return True if an attribute of ``node`` matches a furniture pattern."""
    if not isinstance(node, Tag):
        return False
    for attribute, pattern in patterns.items():
        value = get_attribute(node, attribute)
        if value and pattern.search(value):
            return True
    return False


def strip_site_furniture(node: Any, patterns: Mapping[str, re.Pattern[str]] = SITE_FURNITURE_PATTERNS) -> bool:
    """Detach and destroy ``node`` when it is site furniture.

    Returns
    -------
    bool
        True if the node was removed

    """
    if not is_site_furniture(node, patterns):
        return False
    logger.debug("Removing site furniture <%s id=%r class=%r>", tag_name(node), node.get("id"), node.get("class"))
    delete(node)
    return True
