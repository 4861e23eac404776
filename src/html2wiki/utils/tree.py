#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/tree.py
"""Helpers for walking and mutating BeautifulSoup trees.

The converter reads BeautifulSoup elements directly; these helpers give the
rule callbacks the small set of tree queries they need (tag names,
ancestor chains, siblings) and the mutation primitives used while
preprocessing.

"""

from __future__ import annotations

from typing import Any, Collection

from bs4.element import Comment, NavigableString, PageElement, PreformattedString, Tag

from html2wiki.constants import MAX_ANCESTOR_DEPTH

TEXT_NODE_NAME = "~text"
COMMENT_NODE_NAME = "~comment"


# Set on text nodes whose content is already escaped for wiki output
GUARDED_FLAG = "html2wiki_guarded"


def mark_guarded(node: NavigableString) -> NavigableString:
    """Flag a text node as escaped so later preprocessing passes skip it.

    The node keeps its exact ``NavigableString`` type, so BeautifulSoup's
    ``get_text()`` and ``strings`` still report it.
    """
    setattr(node, GUARDED_FLAG, True)
    return node


def is_guarded(node: Any) -> bool:
    """Return True for text nodes flagged by :func:`mark_guarded`."""
    return is_text_node(node) and bool(getattr(node, GUARDED_FLAG, False))


def is_text_node(node: Any) -> bool:
    """Return True for character data (not comments, doctypes or CDATA)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_comment_node(node: Any) -> bool:
    """Return True for HTML comments."""
    return isinstance(node, Comment)


def tag_name(node: Any) -> str:
    """Return the lower-case tag name, or a pseudo-name for text and comments."""
    if isinstance(node, Tag):
        return (node.name or "").lower()
    if is_text_node(node):
        return TEXT_NODE_NAME
    if is_comment_node(node):
        return COMMENT_NODE_NAME
    return ""


def look_up_ancestors(node: PageElement, tags: Collection[str]) -> list[Tag]:
    """Collect the strict ancestors of ``node`` whose tag is in ``tags``.

    Parameters
    ----------
    node : PageElement
        Starting node (not included in the result)
    tags : collection of str
        Tag names to select

    Returns
    -------
    list of Tag
        Matching ancestors ordered outermost first

    Notes
    -----
    The walk follows parent links and stops after ``MAX_ANCESTOR_DEPTH``
    steps or when a node repeats, so a corrupted tree cannot loop forever.

    """
    found: list[Tag] = []
    seen: set[int] = set()
    parent = node.parent
    depth = 0
    while parent is not None and depth < MAX_ANCESTOR_DEPTH:
        if id(parent) in seen:
            break
        seen.add(id(parent))
        if tag_name(parent) in tags:
            found.append(parent)
        parent = parent.parent
        depth += 1
    found.reverse()
    return found


def has_ancestor(node: PageElement, tag: str) -> bool:
    """Return True if any strict ancestor of ``node`` has tag ``tag``."""
    return bool(look_up_ancestors(node, (tag,)))


def previous_sibling_element(node: PageElement) -> PageElement | None:
    """Return the nearest preceding sibling that carries content.

    Whitespace-only strings and comments are skipped; they never produce
    markup of their own.
    """
    for sibling in node.previous_siblings:
        if is_comment_node(sibling):
            continue
        if is_text_node(sibling) and not str(sibling).strip():
            continue
        return sibling
    return None


def get_attribute(node: Tag, name: str) -> str | None:
    """Return an attribute value as text, joining multi-valued attributes."""
    value = node.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def detach(node: PageElement) -> PageElement:
    """Remove ``node`` from its parent, keeping its subtree intact."""
    return node.extract()


def delete(node: PageElement) -> None:
    """Detach ``node`` and destroy its subtree."""
    if isinstance(node, Tag):
        node.decompose()
    else:
        detach(node)


def replace_with_content(node: Tag) -> None:
    """Replace ``node`` by its children."""
    node.unwrap()


def is_removed(node: PageElement) -> bool:
    """Return True once ``node`` has been destroyed by :func:`delete`."""
    return bool(getattr(node, "decomposed", False))


def is_attached(node: PageElement, root: PageElement) -> bool:
    """Return True while ``node`` is still reachable from ``root``."""
    if is_removed(node):
        return False
    current: PageElement | None = node
    depth = 0
    while current is not None and depth <= MAX_ANCESTOR_DEPTH:
        if current is root:
            return True
        current = getattr(current, "parent", None)
        depth += 1
    return False
