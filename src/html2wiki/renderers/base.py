#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/renderers/base.py
"""Base class for rule-driven HTML to wiki renderers.

A dialect declares a table of element rules (see :mod:`html2wiki.rules`).
:class:`BaseWikiRenderer` supplies everything else: loading the tree, a
single preprocessing pass, the recursive walk that applies each element's
rule, and normalization of the final text.

Walk semantics for WRAP and PRESERVE rules, in order:

1. convert the children
2. trim the converted content (``trim``)
3. normalize its newlines (``line_format``)
4. surround it with ``start``/``end``
5. prefix every line (``line_prefix``)
6. pad with blank lines (``block``)

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Mapping, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from html2wiki.constants import (
    HTML_WHITESPACE,
    HTML_WHITESPACE_RUN,
    STRUCTURAL_CONTAINER_TAGS,
    TRANSPARENT_TAGS,
    URL_ATTRIBUTES,
)
from html2wiki.exceptions import InvalidOptionsError
from html2wiki.options.base import BaseConverterOptions
from html2wiki.parsers.html import HtmlSource, load_html
from html2wiki.rules import Rule, RuleKind, RuleTable, RuleText
from html2wiki.utils.attributes import format_attributes
from html2wiki.utils.decorators import debug_timer
from html2wiki.utils.escape import escape_html_entities
from html2wiki.utils.io_utils import write_text
from html2wiki.utils.tree import (
    detach,
    has_ancestor,
    is_attached,
    is_comment_node,
    is_guarded,
    is_text_node,
    mark_guarded,
    tag_name,
)

logger = logging.getLogger(__name__)


def apply_trim(content: str, trim: str) -> str:
    """Strip HTML whitespace from one or both ends of ``content``."""
    if trim in ("leading", "both"):
        content = content.lstrip(HTML_WHITESPACE)
    if trim in ("trailing", "both"):
        content = content.rstrip(HTML_WHITESPACE)
    return content


def apply_line_format(content: str, line_format: str) -> str:
    """Normalize newlines in ``content``.

    - "none": unchanged
    - "blocks": at most one blank line between blocks
    - "multi": no blank lines
    - "single": everything on one line
    """
    if line_format == "none":
        return content

    content = re.sub(r"^[ \t\r\f]+\n", "\n", content, flags=re.MULTILINE)
    if line_format == "blocks":
        return re.sub(r"\n{3,}", "\n\n", content)
    if line_format == "multi":
        return re.sub(r"\n{2,}", "\n", content)
    return re.sub(r"[ \t]*\n+[ \t]*", " ", content)


def prefix_lines(text: str, prefix: str) -> str:
    """Insert ``prefix`` at the start of every line of ``text``.

    A final newline does not open a new line.
    """
    lines = text.split("\n")
    last = len(lines) - 1
    return "\n".join(line if i == last and not line else prefix + line for i, line in enumerate(lines))


def normalize_output(text: str) -> str:
    """Tidy the assembled document.

    Leading and trailing horizontal whitespace is removed from every line,
    runs of blank lines collapse to one, and the document is trimmed.
    """
    text = re.sub(r"^[ \t]+", "", text, flags=re.MULTILINE)
    text = re.sub(r"[ \t]+$", "", text, flags=re.MULTILINE)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip(HTML_WHITESPACE)


class BaseWikiRenderer(ABC):
    """Abstract base class for HTML to wiki markup renderers.

    Subclasses declare their rules in :meth:`get_rules` and may hook into
    preprocessing (:meth:`preprocess_node`, :meth:`guard_text`) and the final text
    (:meth:`postprocess_output`).

    Parameters
    ----------
    options : BaseConverterOptions or None, default = None
        Dialect options. If None, ``options_class()`` defaults are used.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an instance of ``options_class``
    ConfigurationError
        If the dialect's rule table cannot be resolved

    """

    dialect_name: str = "wiki"
    options_class: type[BaseConverterOptions] = BaseConverterOptions

    def __init__(self, options: BaseConverterOptions | None = None):
        """Validate options and build the session rule table."""
        self._validate_options_type(options, self.options_class, self.dialect_name)
        self.options: BaseConverterOptions = options or self.options_class()
        self.rules: RuleTable = RuleTable(self.get_rules())

    @staticmethod
    def _validate_options_type(options: BaseConverterOptions | None, expected_type: type, renderer_name: str) -> None:
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def get_rules(self) -> Mapping[str, Rule]:
        """Return the rule declarations for this dialect, keyed by tag name."""
        raise NotImplementedError

    def preprocess_node(self, node: PageElement) -> None:
        """Adjust ``node`` in place before conversion. No-op by default."""

    def guard_text(self, text: str, raw_text: str) -> str:
        """Escape dialect markup in a normalized text node. Identity by default.

        Parameters
        ----------
        text : str
            Node text after whitespace collapsing and entity escaping
        raw_text : str
            Node text as parsed, with its original line breaks

        """
        return text

    def postprocess_output(self, output: str) -> str:
        """Finalize the converted text. Identity by default."""
        return output

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def convert(self, source: HtmlSource) -> str:
        """Convert HTML to wiki markup.

        Parameters
        ----------
        source : str, bytes, Path, file-like, BeautifulSoup or Tag
            HTML input; a parsed tree is modified in place by preprocessing

        Returns
        -------
        str
            Wiki markup

        """
        with debug_timer(logger, f"Converting ({self.dialect_name})"):
            root = load_html(source, self.options.html_parser)
            self.preprocess_tree(root)
            output = normalize_output(self.render_node(root))
            return self.postprocess_output(output)

    def render(self, source: HtmlSource, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Convert HTML and write the markup to a path or stream."""
        write_text(self.convert(source), output)

    # ------------------------------------------------------------------
    # Preprocessing
    # ------------------------------------------------------------------

    def preprocess_tree(self, root: Tag) -> None:
        """Run the generic cleanup and the dialect hook over every node.

        Nodes are visited in document order from a snapshot; anything
        removed by an earlier step is skipped. Text nodes are passed through
        :meth:`guard_text` once and flagged, so running this again changes
        nothing.
        """
        for node in list(root.descendants):
            if not is_attached(node, root):
                continue
            raw_text = str(node) if is_text_node(node) else None
            current = self._preprocess_generic(node)
            if current is None or not is_attached(current, root):
                continue
            self.preprocess_node(current)
            if raw_text is not None and not is_guarded(current) and is_attached(current, root):
                self.replace_text(current, self.guard_text(str(current), raw_text))

    def _preprocess_generic(self, node: PageElement) -> PageElement | None:
        if isinstance(node, PreformattedString):
            if is_comment_node(node) and not self.options.strip_comments:
                return node
            detach(node)
            return None

        if is_text_node(node):
            return self._normalize_text(node)

        if isinstance(node, Tag):
            name = tag_name(node)
            url_attribute = URL_ATTRIBUTES.get(name)
            if self.options.base_uri and url_attribute and node.get(url_attribute):
                node[url_attribute] = urljoin(self.options.base_uri, str(node[url_attribute]))
            if name == "caption" and not has_ancestor(node, "table"):
                node.name = "p"
        return node

    def _normalize_text(self, node: NavigableString) -> NavigableString | None:
        if is_guarded(node):
            return node

        text = str(node)
        if not text.strip(HTML_WHITESPACE) and tag_name(node.parent) in STRUCTURAL_CONTAINER_TAGS:
            detach(node)
            return None

        if not has_ancestor(node, "pre"):
            text = HTML_WHITESPACE_RUN.sub(" ", text)
        if self.options.escape_entities:
            text = escape_html_entities(text)

        if text == str(node):
            return node
        replacement = NavigableString(text)
        node.replace_with(replacement)
        return replacement

    @staticmethod
    def replace_text(node: NavigableString, text: str) -> NavigableString:
        """Replace the content of a text node and flag it as guarded."""
        if text == str(node):
            return mark_guarded(node)
        guarded = mark_guarded(NavigableString(text))
        node.replace_with(guarded)
        return guarded

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_node(self, node: PageElement) -> str:
        """Convert ``node`` and its subtree to markup."""
        if is_text_node(node):
            return str(node)
        if is_comment_node(node):
            return f"<!--{node}-->"
        if not isinstance(node, Tag):
            return ""

        name = tag_name(node)
        if isinstance(node, BeautifulSoup) or name in TRANSPARENT_TAGS:
            return self.get_elem_contents(node)

        rule = self.rules.lookup(name)
        if rule is None:
            return self._render_unknown(node)
        return self.apply_rule(node, rule)

    def get_elem_contents(self, node: Tag) -> str:
        """Return the converted content of ``node``'s children."""
        return "".join(self.render_node(child) for child in node.children)

    def get_attr_str(self, node: Tag, allowed: tuple[str, ...]) -> str:
        """Return the allow-listed attributes of ``node`` as ``name="value"`` pairs."""
        return format_attributes(node, allowed)

    def _render_unknown(self, node: Tag) -> str:
        mode = self.options.unknown_tags
        logger.debug("No rule for <%s>; handling as %s", node.name, mode)
        if mode == "strip":
            return ""
        content = self.get_elem_contents(node)
        if mode == "preserve":
            return f"<{node.name}>{content}</{node.name}>"
        return content

    def _expand(self, value: RuleText, node: Tag, rule: Rule) -> str:
        if callable(value):
            return value(self, node, rule) or ""
        return value

    def apply_rule(self, node: Tag, rule: Rule) -> str:
        """Render ``node`` according to a resolved (non-alias) ``rule``."""
        if rule.kind is RuleKind.DELETE:
            return ""
        if rule.kind is RuleKind.REPLACE:
            return self._expand(rule.replace, node, rule)

        if rule.kind is RuleKind.PRESERVE:
            start = self._preserve_start(node, rule)
            end = "" if rule.empty else f"</{node.name}>"
            content = "" if rule.empty else self.get_elem_contents(node)
        else:
            content = self.get_elem_contents(node)
            start = self._expand(rule.start, node, rule)
            end = self._expand(rule.end, node, rule)

        content = apply_trim(content, rule.trim)
        content = apply_line_format(content, rule.line_format)
        output = start + content + end

        if rule.line_prefix:
            output = prefix_lines(output, rule.line_prefix)
        if rule.block:
            output = f"\n\n{output}\n\n"
        return output

    def _preserve_start(self, node: Tag, rule: Rule) -> str:
        attrs = self.get_attr_str(node, rule.attributes)
        attr_str = f" {attrs}" if attrs else ""
        slash = " /" if rule.empty else ""
        return f"<{node.name}{attr_str}{slash}>"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(options={self.options!r})"

