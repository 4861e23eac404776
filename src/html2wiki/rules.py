#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/rules.py
"""Declarative element rules and the session rule table.

Each HTML element name maps to one :class:`Rule` describing how the element
becomes markup. A dialect declares its rules as a plain mapping; the
:class:`RuleTable` built from it resolves every alias up front, so a lookup
during the tree walk is a single dictionary access.

Examples
--------
    >>> table = RuleTable({
    ...     "em": Rule.wrap("''", "''", line_format="single"),
    ...     "i": Rule.alias_of("em"),
    ... })
    >>> table.lookup("i").start
    "''"

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterator, Mapping, Union

from html2wiki.constants import LINE_FORMATS, TRIM_POLICIES, LineFormat, TrimPolicy
from html2wiki.exceptions import ConfigurationError

if TYPE_CHECKING:
    from bs4.element import Tag

logger = logging.getLogger(__name__)

RuleCallback = Callable[[Any, "Tag", "Rule"], str]
RuleText = Union[str, RuleCallback]


class RuleKind(str, Enum):
    """Rendering behavior selected by a rule."""

    REPLACE = "replace"
    WRAP = "wrap"
    PRESERVE = "preserve"
    ALIAS = "alias"
    DELETE = "delete"


@dataclass(frozen=True)
class Rule:
    """Immutable description of how one element is rendered.

    Parameters
    ----------
    kind : RuleKind
        Discriminant; selects which of the remaining fields are meaningful.
    start, end : str or callable
        Markup placed around the converted content (WRAP). Callables are
        invoked as ``callback(renderer, node, rule)``.
    replace : str or callable
        Output used instead of the element and its content (REPLACE).
    block : bool
        Surround the result with blank lines.
    line_format : {"none", "single", "multi", "blocks"}
        Newline normalization applied to the converted content.
    trim : {"none", "leading", "trailing", "both"}
        Whitespace trimming applied to the converted content.
    line_prefix : str
        Text inserted at the start of every output line.
    attributes : tuple of str
        Allow-list of attributes kept on preserved elements.
    empty : bool
        Preserved element is a void element (``<br />``).
    alias : str or None
        Tag whose rule this rule stands for (ALIAS).

    """

    kind: RuleKind
    start: RuleText = ""
    end: RuleText = ""
    replace: RuleText = ""
    block: bool = False
    line_format: LineFormat = "none"
    trim: TrimPolicy = "none"
    line_prefix: str = ""
    attributes: tuple[str, ...] = ()
    empty: bool = False
    alias: str | None = None

    def __post_init__(self) -> None:
        """Validate the descriptor fields."""
        if self.line_format not in LINE_FORMATS:
            raise ConfigurationError(f"Unknown line format {self.line_format!r}")
        if self.trim not in TRIM_POLICIES:
            raise ConfigurationError(f"Unknown trim policy {self.trim!r}")
        if self.kind is RuleKind.ALIAS and not self.alias:
            raise ConfigurationError("Alias rule requires a target tag")

    @classmethod
    def wrap(cls, start: RuleText = "", end: RuleText = "", **kwargs: Any) -> Rule:
        """Create a rule that surrounds converted content with ``start``/``end``."""
        return cls(RuleKind.WRAP, start=start, end=end, **kwargs)

    @classmethod
    def replace_with(cls, replace: RuleText) -> Rule:
        """Create a rule that substitutes the whole element."""
        return cls(RuleKind.REPLACE, replace=replace)

    @classmethod
    def preserve(cls, attributes: tuple[str, ...] = (), **kwargs: Any) -> Rule:
        """Create a rule that keeps the element as raw HTML."""
        return cls(RuleKind.PRESERVE, attributes=tuple(attributes), **kwargs)

    @classmethod
    def alias_of(cls, tag: str) -> Rule:
        """Create a rule that reuses the rule of another tag."""
        return cls(RuleKind.ALIAS, alias=tag)

    @classmethod
    def delete(cls) -> Rule:
        """Create a rule that drops the element and its content."""
        return cls(RuleKind.DELETE)


def resolve_alias(rules: Mapping[str, Rule], tag: str) -> Rule:
    """Follow alias rules from ``tag`` to a terminal rule.

    Parameters
    ----------
    rules : Mapping[str, Rule]
        Raw rule declarations, possibly containing aliases
    tag : str
        Tag to resolve

    Returns
    -------
    Rule
        The first non-alias rule on the chain

    Raises
    ------
    ConfigurationError
        If the chain references a tag without a rule or loops

    """
    chain: list[str] = [tag]
    rule = rules.get(tag)
    if rule is None:
        raise ConfigurationError(f"No rule defined for tag '{tag}'", tag=tag, chain=tuple(chain))

    while rule.kind is RuleKind.ALIAS:
        target = rule.alias or ""
        if target in chain:
            chain.append(target)
            raise ConfigurationError(
                f"Alias cycle detected for tag '{tag}': {' -> '.join(chain)}", tag=tag, chain=tuple(chain)
            )
        chain.append(target)
        next_rule = rules.get(target)
        if next_rule is None:
            raise ConfigurationError(
                f"Rule for '{tag}' aliases unknown tag '{target}'", tag=tag, chain=tuple(chain)
            )
        rule = next_rule

    return rule


class RuleTable(Mapping[str, Rule]):
    """Read-only mapping from tag name to a resolved (non-alias) rule.

    The table is built once per conversion session. Aliases are resolved at
    construction, so :meth:`lookup` never returns an ALIAS rule.

    Parameters
    ----------
    rules : Mapping[str, Rule]
        Rule declarations keyed by lower-case tag name

    Raises
    ------
    ConfigurationError
        If any alias cannot be resolved

    """

    def __init__(self, rules: Mapping[str, Rule]):
        """Resolve all declarations into terminal rules."""
        declared = {tag.lower(): rule for tag, rule in rules.items()}
        self._rules: dict[str, Rule] = {tag: resolve_alias(declared, tag) for tag in declared}
        logger.debug("Built rule table with %d tags", len(self._rules))

    def lookup(self, tag: str) -> Rule | None:
        """Return the rule for ``tag``, or None when the tag has no rule."""
        return self._rules.get(tag.lower())

    def __getitem__(self, tag: str) -> Rule:
        return self._rules[tag.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._rules)} tags)"


__all__ = ["Rule", "RuleCallback", "RuleKind", "RuleTable", "RuleText", "resolve_alias"]
