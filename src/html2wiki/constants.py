#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the html2wiki library.

This module centralizes the hardcoded values used by the MediaWiki dialect:
attribute allow-lists, tag groups, text-escaping patterns and option
defaults.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Dependencies - Optional package requirements
3. Attribute Allow-Lists - Attributes kept on generated markup
4. Tag Groups - Element names grouped by rendering behavior
5. Text Escaping - Patterns that collide with wiki syntax
6. Defaults - Option default values
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

LineFormat = Literal["none", "single", "multi", "blocks"]
TrimPolicy = Literal["none", "leading", "trailing", "both"]
UnknownTagsMode = Literal["passthrough", "strip", "preserve"]
HtmlParserType = Literal["html.parser", "lxml", "html5lib"]

LINE_FORMATS: tuple[str, ...] = ("none", "single", "multi", "blocks")
TRIM_POLICIES: tuple[str, ...] = ("none", "leading", "trailing", "both")
UNKNOWN_TAGS_MODES: tuple[str, ...] = ("passthrough", "strip", "preserve")
HTML_PARSERS: tuple[str, ...] = ("html.parser", "lxml", "html5lib")

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_HTML_PARSER_BACKENDS = {
    "html.parser": [],
    "lxml": [("lxml", "lxml", "")],
    "html5lib": [("html5lib", "html5lib", "")],
}

# =============================================================================
# Attribute Allow-Lists
# =============================================================================

COMMON_ATTRIBUTES: tuple[str, ...] = ("id", "class", "lang", "dir", "title", "style")
BLOCK_ATTRIBUTES: tuple[str, ...] = COMMON_ATTRIBUTES + ("align",)
TABLE_ALIGN_ATTRIBUTES: tuple[str, ...] = ("align", "char", "charoff", "valign")
TABLE_CELL_ATTRIBUTES: tuple[str, ...] = (
    "abbr",
    "axis",
    "headers",
    "scope",
    "rowspan",
    "colspan",
    "nowrap",
    "width",
    "height",
    "bgcolor",
)

TABLE_START_ATTRIBUTES: tuple[str, ...] = COMMON_ATTRIBUTES + (
    "summary",
    "width",
    "border",
    "frame",
    "rules",
    "cellspacing",
    "cellpadding",
    "align",
    "bgcolor",
)
TABLE_ROW_ATTRIBUTES: tuple[str, ...] = COMMON_ATTRIBUTES + ("bgcolor",) + TABLE_ALIGN_ATTRIBUTES
TABLE_DATA_ATTRIBUTES: tuple[str, ...] = COMMON_ATTRIBUTES + TABLE_CELL_ATTRIBUTES + TABLE_ALIGN_ATTRIBUTES
CAPTION_ATTRIBUTES: tuple[str, ...] = COMMON_ATTRIBUTES + ("align",)

LINE_BREAK_ATTRIBUTES: tuple[str, ...] = ("id", "class", "title", "style", "clear")
BLOCKQUOTE_ATTRIBUTES: tuple[str, ...] = COMMON_ATTRIBUTES + ("cite",)
EDIT_ATTRIBUTES: tuple[str, ...] = COMMON_ATTRIBUTES + ("cite", "datetime")
FONT_ATTRIBUTES: tuple[str, ...] = COMMON_ATTRIBUTES + ("size", "color", "face")

# =============================================================================
# Tag Groups
# =============================================================================

# Kept as raw HTML; MediaWiki's sanitizer accepts them but has no markup for them
PRESERVED_TAGS: tuple[str, ...] = (
    "center",
    "cite",
    "code",
    "var",
    "sup",
    "sub",
    "tt",
    "big",
    "small",
    "strike",
    "s",
    "u",
    "ruby",
    "rb",
    "rt",
    "rp",
)

# Dropped together with their content
DISALLOWED_TAGS: tuple[str, ...] = ("head", "title", "script", "style", "meta", "link", "object")

HEADING_LEVELS = range(1, 7)

LIST_CONTAINER_TAGS: frozenset[str] = frozenset({"ul", "ol", "dl"})
LIST_ITEM_TAGS: frozenset[str] = frozenset({"li", "dt", "dd"})
LIST_MARKERS: dict[str, str] = {"ul": "*", "ol": "#", "dl": ":"}
DEFINITION_TERM_MARKER = ";"

TABLE_SECTION_TAGS: frozenset[str] = frozenset({"thead", "tbody", "tfoot"})

# Children that keep a table cell's content on the prefix line
PHRASAL_TAGS: frozenset[str] = frozenset(
    {
        "i",
        "em",
        "b",
        "strong",
        "u",
        "tt",
        "code",
        "span",
        "font",
        "sup",
        "sub",
        "br",
        "hr",
        "s",
        "strike",
        "del",
        "ins",
    }
)

# Document scaffolding and table sections: always rendered as their content
TRANSPARENT_TAGS: frozenset[str] = frozenset({"[document]", "html", "body", "thead", "tbody", "tfoot"})

# Whitespace-only text directly inside these elements carries no content
STRUCTURAL_CONTAINER_TAGS: frozenset[str] = frozenset(
    {"html", "head", "table", "thead", "tbody", "tfoot", "tr", "ul", "ol", "dl"}
)

# =============================================================================
# Text Escaping
# =============================================================================

# HTML whitespace; U+00A0 is content and never collapsed
HTML_WHITESPACE = " \t\n\r\f"
HTML_WHITESPACE_RUN = re.compile(r"[ \t\n\r\f]+")

NOWIKI_OPEN = "<nowiki>"
NOWIKI_CLOSE = "</nowiki>"

URL_PROTOCOLS: tuple[str, ...] = ("http", "https", "ftp", "irc", "gopher", "news", "mailto")
EXT_LINK_URL_CLASS = r'[^\]<>"\x00-\x20\x7f]'
EXT_LINK_TEXT_CLASS = r"[^\]\x00-\x1f\x7f]"

# Order matters only for which pattern is reported first. Line-start markers
# may follow blanks, which the final output pass strips.
WIKITEXT_COLLISION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"''"),
    re.compile(r"^[ \t]*[*#;:=!|]", re.MULTILINE),
    re.compile(r"^[ \t]*----", re.MULTILINE),
    re.compile(r"^[ \t]*\{\|", re.MULTILINE),
    re.compile(r"\[\["),
    re.compile(r"\{\{"),
)

BRACKETED_EXTERNAL_LINK_PATTERN = re.compile(
    r"\[\b(?:" + "|".join(URL_PROTOCOLS) + r"):" + EXT_LINK_URL_CLASS + r"+ *" + EXT_LINK_TEXT_CLASS + r"*?\]"
)

# Site furniture exported along with MediaWiki page bodies
SITE_FURNITURE_PATTERNS: dict[str, re.Pattern[str]] = {
    "id": re.compile(r"catlinks"),
    "class": re.compile(r"urlexpansion|printfooter|editsection"),
}

# Protects the leading space of preformatted lines until output is finalized
PRE_LINE_PREFIX = "[qzhvkwpxrjmbtnfgdlsycq]"

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PRESERVE_BOLD = False
DEFAULT_PRESERVE_ITALIC = False
DEFAULT_STRIP_COMMENTS = True
DEFAULT_ESCAPE_ENTITIES = True
DEFAULT_UNKNOWN_TAGS: UnknownTagsMode = "passthrough"
DEFAULT_IMAGE_NAMESPACE = "Image"
DEFAULT_HTML_PARSER: HtmlParserType = "html.parser"

# Attributes holding URLs that are resolved against base_uri
URL_ATTRIBUTES: dict[str, str] = {"a": "href", "img": "src"}

# Upper bound on parent-link walks; parsed trees are far shallower
MAX_ANCESTOR_DEPTH = 10_000
