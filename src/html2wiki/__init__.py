"""html2wiki - convert HTML documents to MediaWiki markup.

html2wiki reads HTML (a string, bytes, a file or an already parsed
BeautifulSoup tree) and produces the equivalent MediaWiki markup. Elements
MediaWiki has syntax for become wiki markup, elements its sanitizer accepts
are kept as HTML with a filtered attribute set, and everything else is
reduced to its content.

Key Features
------------
- Declarative, per-session rule table with load-time alias resolution
- Nested ``*``/``#``/``:``/``;`` list prefixes
- Internal ``[[Title]]`` versus external ``[url text]`` link classification
- Compact or block layout of table cells depending on their content
- ``<nowiki>`` guarding of text that would be read as wiki syntax

Requirements
------------
- Python 3.10+
- beautifulsoup4 (optional lxml or html5lib tree builders)

Examples
--------
    >>> from html2wiki import html2wiki
    >>> html2wiki("<h2>Usage</h2><ol><li>Install</li><li>Run</li></ol>")
    '== Usage ==\\n\\n# Install\\n# Run'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "html2wiki requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from html2wiki.api import html2wiki
from html2wiki.exceptions import (
    ConfigurationError,
    DependencyError,
    Html2WikiError,
    InvalidOptionsError,
    MalformedInputWarning,
    ParsingError,
    ValidationError,
)
from html2wiki.options import BaseConverterOptions, MediaWikiOptions
from html2wiki.renderers import BaseWikiRenderer, MediaWikiRenderer
from html2wiki.rules import Rule, RuleKind, RuleTable

__all__ = [
    "__version__",
    "html2wiki",
    "BaseConverterOptions",
    "BaseWikiRenderer",
    "ConfigurationError",
    "DependencyError",
    "Html2WikiError",
    "InvalidOptionsError",
    "MalformedInputWarning",
    "MediaWikiOptions",
    "MediaWikiRenderer",
    "ParsingError",
    "Rule",
    "RuleKind",
    "RuleTable",
    "ValidationError",
]
