"""Test utilities for html2wiki test suite.

This module provides sample HTML documents, structural checks for generated
MediaWiki markup, and temporary directory helpers.
"""

import re
import tempfile
from pathlib import Path

from html2wiki.constants import NOWIKI_CLOSE, NOWIKI_OPEN


class HtmlTestGenerator:
    """Generator for HTML test content with MediaWiki edge cases."""

    @staticmethod
    def create_wiki_export_html() -> str:
        """Create a page body as exported from a MediaWiki site, furniture included."""
        return """
        <html>
        <head><title>Python (programming language)</title><style>.x {}</style></head>
        <body>
            <h1>Python</h1>
            <a name="top"></a>
            <h2><span class="editsection">[<a href="/w/index.php?action=edit">edit</a>]</span> History</h2>
            <p>Python was created by <a href="http://en.wikipedia.org/wiki/Guido_van_Rossum">Guido van Rossum</a>
               and first released in 1991.</p>
            <p>See the <a href="http://www.python.org/">official site</a>.</p>
            <div class="printfooter">Retrieved from somewhere</div>
            <div id="catlinks">Categories: Programming languages</div>
        </body>
        </html>
        """

    @staticmethod
    def create_table_html() -> str:
        """Create a table with a caption, a header row and two data rows."""
        return """
        <table class="wikitable" border="1" onclick="evil()">
            <caption>Releases</caption>
            <tr><th>Version</th><th>Year</th></tr>
            <tr><td>2.0</td><td>2000</td></tr>
            <tr><td colspan="2"><div>Still going</div></td></tr>
        </table>
        """

    @staticmethod
    def create_nested_lists_html() -> str:
        """Create nested bullet, numbered and definition lists."""
        return """
        <ul>
            <li>Fruit
                <ol>
                    <li>Apple</li>
                    <li>Pear</li>
                </ol>
            </li>
            <li>Vegetables</li>
        </ul>
        <dl>
            <dt>Term</dt>
            <dd>Definition</dd>
        </dl>
        """


def assert_wikitext_balanced(wikitext: str) -> None:
    """Assert that table and nowiki delimiters in ``wikitext`` are balanced."""
    table_opens = len(re.findall(r"^\{\|", wikitext, flags=re.MULTILINE))
    table_closes = len(re.findall(r"^\|\}", wikitext, flags=re.MULTILINE))
    assert table_opens == table_closes, f"unbalanced tables in:\n{wikitext}"
    assert wikitext.count(NOWIKI_OPEN) == wikitext.count(NOWIKI_CLOSE), f"unbalanced nowiki in:\n{wikitext}"


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    import shutil
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
