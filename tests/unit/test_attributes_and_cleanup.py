#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for attribute filtering, noise removal and tree helpers."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup
from bs4.element import NavigableString

from html2wiki.utils.attributes import format_attributes
from html2wiki.utils.cleanup import is_site_furniture, strip_named_anchor, strip_site_furniture
from html2wiki.utils.tree import (
    delete,
    detach,
    get_attribute,
    has_ancestor,
    is_attached,
    is_guarded,
    is_removed,
    look_up_ancestors,
    mark_guarded,
    previous_sibling_element,
    tag_name,
)


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@pytest.mark.unit
class TestFormatAttributes:
    """Test the attribute filter."""

    def test_allowed_attributes_only(self) -> None:
        """Test that attributes outside the allow-list are dropped."""
        td = _soup('<td colspan="2" onclick="x()">a</td>').td
        assert format_attributes(td, ("colspan",)) == 'colspan="2"'

    def test_allow_list_order(self) -> None:
        """Test that output follows the allow-list, not the source order."""
        div = _soup('<div style="s" id="i" class="c"></div>').div
        assert format_attributes(div, ("id", "class", "style")) == 'id="i" class="c" style="s"'

    def test_none_present(self) -> None:
        """Test that no matching attributes gives an empty string."""
        assert format_attributes(_soup("<p>x</p>").p, ("id", "class")) == ""

    def test_multi_valued_class_joined(self) -> None:
        """Test that BeautifulSoup's class list is joined with spaces."""
        div = _soup('<div class="a  b"></div>').div
        assert format_attributes(div, ("class",)) == 'class="a b"'

    def test_values_escaped(self) -> None:
        """Test that quotes and ampersands in values are encoded."""
        span = _soup("<span title='say \"hi\" &amp; go'></span>").span
        assert format_attributes(span, ("title",)) == 'title="say &quot;hi&quot; &amp; go"'

    def test_empty_value_kept(self) -> None:
        """Test that a present but empty attribute is emitted."""
        td = _soup('<td nowrap="">a</td>').td
        assert format_attributes(td, ("nowrap",)) == 'nowrap=""'

    def test_duplicate_allow_list_entries(self) -> None:
        """Test that a name listed twice is emitted once."""
        table = _soup('<table frame="box"></table>').table
        assert format_attributes(table, ("frame", "frame")) == 'frame="box"'


@pytest.mark.unit
class TestCleanup:
    """Test named-anchor and site-furniture removal."""

    def test_named_anchor_unwrapped(self) -> None:
        """Test that an anchor without href is replaced by its content."""
        soup = _soup('<p>Go <a name="top">here</a> now</p>')
        assert strip_named_anchor(soup.a) is True
        assert soup.a is None
        assert soup.p.get_text() == "Go here now"

    def test_empty_href_is_a_named_anchor(self) -> None:
        """Test that an empty href does not make a usable link."""
        soup = _soup('<p><a href="">x</a></p>')
        assert strip_named_anchor(soup.a) is True

    def test_link_kept(self) -> None:
        """Test that real links are not touched."""
        soup = _soup('<p><a href="http://x.com">x</a></p>')
        assert strip_named_anchor(soup.a) is False
        assert soup.a is not None

    def test_other_tags_ignored(self) -> None:
        """Test that non-anchor nodes are not touched."""
        assert strip_named_anchor(_soup("<b>x</b>").b) is False

    @pytest.mark.parametrize(
        "html",
        [
            '<div id="catlinks">Categories</div>',
            '<div id="mw-normal-catlinks">Categories</div>',
            '<span class="urlexpansion">(http://x)</span>',
            '<div class="printfooter">Retrieved</div>',
            '<span class="mw-editsection">[edit]</span>',
            '<span class="plain editsection">[edit]</span>',
        ],
    )
    def test_furniture_detected(self, html: str) -> None:
        """Test that boilerplate ids and classes are recognized."""
        assert is_site_furniture(_soup(html).contents[0])

    def test_content_not_furniture(self) -> None:
        """Test that ordinary elements are kept."""
        assert not is_site_furniture(_soup('<div id="content" class="body">x</div>').div)

    def test_strip_site_furniture_destroys_node(self) -> None:
        """Test that furniture is detached and destroyed with its subtree."""
        soup = _soup('<body><div id="catlinks"><a href="/c">C</a></div><p>x</p></body>')
        div = soup.div
        assert strip_site_furniture(div) is True
        assert is_removed(div)
        assert str(soup) == "<body><p>x</p></body>"

    def test_strip_site_furniture_keeps_content(self) -> None:
        """Test that ordinary elements survive."""
        soup = _soup("<p>x</p>")
        assert strip_site_furniture(soup.p) is False
        assert str(soup) == "<p>x</p>"


@pytest.mark.unit
class TestTreeHelpers:
    """Test BeautifulSoup tree helpers."""

    def test_tag_name(self) -> None:
        """Test tag names and pseudo-names."""
        soup = _soup("<P>text<!--c--></P>")
        text, comment = soup.p.contents
        assert tag_name(soup.p) == "p"
        assert tag_name(text) == "~text"
        assert tag_name(comment) == "~comment"

    def test_look_up_ancestors_outer_first(self) -> None:
        """Test that ancestors are ordered outermost first."""
        soup = _soup('<ul id="a"><li><ol id="b"><li id="x">x</li></ol></li></ul>')
        found = look_up_ancestors(soup.find(id="x"), ("ul", "ol"))
        assert [tag.get("id") for tag in found] == ["a", "b"]

    def test_look_up_ancestors_excludes_self(self) -> None:
        """Test that the starting node is not included."""
        soup = _soup("<ul><li>x</li></ul>")
        assert look_up_ancestors(soup.ul, ("ul",)) == []

    def test_has_ancestor(self) -> None:
        """Test single-tag ancestor checks."""
        soup = _soup("<pre><b>x</b></pre>")
        assert has_ancestor(soup.b, "pre")
        assert not has_ancestor(soup.pre, "pre")

    def test_previous_sibling_element_skips_noise(self) -> None:
        """Test that whitespace and comments are skipped."""
        soup = _soup("<tr><td>a</td> <!-- c -->\n<td id='x'>b</td></tr>")
        assert previous_sibling_element(soup.find(id="x")) is soup.td

    def test_get_attribute(self) -> None:
        """Test attribute access as text."""
        div = _soup('<div class="a b" title="t"></div>').div
        assert get_attribute(div, "class") == "a b"
        assert get_attribute(div, "title") == "t"
        assert get_attribute(div, "id") is None

    def test_is_attached(self) -> None:
        """Test reachability from the root."""
        soup = _soup("<p><b>x</b></p>")
        bold = soup.b
        assert is_attached(bold, soup)
        bold.extract()
        assert not is_attached(bold, soup)

    def test_detach_keeps_subtree(self) -> None:
        """Test that a detached element keeps its children."""
        soup = _soup("<div><p><b>x</b></p></div>")
        paragraph = detach(soup.p)
        assert str(soup) == "<div></div>"
        assert paragraph.b.get_text() == "x"
        assert not is_removed(paragraph)

    def test_delete_text_node(self) -> None:
        """Test that deleting a string detaches it."""
        soup = _soup("<p>x<b>y</b></p>")
        delete(soup.p.contents[0])
        assert str(soup) == "<p><b>y</b></p>"

    def test_guarded_text_stays_visible(self) -> None:
        """Test that flagged text keeps its type and is still reported by get_text()."""
        soup = _soup("<p>x</p>")
        node = soup.p.contents[0]
        assert not is_guarded(node)

        mark_guarded(node)

        assert is_guarded(soup.p.contents[0])
        assert type(soup.p.contents[0]) is NavigableString
        assert soup.p.get_text() == "x"
        assert list(soup.p.strings) == ["x"]

    def test_tags_are_never_guarded(self) -> None:
        """Test that only text nodes carry the flag."""
        assert not is_guarded(_soup("<p>x</p>").p)
