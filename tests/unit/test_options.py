#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for converter options."""

from __future__ import annotations

import dataclasses
import re

import pytest

from html2wiki.options import BaseConverterOptions, MediaWikiOptions, create_updated_options


@pytest.mark.unit
class TestBaseConverterOptions:
    """Test the dialect-independent options."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = BaseConverterOptions()
        assert options.html_parser == "html.parser"
        assert options.strip_comments is True
        assert options.escape_entities is True
        assert options.unknown_tags == "passthrough"
        assert options.base_uri is None

    def test_frozen(self) -> None:
        """Test that options cannot be modified in place."""
        options = BaseConverterOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.strip_comments = False  # type: ignore[misc]

    def test_invalid_html_parser(self) -> None:
        """Test that unknown tree builders are rejected."""
        with pytest.raises(ValueError, match="html_parser"):
            BaseConverterOptions(html_parser="regex")  # type: ignore[arg-type]

    def test_invalid_unknown_tags(self) -> None:
        """Test that unknown handling modes are rejected."""
        with pytest.raises(ValueError, match="unknown_tags"):
            BaseConverterOptions(unknown_tags="explode")  # type: ignore[arg-type]

    def test_field_metadata(self) -> None:
        """Test that every field carries help text for the CLI."""
        for field in dataclasses.fields(MediaWikiOptions):
            assert field.metadata.get("help"), field.name


@pytest.mark.unit
class TestMediaWikiOptions:
    """Test MediaWiki options."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = MediaWikiOptions()
        assert options.preserve_bold is False
        assert options.preserve_italic is False
        assert options.wiki_uri == ()
        assert options.image_namespace == "Image"

    def test_create_updated(self) -> None:
        """Test that create_updated returns a modified copy."""
        options = MediaWikiOptions()
        updated = options.create_updated(preserve_bold=True, image_namespace="File")

        assert updated.preserve_bold is True
        assert updated.image_namespace == "File"
        assert options.preserve_bold is False
        assert isinstance(updated, MediaWikiOptions)

    def test_create_updated_options_helper(self) -> None:
        """Test the module-level helper."""
        updated = create_updated_options(MediaWikiOptions(), strip_comments=False)
        assert updated.strip_comments is False

    def test_create_updated_revalidates(self) -> None:
        """Test that invalid values are rejected on update too."""
        with pytest.raises(ValueError):
            MediaWikiOptions().create_updated(image_namespace="")

    def test_single_prefix_wrapped(self) -> None:
        """Test that one prefix string becomes a one-element tuple."""
        options = MediaWikiOptions(wiki_uri="http://w/wiki/")  # type: ignore[arg-type]
        assert options.wiki_uri == ("http://w/wiki/",)

    def test_single_pattern_wrapped(self) -> None:
        """Test that one compiled pattern becomes a one-element tuple."""
        pattern = re.compile(r"title=([^&]+)")
        options = MediaWikiOptions(wiki_uri=pattern)  # type: ignore[arg-type]
        assert options.wiki_uri == (pattern,)

    def test_single_callable_wrapped(self) -> None:
        """Test that one callable becomes a one-element tuple."""

        def recognizer(url: str) -> str | None:
            return None

        options = MediaWikiOptions(wiki_uri=recognizer)  # type: ignore[arg-type]
        assert options.wiki_uri == (recognizer,)

    def test_list_converted_to_tuple(self) -> None:
        """Test that sequences are stored as tuples, keeping order."""
        options = MediaWikiOptions(wiki_uri=["http://a/", "http://b/"])  # type: ignore[arg-type]
        assert options.wiki_uri == ("http://a/", "http://b/")
        assert hash(options) is not None

    def test_none_means_no_recognizers(self) -> None:
        """Test that None is accepted."""
        assert MediaWikiOptions(wiki_uri=None).wiki_uri == ()  # type: ignore[arg-type]

    def test_invalid_wiki_uri_entry(self) -> None:
        """Test that unsupported entries are rejected."""
        with pytest.raises(ValueError, match="wiki_uri"):
            MediaWikiOptions(wiki_uri=("http://a/", 42))  # type: ignore[arg-type]

    def test_invalid_wiki_uri_type(self) -> None:
        """Test that unsupported containers are rejected."""
        with pytest.raises(ValueError, match="wiki_uri"):
            MediaWikiOptions(wiki_uri=42)  # type: ignore[arg-type]

    @pytest.mark.parametrize("namespace", ["", "File:Extra"])
    def test_invalid_image_namespace(self, namespace: str) -> None:
        """Test that empty names and names with ':' are rejected."""
        with pytest.raises(ValueError, match="image_namespace"):
            MediaWikiOptions(image_namespace=namespace)

    def test_base_validation_runs(self) -> None:
        """Test that the base validation applies to subclasses."""
        with pytest.raises(ValueError, match="html_parser"):
            MediaWikiOptions(html_parser="nope")  # type: ignore[arg-type]
