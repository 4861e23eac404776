"""Pytest configuration and shared fixtures for html2wiki test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir

from html2wiki.options import MediaWikiOptions
from html2wiki.renderers import MediaWikiRenderer

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def renderer() -> MediaWikiRenderer:
    """Provide a MediaWiki renderer with default options."""
    return MediaWikiRenderer()


@pytest.fixture
def wiki_renderer() -> MediaWikiRenderer:
    """Provide a MediaWiki renderer that recognizes ``http://w/wiki/`` as internal."""
    return MediaWikiRenderer(MediaWikiOptions(wiki_uri=("http://w/wiki/",)))


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo the root logger changes made by the command-line tool."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        logging.captureWarnings(False)
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
