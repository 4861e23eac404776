"""Unit tests for dependency checks and package version helpers."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

import html2wiki.utils.decorators
from html2wiki.exceptions import DependencyError
from html2wiki.parsers import load_html
from html2wiki.utils.decorators import check_dependencies, debug_timer, requires_dependencies
from html2wiki.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the requires_dependencies decorator."""

    def test_missing_package_raises_error(self) -> None:
        """Test that a missing package raises DependencyError."""

        @requires_dependencies("test", [("nonexistent-package", "nonexistent", "")])
        def sample_function() -> str:
            return "success"

        with pytest.raises(DependencyError) as exc_info:
            sample_function()

        assert exc_info.value.converter_name == "test"
        assert ("nonexistent-package", "") in exc_info.value.missing_packages
        assert exc_info.value.original_import_error is not None
        assert 'pip install "nonexistent-package"' in str(exc_info.value)

    def test_version_mismatch_raises_error(self) -> None:
        """Test that an installed package with wrong version raises DependencyError."""
        with patch("html2wiki.utils.decorators.importlib.import_module"):
            with patch.object(html2wiki.utils.decorators, "check_version_requirement", return_value=(False, "1.0.0")):

                @requires_dependencies("test", [("test-package", "test_package", ">=2.0.0")])
                def sample_function() -> str:
                    return "success"

                with pytest.raises(DependencyError) as exc_info:
                    sample_function()

                assert len(exc_info.value.missing_packages) == 0
                assert ("test-package", ">=2.0.0", "1.0.0") in exc_info.value.version_mismatches
                assert "1.0.0 is installed" in str(exc_info.value)

    def test_correct_version_succeeds(self) -> None:
        """Test that an installed package with correct version allows execution."""
        with patch("html2wiki.utils.decorators.importlib.import_module"):
            with patch.object(html2wiki.utils.decorators, "check_version_requirement", return_value=(True, "2.5.0")):

                @requires_dependencies("test", [("test-package", "test_package", ">=2.0.0")])
                def sample_function() -> str:
                    return "success"

                assert sample_function() == "success"

    def test_no_version_spec_allows_any_version(self) -> None:
        """Test that empty version spec allows any installed version."""
        with patch("html2wiki.utils.decorators.importlib.import_module"):
            check_dependencies("test", [("test-package", "test_package", "")])

    def test_wrapped_function_metadata(self) -> None:
        """Test that functools.wraps keeps the name and docstring."""
        assert load_html.__name__ == "load_html"
        assert "BeautifulSoup tree" in (load_html.__doc__ or "")

    def test_missing_tree_builder(self) -> None:
        """Test that selecting an uninstalled tree builder raises DependencyError."""
        with patch.object(html2wiki.utils.decorators.importlib, "import_module", side_effect=ImportError("no lxml")):
            with pytest.raises(DependencyError) as exc_info:
                check_dependencies("html", [("lxml", "lxml", "")])

        assert exc_info.value.missing_packages == [("lxml", "")]


@pytest.mark.unit
class TestPackageVersions:
    """Test installed-version lookups."""

    def test_installed_package(self) -> None:
        """Test that beautifulsoup4 is found and satisfies the base requirement."""
        assert get_package_version("beautifulsoup4")
        meets, installed = check_version_requirement("beautifulsoup4", ">=4.0")
        assert meets is True
        assert installed

    def test_unmet_requirement(self) -> None:
        """Test a requirement no installed version can meet."""
        meets, installed = check_version_requirement("beautifulsoup4", ">=999")
        assert meets is False
        assert installed

    def test_missing_package(self) -> None:
        """Test a distribution that is not installed."""
        assert get_package_version("definitely-not-installed-pkg") is None
        assert check_version_requirement("definitely-not-installed-pkg", ">=1") == (False, None)

    def test_invalid_specifier(self) -> None:
        """Test that malformed specifiers raise ValueError."""
        with pytest.raises(ValueError, match="Invalid version specifier"):
            check_version_requirement("beautifulsoup4", "not a spec")


@pytest.mark.unit
class TestDebugTimer:
    """Test the timing context manager."""

    def test_logs_when_debug_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the duration is logged at DEBUG level."""
        logger = logging.getLogger("html2wiki.test_timer")
        with caplog.at_level(logging.DEBUG, logger="html2wiki.test_timer"):
            with debug_timer(logger, "Converting (test)"):
                pass

        assert any("Converting (test) completed in" in record.message for record in caplog.records)

    def test_silent_otherwise(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that nothing is logged above DEBUG level."""
        logger = logging.getLogger("html2wiki.test_timer_quiet")
        logger.setLevel(logging.INFO)
        with debug_timer(logger, "Quiet"):
            pass

        assert not [record for record in caplog.records if record.name == "html2wiki.test_timer_quiet"]
