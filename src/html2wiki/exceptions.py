#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2wiki library.

This module defines specialized exception classes for the error conditions
that can occur while turning an HTML tree into wiki markup. These exceptions
provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- Html2WikiError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - ConfigurationError (broken rule table, fatal at session start)

  - ParsingError (input could not be loaded into a tree)

  - DependencyError (missing/incompatible packages)

- MalformedInputWarning (non-fatal, element degraded to a fallback)

"""

from __future__ import annotations

from typing import Any


class Html2WikiError(Exception):
    """Base exception class for all html2wiki-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Html2WikiError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    converter_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(Html2WikiError):
    """Exception raised when a rule table cannot be resolved.

    Raised while a conversion session is being set up, before any node is
    visited: an alias rule points at a tag with no rule, or a chain of
    aliases loops back on itself.

    Parameters
    ----------
    message : str
        Description of the configuration defect
    tag : str, optional
        Tag whose rule could not be resolved
    chain : sequence of str, optional
        Alias chain followed before the defect was detected

    """

    def __init__(
        self,
        message: str,
        tag: str | None = None,
        chain: tuple[str, ...] = (),
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error with the offending alias chain."""
        super().__init__(message, original_error=original_error)
        self.tag = tag
        self.chain = chain


class ParsingError(Html2WikiError):
    """Exception raised when the input cannot be loaded into an HTML tree.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage at which loading failed (e.g., "reading", "decoding")

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class DependencyError(Html2WikiError):
    """Exception raised when required dependencies are missing or incompatible.

    Parameters
    ----------
    converter_name : str
        Name of the component that needs the dependencies
    missing_packages : list of tuple
        (package_name, version_spec) pairs that are not installed
    version_mismatches : list of tuple, optional
        (package_name, required_version, installed_version) triples
    install_command : str, optional
        Suggested pip command. Generated from the package lists when omitted
    message : str, optional
        Custom error message
    original_import_error : ImportError, optional
        The ImportError raised while importing the first missing package

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]] | None = None,
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.converter_name = converter_name
        self.missing_packages = missing_packages or []
        self.version_mismatches = version_mismatches or []

        if not install_command:
            specs = [f"{pkg}{spec}" if spec else pkg for pkg, spec in self.missing_packages]
            specs.extend(f"{pkg}{required}" for pkg, required, _ in self.version_mismatches)
            install_command = "pip install " + " ".join(f'"{spec}"' for spec in specs) if specs else ""
        self.install_command = install_command

        if message is None:
            parts = [f"'{converter_name}' requires additional dependencies."]
            if self.missing_packages:
                parts.append("Missing: " + ", ".join(pkg for pkg, _ in self.missing_packages) + ".")
            for pkg, required, installed in self.version_mismatches:
                parts.append(f"{pkg} {installed} is installed but {required} is required.")
            if install_command:
                parts.append(f"Install with: {install_command}")
            message = " ".join(parts)

        super().__init__(message, original_error=original_import_error)
        self.original_import_error = original_import_error


class MalformedInputWarning(UserWarning):
    """Warning emitted when an element lacks data its rule needs.

    The element is rendered with its documented fallback (for instance an
    image without ``src`` becomes an empty string) and conversion continues.
    """


__all__ = [
    "Html2WikiError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigurationError",
    "ParsingError",
    "DependencyError",
    "MalformedInputWarning",
]
