#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/decorators.py
"""Utility decorators for html2wiki loaders and renderers.

This module provides the dependency check applied to entry points that need
optional packages, and a timing helper for DEBUG logging.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from html2wiki.exceptions import DependencyError
from html2wiki.utils.packages import check_version_requirement


def check_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> None:
    """Raise DependencyError unless every package in ``packages`` is importable.

    Parameters
    ----------
    converter_name : str
        Component name shown in the error message (e.g., "html")
    packages : list of tuple
        (install_name, import_name, version_spec) triples; an empty
        version_spec accepts any installed version

    Raises
    ------
    DependencyError
        If a package is missing or its version does not satisfy the version specifier

    """
    missing = []
    version_mismatches = []
    original_error = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            if original_error is None:
                original_error = e
            continue

        if version_spec:
            meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
            if not meets_requirement:
                version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

    if missing or version_mismatches:
        raise DependencyError(
            converter_name=converter_name,
            missing_packages=missing,
            version_mismatches=version_mismatches,
            original_import_error=original_error,
        ) from original_error


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the component needing the packages
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples

    Returns
    -------
    Callable
        Decorated callable that checks dependencies before execution

    Examples
    --------
        >>> @requires_dependencies("html", [("beautifulsoup4", "bs4", ">=4.12.0")])
        ... def load(markup):
        ...     from bs4 import BeautifulSoup
        ...     return BeautifulSoup(markup, "html.parser")

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check_dependencies(converter_name, packages)
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the duration at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Converting (mediawiki)")

    Notes
    -----
    Nothing is measured when DEBUG logging is disabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.3f}s")
    else:
        yield
