#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for html2wiki dialects.

Options are frozen dataclasses: build one per conversion session and use
``create_updated()`` to derive variants.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from html2wiki.options.base import BaseConverterOptions, CloneFrozenMixin
from html2wiki.options.mediawiki import MediaWikiOptions, WikiUriSpec


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Field names and their new values

    Returns
    -------
    Any
        New options instance; the original is left untouched

    """
    return replace(options, **kwargs)


__all__ = [
    "BaseConverterOptions",
    "CloneFrozenMixin",
    "MediaWikiOptions",
    "WikiUriSpec",
    "create_updated_options",
]
