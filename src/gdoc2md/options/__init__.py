#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for gdoc2md parsers and renderers.

Each parser and renderer has its own frozen Options dataclass. Instances are
immutable; use ``create_updated`` (or ``create_updated_options``) to derive a
modified copy.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from gdoc2md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from gdoc2md.options.gdocs import GoogleDocsOptions
from gdoc2md.options.html import HtmlParserOptions, HtmlRendererOptions
from gdoc2md.options.markdown import MarkdownRendererOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Keyword arguments with the field names and new values to update

    Returns
    -------
    Any
        A new options instance with the updated values

    Examples
    --------
    >>> original = MarkdownRendererOptions()
    >>> updated = create_updated_options(original, fallback_mode="plain")

    """
    return replace(options, **kwargs)


__all__ = [
    "CloneFrozenMixin",
    "BaseRendererOptions",
    "BaseParserOptions",
    "GoogleDocsOptions",
    "HtmlParserOptions",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
    "create_updated_options",
]
