"""Base classes for parser and renderer options.

This module defines the foundation classes for the format-specific options
used throughout the gdoc2md conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers turn either the document tree (HTML) or the intermediate
    Markdown model (Markdown) into text.

    Parameters
    ----------
    output_encoding : str, default "utf-8"
        Encoding used when rendered text is written to a path or binary stream

    """

    output_encoding: str = field(
        default="utf-8",
        metadata={"help": "Encoding used when writing rendered output to files", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If the output encoding is empty.

        """
        if not self.output_encoding:
            raise ValueError("output_encoding must be a non-empty codec name")


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers turn a source document into a document tree.

    Parameters
    ----------
    extract_metadata : bool, default True
        Whether to copy document metadata (such as the title) into
        ``Root.metadata``

    """

    extract_metadata: bool = field(
        default=True,
        metadata={"help": "Copy document metadata (title, ids) into the tree", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate base parser options."""
        pass
