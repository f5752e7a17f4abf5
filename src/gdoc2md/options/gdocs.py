#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Google Docs JSON parsing.

This module defines options for turning a Google Docs API ``documents.get``
response into a document tree.
"""

from dataclasses import dataclass, field

from gdoc2md.constants import (
    DEFAULT_GDOCS_SKIP_EMPTY_PARAGRAPHS,
    DEFAULT_GDOCS_SUBTITLE_LEVEL,
    DEFAULT_GDOCS_TITLE_LEVEL,
)
from gdoc2md.options.base import BaseParserOptions


# src/gdoc2md/options/gdocs.py
@dataclass(frozen=True)
class GoogleDocsOptions(BaseParserOptions):
    """Configuration options for Google Docs-to-tree parsing.

    Parameters
    ----------
    title_heading_level : int, default 1
        Heading level for paragraphs styled ``TITLE``.
    subtitle_heading_level : int, default 2
        Heading level for paragraphs styled ``SUBTITLE``.
    skip_empty_paragraphs : bool, default True
        Drop paragraphs that contain no text.
    preserve_text_styles : bool, default True
        Keep colour, font size and font family as a ``span`` style attribute.
        Bold, italic, underline and similar flags are always kept as elements.
    include_links : bool, default True
        Wrap linked text runs in ``a`` elements.

    """

    title_heading_level: int = field(
        default=DEFAULT_GDOCS_TITLE_LEVEL,
        metadata={"help": "Heading level for TITLE paragraphs", "type": int, "importance": "advanced"},
    )
    subtitle_heading_level: int = field(
        default=DEFAULT_GDOCS_SUBTITLE_LEVEL,
        metadata={"help": "Heading level for SUBTITLE paragraphs", "type": int, "importance": "advanced"},
    )
    skip_empty_paragraphs: bool = field(
        default=DEFAULT_GDOCS_SKIP_EMPTY_PARAGRAPHS,
        metadata={
            "help": "Drop paragraphs without text",
            "cli_name": "keep-empty-paragraphs",
            "importance": "core",
        },
    )
    preserve_text_styles: bool = field(
        default=True,
        metadata={
            "help": "Keep colour and font settings as span style attributes",
            "cli_name": "no-preserve-text-styles",
            "importance": "advanced",
        },
    )
    include_links: bool = field(
        default=True,
        metadata={"help": "Keep hyperlinks on linked text runs", "cli_name": "no-links", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate heading levels.

        Raises
        ------
        ValueError
            If a heading level is outside 1-6.

        """
        super().__post_init__()

        for name in ("title_heading_level", "subtitle_heading_level"):
            level = getattr(self, name)
            if not 1 <= level <= 6:
                raise ValueError(f"{name} must be between 1 and 6, got {level}")
