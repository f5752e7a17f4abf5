#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering and the degradation pipeline."""
# src/gdoc2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from gdoc2md.constants import (
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_COLLAPSE_BLANK_LINES,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_ESCAPE_SPECIAL,
    DEFAULT_FALLBACK_MODE,
    DEFAULT_HEADING_LEVEL_OFFSET,
    DEFAULT_USE_HASH_HEADINGS,
    CodeFenceChar,
    EmphasisSymbol,
    FallbackMode,
)
from gdoc2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options.

    The Markdown renderer honors every field. The structural converter
    always overrides ``bullet_symbol``, ``code_fence_char`` and
    ``increment_list_markers`` with its fixed choices (``-`` bullets,
    backtick fences, incrementing ordered markers) so that its output stays
    comparable with the fallback reconstructor.

    Parameters
    ----------
    escape_special : bool, default True
        Whether to escape special Markdown characters in text content.
    emphasis_symbol : {"\*", "\_"}, default "\*"
        Symbol to use for emphasis/italic formatting.
    bullet_symbol : str, default "-"
        Marker for unordered list items.
    increment_list_markers : bool, default True
        Number ordered items 1., 2., 3. instead of repeating the start number.
    use_hash_headings : bool, default True
        Use ``#`` headings. When False, levels 1 and 2 use setext underlines.
    heading_level_offset : int, default 0
        Shift all heading levels by this amount (clamped to 1-6).
    code_fence_char : {"`", "~"}, default "`"
        Character to use for code fences.
    code_fence_min : int, default 3
        Minimum length for code fences.
    collapse_blank_lines : bool, default True
        Collapse runs of blank lines into a single blank line.
    fallback_mode : {"structured", "plain"}, default "structured"
        Reconstruction used when structural conversion fails:
        - "structured": block-by-block reconstruction from the original tree
        - "plain": flattened text with short title-like lines promoted to headings

    """

    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={
            "help": "Escape special Markdown characters (e.g. asterisks) in text content",
            "cli_name": "no-escape-special",
            "importance": "core",
        },
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,  # type: ignore[arg-type]
        metadata={"help": "Symbol to use for emphasis/italic formatting", "choices": ["*", "_"], "importance": "core"},
    )
    bullet_symbol: str = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "*", "+"], "importance": "advanced"},
    )
    increment_list_markers: bool = field(
        default=True,
        metadata={"help": "Number ordered items 1., 2., 3. instead of repeating the start", "importance": "advanced"},
    )
    use_hash_headings: bool = field(
        default=DEFAULT_USE_HASH_HEADINGS,
        metadata={"help": "Use # syntax for headings instead of underline style", "importance": "core"},
    )
    heading_level_offset: int = field(
        default=DEFAULT_HEADING_LEVEL_OFFSET,
        metadata={"help": "Shift all heading levels by this amount", "type": int, "importance": "advanced"},
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,  # type: ignore[arg-type]
        metadata={"help": "Character to use for code fences", "choices": ["`", "~"], "importance": "advanced"},
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={"help": "Minimum length for code fences", "type": int, "importance": "advanced"},
    )
    collapse_blank_lines: bool = field(
        default=DEFAULT_COLLAPSE_BLANK_LINES,
        metadata={"help": "Collapse multiple blank lines into at most one", "importance": "core"},
    )
    fallback_mode: FallbackMode = field(
        default=DEFAULT_FALLBACK_MODE,
        metadata={
            "help": "Reconstruction strategy when structural conversion fails",
            "choices": ["structured", "plain"],
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate Markdown rendering options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.emphasis_symbol not in ("*", "_"):
            raise ValueError(f"emphasis_symbol must be '*' or '_', got {self.emphasis_symbol!r}")
        if self.bullet_symbol not in ("-", "*", "+"):
            raise ValueError(f"bullet_symbol must be one of '-', '*', '+', got {self.bullet_symbol!r}")
        if self.code_fence_char not in ("`", "~"):
            raise ValueError(f"code_fence_char must be '`' or '~', got {self.code_fence_char!r}")
        if self.code_fence_min < 3:
            raise ValueError(f"code_fence_min must be at least 3, got {self.code_fence_min}")
        if self.fallback_mode not in ("structured", "plain"):
            raise ValueError(f"fallback_mode must be 'structured' or 'plain', got {self.fallback_mode!r}")
