#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for gdoc2md.

This module centralizes the hardcoded values and default configuration
constants used across gdoc2md.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Markdown Output - Defaults for the Markdown emitter and degradation pipeline
3. HTML Output - Defaults for the HTML serializer
4. Input Formats - Google Docs and HTML producer settings
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

# Output selection
TargetFormat = Literal["html", "markdown"]
SourceFormat = Literal["auto", "gdocs", "html"]

# Markdown formatting types
EmphasisSymbol = Literal["*", "_"]
CodeFenceChar = Literal["`", "~"]
FallbackMode = Literal["structured", "plain"]

# HTML parser types
HtmlParser = Literal["html.parser", "html5lib", "lxml"]

# =============================================================================
# Format Names and Aliases
# =============================================================================

# Keys are the names accepted from callers, values are canonical formats
TARGET_FORMAT_ALIASES: dict[str, TargetFormat] = {
    "html": "html",
    "htm": "html",
    "md": "markdown",
    "markdown": "markdown",
}

SUPPORTED_TARGET_FORMATS = ["html", "md"]
SUPPORTED_SOURCE_FORMATS = ["auto", "gdocs", "html"]

GDOCS_EXTENSIONS = frozenset({".json"})
HTML_EXTENSIONS = frozenset({".html", ".htm", ".xhtml"})

# =============================================================================
# Markdown Output Constants
# =============================================================================

DEFAULT_ESCAPE_SPECIAL = True
DEFAULT_EMPHASIS_SYMBOL = "*"
DEFAULT_BULLET_SYMBOL = "-"
DEFAULT_CODE_FENCE_CHAR = "`"
DEFAULT_CODE_FENCE_MIN = 3
DEFAULT_COLLAPSE_BLANK_LINES = True
DEFAULT_USE_HASH_HEADINGS = True
DEFAULT_HEADING_LEVEL_OFFSET = 0
DEFAULT_FALLBACK_MODE: FallbackMode = "structured"

# Table transcoding
EMPTY_TABLE_PLACEHOLDER = "[Empty Table]"
DEFAULT_COLUMN_LABEL = "Column"
EMPTY_CELL_TEXT = " "
TABLE_SEPARATOR_CELL = "---"

# List transcoding
LIST_INDENT = "  "
UNORDERED_LIST_MARKER = "-"

# Strikethrough has no equivalent in the Markdown AST, so it is inlined as syntax
STRIKETHROUGH_MARKER = "~~"

# Style declarations recognized on generic spans
BOLD_FONT_WEIGHTS = frozenset({"bold", "700"})
ITALIC_FONT_STYLES = frozenset({"italic"})

# Legacy plain fallback: short capitalized lines without closing punctuation become headings
PLAIN_FALLBACK_MAX_HEADING_LENGTH = 50
PLAIN_FALLBACK_SENTENCE_ENDINGS = (".", "!", "?")

# =============================================================================
# HTML Output Constants
# =============================================================================

DEFAULT_COLLAPSE_EMPTY_ATTRIBUTES = True
DEFAULT_HTML_STANDALONE = False
DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_HTML_TITLE = "Document"

HTML_VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# =============================================================================
# Input Format Constants
# =============================================================================

# HTML producer
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_HTML_COLLAPSE_WHITESPACE = True
HTML_SKIPPED_ELEMENTS = frozenset({"script", "style", "head", "noscript", "template"})

# Google Docs producer
GDOCS_HEADING_STYLES = {
    "HEADING_1": 1,
    "HEADING_2": 2,
    "HEADING_3": 3,
    "HEADING_4": 4,
    "HEADING_5": 5,
    "HEADING_6": 6,
}
DEFAULT_GDOCS_TITLE_LEVEL = 1
DEFAULT_GDOCS_SUBTITLE_LEVEL = 2
DEFAULT_GDOCS_SKIP_EMPTY_PARAGRAPHS = True

# Glyph types that render as numbers or letters; everything else is a bullet
GDOCS_ORDERED_GLYPH_TYPES = frozenset(
    {
        "DECIMAL",
        "ZERO_DECIMAL",
        "ALPHA",
        "UPPER_ALPHA",
        "ROMAN",
        "UPPER_ROMAN",
    }
)

# Vertical tab marks a soft line break inside a Google Docs paragraph
GDOCS_SOFT_BREAK = "\u000b"
