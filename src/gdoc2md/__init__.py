"""gdoc2md - Convert Google Docs documents to HTML and Markdown.

gdoc2md turns a document tree (built from a Google Docs API export or from
HTML) into HTML or Markdown. Markdown conversion degrades gracefully through
three tiers:

1. Normalization rewrites constructs Markdown cannot express (tables,
   strikethrough, underline, inline styles) into ones it can.
2. Structural conversion maps the normalized tree onto the Markdown model
   and serializes it.
3. When structural conversion fails, a rule-based fallback reconstructs
   Markdown from the original tree, so some output is always produced.

Requirements
------------
- Python 3.10+
- beautifulsoup4 for HTML input, rich for the command line

Examples
--------
Converting a Google Docs export:

    >>> from gdoc2md import load_document, to_markdown
    >>> tree = load_document("document.json")
    >>> print(to_markdown(tree))

Building a tree by hand:

    >>> from gdoc2md import to_html
    >>> from gdoc2md.tree import Root, element
    >>> tree = Root(children=[element("p", "Hello ", element("strong", "world"))])
    >>> to_html(tree)
    '<p>Hello <strong>world</strong></p>'

See Also
--------
gdoc2md.tree : Document tree definitions and traversal helpers
gdoc2md.markdown : The Markdown degradation pipeline

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "gdoc2md requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from gdoc2md.api import (
    convert,
    convert_file,
    detect_source_format,
    load_document,
    to_html,
    to_markdown,
)
from gdoc2md.exceptions import (
    FileAccessError,
    FileError,
    FileNotFoundError,
    FormatError,
    Gdoc2MdError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    StructuralConversionError,
    ValidationError,
)
from gdoc2md.markdown import MarkdownConversion, MarkdownConverter
from gdoc2md.options import (
    BaseParserOptions,
    BaseRendererOptions,
    GoogleDocsOptions,
    HtmlParserOptions,
    HtmlRendererOptions,
    MarkdownRendererOptions,
)
from gdoc2md.tree import Element, Root, Tag, Text, element

__all__ = [
    "__version__",
    # API
    "convert",
    "convert_file",
    "detect_source_format",
    "load_document",
    "to_html",
    "to_markdown",
    "MarkdownConversion",
    "MarkdownConverter",
    # Document tree
    "Element",
    "Root",
    "Tag",
    "Text",
    "element",
    # Options
    "BaseParserOptions",
    "BaseRendererOptions",
    "GoogleDocsOptions",
    "HtmlParserOptions",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
    # Exceptions
    "Gdoc2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "StructuralConversionError",
]
