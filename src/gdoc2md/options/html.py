#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML parsing and rendering.

This module defines options for serializing the document tree to HTML and
for building a document tree from HTML input.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gdoc2md.constants import (
    DEFAULT_COLLAPSE_EMPTY_ATTRIBUTES,
    DEFAULT_HTML_COLLAPSE_WHITESPACE,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_PARSER,
    DEFAULT_HTML_STANDALONE,
    DEFAULT_HTML_TITLE,
    HtmlParser,
)
from gdoc2md.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the document tree to HTML.

    Parameters
    ----------
    collapse_empty_attributes : bool, default True
        Render attributes with an empty value as a bare name
        (``<td hidden>`` instead of ``<td hidden="">``).
    standalone : bool, default False
        Wrap the fragment in a complete HTML5 document with ``<html>``,
        ``<head>`` and ``<body>``.
    language : str, default "en"
        Language code for ``<html lang="...">`` in standalone mode.
    default_title : str, default "Document"
        ``<title>`` used in standalone mode when the tree has no title metadata.

    Examples
    --------
        >>> options = HtmlRendererOptions(standalone=True, language="de")

    """

    collapse_empty_attributes: bool = field(
        default=DEFAULT_COLLAPSE_EMPTY_ATTRIBUTES,
        metadata={
            "help": "Render empty-valued attributes as bare attribute names",
            "cli_name": "no-collapse-empty-attributes",
            "importance": "advanced",
        },
    )
    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={"help": "Generate a complete HTML document instead of a fragment", "importance": "core"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language code for the <html lang> attribute", "importance": "advanced"},
    )
    default_title: str = field(
        default=DEFAULT_HTML_TITLE,
        metadata={"help": "Title used in standalone mode when the document has none", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate dependent field constraints.

        Raises
        ------
        ValueError
            If the language code is empty or contains whitespace.

        """
        super().__post_init__()

        if not self.language or any(ch.isspace() for ch in self.language):
            raise ValueError(f"language must be a non-empty code without whitespace, got {self.language!r}")


@dataclass(frozen=True)
class HtmlParserOptions(BaseParserOptions):
    """Configuration options for building a document tree from HTML.

    Parameters
    ----------
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup tree builder to use. ``html5lib`` and ``lxml`` must be
        installed separately.
    collapse_whitespace : bool, default True
        Collapse runs of whitespace in text outside ``<pre>`` to one space and
        drop whitespace-only text between block elements.
    extract_title : bool, default True
        Store the ``<title>`` text in ``Root.metadata["title"]``.

    """

    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,  # type: ignore[arg-type]
        metadata={
            "help": "BeautifulSoup parser backend",
            "choices": ["html.parser", "html5lib", "lxml"],
            "importance": "advanced",
        },
    )
    collapse_whitespace: bool = field(
        default=DEFAULT_HTML_COLLAPSE_WHITESPACE,
        metadata={
            "help": "Collapse whitespace in text outside <pre> elements",
            "cli_name": "no-collapse-whitespace",
            "importance": "core",
        },
    )
    extract_title: bool = field(
        default=True,
        metadata={"help": "Store the HTML <title> text as document metadata", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the parser backend name.

        Raises
        ------
        ValueError
            If ``html_parser`` is not a supported backend.

        """
        super().__post_init__()

        if self.html_parser not in ("html.parser", "html5lib", "lxml"):
            raise ValueError(f"html_parser must be one of html.parser, html5lib, lxml, got {self.html_parser!r}")
