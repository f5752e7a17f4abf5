#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/parsers/html.py
"""HTML to document tree parser.

This module builds a document tree from HTML using BeautifulSoup. The tree
keeps the source tag names, so elements outside the fixed vocabulary survive
as ``Tag.UNKNOWN`` and are serialized back unchanged by the HTML renderer.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from gdoc2md.constants import HTML_SKIPPED_ELEMENTS
from gdoc2md.exceptions import ParsingError
from gdoc2md.options.html import HtmlParserOptions
from gdoc2md.parsers.base import BaseParser, ParserInput, load_text_content
from gdoc2md.tree.nodes import BLOCK_TAGS, Element, Node, Root, Tag, Text

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


class HtmlParser(BaseParser):
    """Convert HTML documents to a document tree.

    Parameters
    ----------
    options : HtmlParserOptions or None, default = None
        Parsing options

    Examples
    --------
        >>> tree = HtmlParser().parse("<h1>Title</h1><p>Hello <b>world</b></p>")
        >>> [child.tag_name for child in tree.children]
        ['h1', 'p']

    """

    def __init__(self, options: HtmlParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, HtmlParserOptions, "html")
        options = options or HtmlParserOptions()
        super().__init__(options)
        self.options: HtmlParserOptions = options

    def parse(self, input_data: ParserInput) -> Root:
        """Parse an HTML document into a document tree.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            HTML content or a path to an HTML file

        Returns
        -------
        Root
            Document tree; the ``<title>`` text goes into ``metadata``

        Raises
        ------
        ParsingError
            If the selected BeautifulSoup parser is not installed

        """
        html_content = load_text_content(input_data, is_html=True)
        return self.convert_to_tree(html_content)

    def convert_to_tree(self, html_content: str) -> Root:
        """Convert an HTML string to a document tree."""
        from bs4 import BeautifulSoup
        from bs4.exceptions import FeatureNotFound

        try:
            soup = BeautifulSoup(html_content, self.options.html_parser)
        except FeatureNotFound as e:
            raise ParsingError(
                f"HTML parser backend '{self.options.html_parser}' is not installed",
                parsing_stage="html_parse",
                original_error=e,
            ) from e

        metadata = self.extract_metadata(soup)
        container = soup.body if soup.body is not None else soup
        children = self._convert_children(container, in_pre=False)
        if self.options.collapse_whitespace:
            children = _strip_block_whitespace(children)

        logger.debug("Parsed HTML into %d top-level node(s)", len(children))
        return Root(children=children, metadata=metadata)

    def extract_metadata(self, soup: Any) -> dict[str, Any]:
        """Collect the document title and language."""
        metadata: dict[str, Any] = {}
        if not self.options.extract_metadata:
            return metadata

        if self.options.extract_title and soup.title is not None:
            title = soup.title.get_text().strip()
            if title:
                metadata["title"] = title

        html_tag = soup.find("html")
        if html_tag is not None and html_tag.get("lang"):
            metadata["language"] = html_tag["lang"]
        return metadata

    def _convert_children(self, node: Any, in_pre: bool) -> list[Node]:
        children: list[Node] = []
        for child in node.children:
            converted = self._convert_node(child, in_pre)
            if converted is not None:
                children.append(converted)
        return children

    def _convert_node(self, node: Any, in_pre: bool) -> Optional[Node]:
        from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction

        if isinstance(node, (Comment, Declaration, Doctype, ProcessingInstruction)):
            return None

        if isinstance(node, NavigableString):
            text = str(node)
            if self.options.collapse_whitespace and not in_pre:
                text = _WHITESPACE_RUN.sub(" ", text)
            return Text(text) if text else None

        if not getattr(node, "name", None):
            return None

        name = node.name.lower()
        if name in HTML_SKIPPED_ELEMENTS:
            logger.debug("Dropping <%s> element", name)
            return None

        tag = Tag.from_name(name)
        children = self._convert_children(node, in_pre or tag is Tag.PRE)
        if self.options.collapse_whitespace and tag in BLOCK_TAGS and tag is not Tag.PRE:
            children = _strip_block_whitespace(children)

        return Element(tag=tag, tag_name=name, attributes=_attributes(node), children=children)


def _attributes(node: Any) -> dict[str, str]:
    # BeautifulSoup returns multi-valued attributes such as class as lists
    attributes: dict[str, str] = {}
    for name, value in node.attrs.items():
        attributes[name] = " ".join(value) if isinstance(value, (list, tuple)) else str(value)
    return attributes


def _strip_block_whitespace(children: list[Node]) -> list[Node]:
    """Drop whitespace-only text that sits next to a block element or at the edges."""
    result: list[Node] = []
    for index, child in enumerate(children):
        if isinstance(child, Text) and not child.value.strip():
            before = children[index - 1] if index > 0 else None
            after = children[index + 1] if index + 1 < len(children) else None
            if before is None or after is None or _is_block(before) or _is_block(after):
                continue
        result.append(child)
    return result


def _is_block(node: Node) -> bool:
    return isinstance(node, Element) and node.tag in BLOCK_TAGS
