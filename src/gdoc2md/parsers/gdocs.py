#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/parsers/gdocs.py
"""Google Docs JSON to document tree parser.

This module converts the JSON returned by the Google Docs API
``documents.get`` call into a document tree.

Mapping
-------
- ``paragraph`` with ``namedStyleType`` ``HEADING_1`` .. ``HEADING_6`` becomes
  ``h1`` .. ``h6``; ``TITLE`` and ``SUBTITLE`` use the configured levels;
  everything else becomes ``p``
- bulleted paragraphs are collected into nested ``ul``/``ol`` elements
- ``table`` becomes ``table > tbody > tr > td``
- ``sectionBreak``, ``tableOfContents`` and inline objects are skipped

"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

from gdoc2md.constants import GDOCS_HEADING_STYLES, GDOCS_ORDERED_GLYPH_TYPES, GDOCS_SOFT_BREAK
from gdoc2md.exceptions import ParsingError
from gdoc2md.options.gdocs import GoogleDocsOptions
from gdoc2md.parsers.base import BaseParser, ParserInput, load_text_content
from gdoc2md.tree.nodes import Element, Node, Root, Tag, Text

logger = logging.getLogger(__name__)

# (level, list element) for every open list, outermost first
_ListStack = list[tuple[int, Element]]


class GoogleDocsParser(BaseParser):
    """Convert a Google Docs API document to a document tree.

    Parameters
    ----------
    options : GoogleDocsOptions or None, default = None
        Parsing options

    Examples
    --------
        >>> payload = {
        ...     "title": "Notes",
        ...     "body": {"content": [{"paragraph": {"elements": [{"textRun": {"content": "Hi\\n"}}]}}]},
        ... }
        >>> tree = GoogleDocsParser().parse(payload)
        >>> tree.metadata["title"]
        'Notes'

    """

    def __init__(self, options: GoogleDocsOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, GoogleDocsOptions, "gdocs")
        options = options or GoogleDocsOptions()
        super().__init__(options)
        self.options: GoogleDocsOptions = options
        self._lists: dict[str, Any] = {}

    def parse(self, input_data: Union[ParserInput, dict[str, Any]]) -> Root:
        """Parse a Google Docs document into a document tree.

        Parameters
        ----------
        input_data : dict, str, Path, IO, or bytes
            Decoded API response, JSON text, or a path to a JSON file

        Returns
        -------
        Root
            Document tree with the title in ``metadata``

        Raises
        ------
        ParsingError
            If the input is not JSON, has no ``body``, or its structural
            elements are not shaped like a Docs API response

        """
        document = input_data if isinstance(input_data, dict) else self._load_json(input_data)

        body = document.get("body")
        if not isinstance(body, dict):
            raise ParsingError("Google Docs document has no 'body'", parsing_stage="document_structure")

        # Reset per-document state
        self._lists = document.get("lists") or {}

        try:
            children = self._parse_content(body.get("content") or [])
        except (AttributeError, TypeError, ValueError, KeyError) as e:
            raise ParsingError(
                f"Malformed Google Docs document structure: {e}",
                parsing_stage="document_structure",
                original_error=e,
            ) from e
        root = Root(children=children, metadata=self.extract_metadata(document))
        logger.debug("Parsed Google Docs document into %d top-level node(s)", len(children))
        return root

    def extract_metadata(self, document: dict[str, Any]) -> dict[str, Any]:
        """Collect the title and document id when metadata extraction is enabled."""
        if not self.options.extract_metadata:
            return {}
        metadata: dict[str, Any] = {}
        if document.get("title"):
            metadata["title"] = document["title"]
        if document.get("documentId"):
            metadata["document_id"] = document["documentId"]
        return metadata

    def _load_json(self, input_data: ParserInput) -> dict[str, Any]:
        text = load_text_content(input_data)
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParsingError(
                f"Invalid Google Docs JSON: {e.msg} (line {e.lineno}, column {e.colno})",
                parsing_stage="json_decode",
                original_error=e,
            ) from e
        if not isinstance(document, dict):
            raise ParsingError(
                f"Google Docs JSON must be an object, got {type(document).__name__}",
                parsing_stage="document_structure",
            )
        return document

    # ------------------------------------------------------------------
    # Structural elements
    # ------------------------------------------------------------------

    def _parse_content(self, content: list[dict[str, Any]]) -> list[Node]:
        """Convert a list of structural elements to block nodes."""
        blocks: list[Node] = []
        list_stack: _ListStack = []

        for item in content:
            paragraph = item.get("paragraph")
            if paragraph is not None and paragraph.get("bullet"):
                self._add_list_item(paragraph, list_stack, blocks)
                continue

            list_stack.clear()
            if paragraph is not None:
                block = self._parse_paragraph(paragraph)
                if block is not None:
                    blocks.append(block)
            elif "table" in item:
                blocks.append(self._parse_table(item["table"]))
            elif "sectionBreak" in item:
                continue
            elif "tableOfContents" in item:
                logger.debug("Skipping table of contents")
            else:
                logger.debug("Skipping unsupported structural element with keys %s", sorted(item))

        return blocks

    def _parse_paragraph(self, paragraph: dict[str, Any]) -> Optional[Element]:
        inlines = self._parse_elements(paragraph.get("elements") or [])
        has_text = any(_has_text(node) for node in inlines)

        if not has_text:
            if any("horizontalRule" in el for el in paragraph.get("elements") or []):
                return Element(tag=Tag.HR)
            if self.options.skip_empty_paragraphs:
                return None

        style = paragraph.get("paragraphStyle") or {}
        named_style = style.get("namedStyleType", "NORMAL_TEXT")
        level = self._heading_level(named_style)
        if level is None:
            return Element(tag=Tag.P, children=inlines)

        attributes = {"id": style["headingId"]} if style.get("headingId") else {}
        return Element(tag=Tag(f"h{level}"), attributes=attributes, children=inlines)

    def _heading_level(self, named_style: str) -> Optional[int]:
        if named_style == "TITLE":
            return self.options.title_heading_level
        if named_style == "SUBTITLE":
            return self.options.subtitle_heading_level
        return GDOCS_HEADING_STYLES.get(named_style)

    def _parse_table(self, table: dict[str, Any]) -> Element:
        rows: list[Node] = []
        for row in table.get("tableRows") or []:
            cells: list[Node] = []
            for cell in row.get("tableCells") or []:
                content = self._parse_content(cell.get("content") or [])
                # A single paragraph is unwrapped so the cell holds its text directly
                if len(content) == 1 and isinstance(content[0], Element) and content[0].tag is Tag.P:
                    content = content[0].children
                cells.append(Element(tag=Tag.TD, children=content))
            rows.append(Element(tag=Tag.TR, children=cells))
        return Element(tag=Tag.TABLE, children=[Element(tag=Tag.TBODY, children=rows)])

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _add_list_item(self, paragraph: dict[str, Any], list_stack: _ListStack, blocks: list[Node]) -> None:
        """Append a bulleted paragraph to the open lists, nesting by level.

        A new list is attached to the last item of the enclosing list as soon
        as it is opened, so closing a list is just popping it off the stack.
        """
        bullet = paragraph["bullet"]
        list_id = bullet.get("listId", "")
        level = int(bullet.get("nestingLevel", 0))
        tag = Tag.OL if self._is_ordered(list_id, level) else Tag.UL

        item = Element(tag=Tag.LI, children=self._parse_elements(paragraph.get("elements") or []))

        while list_stack and list_stack[-1][0] > level:
            list_stack.pop()

        if list_stack and list_stack[-1][0] == level and list_stack[-1][1].tag is not tag:
            list_stack.pop()

        if list_stack and list_stack[-1][0] == level:
            list_stack[-1][1].children.append(item)
            return

        new_list = Element(tag=tag, children=[item])
        if list_stack:
            parent_items = list_stack[-1][1].children
            parent_items[-1].children.append(new_list)  # type: ignore[union-attr]
        else:
            blocks.append(new_list)
        list_stack.append((level, new_list))

    def _is_ordered(self, list_id: str, level: int) -> bool:
        properties = (self._lists.get(list_id) or {}).get("listProperties") or {}
        levels = properties.get("nestingLevels") or []
        if level >= len(levels):
            return False
        return levels[level].get("glyphType") in GDOCS_ORDERED_GLYPH_TYPES

    # ------------------------------------------------------------------
    # Paragraph elements
    # ------------------------------------------------------------------

    def _parse_elements(self, elements: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for el in elements:
            run = el.get("textRun")
            if run is not None:
                nodes.extend(self._parse_text_run(run))
            elif "horizontalRule" in el:
                continue
            elif "inlineObjectElement" in el:
                logger.debug("Skipping inline object %s", el["inlineObjectElement"].get("inlineObjectId"))
            else:
                logger.debug("Skipping unsupported paragraph element with keys %s", sorted(el))
        return nodes

    def _parse_text_run(self, run: dict[str, Any]) -> list[Node]:
        content = run.get("content", "")
        if content.endswith("\n"):
            content = content[:-1]
        if not content:
            return []

        style = run.get("textStyle") or {}
        nodes: list[Node] = []
        for index, piece in enumerate(content.split(GDOCS_SOFT_BREAK)):
            if index:
                nodes.append(Element(tag=Tag.BR))
            if piece:
                nodes.append(self._apply_text_style(Text(piece), style))
        return nodes

    def _apply_text_style(self, node: Node, style: dict[str, Any]) -> Node:
        """Wrap ``node`` in one element per style flag, innermost first."""
        if style.get("strikethrough"):
            node = Element(tag=Tag.S, children=[node])
        if style.get("underline"):
            node = Element(tag=Tag.U, children=[node])

        offset = style.get("baselineOffset")
        if offset == "SUPERSCRIPT":
            node = Element(tag=Tag.SUP, children=[node])
        elif offset == "SUBSCRIPT":
            node = Element(tag=Tag.SUB, children=[node])

        if style.get("italic"):
            node = Element(tag=Tag.EM, children=[node])
        if style.get("bold"):
            node = Element(tag=Tag.STRONG, children=[node])

        href = _link_target(style.get("link")) if self.options.include_links else None
        if href:
            node = Element(tag=Tag.A, attributes={"href": href}, children=[node])

        if self.options.preserve_text_styles:
            css = _css_declarations(style)
            if css:
                node = Element(tag=Tag.SPAN, attributes={"style": css}, children=[node])

        return node


def _has_text(node: Node) -> bool:
    if isinstance(node, Text):
        return bool(node.value.strip())
    return any(_has_text(child) for child in node.children)


def _link_target(link: Optional[dict[str, Any]]) -> Optional[str]:
    if not link:
        return None
    if link.get("url"):
        return link["url"]
    if link.get("headingId"):
        return f"#{link['headingId']}"
    if link.get("bookmarkId"):
        return f"#{link['bookmarkId']}"
    return None


def _css_declarations(style: dict[str, Any]) -> str:
    """Translate colour, size and font family into an inline style string."""
    declarations: list[str] = []

    rgb = ((style.get("foregroundColor") or {}).get("color") or {}).get("rgbColor")
    if rgb is not None:
        declarations.append(f"color: {_hex_color(rgb)}")

    size = style.get("fontSize") or {}
    if "magnitude" in size:
        unit = str(size.get("unit", "PT")).lower()
        declarations.append(f"font-size: {size['magnitude']:g}{unit}")

    family = (style.get("weightedFontFamily") or {}).get("fontFamily")
    if family:
        declarations.append(f"font-family: {family}")

    return "; ".join(declarations)


def _hex_color(rgb: dict[str, float]) -> str:
    # Missing channels are zero in the API response
    channels = (round(float(rgb.get(name, 0.0)) * 255) for name in ("red", "green", "blue"))
    return "#" + "".join(f"{max(0, min(255, value)):02x}" for value in channels)
