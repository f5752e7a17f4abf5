#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/renderers/html.py
"""HTML rendering from the document tree.

The document tree already uses HTML element vocabulary, so HTML output is a
direct one-to-one serialization: every element is written with its source
tag spelling, every attribute is kept, and text is escaped. Nothing is lost,
which is why the HTML path needs no degradation pipeline.

"""

from __future__ import annotations

import html
import logging

from gdoc2md.constants import HTML_VOID_ELEMENTS
from gdoc2md.options.html import HtmlRendererOptions
from gdoc2md.renderers.base import BaseRenderer
from gdoc2md.tree.nodes import Element, Node, Root, Text

logger = logging.getLogger(__name__)


class HtmlRenderer(BaseRenderer):
    """Render a document tree to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from gdoc2md.tree import Root, element
        >>> tree = Root(children=[element("p", "a < b")])
        >>> HtmlRenderer().render_to_string(tree)
        '<p>a &lt; b</p>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

    def render_to_string(self, tree: Root) -> str:
        """Render a document tree to an HTML string.

        Parameters
        ----------
        tree : Root
            Document tree to serialize

        Returns
        -------
        str
            HTML fragment, or a complete document when ``standalone`` is set

        """
        parts: list[str] = []
        for child in tree.children:
            self._render_node(child, parts)
        body = "".join(parts)

        if not self.options.standalone:
            return body
        return self._wrap_standalone(body, tree)

    def _render_node(self, node: Node, parts: list[str]) -> None:
        if isinstance(node, Text):
            parts.append(html.escape(node.value, quote=False))
            return

        parts.append(f"<{node.tag_name}{self._render_attributes(node)}>")
        if node.tag_name in HTML_VOID_ELEMENTS:
            if node.children:
                logger.debug("Dropping %d children of void element <%s>", len(node.children), node.tag_name)
            return

        for child in node.children:
            self._render_node(child, parts)
        parts.append(f"</{node.tag_name}>")

    def _render_attributes(self, node: Element) -> str:
        rendered = []
        for name, value in node.attributes.items():
            if value == "" and self.options.collapse_empty_attributes:
                rendered.append(f" {name}")
            else:
                rendered.append(f' {name}="{html.escape(str(value), quote=True)}"')
        return "".join(rendered)

    def _wrap_standalone(self, body: str, tree: Root) -> str:
        title = tree.metadata.get("title") or self.options.default_title
        language = tree.metadata.get("language") or self.options.language

        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{html.escape(str(language), quote=True)}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{html.escape(str(title), quote=False)}</title>",
            "</head>",
            "<body>",
            body,
            "</body>",
            "</html>",
        ]
        return "\n".join(parts)
