#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/renderers/markdown.py
"""Markdown rendering from the intermediate Markdown model.

This module provides the MarkdownRenderer class which converts AST nodes
to Markdown text. The renderer keeps list nesting context (markers and
their widths) while it traverses the AST so nested blocks line up under
their parent item.

"""

from __future__ import annotations

import re

from gdoc2md.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from gdoc2md.ast.visitors import NodeVisitor
from gdoc2md.options.markdown import MarkdownRendererOptions
from gdoc2md.renderers.base import BaseRenderer, InlineContentMixin


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from gdoc2md.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> print(MarkdownRenderer().render_to_string(doc))
        # Title

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._list_marker_stack: list[str] = []
        self._marker_width_stack: list[int] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a Markdown string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Markdown text without trailing whitespace

        """
        self._output = []
        self._list_marker_stack = []
        self._marker_width_stack = []

        document.accept(self)

        result = "".join(self._output)
        self._output.clear()
        return self._cleanup_output(result)

    def _cleanup_output(self, text: str) -> str:
        # Normalize line endings first (CRLF/CR -> LF)
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if self.options.collapse_blank_lines:
            text = re.sub(r"\n{3,}", "\n\n", text)
        return text.rstrip()

    def _escape_markdown(self, text: str) -> str:
        """Escape special markdown characters with context awareness.

        - ``#`` is only escaped at the start of the text, where it could
          begin a heading.
        - ``_`` is not escaped in the middle of a word (``snake_case``).
        - Backslash, backticks, asterisks, braces and brackets are always
          escaped.

        Parameters
        ----------
        text : str
            Text to escape

        Returns
        -------
        str
            Escaped text

        """
        if not self.options.escape_special:
            return text

        always_escape = r"\`*{}[]"

        escaped_chars = []
        for i, char in enumerate(text):
            if char in always_escape:
                escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "#":
                if i == 0:
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "_":
                prev_alnum = i > 0 and text[i - 1].isalnum()
                next_alnum = i < len(text) - 1 and text[i + 1].isalnum()
                if not (prev_alnum and next_alnum):
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            else:
                escaped_chars.append(char)

        return "".join(escaped_chars)

    def _current_indent(self) -> str:
        return " " * sum(self._marker_width_stack)

    def _indent_continuation(self, text: str) -> str:
        """Indent every non-empty line after the first to the current list depth."""
        indent = self._current_indent()
        if not indent or "\n" not in text:
            return text
        first, *rest = text.split("\n")
        return "\n".join([first, *(indent + line if line else line for line in rest)])

    def _get_plain_text(self, nodes: list[Node]) -> str:
        parts = []
        for node in nodes:
            if isinstance(node, (Text, Code)):
                parts.append(node.content)
            elif isinstance(node, (Emphasis, Strong, Link)):
                parts.append(self._get_plain_text(node.content))
        return "".join(parts)

    def visit_document(self, node: Document) -> None:
        """Render a Document node, separating blocks with a blank line."""
        for i, child in enumerate(node.children):
            child.accept(self)
            if i < len(node.children) - 1:
                self._output.append("\n\n")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        content = self._render_inline_content(node.content)
        level = max(1, min(6, node.level + self.options.heading_level_offset))

        if not self.options.use_hash_headings and level <= 2:
            underline_char = "=" if level == 1 else "-"
            underline = underline_char * max(3, len(self._get_plain_text(node.content)))
            self._output.append(f"{content}\n{underline}")
        else:
            self._output.append(f"{'#' * level} {content}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_inline_content(node.content)
        self._output.append(self._current_indent() + self._indent_continuation(content))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        The fence is made longer than the longest run of the fence character
        inside the code so the content cannot close it early.

        """
        fence_char = self.options.code_fence_char

        fence_length = self.options.code_fence_min
        if fence_char in node.content:
            longest_run = max(len(run) for run in re.findall(re.escape(fence_char) + "+", node.content))
            fence_length = max(fence_length, longest_run + 1)

        fence = fence_char * fence_length
        lang = node.language or ""
        body = node.content if node.content.endswith("\n") else node.content + "\n"

        indent = self._current_indent()
        block = f"{fence}{lang}\n{body}{fence}"
        self._output.append(indent + self._indent_continuation(block))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node by prefixing every rendered line with ``>``."""
        saved_output = self._output
        saved_widths = self._marker_width_stack
        self._output = []
        self._marker_width_stack = []

        for i, child in enumerate(node.children):
            child.accept(self)
            if i < len(node.children) - 1:
                self._output.append("\n\n")

        quoted = "".join(self._output)
        self._output = saved_output
        self._marker_width_stack = saved_widths

        quoted_lines = [("> " + line) if line else ">" for line in quoted.split("\n")]
        self._output.append(self._current_indent() + self._indent_continuation("\n".join(quoted_lines)))

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        for i, item in enumerate(node.items):
            if node.ordered:
                number = node.start + i if self.options.increment_list_markers else node.start
                marker = f"{number}. "
            else:
                marker = f"{self.options.bullet_symbol} "

            self._list_marker_stack.append(marker)
            item.accept(self)
            self._list_marker_stack.pop()

            if i < len(node.items) - 1:
                self._output.append("\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        The first child is written on the marker line; later children are
        indented by the marker width so they nest under the item.

        """
        indent = self._current_indent()
        marker = self._list_marker_stack[-1] if self._list_marker_stack else f"{self.options.bullet_symbol} "

        self._output.append(f"{indent}{marker}")
        self._marker_width_stack.append(len(marker))

        for i, child in enumerate(node.children):
            if i == 0:
                # First child renders inline with the marker, without its own indent
                saved_output = self._output
                saved_stack = self._marker_width_stack
                self._output = []
                self._marker_width_stack = []

                child.accept(self)

                first_line = "".join(self._output)
                self._output = saved_output
                self._marker_width_stack = saved_stack
                self._output.append(self._indent_continuation(first_line))
            else:
                self._output.append("\n")
                child.accept(self)

        self._marker_width_stack.pop()

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append(self._current_indent() + "---")

    def visit_text(self, node: Text) -> None:
        """Render a Text node, escaping it unless it is marked raw."""
        if node.metadata.get("raw"):
            self._output.append(node.content)
        else:
            self._output.append(self._escape_markdown(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        content = self._render_inline_content(node.content)
        if content:
            symbol = self.options.emphasis_symbol
            self._output.append(f"{symbol}{content}{symbol}")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        content = self._render_inline_content(node.content)
        if content:
            self._output.append(f"**{content}**")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        backticks = "``" if "`" in node.content else "`"
        self._output.append(f"{backticks}{node.content}{backticks}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node as an inline ``[text](url "title")`` link."""
        content = self._render_inline_content(node.content)
        url = node.url.replace(" ", "%20").replace(")", "%29")
        if node.title:
            title = node.title.replace('"', '\\"')
            self._output.append(f'[{content}]({url} "{title}")')
        else:
            self._output.append(f"[{content}]({url})")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a hard LineBreak node."""
        self._output.append("  \n")
