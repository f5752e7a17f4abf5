#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/ast/__init__.py
"""Intermediate Markdown document model.

The structural converter builds these nodes from a normalized document tree
and the Markdown renderer serializes them.

Examples
--------
    >>> from gdoc2md.ast import Document, Heading, Paragraph, Text
    >>> from gdoc2md.renderers.markdown import MarkdownRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> MarkdownRenderer().render_to_string(doc)
    '# Title\\n\\nHello world'

"""

from __future__ import annotations

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
from gdoc2md.ast.visitors import NodeVisitor, ValidationVisitor

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "Strong",
    "Text",
    "ThematicBreak",
    "NodeVisitor",
    "ValidationVisitor",
]
