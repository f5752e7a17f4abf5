#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/ast/visitors.py
"""Visitor pattern implementation for Markdown AST traversal.

Visitors separate algorithms (rendering, validation) from the node classes.
The Markdown renderer is a visitor, and the structural converter runs the
``ValidationVisitor`` over every AST it builds before rendering it.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for each node type. Every
    method accepts a node and returns Any (typically None for side-effect
    visitors such as renderers).

    Examples
    --------
    Simple visitor that counts text nodes:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...
        ...     def visit_paragraph(self, node):
        ...         for child in node.content:
        ...             child.accept(self)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


class ValidationVisitor(NodeVisitor):
    """Visitor that validates AST structure.

    Checks block/inline containment (headings, paragraphs and inline
    containers hold only inline nodes; documents, quotes and list items hold
    only block nodes), heading levels and ordered list starts.

    Parameters
    ----------
    strict : bool, default = True
        Whether to raise ``ValueError`` on the first validation failure.
        When False, failures are only collected in ``errors``.

    Examples
    --------
        >>> validator = ValidationVisitor(strict=True)
        >>> doc.accept(validator)  # Raises ValueError on invalid nesting

    """

    INLINE_NODES = frozenset({Text, Emphasis, Strong, Code, Link, LineBreak})

    BLOCK_NODES = frozenset({Heading, Paragraph, CodeBlock, BlockQuote, List, ThematicBreak})

    def __init__(self, strict: bool = True):
        """Initialize the validator."""
        self.strict = strict
        self.errors: list[str] = []

    def _add_error(self, message: str) -> None:
        self.errors.append(message)
        if self.strict:
            raise ValueError(message)

    def _validate_children_are_inline(self, children: list[Node], context: str) -> None:
        for i, child in enumerate(children):
            if type(child) not in self.INLINE_NODES:
                self._add_error(f"{context} can only contain inline nodes, but child {i} is {type(child).__name__}")

    def _validate_children_are_blocks(self, children: list[Node], context: str) -> None:
        for i, child in enumerate(children):
            if type(child) not in self.BLOCK_NODES:
                self._add_error(f"{context} can only contain block nodes, but child {i} is {type(child).__name__}")

    def visit_document(self, node: Document) -> None:
        """Validate a Document node."""
        self._validate_children_are_blocks(node.children, "Document")
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Validate a Heading node."""
        if not 1 <= node.level <= 6:
            self._add_error(f"Invalid heading level: {node.level}")
        self._validate_children_are_inline(node.content, "Heading")
        for child in node.content:
            child.accept(self)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Validate a Paragraph node."""
        self._validate_children_are_inline(node.content, "Paragraph")
        for child in node.content:
            child.accept(self)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Validate a CodeBlock node."""
        if node.language is not None and any(ch.isspace() for ch in node.language):
            self._add_error(f"CodeBlock language must be a single word, got '{node.language}'")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Validate a BlockQuote node."""
        self._validate_children_are_blocks(node.children, "BlockQuote")
        for child in node.children:
            child.accept(self)

    def visit_list(self, node: List) -> None:
        """Validate a List node."""
        if node.ordered and node.start < 0:
            self._add_error(f"Ordered list start must be >= 0, got {node.start}")

        for i, item in enumerate(node.items):
            if not isinstance(item, ListItem):
                self._add_error(f"List can only contain list items, but item {i} is {type(item).__name__}")
                continue
            item.accept(self)

    def visit_list_item(self, node: ListItem) -> None:
        """Validate a ListItem node."""
        self._validate_children_are_blocks(node.children, "ListItem")
        for child in node.children:
            child.accept(self)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Validate a ThematicBreak node."""
        pass

    def visit_text(self, node: Text) -> None:
        """Validate a Text node."""
        pass

    def visit_emphasis(self, node: Emphasis) -> None:
        """Validate an Emphasis node."""
        self._validate_children_are_inline(node.content, "Emphasis")
        for child in node.content:
            child.accept(self)

    def visit_strong(self, node: Strong) -> None:
        """Validate a Strong node."""
        self._validate_children_are_inline(node.content, "Strong")
        for child in node.content:
            child.accept(self)

    def visit_code(self, node: Code) -> None:
        """Validate a Code node."""
        pass

    def visit_link(self, node: Link) -> None:
        """Validate a Link node."""
        self._validate_children_are_inline(node.content, "Link")
        for child in node.content:
            child.accept(self)

    def visit_line_break(self, node: LineBreak) -> None:
        """Validate a LineBreak node."""
        pass
