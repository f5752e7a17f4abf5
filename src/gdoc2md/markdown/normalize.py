#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/markdown/normalize.py
"""Normalization of a document tree ahead of structural Markdown conversion.

The normalizer rewrites the constructs Markdown cannot express into the
closest thing it can:

======================  ==========================================================
Element                 Rewrite
======================  ==========================================================
``s``                   first text child wrapped in ``~~`` and relabeled ``span``
``table``               replaced by a raw text node holding the pipe table
``u``, ``sub``, ``sup`` relabeled ``span`` (content kept, styling dropped)
``span`` with style     ``strong`` for bold weight, ``em`` for italic, otherwise the
                        style attribute is dropped
======================  ==========================================================

Rewrites build new nodes and never modify the input tree, which the
fallback reconstructor still needs in its original form. Rules are applied
pre-order: a node is rewritten before its children are visited, and a
replacement is never visited again.

"""

from __future__ import annotations

import copy
import logging
from typing import Callable, Iterator

from gdoc2md.constants import BOLD_FONT_WEIGHTS, ITALIC_FONT_STYLES, STRIKETHROUGH_MARKER
from gdoc2md.markdown.tables import table_to_markdown
from gdoc2md.tree.nodes import Element, Node, Root, Tag, Text

logger = logging.getLogger(__name__)

# A rewritten node plus the source children still to be rewritten into it
Rewrite = tuple[Node, list[Node]]


def parse_style(style: str) -> dict[str, str]:
    """Split an inline style string into lowercase declarations.

    Only ``name: value`` pairs separated by ``;`` are recognized. This is not
    a CSS parser: no shorthands, comments, or ``!important`` handling.

    Parameters
    ----------
    style : str
        Value of a ``style`` attribute

    Returns
    -------
    dict of str to str
        Declaration name to value, both trimmed and lowercased

    Examples
    --------
    >>> parse_style("Font-Weight : 700; color: red")
    {'font-weight': '700', 'color': 'red'}

    """
    declarations: dict[str, str] = {}
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        if not sep or not name.strip():
            continue
        declarations[name.strip().lower()] = value.strip().lower()
    return declarations


def style_emphasis(style: str) -> Tag | None:
    """Map a style string to ``Tag.STRONG``, ``Tag.EM`` or None.

    Bold weight takes precedence when a style is both bold and italic.
    """
    declarations = parse_style(style)
    if declarations.get("font-weight") in BOLD_FONT_WEIGHTS:
        return Tag.STRONG
    if declarations.get("font-style") in ITALIC_FONT_STYLES:
        return Tag.EM
    return None


class TreeNormalizer:
    """Rewrite a document tree into a Markdown-friendly copy.

    The tree is walked with an explicit stack, so nesting depth is bounded
    only by memory.

    Examples
    --------
        >>> tree = Root(children=[element("p", element("s", "old"))])
        >>> normalized = TreeNormalizer().normalize(tree)
        >>> normalized.children[0].children[0]
        Element(tag=<Tag.SPAN: 'span'>, tag_name='span', attributes={}, children=[Text(value='~~old~~', raw=False)])

    """

    def __init__(self) -> None:
        """Initialize the normalizer and its tag dispatch table."""
        self._handlers: dict[Tag, Callable[[Element], Rewrite]] = {
            Tag.S: self._rewrite_strikethrough,
            Tag.TABLE: self._rewrite_table,
            Tag.U: self._relabel_as_span,
            Tag.SUB: self._relabel_as_span,
            Tag.SUP: self._relabel_as_span,
            Tag.SPAN: self._rewrite_span,
        }
        self._rewrites = 0

    def normalize(self, tree: Root) -> Root:
        """Return a normalized copy of ``tree``.

        Parameters
        ----------
        tree : Root
            Document tree; left untouched

        Returns
        -------
        Root
            New tree sharing no element or metadata object with the input

        """
        self._rewrites = 0
        normalized = Root(children=[], metadata=copy.deepcopy(tree.metadata))

        # Each frame pairs the source children still to visit with the list receiving their rewrites
        stack: list[tuple[Iterator[Node], list[Node]]] = [(iter(tree.children), normalized.children)]
        while stack:
            pending, target = stack[-1]
            node = next(pending, None)
            if node is None:
                stack.pop()
                continue
            replacement, remaining = self._rewrite(node)
            target.append(replacement)
            if remaining:
                stack.append((iter(remaining), replacement.children))  # type: ignore[union-attr]

        logger.debug("Normalization rewrote %d element(s)", self._rewrites)
        return normalized

    def _rewrite(self, node: Node) -> Rewrite:
        # Text is immutable, so it can be shared with the input tree
        if isinstance(node, Text):
            return node, []
        handler = self._handlers.get(node.tag)
        if handler is None:
            return self._copy(node)
        return handler(node)

    @staticmethod
    def _copy(
        node: Element,
        tag: Tag | None = None,
        attributes: dict[str, str] | None = None,
        leading: list[Node] | None = None,
    ) -> Rewrite:
        """Copy ``node`` without its children.

        ``leading`` replaces the first ``len(leading)`` source children; the
        rest are returned for the caller to rewrite into the copy.
        """
        leading = leading or []
        new_tag = tag or node.tag
        shell = Element(
            tag=new_tag,
            tag_name=new_tag.value if tag is not None else node.tag_name,
            attributes=dict(node.attributes if attributes is None else attributes),
            children=list(leading),
        )
        return shell, node.children[len(leading) :]

    def _rewrite_strikethrough(self, node: Element) -> Rewrite:
        if not node.children or not isinstance(node.children[0], Text):
            # Only a leading text child is rewritten; anything richer is left for the fallback
            logger.debug("Leaving <%s> without a leading text child unchanged", node.tag_name)
            return self._copy(node)

        self._rewrites += 1
        first = node.children[0]
        struck = Text(f"{STRIKETHROUGH_MARKER}{first.value}{STRIKETHROUGH_MARKER}")
        return self._copy(node, tag=Tag.SPAN, leading=[struck])

    def _rewrite_table(self, node: Element) -> Rewrite:
        self._rewrites += 1
        return Text(f"\n\n{table_to_markdown(node)}\n\n", raw=True), []

    def _relabel_as_span(self, node: Element) -> Rewrite:
        self._rewrites += 1
        return self._copy(node, tag=Tag.SPAN)

    def _rewrite_span(self, node: Element) -> Rewrite:
        if "style" not in node.attributes:
            return self._copy(node)

        self._rewrites += 1
        attributes = {name: value for name, value in node.attributes.items() if name != "style"}
        replacement = style_emphasis(node.attributes["style"])
        return self._copy(node, tag=replacement, attributes=attributes)


def normalize_tree(tree: Root) -> Root:
    """Return a normalized copy of ``tree``; see ``TreeNormalizer``."""
    return TreeNormalizer().normalize(tree)
