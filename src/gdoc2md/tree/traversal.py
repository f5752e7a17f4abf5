#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/tree/traversal.py
"""Traversal helpers for the document tree.

All traversals here are iterative so arbitrarily deep trees do not hit the
interpreter recursion limit, and all of them visit nodes in depth-first,
left-to-right order, which is also the order content is rendered in.

"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Union

from gdoc2md.tree.nodes import BLOCK_TAGS, CELL_TAGS, LIST_TAGS, Element, Node, Parent, Root, Tag, Text

NodePredicate = Callable[[Node], bool]


def _children_of(node: Union[Root, Node]) -> list[Node]:
    if isinstance(node, (Root, Element)):
        return node.children
    return []


def iter_descendants(node: Union[Root, Node], skip: Optional[NodePredicate] = None) -> Iterator[Node]:
    """Yield every descendant of ``node`` in document order.

    Parameters
    ----------
    node : Root or Node
        Subtree root; the root itself is not yielded
    skip : callable, optional
        Predicate; descendants for which it returns True are neither yielded
        nor descended into

    Yields
    ------
    Node
        Descendant nodes, depth-first and left-to-right

    """
    stack: list[Node] = list(reversed(_children_of(node)))
    while stack:
        current = stack.pop()
        if skip is not None and skip(current):
            continue
        yield current
        stack.extend(reversed(_children_of(current)))


def extract_text(node: Union[Root, Node], skip: Optional[NodePredicate] = None) -> str:
    """Concatenate every text value under ``node`` in document order.

    No separators are inserted. A subtree without text yields ``""``.

    Parameters
    ----------
    node : Root or Node
        Subtree root. A ``Text`` node returns its own value.
    skip : callable, optional
        Predicate pruning descendant subtrees from the extraction. It is not
        applied to ``node`` itself.

    Returns
    -------
    str
        The flattened text

    Examples
    --------
    >>> extract_text(element("p", "Hello ", element("em", "world")))
    'Hello world'

    """
    if isinstance(node, Text):
        return node.value
    return "".join(child.value for child in iter_descendants(node, skip=skip) if isinstance(child, Text))


def find_all(node: Union[Root, Node], predicate: NodePredicate) -> list[Element]:
    """Find the outermost descendant elements matching ``predicate``.

    A matching element is collected but not searched further, so matches
    nested inside another match are not returned.

    Parameters
    ----------
    node : Root or Node
        Subtree root; the root itself is never matched
    predicate : callable
        Element test

    Returns
    -------
    list of Element
        Matching elements in document order

    """
    matches: list[Element] = []
    stack: list[Node] = list(reversed(_children_of(node)))
    while stack:
        current = stack.pop()
        if not isinstance(current, Element):
            continue
        if predicate(current):
            matches.append(current)
            continue
        stack.extend(reversed(current.children))
    return matches


def has_tag(*tags: Tag) -> NodePredicate:
    """Build a predicate matching elements whose tag is one of ``tags``."""
    wanted = frozenset(tags)

    def predicate(node: Node) -> bool:
        return isinstance(node, Element) and node.tag in wanted

    return predicate


is_list = has_tag(*LIST_TAGS)
is_row = has_tag(Tag.TR)
is_cell = has_tag(*CELL_TAGS)


def is_block(node: Node) -> bool:
    """Return True for elements that start a block of their own."""
    return isinstance(node, Element) and node.tag in BLOCK_TAGS


def has_block_descendant(node: Parent) -> bool:
    """Return True when any descendant of ``node`` is a block element."""
    return any(is_block(child) for child in iter_descendants(node))


def count_nodes(node: Union[Root, Node]) -> int:
    """Count the nodes in a subtree, the root included."""
    return 1 + sum(1 for _ in iter_descendants(node))


def fold_whitespace(text: str) -> str:
    """Trim ``text`` and fold each line break (and surrounding spaces) to one space."""
    return " ".join(part.strip() for part in text.strip().splitlines() if part.strip())
