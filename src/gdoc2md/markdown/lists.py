#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/markdown/lists.py
"""List transcoding to indented Markdown list text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from gdoc2md.constants import LIST_INDENT, UNORDERED_LIST_MARKER
from gdoc2md.tree.nodes import Element, Node, Tag
from gdoc2md.tree.traversal import extract_text, find_all, fold_whitespace, is_list


@dataclass
class _ListLevel:
    items: Iterator[Node]
    level: int
    ordered: bool
    counter: int = 1


def list_to_markdown(list_node: Element, ordered: Optional[bool] = None, level: int = 0) -> str:
    """Convert a list subtree to Markdown list lines.

    Every direct ``li`` child produces one line indented two spaces per
    nesting level. Ordered lists number their items from 1, counting only
    items with text. Lists nested anywhere inside an item are transcoded one
    level deeper and placed right after that item's line, even when the item
    itself has no text and produced no line.

    Parameters
    ----------
    list_node : Element
        ``ul`` or ``ol`` element
    ordered : bool, optional
        Force ordered or unordered markers; defaults to ``list_node.tag is Tag.OL``
    level : int, default 0
        Nesting level of ``list_node``

    Returns
    -------
    str
        Newline-terminated lines, or ``""`` when no item has text

    Examples
    --------
    >>> nested = element("ol", element("li", "y"))
    >>> print(list_to_markdown(element("ul", element("li", "x", nested), element("li", ""))), end="")
    - x
      1. y

    """
    if ordered is None:
        ordered = list_node.tag is Tag.OL

    lines: list[str] = []
    stack = [_ListLevel(iter(list_node.children), level, ordered)]
    while stack:
        current = stack[-1]
        item = next(current.items, None)
        if item is None:
            stack.pop()
            continue
        if not (isinstance(item, Element) and item.tag is Tag.LI):
            continue

        text = fold_whitespace(extract_text(item, skip=is_list))
        if text:
            marker = f"{current.counter}." if current.ordered else UNORDERED_LIST_MARKER
            lines.append(f"{LIST_INDENT * current.level}{marker} {text}\n")
            current.counter += 1

        # Nested lists are emitted before the next item of this list
        for nested in reversed(find_all(item, is_list)):
            stack.append(_ListLevel(iter(nested.children), current.level + 1, nested.tag is Tag.OL))

    return "".join(lines)
