#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/tree/__init__.py
"""Document tree model shared by every producer and output path.

Examples
--------
    >>> from gdoc2md.tree import Root, element
    >>> tree = Root(children=[element("h1", "Title"), element("p", "Body")])

"""

from __future__ import annotations

from gdoc2md.tree.nodes import (
    BLOCK_TAGS,
    HEADING_TAGS,
    LIST_TAGS,
    TABLE_TAGS,
    Element,
    Node,
    Parent,
    Root,
    Tag,
    Text,
    element,
    heading_level,
)
from gdoc2md.tree.traversal import (
    count_nodes,
    extract_text,
    find_all,
    fold_whitespace,
    has_block_descendant,
    iter_descendants,
)

__all__ = [
    "BLOCK_TAGS",
    "HEADING_TAGS",
    "LIST_TAGS",
    "TABLE_TAGS",
    "Element",
    "Node",
    "Parent",
    "Root",
    "Tag",
    "Text",
    "element",
    "heading_level",
    "count_nodes",
    "extract_text",
    "find_all",
    "fold_whitespace",
    "has_block_descendant",
    "iter_descendants",
]
