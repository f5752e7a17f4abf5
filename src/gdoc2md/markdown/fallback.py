#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/markdown/fallback.py
"""Rule-based Markdown reconstruction used when structural conversion fails.

The reconstructor reads the original, unnormalized tree and emits Markdown
block by block in document order:

- headings become ``#`` lines, paragraphs become trimmed text
- lists go through the list transcoder, tables through the table transcoder
- any other element is descended into, and inline content found outside a
  recognized block is emitted as a paragraph of its own

Recognized blocks are not descended into, so their text is emitted once.
Reconstruction never raises; the worst case is an empty string.

A legacy ``plain`` strategy is also provided: it flattens the tree to text
and promotes short title-like lines to headings.

"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator

from gdoc2md.constants import PLAIN_FALLBACK_MAX_HEADING_LENGTH, PLAIN_FALLBACK_SENTENCE_ENDINGS
from gdoc2md.markdown.lists import list_to_markdown
from gdoc2md.markdown.tables import table_to_markdown
from gdoc2md.tree.nodes import BLOCK_TAGS, HEADING_TAGS, Element, Node, Root, Tag, Text
from gdoc2md.tree.traversal import extract_text, fold_whitespace, has_block_descendant

logger = logging.getLogger(__name__)

_TITLE_START = re.compile(r"[A-Z]")


class FallbackReconstructor:
    """Reconstruct Markdown directly from a document tree.

    Examples
    --------
        >>> tree = Root(children=[element("h2", "Notes"), element("p", " Body ")])
        >>> FallbackReconstructor().reconstruct(tree)
        '## Notes\\n\\nBody'

    """

    def __init__(self) -> None:
        """Initialize the reconstructor and its block dispatch table."""
        self._block_handlers: dict[Tag, Callable[[Element], str]] = {tag: self._heading for tag in HEADING_TAGS}
        self._block_handlers.update(
            {
                Tag.P: self._paragraph,
                Tag.UL: self._list,
                Tag.OL: self._list,
                Tag.TABLE: self._table,
            }
        )

    def reconstruct(self, tree: Root) -> str:
        """Reconstruct Markdown for ``tree``.

        Parameters
        ----------
        tree : Root
            Original document tree

        Returns
        -------
        str
            Trimmed Markdown text

        """
        blocks: list[str] = []
        self._walk(tree.children, blocks)
        return "".join(blocks).strip()

    def _walk(self, nodes: list[Node], blocks: list[str]) -> None:
        run: list[Node] = []
        stack: list[Iterator[Node]] = [iter(nodes)]
        while stack:
            node = next(stack[-1], None)
            if node is None:
                # Inline content never spans the boundary of an unrecognized wrapper
                self._flush(run, blocks)
                run = []
                stack.pop()
                continue

            if isinstance(node, Text) or self._is_inline(node):
                run.append(node)
                continue

            self._flush(run, blocks)
            run = []
            handler = self._block_handlers.get(node.tag)
            if handler is not None:
                blocks.append(handler(node))
            else:
                logger.debug("Descending into unrecognized <%s>", node.tag_name)
                stack.append(iter(node.children))

    @staticmethod
    def _is_inline(node: Element) -> bool:
        return node.tag not in BLOCK_TAGS and not has_block_descendant(node)

    @staticmethod
    def _flush(run: list[Node], blocks: list[str]) -> None:
        text = "".join(extract_text(node) for node in run).strip()
        if text:
            blocks.append(f"{text}\n\n")

    @staticmethod
    def _heading(node: Element) -> str:
        text = fold_whitespace(extract_text(node))
        if not text:
            return ""
        return f"{'#' * HEADING_TAGS[node.tag]} {text}\n\n"

    @staticmethod
    def _paragraph(node: Element) -> str:
        text = extract_text(node).strip()
        return f"{text}\n\n" if text else ""

    @staticmethod
    def _list(node: Element) -> str:
        markdown = list_to_markdown(node)
        return f"{markdown}\n" if markdown else ""

    @staticmethod
    def _table(node: Element) -> str:
        return table_to_markdown(node).rstrip("\n") + "\n\n"


def reconstruct_markdown(tree: Root) -> str:
    """Reconstruct Markdown for ``tree``; see ``FallbackReconstructor``."""
    return FallbackReconstructor().reconstruct(tree)


def is_title_like(line: str) -> bool:
    """Heuristic used by the plain fallback to spot heading lines.

    A line qualifies when it is shorter than 50 characters, its trimmed form
    starts with an ASCII capital letter, and it does not end with ``.``,
    ``!`` or ``?``.
    """
    stripped = line.strip()
    return (
        len(line) < PLAIN_FALLBACK_MAX_HEADING_LENGTH
        and bool(_TITLE_START.match(stripped))
        and not stripped.endswith(PLAIN_FALLBACK_SENTENCE_ENDINGS)
    )


def plain_text_markdown(tree: Root) -> str:
    """Flatten ``tree`` to text and promote title-like lines to ``#`` headings.

    Parameters
    ----------
    tree : Root
        Original document tree

    Returns
    -------
    str
        Trimmed text

    """
    lines = [f"# {line.strip()}" if is_title_like(line) else line for line in extract_text(tree).split("\n")]
    return "\n".join(lines).strip()
