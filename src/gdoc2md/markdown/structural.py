#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/markdown/structural.py
"""Structural conversion of a normalized document tree to Markdown.

The structural path maps the tree onto the intermediate Markdown model
(``gdoc2md.ast``) and serializes it with ``MarkdownRenderer``. It produces the
most faithful Markdown, but only for trees whose shape the model can
express. Anything else (unknown tags, strikethrough the normalizer could not
rewrite, blocks nested in inline content, stray list items or table parts)
makes the builder raise ``StructuralConversionError``.

``convert_structural`` turns that exception, and any failure of validation
or rendering, into a ``StructuralResult`` value so callers can choose the
fallback without exception handling of their own.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from gdoc2md import ast
from gdoc2md.ast.visitors import ValidationVisitor
from gdoc2md.exceptions import StructuralConversionError
from gdoc2md.options.markdown import MarkdownRendererOptions
from gdoc2md.renderers.markdown import MarkdownRenderer
from gdoc2md.tree.nodes import BLOCK_TAGS, Element, Node, Root, Tag, Text, heading_level
from gdoc2md.tree.traversal import extract_text

logger = logging.getLogger(__name__)

# Emitter choices that keep structural output comparable with the fallback
STRUCTURAL_EMITTER_SETTINGS = {
    "bullet_symbol": "-",
    "code_fence_char": "`",
    "increment_list_markers": True,
}


@dataclass(frozen=True)
class StructuralResult:
    """Outcome of a structural conversion attempt.

    Parameters
    ----------
    markdown : str or None
        Rendered Markdown when the conversion succeeded
    reason : str or None
        Why the conversion failed

    """

    markdown: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, markdown: str) -> StructuralResult:
        """Build a successful result."""
        return cls(markdown=markdown)

    @classmethod
    def failure(cls, reason: str) -> StructuralResult:
        """Build a failed result."""
        return cls(reason=reason)

    @property
    def succeeded(self) -> bool:
        """Whether the conversion produced Markdown."""
        return self.markdown is not None


class MarkdownAstBuilder:
    """Build the intermediate Markdown model from a normalized tree.

    Consecutive inline content at block level is grouped into one paragraph
    whose leading and trailing whitespace is trimmed; whitespace-only runs
    are dropped. ``div`` wrappers are flattened and ``span`` elements are
    transparent in inline content.

    Raises
    ------
    StructuralConversionError
        For every tree shape the model cannot express

    """

    def __init__(self) -> None:
        """Initialize the builder and its block dispatch table."""
        self._block_handlers = {
            Tag.P: self._build_paragraph,
            Tag.UL: self._build_list,
            Tag.OL: self._build_list,
            Tag.PRE: self._build_code_block,
            Tag.BLOCKQUOTE: self._build_block_quote,
            Tag.HR: self._build_thematic_break,
            Tag.DIV: self._build_division,
        }

    def build(self, tree: Root) -> ast.Document:
        """Build a Document from a normalized tree."""
        return ast.Document(children=self._build_blocks(tree.children), metadata=dict(tree.metadata))

    # ------------------------------------------------------------------
    # Block content
    # ------------------------------------------------------------------

    def _build_blocks(self, nodes: list[Node]) -> list[ast.Node]:
        blocks: list[ast.Node] = []
        run: list[Node] = []

        for node in nodes:
            if isinstance(node, Element) and node.tag in BLOCK_TAGS:
                self._flush_inline_run(run, blocks)
                run = []
                blocks.extend(self._build_block(node))
            else:
                run.append(node)

        self._flush_inline_run(run, blocks)
        return blocks

    def _flush_inline_run(self, run: list[Node], blocks: list[ast.Node]) -> None:
        if not run:
            return
        content = _trim_inline_edges(self._build_inlines(run))
        if content:
            blocks.append(ast.Paragraph(content=content))

    def _build_block(self, node: Element) -> list[ast.Node]:
        level = heading_level(node.tag)
        if level is not None:
            content = _trim_inline_edges(self._build_inlines(node.children))
            return [ast.Heading(level=level, content=content)] if content else []

        handler = self._block_handlers.get(node.tag)
        if handler is not None:
            return handler(node)

        if node.tag is Tag.LI:
            raise StructuralConversionError("List item outside of a list", tag_name=node.tag_name)
        raise StructuralConversionError(
            f"Table structure <{node.tag_name}> has no Markdown model equivalent", tag_name=node.tag_name
        )

    def _build_paragraph(self, node: Element) -> list[ast.Node]:
        content = _trim_inline_edges(self._build_inlines(node.children))
        return [ast.Paragraph(content=content)] if content else []

    def _build_list(self, node: Element) -> list[ast.Node]:
        items: list[ast.ListItem] = []
        for child in node.children:
            if isinstance(child, Text):
                if child.value.strip():
                    raise StructuralConversionError(f"Loose text inside <{node.tag_name}>", tag_name=node.tag_name)
                continue
            if child.tag is not Tag.LI:
                raise StructuralConversionError(
                    f"<{child.tag_name}> cannot be a direct child of <{node.tag_name}>", tag_name=child.tag_name
                )
            blocks = self._build_blocks(child.children)
            # Items without content render as a bare marker, so they are dropped
            if blocks:
                items.append(ast.ListItem(children=blocks))

        if not items:
            return []

        ordered = node.tag is Tag.OL
        return [ast.List(ordered=ordered, items=items, start=_list_start(node) if ordered else 1)]

    def _build_code_block(self, node: Element) -> list[ast.Node]:
        language = None
        for child in node.children:
            if isinstance(child, Element) and child.tag is Tag.CODE:
                for class_name in child.attributes.get("class", "").split():
                    if class_name.startswith("language-"):
                        language = class_name[len("language-") :] or None
                        break
        return [ast.CodeBlock(content=extract_text(node), language=language)]

    def _build_block_quote(self, node: Element) -> list[ast.Node]:
        children = self._build_blocks(node.children)
        return [ast.BlockQuote(children=children)] if children else []

    def _build_thematic_break(self, node: Element) -> list[ast.Node]:
        return [ast.ThematicBreak()]

    def _build_division(self, node: Element) -> list[ast.Node]:
        return self._build_blocks(node.children)

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def _build_inlines(self, nodes: list[Node]) -> list[ast.Node]:
        inlines: list[ast.Node] = []
        for node in nodes:
            if isinstance(node, Text):
                metadata = {"raw": True} if node.raw else {}
                inlines.append(ast.Text(content=node.value, metadata=metadata))
            else:
                inlines.extend(self._build_inline(node))
        return inlines

    def _build_inline(self, node: Element) -> list[ast.Node]:
        tag = node.tag
        if tag is Tag.SPAN:
            return self._build_inlines(node.children)
        if tag is Tag.EM:
            content = self._build_inlines(node.children)
            return [ast.Emphasis(content=content)] if content else []
        if tag is Tag.STRONG:
            content = self._build_inlines(node.children)
            return [ast.Strong(content=content)] if content else []
        if tag is Tag.A:
            return [
                ast.Link(
                    url=node.attributes.get("href", ""),
                    content=self._build_inlines(node.children),
                    title=node.attributes.get("title") or None,
                )
            ]
        if tag is Tag.CODE:
            return [ast.Code(content=extract_text(node))]
        if tag is Tag.BR:
            return [ast.LineBreak()]
        if tag is Tag.UNKNOWN:
            raise StructuralConversionError(f"Unsupported element <{node.tag_name}>", tag_name=node.tag_name)
        if tag in BLOCK_TAGS:
            raise StructuralConversionError(
                f"Block element <{node.tag_name}> inside inline content", tag_name=node.tag_name
            )
        raise StructuralConversionError(
            f"Element <{node.tag_name}> has no Markdown model equivalent", tag_name=node.tag_name
        )


def _list_start(node: Element) -> int:
    try:
        return max(0, int(node.attributes.get("start", "1")))
    except ValueError:
        return 1


def _trim_inline_edges(content: list[ast.Node]) -> list[ast.Node]:
    """Strip whitespace and line breaks from both ends of an inline run."""
    content = list(content)

    while content:
        first = content[0]
        if isinstance(first, ast.LineBreak):
            content.pop(0)
        elif isinstance(first, ast.Text) and not first.content.lstrip():
            content.pop(0)
        else:
            if isinstance(first, ast.Text):
                content[0] = ast.Text(content=first.content.lstrip(), metadata=dict(first.metadata))
            break

    while content:
        last = content[-1]
        if isinstance(last, ast.LineBreak):
            content.pop()
        elif isinstance(last, ast.Text) and not last.content.rstrip():
            content.pop()
        else:
            if isinstance(last, ast.Text):
                content[-1] = ast.Text(content=last.content.rstrip(), metadata=dict(last.metadata))
            break

    return content


def convert_structural(tree: Root, options: MarkdownRendererOptions | None = None) -> StructuralResult:
    """Attempt structural Markdown conversion of a normalized tree.

    Parameters
    ----------
    tree : Root
        Normalized document tree
    options : MarkdownRendererOptions, optional
        Rendering options; the bullet, fence and ordered-marker settings are
        always replaced by the fixed structural emitter choices

    Returns
    -------
    StructuralResult
        ``success(markdown)`` or ``failure(reason)``; never raises for tree
        shape problems

    """
    emitter_options = (options or MarkdownRendererOptions()).create_updated(**STRUCTURAL_EMITTER_SETTINGS)

    try:
        document = MarkdownAstBuilder().build(tree)
    except StructuralConversionError as exc:
        return StructuralResult.failure(exc.message)
    except RecursionError:
        return StructuralResult.failure("Document tree is nested too deeply")

    try:
        document.accept(ValidationVisitor(strict=True))
    except ValueError as exc:
        return StructuralResult.failure(f"Invalid Markdown model: {exc}")
    except RecursionError:
        return StructuralResult.failure("Markdown model is nested too deeply to validate")

    try:
        markdown = MarkdownRenderer(emitter_options).render_to_string(document).strip()
    except Exception as exc:
        logger.debug("Markdown emitter raised %s", type(exc).__name__, exc_info=True)
        return StructuralResult.failure(f"Markdown emitter failed: {exc}")

    if not markdown.strip() and extract_text(tree).strip():
        return StructuralResult.failure("Markdown emitter produced no output for a document with text")

    return StructuralResult.success(markdown)
