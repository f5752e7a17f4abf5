#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/markdown/pipeline.py
"""Two-tier Markdown conversion.

1. Normalize a copy of the tree and try the structural converter.
2. If that fails, log a warning and reconstruct Markdown from the original
   tree with the configured fallback.

Markdown conversion of a tree therefore always returns text; degradation is
reported through logging and ``MarkdownConversion.warnings``, never raised.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gdoc2md.markdown.fallback import plain_text_markdown, reconstruct_markdown
from gdoc2md.markdown.normalize import normalize_tree
from gdoc2md.markdown.structural import StructuralResult, convert_structural
from gdoc2md.options.markdown import MarkdownRendererOptions
from gdoc2md.renderers.base import BaseRenderer
from gdoc2md.tree.nodes import Root
from gdoc2md.tree.traversal import count_nodes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkdownConversion:
    """Markdown output together with how it was produced.

    Parameters
    ----------
    markdown : str
        The Markdown text
    used_fallback : bool
        True when structural conversion failed and the fallback ran
    warnings : list of str
        Non-fatal problems met during conversion

    """

    markdown: str
    used_fallback: bool = False
    warnings: list[str] = field(default_factory=list)


class MarkdownConverter:
    """Convert document trees to Markdown with graceful degradation.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Rendering options; ``fallback_mode`` picks the fallback strategy

    Examples
    --------
        >>> from gdoc2md.tree import Root, element
        >>> tree = Root(children=[element("p", element("s", "old"))])
        >>> MarkdownConverter().convert(tree)
        '~~old~~'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the converter with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        self.options = options or MarkdownRendererOptions()

    def convert(self, tree: Root) -> str:
        """Convert ``tree`` to Markdown text."""
        return self.convert_with_report(tree).markdown

    def convert_with_report(self, tree: Root) -> MarkdownConversion:
        """Convert ``tree`` to Markdown and report whether the fallback ran.

        Parameters
        ----------
        tree : Root
            Document tree; never modified

        Returns
        -------
        MarkdownConversion
            Markdown text, fallback flag and collected warnings

        """
        logger.debug("Converting document tree with %d node(s) to Markdown", count_nodes(tree))

        try:
            normalized = normalize_tree(tree)
        except RecursionError:
            result = StructuralResult.failure("Document tree is nested too deeply to normalize")
        else:
            result = convert_structural(normalized, self.options)

        if result.succeeded:
            return MarkdownConversion(markdown=result.markdown or "")

        message = (
            f"Structural Markdown conversion failed ({result.reason}); "
            f"using {self.options.fallback_mode} fallback"
        )
        logger.warning(message)

        if self.options.fallback_mode == "plain":
            markdown = plain_text_markdown(tree)
        else:
            markdown = reconstruct_markdown(tree)
        return MarkdownConversion(markdown=markdown, used_fallback=True, warnings=[message])
