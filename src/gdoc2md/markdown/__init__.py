#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/markdown/__init__.py
"""Markdown degradation pipeline.

- tables: table subtree to pipe-table text
- lists: list subtree to indented list text
- normalize: rewrite of constructs Markdown cannot express
- structural: normalized tree to Markdown through the intermediate model
- fallback: rule-based reconstruction from the original tree
- pipeline: the two tiers combined

"""

from __future__ import annotations

from gdoc2md.markdown.fallback import FallbackReconstructor, plain_text_markdown, reconstruct_markdown
from gdoc2md.markdown.lists import list_to_markdown
from gdoc2md.markdown.normalize import TreeNormalizer, normalize_tree, parse_style
from gdoc2md.markdown.pipeline import MarkdownConversion, MarkdownConverter
from gdoc2md.markdown.structural import MarkdownAstBuilder, StructuralResult, convert_structural
from gdoc2md.markdown.tables import table_to_markdown

__all__ = [
    "FallbackReconstructor",
    "plain_text_markdown",
    "reconstruct_markdown",
    "list_to_markdown",
    "TreeNormalizer",
    "normalize_tree",
    "parse_style",
    "MarkdownConversion",
    "MarkdownConverter",
    "MarkdownAstBuilder",
    "StructuralResult",
    "convert_structural",
    "table_to_markdown",
]
