#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/gdoc2md/renderers/__init__.py
"""Renderers for the two output formats.

- MarkdownRenderer: serializes the intermediate Markdown model
- HtmlRenderer: serializes the document tree directly

Examples
--------
    >>> from gdoc2md.tree import Root, element
    >>> from gdoc2md.renderers import HtmlRenderer
    >>> HtmlRenderer().render_to_string(Root(children=[element("p", "Hi")]))
    '<p>Hi</p>'

"""

from gdoc2md.renderers.base import BaseRenderer, InlineContentMixin
from gdoc2md.renderers.html import HtmlRenderer
from gdoc2md.renderers.markdown import MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "HtmlRenderer",
    "MarkdownRenderer",
]
