#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/renderers/base.py
"""Base classes for renderers.

This module defines the abstract base class shared by the Markdown renderer
(which consumes the intermediate Markdown model) and the HTML renderer (which
consumes the document tree directly).

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import TextIOBase
from pathlib import Path
from typing import IO, Any, Union

from gdoc2md.ast.nodes import Node
from gdoc2md.exceptions import InvalidOptionsError
from gdoc2md.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class UpperCaseRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return str(doc).upper()
        ...
        ...     def render(self, doc, output):
        ...         self.write_text_output(self.render_to_string(doc), output)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Any) -> str:
        """Render a document to a string.

        Parameters
        ----------
        doc : Any
            Document to render (``gdoc2md.ast.Document`` or ``gdoc2md.tree.Root``
            depending on the renderer)

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Any, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a document and write it to ``output``.

        Parameters
        ----------
        doc : Any
            Document to render
        output : str, Path, IO[bytes] or IO[str]
            File path or file-like object

        Raises
        ------
        RenderingError
            If rendering fails
        OSError
            If output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def write_text_output(self, text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Binary streams and paths receive the text encoded with the options'
        ``output_encoding``.

        Raises
        ------
        TypeError
            If output type is not supported

        """
        encoding = self.options.output_encoding if self.options is not None else "utf-8"
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding=encoding)
        elif isinstance(output, TextIOBase) or hasattr(output, "encoding"):
            output.write(text)  # type: ignore[arg-type]
        elif hasattr(output, "write"):
            output.write(text.encode(encoding))  # type: ignore[arg-type]
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")


class InlineContentMixin:
    """Mixin providing inline content rendering for text-based renderers.

    The implementing class must have an ``_output`` list that its visitor
    methods append to.

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        The current output buffer is swapped out while the nodes render, so
        nested inline formatting can be wrapped by the caller.

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
