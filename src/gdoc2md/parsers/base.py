#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that document producers inherit
from. A parser turns a source document (Google Docs JSON, HTML) into the
document tree consumed by the HTML serializer and the Markdown pipeline.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Optional, Union

from gdoc2md.exceptions import FileAccessError, InvalidOptionsError, ValidationError
from gdoc2md.exceptions import FileNotFoundError as Gdoc2MdFileNotFoundError
from gdoc2md.options.base import BaseParserOptions
from gdoc2md.tree.nodes import Root
from gdoc2md.utils.encoding import declared_html_encoding, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]

# Strings longer than this, or spanning lines, are never treated as paths
_MAX_PATH_LENGTH = 260


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from gdoc2md.parsers.base import BaseParser
        >>> from gdoc2md.tree import Root
        >>>
        >>> class MyCustomParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Root(children=[])

    Notes
    -----
    ``parse`` should accept every supported input type:

    - str or Path: file path to read (a str may also hold the content itself)
    - IO[bytes] or IO[str]: file-like object
    - bytes: raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Any) -> Root:
        """Parse the input document into a document tree.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            The input document to parse

        Returns
        -------
        Root
            Document tree

        Raises
        ------
        ParsingError
            If the input is not a valid document of this format
        FileError
            If an input path cannot be read
        ValidationError
            If the input type is not supported

        """
        raise NotImplementedError


def decode_bytes(data: bytes, is_html: bool = False) -> str:
    """Decode source bytes, honouring the encoding an HTML document declares."""
    declared = declared_html_encoding(data) if is_html else None
    return read_text_with_encoding_detection(data, declared_encoding=declared)


def read_path(path: Path) -> bytes:
    """Read a file, translating OS errors into gdoc2md file errors.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the path is a directory or cannot be read

    """
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise Gdoc2MdFileNotFoundError(str(path), original_error=e) from e
    except IsADirectoryError as e:
        raise FileAccessError(str(path), message=f"Input path is a directory: {path}", original_error=e) from e
    except OSError as e:
        raise FileAccessError(str(path), original_error=e) from e


def as_existing_path(input_data: Any) -> Optional[Path]:
    """Return ``input_data`` as a Path when it names a file, else None.

    A string counts as a path only when it is short, single-line and names an
    existing file; otherwise it is document content. A Path is always
    returned as is, so a missing file surfaces as a file error on read.
    """
    if isinstance(input_data, Path):
        return input_data
    if isinstance(input_data, str) and len(input_data) <= _MAX_PATH_LENGTH and "\n" not in input_data:
        try:
            path = Path(input_data)
            if path.is_file():
                return path
        except OSError:
            pass
    return None


def load_text_content(input_data: ParserInput, is_html: bool = False) -> str:
    """Load text from a path, raw bytes, a string of content, or a stream.

    Byte input is decoded with ``read_text_with_encoding_detection``; with
    ``is_html`` the document's own charset declaration is tried first.

    Raises
    ------
    FileError
        If a path cannot be read
    ValidationError
        If the input type is not supported

    """
    if isinstance(input_data, bytes):
        return decode_bytes(input_data, is_html)
    path = as_existing_path(input_data)
    if path is not None:
        return decode_bytes(read_path(path), is_html)
    if isinstance(input_data, str):
        return input_data
    if hasattr(input_data, "read"):
        data = input_data.read()
        return decode_bytes(data, is_html) if isinstance(data, bytes) else data
    raise ValidationError(
        f"Unsupported input type: {type(input_data).__name__}",
        parameter_name="input_data",
        parameter_value=input_data,
    )
