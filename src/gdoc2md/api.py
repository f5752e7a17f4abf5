"""The major exported API functions for document conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/gdoc2md/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from gdoc2md.constants import (
    GDOCS_EXTENSIONS,
    HTML_EXTENSIONS,
    SUPPORTED_SOURCE_FORMATS,
    SUPPORTED_TARGET_FORMATS,
    TARGET_FORMAT_ALIASES,
    SourceFormat,
    TargetFormat,
)
from gdoc2md.exceptions import FormatError, OutputWriteError
from gdoc2md.markdown.pipeline import MarkdownConverter
from gdoc2md.options.base import BaseParserOptions, BaseRendererOptions
from gdoc2md.options.gdocs import GoogleDocsOptions
from gdoc2md.options.html import HtmlParserOptions, HtmlRendererOptions
from gdoc2md.options.markdown import MarkdownRendererOptions
from gdoc2md.parsers.base import BaseParser, as_existing_path, load_text_content
from gdoc2md.parsers.gdocs import GoogleDocsParser
from gdoc2md.parsers.html import HtmlParser
from gdoc2md.renderers.html import HtmlRenderer
from gdoc2md.tree.nodes import Root

logger = logging.getLogger(__name__)

DocumentInput = Union[str, Path, IO[bytes], IO[str], bytes, dict]


def _with_overrides(options: Any, default_factory: type, **kwargs: Any) -> Any:
    """Apply keyword overrides to options, creating defaults when needed."""
    if options is None:
        return default_factory(**kwargs)
    return options.create_updated(**kwargs) if kwargs else options


def to_markdown(tree: Root, options: Optional[MarkdownRendererOptions] = None, **kwargs: Any) -> str:
    """Convert a document tree to Markdown.

    Structural conversion is tried first; when the tree cannot be expressed
    through the Markdown model, a warning is logged and the rule-based
    fallback produces the output instead. This function never raises for
    tree shape problems.

    Parameters
    ----------
    tree : Root
        Document tree; not modified
    options : MarkdownRendererOptions, optional
        Rendering options
    kwargs : Any
        Individual ``MarkdownRendererOptions`` fields overriding ``options``

    Returns
    -------
    str
        Markdown text

    Examples
    --------
        >>> from gdoc2md.tree import Root, element
        >>> to_markdown(Root(children=[element("h1", "Title"), element("p", "Hello world")]))
        '# Title\\n\\nHello world'

    """
    options = _with_overrides(options, MarkdownRendererOptions, **kwargs)
    return MarkdownConverter(options).convert(tree)


def to_html(tree: Root, options: Optional[HtmlRendererOptions] = None, **kwargs: Any) -> str:
    """Serialize a document tree to HTML.

    Parameters
    ----------
    tree : Root
        Document tree
    options : HtmlRendererOptions, optional
        Rendering options
    kwargs : Any
        Individual ``HtmlRendererOptions`` fields overriding ``options``

    Returns
    -------
    str
        HTML fragment, or a complete document when ``standalone`` is set

    """
    options = _with_overrides(options, HtmlRendererOptions, **kwargs)
    return HtmlRenderer(options).render_to_string(tree)


def resolve_target_format(target_format: str) -> TargetFormat:
    """Map a user-supplied target format name to its canonical form.

    Raises
    ------
    FormatError
        If the name is not a supported target format

    """
    resolved = TARGET_FORMAT_ALIASES.get(str(target_format).strip().lower())
    if resolved is None:
        raise FormatError(format_type=str(target_format), supported_formats=SUPPORTED_TARGET_FORMATS)
    return resolved  # type: ignore[return-value]


def convert(tree: Root, target_format: str, options: Optional[BaseRendererOptions] = None) -> str:
    """Convert a document tree to the requested target format.

    Parameters
    ----------
    tree : Root
        Document tree
    target_format : str
        ``"html"`` (or ``"htm"``), ``"md"`` or ``"markdown"``
    options : BaseRendererOptions, optional
        Options matching the target format

    Returns
    -------
    str
        Converted output

    Raises
    ------
    FormatError
        If the target format is not supported
    InvalidOptionsError
        If ``options`` does not match the target format

    """
    resolved = resolve_target_format(target_format)
    if resolved == "html":
        return to_html(tree, options)  # type: ignore[arg-type]
    return to_markdown(tree, options)  # type: ignore[arg-type]


def detect_source_format(source: Any, content: Optional[str] = None) -> SourceFormat:
    """Detect whether ``source`` is Google Docs JSON or HTML.

    Detection uses the file extension when ``source`` names a file, and falls
    back to the content: a JSON object is Google Docs, anything else is HTML.
    """
    if isinstance(source, dict):
        return "gdocs"

    path = as_existing_path(source)
    if path is not None:
        suffix = path.suffix.lower()
        if suffix in GDOCS_EXTENSIONS:
            return "gdocs"
        if suffix in HTML_EXTENSIONS:
            return "html"

    if content is not None and content.lstrip().startswith("{"):
        return "gdocs"
    return "html"


def _create_parser(source_format: str, options: Optional[BaseParserOptions]) -> BaseParser:
    if source_format == "gdocs":
        return GoogleDocsParser(options)  # type: ignore[arg-type]
    return HtmlParser(options)  # type: ignore[arg-type]


def load_document(
    source: DocumentInput,
    source_format: SourceFormat = "auto",
    options: Optional[BaseParserOptions] = None,
) -> Root:
    """Build a document tree from a Google Docs JSON or HTML source.

    Parameters
    ----------
    source : dict, str, Path, IO, or bytes
        Decoded Google Docs response, document content, or a path
    source_format : {"auto", "gdocs", "html"}, default "auto"
        Source format; ``auto`` infers it from the options class, the file
        extension, or the content
    options : BaseParserOptions, optional
        ``GoogleDocsOptions`` or ``HtmlParserOptions``

    Returns
    -------
    Root
        Document tree

    Raises
    ------
    FormatError
        If ``source_format`` is not supported
    ParsingError
        If the source cannot be parsed
    FileError
        If a source path cannot be read

    Examples
    --------
        >>> tree = load_document("<p>Hello</p>")
        >>> tree.children[0].tag_name
        'p'

    """
    if source_format not in SUPPORTED_SOURCE_FORMATS:
        raise FormatError(format_type=str(source_format), supported_formats=SUPPORTED_SOURCE_FORMATS)

    if isinstance(source, dict):
        if source_format == "auto":
            source_format = "gdocs"
        return _create_parser(source_format, options).parse(source)  # type: ignore[arg-type]

    content = load_text_content(source, is_html=source_format != "gdocs")

    if source_format == "auto":
        if isinstance(options, GoogleDocsOptions):
            source_format = "gdocs"
        elif isinstance(options, HtmlParserOptions):
            source_format = "html"
        else:
            source_format = detect_source_format(source, content)
        logger.debug("Detected source format: %s", source_format)

    return _create_parser(source_format, options).parse(content)


def convert_file(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]],
    target_format: str,
    source_format: SourceFormat = "auto",
    options: Optional[BaseRendererOptions] = None,
    parser_options: Optional[BaseParserOptions] = None,
) -> str:
    """Convert a document file and optionally write the result.

    The target format is validated before anything is read or written.

    Parameters
    ----------
    input_path : str or Path
        Google Docs JSON or HTML file
    output_path : str, Path, or None
        Destination file; None only returns the output
    target_format : str
        ``"html"``, ``"md"`` or ``"markdown"``
    source_format : {"auto", "gdocs", "html"}, default "auto"
        Source format of ``input_path``
    options : BaseRendererOptions, optional
        Options matching the target format
    parser_options : BaseParserOptions, optional
        Options matching the source format

    Returns
    -------
    str
        Converted output

    Raises
    ------
    FormatError
        If the target or source format is not supported
    FileError
        If the input file cannot be read
    ParsingError
        If the input cannot be parsed
    OutputWriteError
        If the output file cannot be written

    """
    resolved = resolve_target_format(target_format)

    tree = load_document(Path(input_path), source_format=source_format, options=parser_options)
    output = convert(tree, resolved, options)

    if output_path is not None:
        encoding = options.output_encoding if options is not None else "utf-8"
        try:
            Path(output_path).write_text(output, encoding=encoding)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.info("Wrote %s output to %s", resolved, output_path)

    return output
