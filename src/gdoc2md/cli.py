#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/cli.py
"""Command-line interface for gdoc2md.

This module provides a simple command-line tool for converting Google Docs
JSON exports and HTML documents to HTML or Markdown.

Examples
--------
Convert a Google Docs export to Markdown:
    $ gdoc2md md document.json document.md

Convert to a standalone HTML page:
    $ gdoc2md html document.json document.html --standalone

Print Markdown to stdout using the plain fallback:
    $ gdoc2md md page.html - --fallback plain

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

from gdoc2md import __version__
from gdoc2md.api import convert_file, resolve_target_format
from gdoc2md.constants import DEFAULT_FALLBACK_MODE, SUPPORTED_SOURCE_FORMATS
from gdoc2md.exceptions import (
    FileError,
    FormatError,
    Gdoc2MdError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from gdoc2md.logging_utils import configure_logging
from gdoc2md.options.base import BaseRendererOptions
from gdoc2md.options.html import HtmlRendererOptions
from gdoc2md.options.markdown import MarkdownRendererOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

STDOUT_TARGET = "-"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    # Check for validation errors (includes invalid options)
    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR

    # Check for file I/O errors
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    # Check for format errors
    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    # Check for parsing errors
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    # Check for rendering and output write errors
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    # All other errors (unexpected errors)
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gdoc2md",
        description="Convert Google Docs JSON or HTML documents to HTML or Markdown.",
    )
    parser.add_argument("format", metavar="FORMAT", help="Output format: html or md")
    parser.add_argument("input", metavar="INPUT", help="Input file (Google Docs JSON or HTML)")
    parser.add_argument("output", metavar="OUTPUT", help="Output file, or '-' for stdout")

    parser.add_argument(
        "--input-format",
        choices=SUPPORTED_SOURCE_FORMATS,
        default="auto",
        help="Input format (default: detect from extension or content)",
    )
    parser.add_argument(
        "--fallback",
        choices=["structured", "plain"],
        default=DEFAULT_FALLBACK_MODE,
        help="Markdown fallback used when structural conversion fails (default: %(default)s)",
    )
    parser.add_argument(
        "--no-escape-special",
        action="store_true",
        help="Do not escape Markdown special characters in text",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Wrap HTML output in a complete HTML document",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", type=str, help="Write log messages to this file as well")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace logging with timestamps and logger names (implies --log-level DEBUG)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace, console: Console) -> None:
    """Set up logging from command-line arguments, logging to ``console``."""
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace, console=console)


def _build_renderer_options(parsed_args: argparse.Namespace, target_format: str) -> BaseRendererOptions:
    if target_format == "html":
        return HtmlRendererOptions(standalone=parsed_args.standalone)
    return MarkdownRendererOptions(
        escape_special=not parsed_args.no_escape_special,
        fallback_mode=parsed_args.fallback,
    )


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI entry point.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    to_stdout = parsed_args.output == STDOUT_TARGET
    # Status lines go to stderr when stdout carries the converted document
    console = Console(stderr=to_stdout)
    error_console = Console(stderr=True)

    _setup_logging_level(parsed_args, error_console)

    try:
        target_format = resolve_target_format(parsed_args.format)
        options = _build_renderer_options(parsed_args, target_format)
        output = convert_file(
            parsed_args.input,
            None if to_stdout else parsed_args.output,
            target_format,
            source_format=parsed_args.input_format,
            options=options,
        )
    except Exception as e:
        exit_code = get_exit_code_for_exception(e)
        error_msg = str(e)
        if not isinstance(e, (Gdoc2MdError, ValueError)):
            error_msg = f"Unexpected error: {e}"
            logger.debug("Unexpected error during conversion", exc_info=True)
        error_console.print(f"[red]Error during conversion:[/red] {escape(error_msg)}", soft_wrap=True, highlight=False)
        return exit_code

    console.print(
        f"[green]✓[/green] Converted {escape(parsed_args.input)} to {parsed_args.format.upper()}",
        soft_wrap=True,
        highlight=False,
    )
    if to_stdout:
        sys.stdout.write(output if output.endswith("\n") else f"{output}\n")
        sys.stdout.flush()
    else:
        console.print(
            f"[green]✓[/green] Output saved to {escape(parsed_args.output)}", soft_wrap=True, highlight=False
        )

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
