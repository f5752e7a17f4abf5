#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/logging_utils.py
"""Logging setup for the gdoc2md command line.

Library modules only create module-level loggers; handlers are installed
here, once, by the CLI. Console records are rendered by rich on the same
stderr console the CLI prints its errors to, so log lines never mix with a
document written to stdout. An optional log file receives plain text
records.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FILE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FILE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for a level name, defaulting to INFO for unknown names."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Install the console and file handlers on the root logger.

    Any handlers already on the root logger are removed first, so calling
    this twice does not duplicate output.

    Parameters
    ----------
    log_level : int or str
        Numeric logging level or level name (e.g. ``"INFO"``)
    log_file : str, optional
        Path of a file that also receives every record, appended to
    trace_mode : bool, default False
        Add timestamps, logger names and source locations to every record
    console : Console, optional
        Console for log records; a new stderr console when omitted

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        show_time=trace_mode,
        show_path=trace_mode,
        rich_tracebacks=trace_mode,
        log_time_format=TRACE_DATE_FORMAT,
    )
    console_handler.setFormatter(logging.Formatter("[%(name)s] %(message)s" if trace_mode else "%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter(TRACE_FILE_FORMAT, datefmt=TRACE_DATE_FORMAT)
                if trace_mode
                else logging.Formatter(PLAIN_FILE_FORMAT)
            )
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
