#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for the CLI logging setup.

Tests cover:
- Level resolution from names and numbers
- Console records rendered through rich on the given console
- Plain and trace formats in the log file
- Repeated configuration replacing earlier handlers

"""

import logging
from io import StringIO

import pytest
from rich.console import Console
from rich.logging import RichHandler

from gdoc2md.logging_utils import configure_logging, resolve_log_level


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler changes configure_logging makes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _console():
    return Console(file=StringIO(), width=200)


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
            (logging.ERROR, logging.ERROR),
            ("noisy", logging.INFO),
        ],
    )
    def test_levels(self, value, expected):
        """Test names are case-insensitive and unknown names fall back to INFO."""
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_handler(self):
        """Test records at or above the level reach the rich console."""
        console = _console()
        root = configure_logging("WARNING", console=console)

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)

        logging.getLogger("gdoc2md.test").info("hidden message")
        logging.getLogger("gdoc2md.test").warning("visible message")
        output = console.file.getvalue()
        assert "visible message" in output
        assert "hidden message" not in output

    def test_reconfiguring_replaces_handlers(self):
        """Test a second call does not stack handlers."""
        configure_logging("INFO", console=_console())
        root = configure_logging("DEBUG", console=_console())
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_plain_log_file(self, tmp_path):
        """Test the log file gets LEVEL: message records."""
        log_path = tmp_path / "run.log"
        root = configure_logging("INFO", log_file=str(log_path), console=_console())
        logging.getLogger("gdoc2md.test").warning("written down")
        for handler in root.handlers:
            handler.flush()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == f"INFO: Logging to file: {log_path}"
        assert lines[1] == "WARNING: written down"

    def test_trace_log_file(self, tmp_path):
        """Test trace mode adds timestamps and logger names to the file."""
        log_path = tmp_path / "trace.log"
        root = configure_logging("DEBUG", log_file=str(log_path), trace_mode=True, console=_console())
        logging.getLogger("gdoc2md.test").debug("traced")
        for handler in root.handlers:
            handler.flush()

        last = log_path.read_text(encoding="utf-8").splitlines()[-1]
        assert last.startswith("[")
        assert last.endswith("[DEBUG] [gdoc2md.test] traced")

    def test_unwritable_log_file(self, tmp_path):
        """Test a log file that cannot be opened leaves only the console handler."""
        console = _console()
        root = configure_logging("INFO", log_file=str(tmp_path), console=console)
        assert len(root.handlers) == 1
        assert "Could not create log file" in console.file.getvalue()
