#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/e2e/test_cli.py
"""End-to-end tests for the gdoc2md command line.

Tests cover:
- Conversion to files and to stdout
- Option flags reaching the renderers
- Exit codes and error messages for each failure class
- Logging configuration flags

"""

import logging

import pytest

from gdoc2md import __version__
from gdoc2md.cli import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    get_exit_code_for_exception,
    main,
)
from gdoc2md.exceptions import (
    FileAccessError,
    FormatError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    StructuralConversionError,
)

SAMPLE_MARKDOWN = (
    "# Quarterly Notes\n\nHello **world**\n\n- first\n  1. nested\n- second\n\n| A | B |\n| --- | --- |\n| 1 | 2 |"
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler changes main() makes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def unknown_tag_file(tmp_path):
    """Write HTML the structural converter cannot handle."""
    path = tmp_path / "odd.html"
    path.write_text("<h1>Heading</h1><marquee>body text.</marquee>", encoding="utf-8")
    return path


@pytest.mark.e2e
@pytest.mark.cli
class TestConversion:
    """Tests for successful conversions."""

    def test_markdown_to_file(self, gdocs_file, tmp_path, capsys):
        """Test Markdown is written to the output file with status on stdout."""
        target = tmp_path / "out.md"
        assert main(["md", str(gdocs_file), str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == SAMPLE_MARKDOWN

        captured = capsys.readouterr()
        assert "Converted" in captured.out
        assert "to MD" in captured.out
        assert "Output saved to" in captured.out

    def test_markdown_to_stdout(self, gdocs_file, capsys):
        """Test '-' prints the document alone on stdout and status on stderr."""
        assert main(["markdown", str(gdocs_file), "-"]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == SAMPLE_MARKDOWN + "\n"
        assert "Converted" in captured.err

    def test_html_standalone(self, html_file, capsys):
        """Test --standalone produces a full page with the source title."""
        assert main(["html", str(html_file), "-", "--standalone"]) == EXIT_SUCCESS
        output = capsys.readouterr().out
        assert output.startswith("<!DOCTYPE html>")
        assert "<title>Page</title>" in output
        assert "<h1>Welcome</h1><p>Some <em>text</em></p>" in output

    def test_no_escape_special(self, tmp_path, capsys):
        """Test --no-escape-special leaves special characters alone."""
        source = tmp_path / "stars.html"
        source.write_text("<p>2*3=6</p>", encoding="utf-8")

        assert main(["md", str(source), "-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "2\\*3=6\n"
        assert main(["md", str(source), "-", "--no-escape-special"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "2*3=6\n"

    def test_forced_input_format(self, tmp_path, capsys):
        """Test --input-format overrides detection."""
        source = tmp_path / "page.json"
        source.write_text("<p>not json</p>", encoding="utf-8")
        assert main(["md", str(source), "-", "--input-format", "html"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "not json\n"

    def test_structured_fallback_is_reported(self, unknown_tag_file, capsys):
        """Test the fallback output and its warning."""
        assert main(["md", str(unknown_tag_file), "-"]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == "# Heading\n\nbody text.\n"
        assert "Structural Markdown conversion failed" in captured.err

    def test_plain_fallback(self, unknown_tag_file, capsys):
        """Test --fallback plain flattens the text."""
        assert main(["md", str(unknown_tag_file), "-", "--fallback", "plain"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "Headingbody text.\n"

    def test_log_file(self, html_file, tmp_path):
        """Test --log-file receives log records at the chosen level."""
        log_path = tmp_path / "run.log"
        target = tmp_path / "out.md"
        assert main(["md", str(html_file), str(target), "--log-level", "INFO", "--log-file", str(log_path)]) == 0
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Wrote markdown output to" in log_path.read_text(encoding="utf-8")


@pytest.mark.e2e
@pytest.mark.cli
class TestFailures:
    """Tests for error exit codes."""

    def test_unsupported_format(self, gdocs_file, tmp_path, capsys):
        """Test an unknown FORMAT exits with the format error code."""
        assert main(["pdf", str(gdocs_file), str(tmp_path / "out.pdf")]) == EXIT_FORMAT_ERROR
        captured = capsys.readouterr()
        assert "Error during conversion:" in captured.err
        assert "Unsupported format: 'pdf'" in captured.err
        assert not (tmp_path / "out.pdf").exists()

    def test_missing_input(self, tmp_path, capsys):
        """Test a missing input exits with the file error code."""
        assert main(["md", str(tmp_path / "missing.json"), "-"]) == EXIT_FILE_ERROR
        assert "File not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        """Test malformed Google Docs JSON exits with the parsing error code."""
        source = tmp_path / "broken.json"
        source.write_text("{oops", encoding="utf-8")
        assert main(["md", str(source), "-"]) == EXIT_PARSING_ERROR
        captured = capsys.readouterr()
        assert "Invalid Google Docs JSON" in captured.err
        assert captured.out == ""

    def test_malformed_docs_structure(self, tmp_path, capsys):
        """Test well-formed JSON with misshapen elements exits with the parsing error code."""
        source = tmp_path / "misshapen.json"
        source.write_text('{"body": {"content": [{"paragraph": "oops"}]}}', encoding="utf-8")
        assert main(["md", str(source), "-"]) == EXIT_PARSING_ERROR
        captured = capsys.readouterr()
        assert "Malformed Google Docs document structure" in captured.err
        assert captured.out == ""

    def test_unwritable_output(self, html_file, tmp_path, capsys):
        """Test a directory as output exits with the rendering error code."""
        assert main(["md", str(html_file), str(tmp_path)]) == EXIT_RENDERING_ERROR
        assert "Failed to write output file" in capsys.readouterr().err

    def test_invalid_input_format_choice(self, html_file):
        """Test argparse rejects unknown --input-format values."""
        with pytest.raises(SystemExit) as exc_info:
            main(["md", str(html_file), "-", "--input-format", "docx"])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Tests for the exception to exit code mapping."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (InvalidOptionsError("md", int, str), EXIT_VALIDATION_ERROR),
            (ValueError("bad"), EXIT_VALIDATION_ERROR),
            (FileAccessError("x"), EXIT_FILE_ERROR),
            (FormatError(format_type="pdf"), EXIT_FORMAT_ERROR),
            (ParsingError("bad"), EXIT_PARSING_ERROR),
            (OutputWriteError("x"), EXIT_RENDERING_ERROR),
            (StructuralConversionError("x"), EXIT_RENDERING_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, error, code):
        """Test each error class maps to its exit code."""
        assert get_exit_code_for_exception(error) == code
