"""Pytest configuration and shared fixtures for the gdoc2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import json
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from gdoc2md.tree import Root, element

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


def _paragraph(*runs, named_style="NORMAL_TEXT", bullet=None):
    """Build a Google Docs paragraph structural element from text runs."""
    elements = []
    for run in runs:
        if isinstance(run, str):
            elements.append({"textRun": {"content": run}})
        else:
            elements.append({"textRun": run})
    paragraph = {"elements": elements, "paragraphStyle": {"namedStyleType": named_style}}
    if bullet is not None:
        paragraph["bullet"] = bullet
    return {"paragraph": paragraph}


@pytest.fixture
def gdocs_paragraph():
    """Provide the Google Docs paragraph builder."""
    return _paragraph


@pytest.fixture
def gdocs_document() -> dict:
    """Provide a small Google Docs API response with a heading, text, list and table.

    Returns
    -------
    dict
        Decoded ``documents.get`` response

    """
    return {
        "documentId": "doc-123",
        "title": "Quarterly Notes",
        "body": {
            "content": [
                {"sectionBreak": {"sectionStyle": {}}},
                _paragraph("Quarterly Notes\n", named_style="TITLE"),
                _paragraph("Hello ", {"content": "world", "textStyle": {"bold": True}}, "\n"),
                _paragraph("first\n", bullet={"listId": "kix.list1"}),
                _paragraph("nested\n", bullet={"listId": "kix.list1", "nestingLevel": 1}),
                _paragraph("second\n", bullet={"listId": "kix.list1"}),
                {
                    "table": {
                        "rows": 2,
                        "columns": 2,
                        "tableRows": [
                            {
                                "tableCells": [
                                    {"content": [_paragraph("A\n")]},
                                    {"content": [_paragraph("B\n")]},
                                ]
                            },
                            {
                                "tableCells": [
                                    {"content": [_paragraph("1\n")]},
                                    {"content": [_paragraph("2\n")]},
                                ]
                            },
                        ],
                    }
                },
            ]
        },
        "lists": {
            "kix.list1": {
                "listProperties": {
                    "nestingLevels": [
                        {"glyphSymbol": "●"},
                        {"glyphType": "DECIMAL"},
                    ]
                }
            }
        },
    }


@pytest.fixture
def gdocs_file(tmp_path: Path, gdocs_document: dict) -> Path:
    """Write the sample Google Docs response to a JSON file."""
    path = tmp_path / "document.json"
    path.write_text(json.dumps(gdocs_document), encoding="utf-8")
    return path


@pytest.fixture
def html_file(tmp_path: Path) -> Path:
    """Write a small HTML page to a file."""
    path = tmp_path / "page.html"
    path.write_text(
        "<!DOCTYPE html><html lang='en'><head><title>Page</title></head>"
        "<body><h1>Welcome</h1><p>Some <em>text</em></p></body></html>",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def simple_tree() -> Root:
    """Provide a tree with a heading, a paragraph and a flat list."""
    return Root(
        children=[
            element("h1", "Title"),
            element("p", "Hello world"),
            element("ul", element("li", "a"), element("li", "b")),
        ]
    )
