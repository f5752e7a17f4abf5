#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_structural.py
"""Unit tests for structural Markdown conversion.

Tests cover:
- Mapping of blocks and inline content onto the Markdown model
- Rejection of shapes the model cannot express
- Result values instead of exceptions
- Raw table text surviving the emitter unescaped

"""

import pytest

from gdoc2md import ast
from gdoc2md.exceptions import StructuralConversionError
from gdoc2md.markdown.normalize import normalize_tree
from gdoc2md.markdown.structural import MarkdownAstBuilder, StructuralResult, convert_structural
from gdoc2md.options import MarkdownRendererOptions
from gdoc2md.tree import Root, Text, element


def _convert(*children):
    return convert_structural(Root(children=list(children)))


@pytest.mark.unit
class TestStructuralResult:
    """Tests for the StructuralResult value."""

    def test_success(self):
        """Test a successful result carries Markdown."""
        result = StructuralResult.success("# x")
        assert result.succeeded
        assert result.markdown == "# x"
        assert result.reason is None

    def test_failure(self):
        """Test a failed result carries a reason."""
        result = StructuralResult.failure("nope")
        assert not result.succeeded
        assert result.markdown is None
        assert result.reason == "nope"

    def test_empty_markdown_still_succeeds(self):
        """Test an empty string is a valid success."""
        assert StructuralResult.success("").succeeded


@pytest.mark.unit
class TestBlockMapping:
    """Tests for block-level conversion."""

    def test_heading_and_paragraph(self):
        """Test headings and paragraphs map directly."""
        result = _convert(element("h2", "Title"), element("p", " Hello world "))
        assert result.markdown == "## Title\n\nHello world"

    def test_empty_blocks_are_dropped(self):
        """Test headings and paragraphs without content produce nothing."""
        result = _convert(element("h1", "  "), element("p"), element("p", "x"))
        assert result.markdown == "x"

    def test_loose_inline_content_becomes_paragraph(self):
        """Test inline content at block level is grouped into one paragraph."""
        result = _convert(Text("Hello "), element("em", "there"), element("p", "Next"))
        assert result.markdown == "Hello *there*\n\nNext"

    def test_division_is_flattened(self):
        """Test div wrappers are transparent."""
        result = _convert(element("div", element("h1", "A"), element("div", element("p", "B"))))
        assert result.markdown == "# A\n\nB"

    def test_lists(self):
        """Test nested lists with ordered start values."""
        nested = element("ol", element("li", "y"), element("li", "z"), attributes={"start": "3"})
        result = _convert(element("ul", element("li", "x", nested), element("li", "")))
        assert result.markdown == "- x\n  3. y\n  4. z"

    def test_code_block_language(self):
        """Test pre/code keeps text verbatim with the language class."""
        code = element("code", "print('*')\n", attributes={"class": "language-python"})
        result = _convert(element("pre", code))
        assert result.markdown == "```python\nprint('*')\n```"

    def test_block_quote_and_rule(self):
        """Test blockquotes and horizontal rules."""
        result = _convert(element("blockquote", element("p", "quoted")), element("hr"))
        assert result.markdown == "> quoted\n\n---"

    def test_builder_keeps_metadata(self):
        """Test the document model receives the tree metadata."""
        document = MarkdownAstBuilder().build(Root(children=[], metadata={"title": "T"}))
        assert isinstance(document, ast.Document)
        assert document.metadata == {"title": "T"}


@pytest.mark.unit
class TestInlineMapping:
    """Tests for inline conversion."""

    def test_emphasis_strong_code(self):
        """Test the basic inline elements."""
        result = _convert(element("p", element("em", "a"), " ", element("strong", "b"), " ", element("code", "c")))
        assert result.markdown == "*a* **b** `c`"

    def test_link_with_title(self):
        """Test links keep their URL and title."""
        link = element("a", "docs", attributes={"href": "https://example.com/a b", "title": "Docs"})
        result = _convert(element("p", link))
        assert result.markdown == '[docs](https://example.com/a%20b "Docs")'

    def test_span_is_transparent(self):
        """Test spans contribute their children only."""
        result = _convert(element("p", element("span", "plain")))
        assert result.markdown == "plain"

    def test_line_break(self):
        """Test br becomes a hard line break."""
        result = _convert(element("p", "a", element("br"), "b"))
        assert result.markdown == "a  \nb"

    def test_special_characters_are_escaped(self):
        """Test ordinary text is escaped by the emitter."""
        result = _convert(element("p", "2 * 3 [x]"))
        assert result.markdown == "2 \\* 3 \\[x\\]"

    def test_raw_text_is_not_escaped(self):
        """Test raw text reaches the output verbatim."""
        result = _convert(element("p", Text("| a\\|b |", raw=True)))
        assert result.markdown == "| a\\|b |"

    def test_options_are_honored(self):
        """Test renderer options other than the fixed emitter choices apply."""
        options = MarkdownRendererOptions(escape_special=False, emphasis_symbol="_", bullet_symbol="*")
        result = convert_structural(
            Root(children=[element("p", element("em", "a*b")), element("ul", element("li", "x"))]), options
        )
        assert result.markdown == "_a*b_\n\n- x"


@pytest.mark.unit
class TestRejection:
    """Tests for shapes the model cannot express."""

    def test_unknown_tag_fails(self):
        """Test unknown elements make the conversion fail."""
        result = _convert(element("p", element("marquee", "x")))
        assert not result.succeeded
        assert "marquee" in result.reason

    def test_unknown_block_fails(self):
        """Test unknown elements at block level fail as well."""
        assert not _convert(element("section", element("p", "x"))).succeeded

    def test_leftover_strikethrough_fails(self):
        """Test strikethrough that normalization could not rewrite fails."""
        tree = normalize_tree(Root(children=[element("p", element("s", element("em", "x")))]))
        result = convert_structural(tree)
        assert not result.succeeded
        assert "<s>" in result.reason

    def test_block_inside_inline_fails(self):
        """Test block content nested in inline content fails."""
        assert not _convert(element("p", element("em", element("p", "x")))).succeeded

    def test_stray_list_item_fails(self):
        """Test a list item outside of a list fails."""
        result = _convert(element("li", "x"))
        assert not result.succeeded
        assert "List item" in result.reason

    def test_unnormalized_table_fails(self):
        """Test a table that was not normalized fails."""
        assert not _convert(element("table", element("tr", element("td", "x")))).succeeded

    def test_list_with_loose_text_fails(self):
        """Test non-whitespace text directly inside a list fails."""
        assert not _convert(element("ul", "loose", element("li", "x"))).succeeded

    def test_list_whitespace_is_ignored(self):
        """Test whitespace text between list items is accepted."""
        assert _convert(element("ul", " ", element("li", "x"), "\n")).markdown == "- x"

    def test_builder_raises(self):
        """Test the builder itself signals failure by raising."""
        with pytest.raises(StructuralConversionError) as exc_info:
            MarkdownAstBuilder().build(Root(children=[element("p", element("blink", "x"))]))
        assert exc_info.value.tag_name == "blink"
        assert exc_info.value.rendering_stage == "markdown_ast"

    def test_deep_nesting_fails_gracefully(self):
        """Test nesting deeper than the recursion limit yields a failure, not an exception."""
        node = element("em", "x")
        for _ in range(5000):
            node = element("span", node)
        result = _convert(element("p", node))
        assert not result.succeeded
