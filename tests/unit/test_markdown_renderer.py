#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_renderer.py
"""Unit tests for the Markdown renderer.

Tests cover:
- Headings, paragraphs, lists, block quotes and code blocks
- Context-aware escaping
- Renderer options
- Writing output to paths and streams

"""

from io import BytesIO, StringIO

import pytest

from gdoc2md.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from gdoc2md.exceptions import InvalidOptionsError
from gdoc2md.options import HtmlRendererOptions, MarkdownRendererOptions
from gdoc2md.renderers.markdown import MarkdownRenderer


def _render(*blocks, **options):
    return MarkdownRenderer(MarkdownRendererOptions(**options)).render_to_string(Document(children=list(blocks)))


def _para(*inline):
    return Paragraph(content=[Text(content=item) if isinstance(item, str) else item for item in inline])


def _item(text, *children):
    return ListItem(children=[_para(text), *children])


@pytest.mark.unit
class TestHeadings:
    """Tests for heading rendering."""

    def test_hash_heading(self):
        """Test ATX headings use one hash per level."""
        assert _render(Heading(level=3, content=[Text(content="Title")])) == "### Title"

    def test_level_offset_is_clamped(self):
        """Test the level offset shifts headings within 1-6."""
        assert _render(Heading(level=1, content=[Text(content="A")]), heading_level_offset=1) == "## A"
        assert _render(Heading(level=6, content=[Text(content="B")]), heading_level_offset=2) == "###### B"

    def test_setext_headings(self):
        """Test levels 1 and 2 use underlines when hash headings are off."""
        output = _render(
            Heading(level=1, content=[Text(content="Title")]),
            Heading(level=2, content=[Text(content="Ab")]),
            Heading(level=3, content=[Text(content="Deep")]),
            use_hash_headings=False,
        )
        assert output == "Title\n=====\n\nAb\n---\n\n### Deep"


@pytest.mark.unit
class TestEscaping:
    """Tests for special character escaping."""

    def test_always_escaped_characters(self):
        """Test asterisks, brackets, braces, backticks and backslashes."""
        assert _render(_para("a*b [c] {d} `e` \\")) == "a\\*b \\[c\\] \\{d\\} \\`e\\` \\\\"

    def test_hash_only_at_start(self):
        """Test a hash is escaped only at the start of the text."""
        assert _render(_para("# not a heading #1")) == "\\# not a heading #1"

    def test_underscore_inside_word(self):
        """Test intra-word underscores are left alone."""
        assert _render(_para("snake_case _x_")) == "snake_case \\_x\\_"

    def test_tilde_is_not_escaped(self):
        """Test tildes pass through so inlined strikethrough survives."""
        assert _render(_para("~~old~~")) == "~~old~~"

    def test_escaping_disabled(self):
        """Test escape_special=False writes text unchanged."""
        assert _render(_para("a*b [c]"), escape_special=False) == "a*b [c]"

    def test_raw_text(self):
        """Test raw text is written verbatim."""
        raw = Text(content="| a*b |", metadata={"raw": True})
        assert _render(Paragraph(content=[raw])) == "| a*b |"


@pytest.mark.unit
class TestInline:
    """Tests for inline rendering."""

    def test_emphasis_and_strong(self):
        """Test emphasis and strong markers."""
        paragraph = _para(Emphasis(content=[Text(content="a")]), " ", Strong(content=[Text(content="b")]))
        assert _render(paragraph) == "*a* **b**"

    def test_underscore_emphasis(self):
        """Test the emphasis symbol option."""
        assert _render(_para(Emphasis(content=[Text(content="a")])), emphasis_symbol="_") == "_a_"

    def test_empty_emphasis_is_omitted(self):
        """Test formatting without content produces no markers."""
        assert _render(_para("a", Emphasis(content=[]), Strong(content=[]), "b")) == "ab"

    def test_inline_code(self):
        """Test code spans pick a longer delimiter when needed."""
        assert _render(_para(Code(content="x*y"))) == "`x*y`"
        assert _render(_para(Code(content="a`b"))) == "``a`b``"

    def test_link(self):
        """Test links encode spaces and closing parentheses."""
        link = Link(url="https://example.com/a b(c)", content=[Text(content="site")])
        assert _render(_para(link)) == "[site](https://example.com/a%20b(c%29)"

    def test_link_title_quotes(self):
        """Test quotes in link titles are escaped."""
        link = Link(url="u", content=[Text(content="t")], title='say "hi"')
        assert _render(_para(link)) == '[t](u "say \\"hi\\"")'

    def test_line_break(self):
        """Test hard line breaks use two trailing spaces."""
        assert _render(_para("a", LineBreak(), "b")) == "a  \nb"


@pytest.mark.unit
class TestBlocks:
    """Tests for block rendering."""

    def test_blocks_are_separated_by_blank_lines(self):
        """Test consecutive blocks get one blank line between them."""
        assert _render(_para("a"), ThematicBreak(), _para("b")) == "a\n\n---\n\nb"

    def test_empty_document(self):
        """Test an empty document renders as an empty string."""
        assert _render() == ""

    def test_code_block(self):
        """Test fenced code blocks with a language."""
        assert _render(CodeBlock(content="x = 1", language="python")) == "```python\nx = 1\n```"

    def test_code_block_fence_grows(self):
        """Test the fence is longer than any fence run in the content."""
        assert _render(CodeBlock(content="a\n```\nb\n")) == "````\na\n```\nb\n````"

    def test_tilde_fence(self):
        """Test the fence character option."""
        assert _render(CodeBlock(content="x"), code_fence_char="~") == "~~~\nx\n~~~"

    def test_block_quote(self):
        """Test every quoted line is prefixed."""
        assert _render(BlockQuote(children=[_para("a"), _para("b")])) == "> a\n>\n> b"

    def test_blank_lines_are_collapsed(self):
        """Test runs of blank lines collapse unless disabled."""
        paragraph = _para(Text(content="a\n\n\n\nb", metadata={"raw": True}))
        assert _render(paragraph) == "a\n\nb"
        assert _render(paragraph, collapse_blank_lines=False) == "a\n\n\n\nb"

    def test_line_endings_are_normalized(self):
        """Test CRLF and CR become LF."""
        assert _render(_para("a\r\nb\rc")) == "a\nb\nc"


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_unordered(self):
        """Test unordered items use the bullet symbol."""
        lst = List(ordered=False, items=[_item("a"), _item("b")])
        assert _render(lst) == "- a\n- b"
        assert _render(lst, bullet_symbol="*") == "* a\n* b"

    def test_ordered_start(self):
        """Test ordered items count up from the start number."""
        lst = List(ordered=True, start=3, items=[_item("a"), _item("b")])
        assert _render(lst) == "3. a\n4. b"
        assert _render(lst, increment_list_markers=False) == "3. a\n3. b"

    def test_nested(self):
        """Test nested lists indent by the parent marker width."""
        inner = List(ordered=True, items=[_item("y"), _item("z")])
        outer = List(ordered=False, items=[_item("x", inner), _item("w")])
        assert _render(outer) == "- x\n  1. y\n  2. z\n- w"

    def test_nested_under_ordered(self):
        """Test the indent follows a wider ordered marker."""
        inner = List(ordered=False, items=[_item("y")])
        outer = List(ordered=True, start=10, items=[_item("x", inner)])
        assert _render(outer) == "10. x\n    - y"

    def test_blank_continuation_lines_stay_empty(self):
        """Test multi-line content in an item is indented except for its blank lines."""
        lst = List(ordered=False, items=[_item("x", CodeBlock(content="a\n\nb"))])
        lines = _render(lst).split("\n")
        assert "  a" in lines
        assert "  b" in lines
        assert "" in lines
        assert [line for line in lines if line and not line.strip()] == []


@pytest.mark.unit
class TestRendererPlumbing:
    """Tests for options validation and output writing."""

    def test_wrong_options_type(self):
        """Test options of another renderer are rejected."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            MarkdownRenderer(HtmlRendererOptions())
        assert exc_info.value.converter_name == "markdown"

    def test_render_to_text_stream(self):
        """Test rendering into a text stream."""
        stream = StringIO()
        MarkdownRenderer().render(Document(children=[_para("hi")]), stream)
        assert stream.getvalue() == "hi"

    def test_render_to_binary_stream(self):
        """Test binary streams receive encoded text."""
        stream = BytesIO()
        MarkdownRenderer().render(Document(children=[_para("é")]), stream)
        assert stream.getvalue() == "é".encode("utf-8")

    def test_render_to_path(self, tmp_path):
        """Test rendering into a file path."""
        target = tmp_path / "out.md"
        MarkdownRenderer().render(Document(children=[_para("file")]), target)
        assert target.read_text(encoding="utf-8") == "file"

    def test_unsupported_output(self):
        """Test an object without write is rejected."""
        with pytest.raises(TypeError):
            MarkdownRenderer().render(Document(), 42)

    def test_renderer_is_reusable(self):
        """Test state does not leak between renders."""
        renderer = MarkdownRenderer()
        lst = List(ordered=False, items=[_item("a")])
        assert renderer.render_to_string(Document(children=[lst])) == "- a"
        assert renderer.render_to_string(Document(children=[_para("b")])) == "b"
