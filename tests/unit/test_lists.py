#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_lists.py
"""Unit tests for the list transcoder.

Tests cover:
- Unordered and ordered markers
- Counters that skip empty items
- Nested lists at any depth inside an item
- Items belonging to nested lists are not counted twice

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gdoc2md.markdown.lists import list_to_markdown
from gdoc2md.tree import element


def _list(tag, *texts):
    return element(tag, *(element("li", text) for text in texts))


@pytest.mark.unit
class TestFlatLists:
    """Tests for lists without nesting."""

    def test_unordered(self):
        """Test unordered items use a dash marker."""
        assert list_to_markdown(_list("ul", "a", "b")) == "- a\n- b\n"

    def test_ordered(self):
        """Test ordered items are numbered from 1."""
        assert list_to_markdown(_list("ol", "a", "b", "c")) == "1. a\n2. b\n3. c\n"

    def test_ordered_flag_overrides_tag(self):
        """Test the ordered flag forces numbering on a ul."""
        assert list_to_markdown(_list("ul", "a", "b"), ordered=True) == "1. a\n2. b\n"

    def test_empty_items_are_skipped(self):
        """Test empty items emit nothing and do not advance the counter."""
        assert list_to_markdown(_list("ol", "a", "", "   ", "b")) == "1. a\n2. b\n"

    def test_all_items_empty(self):
        """Test a list with no text produces an empty string."""
        assert list_to_markdown(_list("ul", "", "")) == ""

    def test_level_indents(self):
        """Test each level indents by two spaces."""
        assert list_to_markdown(_list("ul", "a"), level=2) == "    - a\n"

    def test_non_item_children_are_ignored(self):
        """Test loose text and stray elements are not list items."""
        lst = element("ul", "loose", element("p", "stray"), element("li", "real"))
        assert list_to_markdown(lst) == "- real\n"

    def test_item_text_is_flattened(self):
        """Test inline formatting and line breaks are flattened."""
        lst = element("ul", element("li", " Hello ", element("strong", "big"), "\n world "))
        assert list_to_markdown(lst) == "- Hello big world\n"


@pytest.mark.unit
class TestNestedLists:
    """Tests for nested lists."""

    def test_nested_ordered_under_unordered(self):
        """Test the nested list follows its parent item one level deeper."""
        nested = _list("ol", "y")
        lst = element("ul", element("li", "x", nested), element("li", ""))
        assert list_to_markdown(lst) == "- x\n  1. y\n"

    def test_nested_text_not_in_parent_item(self):
        """Test nested item text is not repeated on the parent line."""
        lst = element("ul", element("li", "parent", _list("ul", "child")))
        assert list_to_markdown(lst) == "- parent\n  - child\n"

    def test_counter_resets_per_list(self):
        """Test nested ordered lists count from 1 independently."""
        lst = element(
            "ol",
            element("li", "a", _list("ol", "a1", "a2")),
            element("li", "b", _list("ol", "b1")),
        )
        assert list_to_markdown(lst) == "1. a\n  1. a1\n  2. a2\n2. b\n  1. b1\n"

    def test_nested_list_inside_wrapper(self):
        """Test a nested list wrapped in another element is still found."""
        lst = element("ul", element("li", "x", element("div", _list("ul", "deep"))))
        assert list_to_markdown(lst) == "- x\n  - deep\n"

    def test_nested_list_under_empty_item(self):
        """Test a nested list under an empty item is still emitted."""
        lst = element("ul", element("li", _list("ul", "orphan")))
        assert list_to_markdown(lst) == "  - orphan\n"

    def test_three_levels(self):
        """Test indentation grows with every level."""
        lst = element("ul", element("li", "1", element("ul", element("li", "2", _list("ul", "3")))))
        assert list_to_markdown(lst) == "- 1\n  - 2\n    - 3\n"


item_text = st.text(alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd")), max_size=6)


@pytest.mark.unit
class TestListProperties:
    """Property-based tests for the list transcoder."""

    @given(st.lists(item_text, max_size=10))
    def test_one_line_per_non_empty_item(self, texts):
        """Test the output has exactly one line per item with text."""
        output = list_to_markdown(_list("ol", *texts))
        non_empty = [text for text in texts if text]
        assert output.splitlines() == [f"{index}. {text}" for index, text in enumerate(non_empty, start=1)]

    @given(st.lists(item_text, max_size=10), st.integers(min_value=0, max_value=4))
    def test_indent_matches_level(self, texts, level):
        """Test every line is indented two spaces per level."""
        for line in list_to_markdown(_list("ul", *texts), level=level).splitlines():
            assert line.startswith("  " * level + "- ")


@pytest.mark.unit
class TestDeepNesting:
    """Tests for lists nested far beyond the interpreter recursion limit."""

    def test_deeply_nested_list(self):
        """Test every level is transcoded with its own indentation."""
        depth = 1500
        node = _list("ul", "leaf")
        for _ in range(depth):
            node = element("ul", element("li", "item", node))

        lines = list_to_markdown(node).splitlines()
        assert len(lines) == depth + 1
        assert lines[0] == "- item"
        assert lines[-1] == "  " * depth + "- leaf"
