#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/markdown/tables.py
"""Table transcoding to pipe-table Markdown text.

Tables have no place in the intermediate Markdown model, so they are turned
into literal Markdown text. The transcoder is deliberately forgiving: rows
and cells are searched for at any depth (``thead``/``tbody`` wrappers and
malformed nesting are both fine), and rows of uneven length are normalized
to a single column count.

"""

from __future__ import annotations

from gdoc2md.constants import (
    DEFAULT_COLUMN_LABEL,
    EMPTY_CELL_TEXT,
    EMPTY_TABLE_PLACEHOLDER,
    TABLE_SEPARATOR_CELL,
)
from gdoc2md.tree.nodes import Element
from gdoc2md.tree.traversal import extract_text, find_all, fold_whitespace, is_cell, is_row


def _cell_text(cell: Element) -> str:
    text = fold_whitespace(extract_text(cell)).replace("|", "\\|")
    return text or EMPTY_CELL_TEXT


def collect_rows(table: Element) -> list[list[str]]:
    """Collect the trimmed cell texts of every row in a table.

    Parameters
    ----------
    table : Element
        Table subtree

    Returns
    -------
    list of list of str
        One list of cell texts per row that has at least one cell

    """
    rows: list[list[str]] = []
    for row in find_all(table, is_row):
        cells = [_cell_text(cell) for cell in find_all(row, is_cell)]
        if cells:
            rows.append(cells)
    return rows


def _format_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |\n"


def table_to_markdown(table: Element) -> str:
    """Convert a table subtree to a Markdown pipe table.

    The first row becomes the header. Every emitted row has as many cells as
    the longest input row: the header is padded with ``Column`` labels, data
    rows are padded with empty cells or truncated.

    Parameters
    ----------
    table : Element
        Table subtree

    Returns
    -------
    str
        The table, each row terminated by a newline, or exactly
        ``[Empty Table]`` when no row has any cells

    Examples
    --------
    >>> table = element("table", element("tr", element("td", "A"), element("td", "B")),
    ...                 element("tr", element("td", "1")))
    >>> print(table_to_markdown(table))
    | A | B |
    | --- | --- |
    | 1 |  |

    """
    rows = collect_rows(table)
    if not rows:
        return EMPTY_TABLE_PLACEHOLDER

    column_count = max(len(row) for row in rows)

    header = rows[0] + [DEFAULT_COLUMN_LABEL] * (column_count - len(rows[0]))
    lines = [_format_row(header), _format_row([TABLE_SEPARATOR_CELL] * column_count)]

    for row in rows[1:]:
        padded = row[:column_count] + [""] * (column_count - len(row))
        lines.append(_format_row(padded))

    return "".join(lines)
