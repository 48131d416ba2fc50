"""
Module: contributors.table

Purpose:
    Plain-text table layout for the credits document. Cells are padded to
    their column width and columns are separated by a vertical rule glyph;
    header rows are underlined with a double rule. Output lines are indented
    so Markdown renders them as a code block.

Key Functions:
    - split_column_major(): Distribute items down columns, then across
    - render_table(): Rows of cells -> aligned text lines
"""

from __future__ import annotations

import math
from typing import Sequence

VERTICAL_RULE = "│"
HEADER_RULE = "═"
HEADER_CROSSING = "╪"
INDENT = "    "


def split_column_major(items: Sequence[str], columns: int) -> list[list[str]]:
    """
    Lay ``items`` out in at most ``columns`` columns, filling each column
    top to bottom before moving to the next.

    Args:
        items: Items in display order
        columns: Maximum number of columns

    Returns:
        Rows of cells; the last column may be shorter, its missing cells are ""

    Example:
        >>> split_column_major(["a", "b", "c", "d", "e", "f", "g"], 5)
        [['a', 'c', 'e', 'g'], ['b', 'd', 'f', '']]
    """
    if not items:
        return []
    num_rows = math.ceil(len(items) / columns)
    chunks = [items[i:i + num_rows] for i in range(0, len(items), num_rows)]
    return [
        [chunk[row] if row < len(chunk) else "" for chunk in chunks]
        for row in range(num_rows)
    ]


def _separator(column_spacing: int, glyph: str, fill: str = " ") -> str:
    left = (column_spacing - 1) // 2
    right = column_spacing - 1 - left
    return fill * left + glyph + fill * right


def render_table(
    rows: Sequence[Sequence[str]],
    *,
    column_spacing: int = 5,
    header_rows: int = 0,
    indent: str = INDENT,
) -> list[str]:
    """
    Render rows of cells as aligned text lines.

    Args:
        rows: Table rows; shorter rows are padded with empty cells
        column_spacing: Gap between columns, rule glyph included
        header_rows: Number of leading rows underlined by a header rule
        indent: Prefix for every line

    Returns:
        Lines without terminators and without trailing whitespace
    """
    if not rows:
        return []

    num_columns = max(len(row) for row in rows)
    grid = [list(row) + [""] * (num_columns - len(row)) for row in rows]
    widths = [max(len(row[col]) for row in grid) for col in range(num_columns)]

    cell_separator = _separator(column_spacing, VERTICAL_RULE)
    rule_separator = _separator(column_spacing, HEADER_CROSSING, HEADER_RULE)

    lines: list[str] = []
    for index, row in enumerate(grid):
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        while len(cells) > 1 and not row[len(cells) - 1]:
            cells.pop()
        lines.append((indent + cell_separator.join(cells)).rstrip())
        if header_rows and index == header_rows - 1:
            rule = rule_separator.join(HEADER_RULE * width for width in widths)
            lines.append(indent + rule)
    return lines
