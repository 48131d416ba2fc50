"""
Contributors Package

CONTRIBUTORS.md generation: contributor grouping and text table layout.
"""

from .document import (
    build_contributor_groups,
    generate_contributors_document,
    write_contributors_document,
)
from .table import render_table, split_column_major

__all__ = [
    "build_contributor_groups",
    "generate_contributors_document",
    "write_contributors_document",
    "render_table",
    "split_column_major",
]
