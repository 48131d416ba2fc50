"""
Utils Package

Literal escaping shared by the code generator and the block parser, and
exact text file I/O for in-place edits.
"""

from .escaping import (
    escape_literal,
    unescape_literal,
    join_surrogate_pairs,
)
from .files import read_text_exact, write_text_exact

__all__ = [
    "escape_literal",
    "unescape_literal",
    "join_surrogate_pairs",
    "read_text_exact",
    "write_text_exact",
]
