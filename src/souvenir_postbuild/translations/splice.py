"""
Module: translations.splice

Purpose:
    Replace the generated region of a translation source file in place.
    The region is everything strictly between a begin-sentinel line and the
    first end-sentinel line after it; the sentinels and all other bytes of
    the file are kept exactly as they were, line endings included.

Key Functions:
    - split_lines(): Split text into lines, keeping their endings
    - find_region(): Locate the sentinel lines
    - extract_region(): Text strictly between the sentinels
    - splice_region(): Swap in a new block

Key Classes:
    - RegionNotFoundError: Missing file, or sentinels missing or misordered
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Sequence

_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")


class RegionNotFoundError(Exception):
    """Raised when a translation file cannot be spliced. Recoverable per file."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


def split_lines(text: str) -> list[str]:
    """
    Split text into lines, each keeping its own terminator.

    ``"".join(split_lines(text)) == text`` always holds.
    """
    return _LINE_RE.findall(text)


def detect_newline(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def find_region(lines: Sequence[str], begin_sentinel: str, end_sentinel: str) -> tuple[int, int]:
    """
    Locate the sentinel lines.

    Args:
        lines: File lines (terminators allowed)
        begin_sentinel: Trimmed text of the begin line
        end_sentinel: Trimmed text of the end line

    Returns:
        (begin_index, end_index) with begin_index < end_index

    Raises:
        RegionNotFoundError: If the begin sentinel is missing, or no end
            sentinel follows it
    """
    begin = begin_sentinel.strip()
    end = end_sentinel.strip()

    begin_index = next((i for i, line in enumerate(lines) if line.strip() == begin), -1)
    if begin_index == -1:
        raise RegionNotFoundError(f"Begin sentinel {begin!r} not found")

    end_index = next(
        (i for i in range(begin_index + 1, len(lines)) if lines[i].strip() == end), -1
    )
    if end_index == -1:
        raise RegionNotFoundError(f"End sentinel {end!r} not found after {begin!r}")

    return begin_index, end_index


def extract_region(text: str, begin_sentinel: str, end_sentinel: str) -> str:
    """Return the text strictly between the sentinel lines."""
    lines = split_lines(text)
    begin_index, end_index = find_region(lines, begin_sentinel, end_sentinel)
    return "".join(lines[begin_index + 1:end_index])


def splice_region(text: str, block: str, begin_sentinel: str, end_sentinel: str) -> str:
    """
    Replace the region between the sentinels with ``block``.

    Args:
        text: Existing file contents
        block: New region contents; a missing final line terminator is added
            using the file's newline convention
        begin_sentinel: Trimmed text of the begin line
        end_sentinel: Trimmed text of the end line

    Returns:
        New file contents

    Raises:
        RegionNotFoundError: If the sentinels cannot be located
    """
    lines = split_lines(text)
    begin_index, end_index = find_region(lines, begin_sentinel, end_sentinel)

    if block and not block.endswith(("\n", "\r")):
        block += detect_newline(text)

    head = "".join(lines[:begin_index + 1])
    tail = "".join(lines[end_index:])
    return head + block + tail
