"""Text file helpers that keep line endings byte-for-byte.

Translation files are edited in place, so newline translation on read or
write would rewrite every line of the file.
"""

from __future__ import annotations

from pathlib import Path

from .escaping import join_surrogate_pairs


def read_text_exact(path: Path) -> str:
    """Read a UTF-8 file without newline translation."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text_exact(path: Path, text: str) -> None:
    """Overwrite ``path`` with ``text`` in one write, without newline translation.

    Surrogate pairs held as two code points are joined first so the file is
    valid UTF-8.
    """
    data = join_surrogate_pairs(text)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(data)
