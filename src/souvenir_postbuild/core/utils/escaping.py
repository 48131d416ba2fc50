"""
Literal Escaping Utilities

Escapes arbitrary text so it can sit inside a double-quoted C# string
literal in generated translation code, and reverses the escaping when a
generated block is read back.

Escaping rules:
- \\0 \\a \\b \\t \\n \\v \\f \\r map to their two-character escapes
- backslash and double quote get a leading backslash
- any other code point below 0x20 becomes \\uXXXX
- a high surrogate immediately followed by a low surrogate passes through
- an unpaired surrogate half becomes \\uXXXX
- everything else passes through unchanged
"""

from __future__ import annotations

import re

_SIMPLE_ESCAPES = {
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\\": "\\\\",
    '"': '\\"',
}

_SIMPLE_UNESCAPES = {escape[1]: char for char, escape in _SIMPLE_ESCAPES.items()}

_HEX4_RE = re.compile(r"[0-9A-Fa-f]{4}")


def _is_high_surrogate(char: str) -> bool:
    return 0xD800 <= ord(char) < 0xDC00


def _is_low_surrogate(char: str) -> bool:
    return 0xDC00 <= ord(char) <= 0xDFFF


def escape_literal(value: str) -> str:
    """Escape ``value`` for use inside a double-quoted literal.

    Args:
        value: Arbitrary text, possibly containing lone surrogates.

    Returns:
        Escaped text (without surrounding quotes).
    """
    if value is None:
        raise TypeError("value must be a string, not None")

    out: list[str] = []
    i = 0
    length = len(value)
    while i < length:
        char = value[i]
        simple = _SIMPLE_ESCAPES.get(char)
        if simple is not None:
            out.append(simple)
        elif _is_high_surrogate(char):
            if i + 1 < length and _is_low_surrogate(value[i + 1]):
                out.append(char)
                out.append(value[i + 1])
                i += 1
            else:
                out.append(f"\\u{ord(char):04X}")
        elif _is_low_surrogate(char) or ord(char) < 0x20:
            out.append(f"\\u{ord(char):04X}")
        else:
            out.append(char)
        i += 1
    return "".join(out)


def unescape_literal(value: str) -> str:
    """Reverse :func:`escape_literal`.

    Args:
        value: Literal body as found between the quotes.

    Returns:
        The original text.

    Raises:
        ValueError: On a dangling backslash or an unknown escape sequence.
    """
    out: list[str] = []
    i = 0
    length = len(value)
    while i < length:
        char = value[i]
        if char != "\\":
            out.append(char)
            i += 1
            continue

        if i + 1 >= length:
            raise ValueError(f"Dangling backslash at end of literal: {value!r}")
        code = value[i + 1]
        if code in _SIMPLE_UNESCAPES:
            out.append(_SIMPLE_UNESCAPES[code])
            i += 2
        elif code == "u":
            digits = value[i + 2:i + 6]
            if not _HEX4_RE.fullmatch(digits):
                raise ValueError(f"Invalid \\u escape at offset {i}: {value!r}")
            out.append(chr(int(digits, 16)))
            i += 6
        else:
            raise ValueError(f"Unknown escape sequence \\{code} at offset {i}: {value!r}")
    return "".join(out)


def join_surrogate_pairs(text: str) -> str:
    """Combine surrogate pairs held as two code points into one code point.

    Lone surrogates are left in place; callers escape those before writing.
    """
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
