r"""
Backslash escape resolution

Handles everything that can follow a backslash in a (non-raw) template:

    \'  \"  \\  \0          quote, backslash and NUL
    \n  \r  \t              control characters
    \xHH                    7-bit character (value <= 0x7F)
    \u{H..H}                Unicode scalar, 1 to 6 hex digits
    \<newline>              line continuation, skips following whitespace

Anything else is an InvalidEscape.
"""

import re
from typing import Optional

from ..models.parser import Cursor
from .errors import InvalidEscape

_HEX_RE = re.compile(r'[0-9a-fA-F]+')

SIMPLE_ESCAPES = {
    "'": "'",
    '"': '"',
    '\\': '\\',
    '0': '\0',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

CONTINUATION_WHITESPACE = frozenset(' \n\r\t')


def escape_resolve(cursor: Cursor) -> Optional[str]:
    """
    Resolve the escape whose backslash has just been consumed

    Args:
        cursor: Positioned on the character after the backslash

    Returns:
        The literal character, or None for a line continuation (the cursor
        is then left on the first non-whitespace character, which the
        caller processes normally)

    Raises:
        InvalidEscape: Unknown escape, malformed hex/unicode escape, or a
                       backslash at end of input
    """
    start = cursor.position - 1
    ch = cursor.take()

    if ch is None:
        raise InvalidEscape("invalid escape: trailing backslash", start, cursor.text)
    if ch in SIMPLE_ESCAPES:
        return SIMPLE_ESCAPES[ch]
    if ch == 'x':
        return ascii_decode(cursor, start)
    if ch == 'u':
        return unicode_decode(cursor, start)
    if ch == '\n':
        continuation_skip(cursor)
        return None

    raise InvalidEscape(f"invalid escape: '\\{ch}'", start, cursor.text)


def ascii_decode(cursor: Cursor, start: int) -> str:
    r"""Decode the two hex digits of a \xHH escape"""
    digits = cursor.slice(cursor.position, cursor.position + 2)
    cursor.advance(2)

    if len(digits) != 2 or not _HEX_RE.fullmatch(digits):
        raise InvalidEscape(f"invalid escape: '\\x{digits}'", start, cursor.text)
    value = int(digits, 16)
    if value > 0x7F:
        raise InvalidEscape(
            f"invalid escape: '\\x{digits}' is out of range for a 7-bit character",
            start,
            cursor.text,
        )
    return chr(value)


def unicode_decode(cursor: Cursor, start: int) -> str:
    r"""Decode the braced hex digits of a \u{...} escape"""
    if cursor.take() != '{':
        raise InvalidEscape("invalid escape: '\\u' must be followed by '{'", start, cursor.text)

    end = cursor.text.find('}', cursor.position)
    if end == -1:
        raise InvalidEscape("invalid escape: unterminated '\\u{'", start, cursor.text)

    digits = cursor.slice(cursor.position, end)
    cursor.position = end + 1

    if not 1 <= len(digits) <= 6 or not _HEX_RE.fullmatch(digits):
        raise InvalidEscape(f"invalid escape: '\\u{{{digits}}}'", start, cursor.text)
    value = int(digits, 16)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        raise InvalidEscape(
            f"invalid escape: '\\u{{{digits}}}' is not a unicode scalar value",
            start,
            cursor.text,
        )
    return chr(value)


def continuation_skip(cursor: Cursor) -> None:
    """Skip whitespace after a line continuation, stopping at end of input"""
    while cursor.peek() in CONTINUATION_WHITESPACE:
        cursor.advance()
