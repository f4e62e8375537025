"""
Color payload decoder

Turns the text of a {#...} directive into SGR codes:

    #RedFg          → [31]               named 16-color table
    #f(196)         → [38, 5, 196]       indexed, decimal
    #b[1f]          → [48, 5, 31]        indexed, 2 hex digits
    #f(170,187,204) → [38, 2, 170, 187, 204]   truecolor, decimal triple
    #f[aabbcc]      → [38, 2, 170, 187, 204]   truecolor, 6 hex digits

Any malformed payload raises InvalidColor.
"""

import re
from typing import List, Optional

from . import codes
from .errors import InvalidColor

_DECIMAL_RE = re.compile(r'[0-9]+')
_HEX_RE = re.compile(r'[0-9a-fA-F]+')

_TARGETS = {
    'f': codes.FOREGROUND,
    'b': codes.BACKGROUND,
}


def component_decode(text: str) -> Optional[int]:
    """
    Decode one decimal component in the range 0-255

    Returns:
        The value, or None for empty, non-decimal or out-of-range text
    """
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = int(text)
    if value > 255:
        return None
    return value


def hex_decode(text: str) -> Optional[int]:
    """Decode a 2-hex-digit component, or None if not exactly two hex digits"""
    if len(text) != 2 or not _HEX_RE.fullmatch(text):
        return None
    return int(text, 16)


def decimal_decode(body: str) -> Optional[List[int]]:
    """
    Decode the body of a (...) payload

    Returns:
        [5, n] for one component, [2, r, g, b] for three, None otherwise
    """
    parts = [component_decode(part) for part in body.split(',')]
    if any(part is None for part in parts):
        return None
    if len(parts) == 1:
        return [codes.INDEXED, parts[0]]
    if len(parts) == 3:
        return [codes.TRUECOLOR, *parts]
    return None


def hexColor_decode(body: str) -> Optional[List[int]]:
    """
    Decode the body of a [...] payload

    Returns:
        [5, n] for two hex digits, [2, r, g, b] for six, None otherwise
    """
    if len(body) == 2:
        value = hex_decode(body)
        return None if value is None else [codes.INDEXED, value]
    if len(body) == 6:
        parts = [hex_decode(body[i:i + 2]) for i in (0, 2, 4)]
        if any(part is None for part in parts):
            return None
        return [codes.TRUECOLOR, *parts]
    return None


def color_decode(text: str, position: Optional[int] = None,
                 source: Optional[str] = None) -> List[int]:
    """
    Resolve a color directive payload into SGR codes

    Named colors are looked up first; anything else must be a target prefix
    ('f' or 'b') followed by a parenthesized decimal or bracketed hex body.

    Args:
        text: Payload after '#'
        position: Template index of the directive (for error reporting)
        source: Template text (for error reporting)

    Returns:
        Codes in emission order

    Raises:
        InvalidColor: Unknown name or malformed payload
    """
    named = codes.colorName_lookup(text)
    if named is not None:
        return [named]

    decoded: Optional[List[int]] = None
    target = _TARGETS.get(text[:1])
    if target is not None and len(text) >= 3:
        opener, closer, body = text[1], text[-1], text[2:-1]
        if (opener, closer) == ('(', ')'):
            decoded = decimal_decode(body)
        elif (opener, closer) == ('[', ']'):
            decoded = hexColor_decode(body)

    if decoded is None:
        raise InvalidColor(f"invalid color: {text!r}", position, source)
    return [target, *decoded]
