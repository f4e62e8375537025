"""
Parser-specific data models

Type-safe structures for scanning a template: the forward cursor and the
tagged result of a delimiter scan.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DelimiterKind(Enum):
    """
    What terminated the current run inside a directive group

    STANDARD covers the style and color symbols, AND introduces a
    passthrough fragment, END closes the group.
    """
    STANDARD = "standard"    # + - #
    AND = "and"              # &
    END = "end"              # }


DELIMITERS = {
    '+': DelimiterKind.STANDARD,
    '-': DelimiterKind.STANDARD,
    '#': DelimiterKind.STANDARD,
    '&': DelimiterKind.AND,
    '}': DelimiterKind.END,
}


@dataclass
class DelimiterMatch:
    """
    Result of finding the next delimiter inside a directive group

    Returned by Parser.delimiter_find(). One scan recognizes every delimiter,
    so callers switch on `kind` instead of re-testing characters.

    Attributes:
        kind: Delimiter class (STANDARD, AND or END)
        symbol: The delimiter character itself
        position: Index of the delimiter in the template

    Example:
        For template "{+Bold#RedFg}" scanning from position 2:
        DelimiterMatch(kind=DelimiterKind.STANDARD, symbol='#', position=6)
    """
    kind: DelimiterKind
    symbol: str
    position: int


@dataclass
class Cursor:
    """
    Forward-only reader over an immutable template

    Attributes:
        text: The template being read
        position: Index of the next unread character
    """
    text: str
    position: int = 0

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Return the character `offset` places ahead without consuming it"""
        index = self.position + offset
        if index < len(self.text):
            return self.text[index]
        return None

    def take(self) -> Optional[str]:
        """Consume and return the next character, or None at end of input"""
        ch = self.peek()
        if ch is not None:
            self.position += 1
        return ch

    def advance(self, count: int = 1) -> None:
        self.position = min(len(self.text), self.position + count)

    def slice(self, start: int, end: int) -> str:
        return self.text[start:end]
