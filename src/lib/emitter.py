"""
SGR code emission

CodeBuffer holds pending numeric codes and renders them as one escape
sequence. It is used by the compiler to build literal output and can be used
directly when codes are only known at run time:

    >>> buffer = CodeBuffer()
    >>> buffer.chain_code(1).chain_codes([38, 5, 196]).flush()
    '\\x1b[1;38;5;196m'
"""

from typing import Iterable, List, Protocol

from ..models.directives import DirectiveGroup

ESCAPE = "\x1b["
TERMINATOR = "m"


class TextSink(Protocol):
    """Anything text can be written to (streams, io.StringIO, ...)"""

    def write(self, s: str) -> object: ...


class CodeBuffer:
    """
    Ordered buffer of pending SGR codes

    Codes are rendered in the order they were added, joined by ';'. Every
    flush clears the buffer, and an empty buffer renders nothing.
    """

    def __init__(self, codes: Iterable[int] = ()) -> None:
        self.codes: List[int] = []
        self.extend(codes)

    def push(self, code: int) -> None:
        """Add one code to the buffer"""
        if not 0 <= code <= 255:
            raise ValueError(f"SGR code out of range 0-255: {code}")
        self.codes.append(code)

    def extend(self, codes: Iterable[int]) -> None:
        for code in codes:
            self.push(code)

    def chain_code(self, code: int) -> "CodeBuffer":
        """Add one code; returns self to allow chaining"""
        self.push(code)
        return self

    def chain_codes(self, codes: Iterable[int]) -> "CodeBuffer":
        self.extend(codes)
        return self

    def is_empty(self) -> bool:
        return not self.codes

    def clear(self) -> None:
        self.codes.clear()

    def flush_partial(self) -> str:
        """
        Render buffered codes without the escape framing and clear the buffer

        Returns:
            e.g. "1;22;31", or "" for an empty buffer
        """
        rendered = ';'.join(str(code) for code in self.codes)
        self.clear()
        return rendered

    def flush(self) -> str:
        """
        Render buffered codes as one complete escape sequence and clear the buffer

        Returns:
            e.g. "\\x1b[1;22;31m", or "" for an empty buffer
        """
        if self.is_empty():
            return ""
        return f"{ESCAPE}{self.flush_partial()}{TERMINATOR}"

    def write_to(self, sink: TextSink) -> None:
        """Write the flushed sequence to a text sink; writes nothing when empty"""
        if not self.is_empty():
            sink.write(self.flush())

    def __len__(self) -> int:
        return len(self.codes)

    def __repr__(self) -> str:
        return f"CodeBuffer({self.codes!r})"


def group_emit(group: DirectiveGroup) -> str:
    """
    Render a directive group as output text

    Style and color codes accumulate into one escape sequence. A passthrough
    fragment splits the sequence: pending codes are flushed first, then the
    fragment is emitted as "{fragment}", and codes that follow start a new
    sequence. A leading placeholder name is emitted as "{name}" after the
    final sequence.

    Example:
        {+Bold&name-Dim} → "\\x1b[1m{name}\\x1b[22m"
        {who+Bold#RedFg} → "\\x1b[1;31m{who}"
    """
    buffer = CodeBuffer()
    parts: List[str] = []

    for directive in group.directives:
        if directive.passthrough_is():
            parts.append(buffer.flush())
            parts.append(f"{{{directive.text}}}")
        else:
            buffer.extend(directive.codes)

    parts.append(buffer.flush())
    if group.name is not None:
        parts.append(f"{{{group.name}}}")

    return ''.join(parts)
