"""
Literal host models

Structures passed between the literal host (unwrap, compile, wrap) and its
callers.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..lib.errors import TemplateError


@dataclass
class UnwrappedLiteral:
    """
    A string literal with its quoting removed

    Attributes:
        text: Literal body (between the quotes), not yet escape-processed
        raw: True for r"..." literals; raw bodies skip escape resolution
        prefix: Prefix characters as written (e.g. "", "r", "R", "u")
        quote: Quote character (' or ")
        delimiter_count: Number of quote characters on each side (1 or 3);
                         only needed to rebuild the quoting of the output

    Example:
        literal_unwrap("r'''{+Bold}'''") yields
        UnwrappedLiteral(text="{+Bold}", raw=True, prefix="r",
                         quote="'", delimiter_count=3)
    """
    text: str
    raw: bool = False
    prefix: str = ""
    quote: str = '"'
    delimiter_count: int = 1


@dataclass
class ExpansionResult:
    """
    Outcome of expanding one literal

    Attributes:
        status: True when the literal compiled
        output: Replacement literal source text (None on failure)
        error: The failure that rejected the literal (None on success)
    """
    status: bool
    output: Optional[str] = None
    error: Optional['TemplateError'] = None
