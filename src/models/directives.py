"""
Directive models

Defines the parsed form of one brace group: the directive kinds the parser
recognizes and the group that collects them for emission.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional


class DirectiveKind(Enum):
    """
    Kinds of directives found inside a brace group

    The value is the symbol that introduces the directive in a template.
    """
    STYLE_ADD = "+"         # {+Bold}
    STYLE_REMOVE = "-"      # {-Bold}
    COLOR = "#"             # {#RedFg}, {#f[aabbcc]}, {#b(31)}
    PASSTHROUGH = "&"       # {&name}


SYMBOL_KINDS = {kind.value: kind for kind in DirectiveKind}


@dataclass
class Directive:
    """
    One parsed directive

    Attributes:
        kind: Directive kind
        text: Source text after the symbol (keyword, color payload or
              placeholder fragment)
        codes: Resolved SGR codes in emission order; empty for passthrough
        position: Index of the directive symbol in the template

    Example:
        "{#f(1,2,3)}" yields
        Directive(kind=COLOR, text="f(1,2,3)", codes=[38, 2, 1, 2, 3], position=1)
    """
    kind: DirectiveKind
    text: str
    codes: List[int] = field(default_factory=list)
    position: int = 0

    def passthrough_is(self) -> bool:
        return self.kind is DirectiveKind.PASSTHROUGH


@dataclass
class DirectiveGroup:
    """
    All directives sharing one pair of braces

    Attributes:
        name: Leading placeholder name, re-emitted as "{name}" after the
              group's final escape sequence (None when the group starts with
              a directive symbol)
        directives: Directives in source order

    Example:
        "{count+Bold&unit}" yields
        DirectiveGroup(name="count", directives=[
            Directive(STYLE_ADD, "Bold", [1]),
            Directive(PASSTHROUGH, "unit"),
        ])
    """
    name: Optional[str] = None
    directives: List[Directive] = field(default_factory=list)

    def codes_all(self) -> List[int]:
        """Every code in the group, ignoring passthrough boundaries"""
        codes: List[int] = []
        for directive in self.directives:
            codes.extend(directive.codes)
        return codes
