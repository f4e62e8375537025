"""
Compiler for styled-string templates

Transforms parsed template pieces into the final output text: literal text,
SGR escape sequences and preserved placeholders, in source order.
"""

from typing import List, Optional

from ..models.directives import DirectiveGroup
from .emitter import group_emit
from .log import LOG
from .parser import Parser, Piece


class Compiler:
    """
    Compiles template text to output text with literal SGR sequences

    Responsibilities:
    - Drive the parser over the template
    - Emit each directive group through the code emitter
    - Concatenate the result, or fail as a unit
    """

    def __init__(
        self,
        source: str,
        raw: bool = False,
        format_safe: Optional[bool] = None,
    ) -> None:
        """
        Initialize compiler

        Args:
            source: Template text (already unwrapped of literal quoting)
            raw: Template came from a raw literal; escapes are not resolved
            format_safe: Keep literal braces doubled; None uses the
                         SGRTEMPLATE_FORMAT_SAFE setting
        """
        from ..config import appsettings

        self.source = source
        self.raw = raw
        self.format_safe = appsettings.format_safe if format_safe is None else format_safe
        self.pieces: List[Piece] = []

    def compile(self) -> str:
        """
        Compile the template

        Returns:
            The compiled output text

        Raises:
            TemplateError: Any escape, keyword, color or bracket failure.
                           Nothing is returned for a rejected template.
        """
        LOG(f"Compiling template of {len(self.source)} characters", level=3)

        parser = Parser(self.source, raw=self.raw, format_safe=self.format_safe)
        self.pieces = parser.parse()

        output = ''.join(self.piece_emit(piece) for piece in self.pieces)
        LOG(f"Compiled {len(self.pieces)} pieces into {len(output)} characters", level=3)
        return output

    @staticmethod
    def piece_emit(piece: Piece) -> str:
        if isinstance(piece, DirectiveGroup):
            return group_emit(piece)
        return piece


def template_compile(source: str, raw: bool = False, format_safe: Optional[bool] = None) -> str:
    """
    Compile one template in a single call

    Example:
        >>> template_compile("{+Bold}hi{+Reset}")
        '\\x1b[1mhi\\x1b[0m'
    """
    return Compiler(source, raw=raw, format_safe=format_safe).compile()
