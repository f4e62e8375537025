"""
Models package for sgrtemplate

Contains data structures and type definitions for the compilation pipeline.
"""

from .state import ProgramState, pipeline
from .directives import Directive, DirectiveGroup, DirectiveKind, SYMBOL_KINDS
from .parser import Cursor, DelimiterKind, DelimiterMatch, DELIMITERS
from .literal import UnwrappedLiteral, ExpansionResult

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "DirectiveGroup",
    "DirectiveKind",
    "SYMBOL_KINDS",
    "Cursor",
    "DelimiterKind",
    "DelimiterMatch",
    "DELIMITERS",
    "UnwrappedLiteral",
    "ExpansionResult",
]
