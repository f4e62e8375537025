"""
sgrtemplate - Styled-string template compiler

Turns templates such as "{+Bold#RedFg}{name}{+Reset}" into text with literal
SGR escape sequences, leaving formatting placeholders for str.format().
"""

__version__ = "1.0.0"

from .lib import (
    Parser,
    Compiler,
    template_compile,
    CodeBuffer,
    TemplateError,
    NotAStringLiteral,
    InvalidEscape,
    InvalidKeyword,
    InvalidColor,
    MissingCloseBracket,
    literal_expand,
    literal_unwrap,
    literal_wrap,
    LOG,
    state_connectToLogger,
    state_disconnectFromLogger,
)

__all__ = [
    "Parser",
    "Compiler",
    "template_compile",
    "CodeBuffer",
    "TemplateError",
    "NotAStringLiteral",
    "InvalidEscape",
    "InvalidKeyword",
    "InvalidColor",
    "MissingCloseBracket",
    "literal_expand",
    "literal_unwrap",
    "literal_wrap",
    "LOG",
    "state_connectToLogger",
    "state_disconnectFromLogger",
    "__version__",
]
