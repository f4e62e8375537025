"""
sgrtemplate - Styled-string template compiler

Compiles brace-delimited style directives into literal SGR escape sequences.
"""

__version__ = "1.0.0"

from .parser import Parser
from .compiler import Compiler, template_compile
from .emitter import CodeBuffer
from .errors import (
    TemplateError,
    NotAStringLiteral,
    InvalidEscape,
    InvalidKeyword,
    InvalidColor,
    MissingCloseBracket,
)
from .literal import literal_expand, literal_unwrap, literal_wrap
from .log import LOG, state_connectToLogger, state_disconnectFromLogger

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
