"""
Custom Pygments lexer for styled-string templates

Provides syntax highlighting for template source, used when the CLI shows
templates at debug verbosity.

Token types:
- String.Escape: Backslash escapes and doubled braces
- Punctuation: Group braces
- Keyword: Style directives (+Bold, -Dim)
- Name.Constant: Color directives (#RedFg, #f[aabbcc])
- Name.Variable: Placeholders and passthrough fragments (&name, {name})
- Text: Everything else
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Error,
)


class TemplateLexer(RegexLexer):
    """
    Lexer for styled-string templates

    Example:
        Hello {+Bold#RedFg}{name}{-Bold}\\n

    Tokens:
        \\n → String.Escape
        { → Punctuation
        +Bold → Keyword
        #RedFg → Name.Constant
        {name} → Name.Variable
    """

    name = 'SGR Template'
    aliases = ['sgrtemplate', 'sgr']
    filenames = ['*.sgr']

    tokens = {
        'root': [
            # Escapes: \u{...}, \xHH, line continuation, single characters
            (r'\\u\{[0-9a-fA-F]*\}', String.Escape),
            (r'\\x[0-9a-fA-F]{2}', String.Escape),
            (r'\\\n[ \t\r\n]*', String.Escape),
            (r'\\.', String.Escape),

            # Doubled braces are literal
            (r'\{\{|\}\}', String.Escape),

            # Empty and plain placeholders
            (r'\{\}', Name.Variable),
            (r'(\{)([^+\-#&{}]+)(\})', bygroups(Punctuation, Name.Variable, Punctuation)),

            # Directive group, optionally led by a placeholder name
            (r'(\{)([^+\-#&{}]*)(?=[+\-#&])', bygroups(Punctuation, Name.Variable), 'group'),

            # Stray closing brace
            (r'\}', Error),

            (r'[^\\{}]+', Text),
            (r'.', Text),
        ],

        'group': [
            (r'[+\-][^+\-#&}]*', Keyword),
            (r'#[^+\-#&}]*', Name.Constant),
            (r'&[^+\-#&}]*', Name.Variable),
            (r'\}', Punctuation, '#pop'),
        ],
    }


def get_lexer() -> TemplateLexer:
    """
    Get the TemplateLexer instance

    Returns:
        TemplateLexer instance ready for use with Pygments
    """
    return TemplateLexer()


def source_highlight(source: str) -> str:
    """Highlight template source for a terminal"""
    return highlight(source, get_lexer(), TerminalFormatter())
