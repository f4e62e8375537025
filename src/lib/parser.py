r"""
Parser for styled-string templates

Splits a template into literal text and directive groups.

A template is ordinary text with three kinds of markup:

    \n \x41 \u{1F600} ...       backslash escapes (skipped for raw templates)
    {{  }}                      literal braces
    {+Bold-Dim#RedFg&name}      directive groups, chained with + - # &

Groups that start with anything other than a directive symbol are plain
formatting placeholders ("{name}", "{}") and pass through untouched, unless a
directive symbol follows the name ("{name+Bold}"), in which case the name is
kept as a trailing placeholder.

Example:
    >>> Parser("Hi {+Bold}{who}{+Reset}").parse()
    ['Hi ', DirectiveGroup(name=None, directives=[...]), '{who}',
     DirectiveGroup(name=None, directives=[...])]
"""

from typing import List, NoReturn, Optional, Type, Union

from ..models.directives import Directive, DirectiveGroup, DirectiveKind, SYMBOL_KINDS
from ..models.parser import Cursor, DelimiterKind, DelimiterMatch, DELIMITERS
from . import codes
from .colors import color_decode
from .errors import InvalidKeyword, MissingCloseBracket, TemplateError
from .escapes import escape_resolve
from .log import LOG

Piece = Union[str, DirectiveGroup]


class Parser:
    """
    Parser for template text

    Handles:
    - Backslash escapes and line continuations
    - Brace doubling ({{ and }})
    - Directive chains and passthrough fragments
    - Plain placeholders, preserved verbatim
    - Error reporting with the offending position
    """

    def __init__(self, source: str, raw: bool = False, format_safe: bool = False):
        """
        Initialize parser with template text

        Args:
            source: Template text, already unwrapped of any literal quoting
            raw: Skip backslash escape resolution (braces are still parsed)
            format_safe: Keep literal braces doubled so that the output is
                         still a valid str.format() template

        Attributes:
            source: Template text being parsed
            cursor: Forward cursor over source
            pieces: Accumulated literal text and directive groups
        """
        self.source = source
        self.raw = raw
        self.format_safe = format_safe
        self.cursor = Cursor(source)
        self.pieces: List[Piece] = []
        self._text: List[str] = []

    def parse(self) -> List[Piece]:
        """
        Parse the template into literal text and directive groups

        Adjacent literal characters are merged into a single string piece.

        Returns:
            Pieces in source order

        Raises:
            TemplateError: InvalidEscape, InvalidKeyword, InvalidColor or
                           MissingCloseBracket (the whole template is rejected)
        """
        cursor = self.cursor
        self.pieces = []
        self._text = []

        while not cursor.at_end():
            ch = cursor.take()

            if ch == '\\' and not self.raw:
                resolved = escape_resolve(cursor)
                if resolved is not None:
                    self._text.append(resolved)
            elif ch == '{':
                self.brace_open()
            elif ch == '}':
                if cursor.peek() == '}':
                    cursor.advance()
                # '}}' and a lone '}' both stand for one literal brace
                self._text.append('}}' if self.format_safe else '}')
            else:
                self._text.append(ch)

        self.text_flush()
        return self.pieces

    def text_flush(self) -> None:
        """Move accumulated literal characters into a single text piece"""
        if self._text:
            self.pieces.append(''.join(self._text))
            self._text = []

    def brace_open(self) -> None:
        """
        Handle the character after an opening brace

        Dispatches to literal brace, empty placeholder, plain placeholder or
        directive group handling.
        """
        cursor = self.cursor
        ch = cursor.peek()

        if ch is None:
            self.error(MissingCloseBracket, "missing close bracket", cursor.position - 1)
        if ch == '{':
            cursor.advance()
            self._text.append('{{' if self.format_safe else '{')
            return
        if ch == '}':
            cursor.advance()
            self._text.append('{}')
            return

        group = self.group_parse()
        if isinstance(group, str):
            self._text.append(group)
        else:
            self.text_flush()
            self.pieces.append(group)

    def group_parse(self) -> Union[str, DirectiveGroup]:
        """
        Parse one brace group, the opening brace already consumed

        Returns:
            The verbatim placeholder text for a plain "{name}" group,
            otherwise the parsed DirectiveGroup

        Raises:
            MissingCloseBracket: Input ended before the closing brace
            InvalidKeyword / InvalidColor: A directive failed to resolve
        """
        cursor = self.cursor
        open_position = cursor.position - 1
        name: Optional[str] = None

        if cursor.peek() not in SYMBOL_KINDS:
            start = cursor.position
            match = self.delimiter_find()
            if match is None:
                self.error(MissingCloseBracket, "missing close bracket", open_position)
            name = cursor.slice(start, match.position)
            cursor.position = match.position
            if match.kind is DelimiterKind.END:
                cursor.advance()
                return f"{{{name}}}"

        group = DirectiveGroup(name=name)
        symbol = cursor.take()

        while True:
            symbol_position = cursor.position - 1
            match = self.delimiter_find()
            if match is None:
                self.error(MissingCloseBracket, "missing close bracket", open_position)

            text = cursor.slice(cursor.position, match.position)
            cursor.position = match.position + 1
            group.directives.append(self.directive_resolve(symbol, text, symbol_position))

            if match.kind is DelimiterKind.END:
                break
            symbol = match.symbol

        LOG(f"Group at {open_position}: {group}", level=3)
        return group

    def delimiter_find(self) -> Optional[DelimiterMatch]:
        """
        Find the next delimiter from the current cursor position

        Single source of truth for delimiter recognition: + - # & and }.
        The cursor itself is not moved.

        Returns:
            DelimiterMatch, or None if input ends first

        Example:
            For "{+Bold#RedFg}" with the cursor on 'B':
            DelimiterMatch(kind=STANDARD, symbol='#', position=6)
        """
        text = self.source
        for position in range(self.cursor.position, len(text)):
            kind = DELIMITERS.get(text[position])
            if kind is not None:
                return DelimiterMatch(kind=kind, symbol=text[position], position=position)
        return None

    def directive_resolve(self, symbol: str, text: str, position: int) -> Directive:
        """
        Build a Directive for one symbol and its text, resolving its codes

        Raises:
            InvalidKeyword: Unknown style keyword
            InvalidColor: Unknown color name or malformed color payload
        """
        kind = SYMBOL_KINDS[symbol]

        if kind is DirectiveKind.PASSTHROUGH:
            return Directive(kind=kind, text=text, position=position)

        if kind is DirectiveKind.COLOR:
            return Directive(
                kind=kind,
                text=text,
                codes=color_decode(text, position, self.source),
                position=position,
            )

        lookup = codes.styleAdd_lookup if kind is DirectiveKind.STYLE_ADD else codes.styleRemove_lookup
        code = lookup(text)
        if code is None:
            self.error(InvalidKeyword, f"invalid keyword: '{symbol}{text}'", position)
        return Directive(kind=kind, text=text, codes=[code], position=position)

    def error(self, error_class: Type[TemplateError], message: str, position: int) -> NoReturn:
        """
        Report a template error at a position

        Raises:
            error_class: Always (this is an error reporting function)
        """
        LOG(f"{message} at position {position}", level=3)
        raise error_class(message, position, self.source)
