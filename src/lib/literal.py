"""
Literal host: expand a string literal as written in source

Takes the source text of one string literal (quotes and prefix included),
compiles its body, and returns a replacement literal that can be spliced
back into the source text verbatim:

    "{+Bold}hi"      →  '\\x1b[1mhi'
    r"{+Bold}\\d"    →  r"<ESC>[1m\\d"   (raw quoting is preserved)

Byte strings and f-strings are rejected as NotAStringLiteral.
"""

import re
from typing import Optional

from ..models.literal import ExpansionResult, UnwrappedLiteral
from .compiler import Compiler
from .errors import NotAStringLiteral, TemplateError
from .log import LOG

_LITERAL_RE = re.compile(
    r'(?P<prefix>[rRuU]?)(?P<quote>"""|\'\'\'|"|\')(?P<body>.*)(?P=quote)',
    re.DOTALL,
)


def body_check(body: str, quote: str, source: str) -> None:
    """
    Reject a literal body that would not survive as written in source

    A backslash always takes the next character with it, raw literals
    included.

    Raises:
        NotAStringLiteral: The body holds its own closing delimiter, ends
                           in a dangling backslash, or (triple-quoted)
                           ends in its quote character
    """
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == '\\':
            if i + 1 == len(body):
                raise NotAStringLiteral(
                    "not a string literal: body ends in a backslash", 0, source
                )
            i += 2
            continue
        if body.startswith(quote, i) or (ch == quote[0] and i + 1 == len(body)):
            raise NotAStringLiteral("not a string literal: unbalanced quotes", 0, source)
        i += 1


def literal_unwrap(text: object) -> UnwrappedLiteral:
    """
    Remove the quoting from a string literal

    Args:
        text: Literal source text, e.g. 'r"{+Bold}"'

    Returns:
        UnwrappedLiteral with the body and its quoting details

    Raises:
        NotAStringLiteral: Not a str, unknown prefix (b, f, ...), or
                           unbalanced quotes
    """
    if not isinstance(text, str):
        raise NotAStringLiteral(
            f"not a string literal: got {type(text).__name__}"
        )

    match = _LITERAL_RE.fullmatch(text.strip())
    if match is None:
        raise NotAStringLiteral(
            "not a string literal: expected a plain or raw string literal, "
            "byte and formatted strings are not accepted",
            0,
            text,
        )

    quote = match.group('quote')
    body = match.group('body')
    body_check(body, quote, text)

    prefix = match.group('prefix')
    return UnwrappedLiteral(
        text=body,
        raw=prefix in ('r', 'R'),
        prefix=prefix,
        quote=quote[0],
        delimiter_count=len(quote),
    )


def literal_wrap(text: str, unwrapped: Optional[UnwrappedLiteral] = None) -> str:
    """
    Quote compiled text as a replacement literal

    Normal literals are re-emitted with repr(), so control characters come
    out escaped. Raw literals keep their prefix and quote delimiters.
    """
    if unwrapped is None or not unwrapped.raw:
        return repr(text)

    quotes = unwrapped.quote * unwrapped.delimiter_count
    return f"{unwrapped.prefix}{quotes}{text}{quotes}"


def literal_expand(text: object, format_safe: Optional[bool] = None) -> ExpansionResult:
    """
    Unwrap, compile and re-wrap one literal

    Every TemplateError is captured in the result; no partial output is
    ever returned.

    Example:
        >>> literal_expand('"{+Bold}hi"').output
        "'\\x1b[1mhi'"
        >>> literal_expand('b"hi"').error
        NotAStringLiteral(...)
    """
    try:
        unwrapped = literal_unwrap(text)
        compiled = Compiler(unwrapped.text, raw=unwrapped.raw, format_safe=format_safe).compile()
    except TemplateError as e:
        LOG(f"Literal rejected: {e.message}", level=2)
        return ExpansionResult(status=False, error=e)

    return ExpansionResult(status=True, output=literal_wrap(compiled, unwrapped))
