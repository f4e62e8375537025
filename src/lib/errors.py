"""
Failure taxonomy for template compilation

Every failure is terminal for the compile call that raised it: the template
is rejected as a unit and no partial output is produced.

    TemplateError
    ├── NotAStringLiteral
    ├── InvalidEscape
    ├── InvalidKeyword
    │   └── InvalidColor
    └── MissingCloseBracket
"""

from typing import Optional


class TemplateError(Exception):
    """
    Base class for all template compilation failures

    Attributes:
        message: Human-readable description, starting with the defect class
        position: Character index in the template where the defect was found
        source: The template text (used to render a context line)
    """

    kind = "template error"

    def __init__(
        self,
        message: Optional[str] = None,
        position: Optional[int] = None,
        source: Optional[str] = None,
    ) -> None:
        self.message = message or self.kind
        self.position = position
        self.source = source
        super().__init__(self.message)

    def context_render(self) -> str:
        """
        Render the error with a caret under the offending character

        Example output:
            invalid keyword: 'Sparkle'
            Position 2
            Context: ...{+Sparkle}...
                          ^
        """
        if self.position is None or self.source is None:
            return self.message

        context_start = max(0, self.position - 40)
        context_end = min(len(self.source), self.position + 40)
        context = self.source[context_start:context_end].replace("\n", " ")

        return (
            f"{self.message}\n"
            f"Position {self.position}\n"
            f"Context: ...{context}...\n"
            f"            {' ' * (self.position - context_start)}^"
        )

    def __str__(self) -> str:
        return self.context_render()


class NotAStringLiteral(TemplateError):
    """Raised when the host hands over something that is not a string literal"""

    kind = "not a string literal"


class InvalidEscape(TemplateError):
    """Raised for an unknown or malformed backslash escape"""

    kind = "invalid escape"


class InvalidKeyword(TemplateError):
    """Raised for an unknown style keyword inside a directive group"""

    kind = "invalid keyword"


class InvalidColor(InvalidKeyword):
    """Raised for an unknown color name or a malformed color payload"""

    kind = "invalid color"


class MissingCloseBracket(TemplateError):
    """Raised when a directive group runs to end of input without a '}'"""

    kind = "missing close bracket"
