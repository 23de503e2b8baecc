"""
Diagnostics for the interpt lexer.

The lexer is total: it never raises. Characters it cannot classify become
ILLEGAL tokens and are additionally recorded as warnings so that tools can
point at them before the parser rejects them.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base record for lexer and parser diagnostics (errors, warnings)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


# Lexer diagnostic codes
ERROR_CODES = {
    "L001": "Illegal character",
}


def create_illegal_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character the lexer emitted as ILLEGAL."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in interpt source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerWarning(
        message=f"{ERROR_CODES['L001']}: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
    )
