"""
Token definitions for the interpt lexer.

This module defines every token type the language knows about:
- Special tokens (end of input, illegal characters)
- Identifiers and integer literals
- Operators and delimiters
- Keywords

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    """
    Enumeration of all token types in interpt.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character
    EOF = auto()                    # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # add, foobar, x, y
    INTEGER = auto()                # 1343456

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=

    # ========================================================================
    # Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;

    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics only; it never takes part in token equality.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Two tokens are equal when their type and literal text match; the
    source location is carried along for error reporting only.
    """
    type: TokenType
    literal: str                    # Exact text from source
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"Token(type={self.type.name}, literal={self.literal!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or delimiter."""
        return self.type in OPERATORS.values()


# Lookup tables for keyword and operator recognition

KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

OPERATORS = {
    # Two-character operators are matched before their one-character prefixes
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,

    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,

    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

WHITESPACE = frozenset(" \t\n\r")


def lookup_identifier(ident: str) -> TokenType:
    """Return the keyword type for ``ident``, or IDENTIFIER if it is not reserved."""
    return KEYWORDS.get(ident, TokenType.IDENTIFIER)
