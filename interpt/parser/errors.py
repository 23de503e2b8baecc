"""
Error handling for the interpt parser.

The parser never raises on bad input. Every problem becomes a ParseError
diagnostic appended to the parser's list, and the caller decides whether
the resulting tree is usable. ParseFailure is the only exception type and
is raised solely by the parse_string / parse_file convenience helpers.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError:
    """
    A recoverable syntax error recorded while parsing.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def category(self) -> Optional[str]:
        """Short description of the error code, if it has one."""
        return PARSER_ERROR_CODES.get(self.code)

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"ParseError({self.code!r}, {self.message!r})"


class ParseFailure(Exception):
    """
    Raised by the convenience helpers when a parse produced diagnostics.
    """

    def __init__(self, errors: List[ParseError]):
        self.errors = errors
        count = len(errors)
        summary = errors[0].message if errors else "unknown error"
        super().__init__(f"{count} parse error{'s' if count != 1 else ''}: {summary}")


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "No prefix parse function",
    "P003": "Invalid integer literal",
    "P004": "Expression nested too deeply",
}

# Hints keyed by the token the parser was looking for
_MISSING_TOKEN_HINTS = {
    TokenType.SEMICOLON: "Add a semicolon ';' to end the statement",
    TokenType.ASSIGN: "Add an assignment operator '=' after the name",
    TokenType.IDENTIFIER: "A name is required here",
    TokenType.RIGHT_PAREN: "Add a closing parenthesis ')'",
    TokenType.LEFT_BRACE: "Add an opening brace '{' to start a block",
    TokenType.RIGHT_BRACE: "Add a closing brace '}'",
}


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: TokenType, found: Token) -> ParseError:
    """Create an error for an expect_peek mismatch."""
    return ParseError(
        message=f"expected next token to be {expected.name}, got {found.type.name} instead",
        location=found.location,
        token=found,
        code="P001",
        help_text=_MISSING_TOKEN_HINTS.get(expected),
    )


def create_no_prefix_parse_fn_error(token: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    if token.type == TokenType.ILLEGAL:
        help_text = f"The character {token.literal!r} is not part of the language."
    elif token.type == TokenType.EOF:
        help_text = "The input ended where an expression was expected."
    else:
        help_text = f"'{token.literal}' cannot begin an expression."

    return ParseError(
        message=f"no prefix parse function for {token.type.name} found",
        location=token.location,
        token=token,
        code="P002",
        help_text=help_text,
    )


def create_integer_literal_error(token: Token) -> ParseError:
    """Create an error for an integer literal outside the signed 64-bit range."""
    return ParseError(
        message=f"could not parse {token.literal!r} as integer",
        location=token.location,
        token=token,
        code="P003",
        help_text="Integer literals must fit in a signed 64-bit integer.",
    )


def create_nesting_too_deep_error(token: Token, limit: int) -> ParseError:
    """Create an error for expressions nested past the parser's depth limit."""
    return ParseError(
        message=f"expression nested too deeply (limit is {limit} levels)",
        location=token.location,
        token=token,
        code="P004",
        help_text="Split the expression up using let bindings.",
    )
