"""
interpt Lexer Package

Implements a pull-based lexical analyzer for the interpt language.

Key Features:
- One token per next_token() call, no buffering ahead of the parser
- Two-character operators (==, !=) through one character of lookahead
- Keyword lookup for identifiers
- Total token stream: unknown characters become ILLEGAL tokens
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, lookup_identifier
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "lookup_identifier",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerWarning",
]
