"""
interpt Front-end Package

Lexer and Pratt parser for a small expression-oriented language.

Architecture:
    interpt/
    ├── lexer/           # Tokenization
    ├── parser/          # Syntax analysis and AST generation
    ├── repl.py          # Interactive read-print loop
    └── cli.py           # Command-line entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, Program, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "Program",
    "parse_string",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
