"""
interpt Lexer - turns source text into tokens, one at a time

The parser pulls tokens through next_token(); nothing is buffered ahead
of it. The cursor only moves forward, with a single character of peek
for the two-character operators.

xwest
"""

import logging
from typing import Iterator, List

from .tokens import Token, TokenType, SourceLocation, OPERATORS, WHITESPACE, lookup_identifier
from .errors import LexerWarning, create_illegal_character_warning

logger = logging.getLogger(__name__)


def _is_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Lexer:
    """
    interpt lexical analyzer.

    Converts source text into a stream of tokens. The stream is total:
    unknown characters come out as ILLEGAL tokens and the end of input
    is reported as EOF on every call after it is reached.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.input = source
        self.filename = filename
        self.position = 0           # index of self.ch
        self.read_position = 0      # index of the next character to read
        self.ch = ""                # "" once the input is exhausted
        self.line = 1
        self._line_start = 0
        self.warnings: List[LexerWarning] = []

        self._read_char()

    def next_token(self) -> Token:
        """Return the next token and advance past it."""
        self._skip_whitespace()

        location = self._location()
        char = self.ch

        if char == "":
            return Token(TokenType.EOF, "", location)

        # Two-character operators need one character of lookahead
        if char in ("=", "!") and self._peek_char() == "=":
            literal = char + self._peek_char()
            self._read_char()
            self._read_char()
            return Token(OPERATORS[literal], literal, location)

        if char in OPERATORS:
            self._read_char()
            return Token(OPERATORS[char], char, location)

        if _is_letter(char):
            literal = self._read_while(_is_letter)
            return Token(lookup_identifier(literal), literal, location)

        if _is_digit(char):
            literal = self._read_while(_is_digit)
            return Token(TokenType.INTEGER, literal, location)

        # Anything else is emitted as ILLEGAL and scanning carries on
        logger.debug("illegal character %r at %s", char, location)
        self.warnings.append(create_illegal_character_warning(char, location))
        self._read_char()
        return Token(TokenType.ILLEGAL, char, location)

    def tokenize(self) -> List[Token]:
        """
        Drain the lexer.

        Returns:
            List of tokens ending with a single EOF token
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF."""
        token = self.next_token()
        while token.type != TokenType.EOF:
            yield token
            token = self.next_token()

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def _read_char(self):
        if self.ch == "\n":
            self.line += 1
            self._line_start = self.read_position

        if self.read_position >= len(self.input):
            self.ch = ""
            self.position = len(self.input)
        else:
            self.ch = self.input[self.read_position]
            self.position = self.read_position
        self.read_position = self.position + 1

    def _peek_char(self) -> str:
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def _read_while(self, predicate) -> str:
        start = self.position
        while self.ch and predicate(self.ch):
            self._read_char()
        return self.input[start:self.position]

    def _skip_whitespace(self):
        while self.ch in WHITESPACE:
            self._read_char()

    def _location(self) -> SourceLocation:
        column = self.position - self._line_start + 1
        return SourceLocation(self.filename, self.line, column, self.position)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending with EOF
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
