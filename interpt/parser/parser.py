"""
interpt Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser for interpt.
Tokens are pulled from the lexer one at a time; the parser only ever
looks at the current token and the one after it.

Author: xwest
"""

import logging
from typing import List, Optional, Dict, Callable
from enum import IntEnum

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Program, Statement, Expression, LetStatement, ReturnStatement,
    ExpressionStatement, BlockStatement, Identifier, IntegerLiteral, Boolean,
    PrefixExpression, InfixExpression, IfExpression, FunctionLiteral,
    CallExpression,
)
from .errors import (
    ParseError, ParseFailure, create_unexpected_token_error,
    create_no_prefix_parse_fn_error, create_integer_literal_error,
    create_nesting_too_deep_error,
)

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[[], Optional[Expression]]
InfixParseFn = Callable[[Expression], Optional[Expression]]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# One nesting level costs up to five Python frames (if or fn bodies), so
# this stays under the interpreter's default recursion limit.
MAX_EXPRESSION_DEPTH = 128


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing."""
    LOWEST = 1
    EQUALITY = 2        # ==, !=
    COMPARISON = 3      # <, >
    TERM = 4            # +, -
    FACTOR = 5          # *, /
    PREFIX = 6          # -x, !x
    CALL = 7            # my_function(x)


PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQUAL: Precedence.EQUALITY,
    TokenType.NOT_EQUAL: Precedence.EQUALITY,
    TokenType.LESS_THAN: Precedence.COMPARISON,
    TokenType.GREATER_THAN: Precedence.COMPARISON,
    TokenType.PLUS: Precedence.TERM,
    TokenType.MINUS: Precedence.TERM,
    TokenType.ASTERISK: Precedence.FACTOR,
    TokenType.SLASH: Precedence.FACTOR,
    TokenType.LEFT_PAREN: Precedence.CALL,
}


class Parser:
    """
    interpt Pratt parser.

    Syntax errors never raise. They are collected in ``diagnostics``
    (and as plain strings in ``errors``) while parsing continues at the
    next statement boundary.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser and pre-read two tokens.

        Args:
            lexer: Lexer positioned at the start of the input
        """
        self.lexer = lexer
        self.diagnostics: List[ParseError] = []
        self._depth = 0

        self.prefix_parse_fns: Dict[TokenType, PrefixParseFn] = {}
        self.infix_parse_fns: Dict[TokenType, InfixParseFn] = {}
        self._init_parsing_tables()

        self.cur_token: Token = self.lexer.next_token()
        self.peek_token: Token = self.lexer.next_token()

    def _init_parsing_tables(self):
        """Register the prefix and infix parsing functions."""

        # Tokens that can start an expression
        self.register_prefix(TokenType.IDENTIFIER, self._parse_identifier)
        self.register_prefix(TokenType.INTEGER, self._parse_integer_literal)
        self.register_prefix(TokenType.TRUE, self._parse_boolean)
        self.register_prefix(TokenType.FALSE, self._parse_boolean)
        self.register_prefix(TokenType.BANG, self._parse_prefix_expression)
        self.register_prefix(TokenType.MINUS, self._parse_prefix_expression)
        self.register_prefix(TokenType.LEFT_PAREN, self._parse_grouped_expression)
        self.register_prefix(TokenType.IF, self._parse_if_expression)
        self.register_prefix(TokenType.FUNCTION, self._parse_function_literal)

        # Binary operators
        for token_type in (
            TokenType.PLUS, TokenType.MINUS, TokenType.ASTERISK, TokenType.SLASH,
            TokenType.EQUAL, TokenType.NOT_EQUAL,
            TokenType.LESS_THAN, TokenType.GREATER_THAN,
        ):
            self.register_infix(token_type, self._parse_infix_expression)

        # Call
        self.register_infix(TokenType.LEFT_PAREN, self._parse_call_expression)

    def register_prefix(self, token_type: TokenType, fn: PrefixParseFn):
        self.prefix_parse_fns[token_type] = fn

    def register_infix(self, token_type: TokenType, fn: InfixParseFn):
        self.infix_parse_fns[token_type] = fn

    @property
    def errors(self) -> List[str]:
        """Accumulated diagnostic messages, in the order they were found."""
        return [error.message for error in self.diagnostics]

    def next_token(self):
        """Advance both cursor tokens by one."""
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def parse_program(self) -> Program:
        """
        Parse the whole input.

        Returns:
            Program AST node; statements that failed to parse are left out
        """
        program = Program()

        while not self._cur_token_is(TokenType.EOF):
            statement = self._parse_statement()
            if statement is not None:
                program.statements.append(statement)
                self.next_token()
            else:
                self._synchronize()
                # A stray '}' cannot close anything at the top level
                if self._cur_token_is(TokenType.RIGHT_BRACE):
                    self.next_token()

        return program

    # Statements

    def _parse_statement(self) -> Optional[Statement]:
        if self.cur_token.type == TokenType.LET:
            return self._parse_let_statement()
        elif self.cur_token.type == TokenType.RETURN:
            return self._parse_return_statement()
        else:
            return self._parse_expression_statement()

    def _parse_let_statement(self) -> Optional[LetStatement]:
        """Parse let <identifier> = <expression>;"""
        token = self.cur_token

        if not self.expect_peek(TokenType.IDENTIFIER):
            return None

        name = Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        self.next_token()
        value = self._parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        if not self._expect_statement_end():
            return None

        return LetStatement(token, name, value)

    def _parse_return_statement(self) -> Optional[ReturnStatement]:
        """Parse return <expression>;"""
        token = self.cur_token

        self.next_token()
        value = self._parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        if not self._expect_statement_end():
            return None

        return ReturnStatement(token, value)

    def _parse_expression_statement(self) -> Optional[ExpressionStatement]:
        token = self.cur_token

        expression = self._parse_expression(Precedence.LOWEST)
        if expression is None:
            return None

        # Optional so that "5 + 5" works at the end of a REPL line
        if self._peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return ExpressionStatement(token, expression)

    def _parse_block_statement(self) -> Optional[BlockStatement]:
        """Parse { <statements> } with the current token on '{'."""
        token = self.cur_token
        statements: List[Statement] = []

        self.next_token()

        while not self._cur_token_is(TokenType.RIGHT_BRACE):
            if self._cur_token_is(TokenType.EOF):
                self._record(create_unexpected_token_error(TokenType.RIGHT_BRACE, self.cur_token))
                return None

            statement = self._parse_statement()
            if statement is not None:
                statements.append(statement)
                self.next_token()
            else:
                self._synchronize()

        return BlockStatement(token, statements)

    # Expressions

    def _parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        """Parse an expression whose operators all bind tighter than ``precedence``."""
        if self._depth >= MAX_EXPRESSION_DEPTH:
            self._record(create_nesting_too_deep_error(self.cur_token, MAX_EXPRESSION_DEPTH))
            return None

        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self._record(create_no_prefix_parse_fn_error(self.cur_token))
            return None

        self._depth += 1
        try:
            left = prefix()

            while (left is not None
                   and not self._peek_token_is(TokenType.SEMICOLON)
                   and precedence < self._peek_precedence()):
                infix = self.infix_parse_fns.get(self.peek_token.type)
                if infix is None:
                    return left

                self.next_token()
                left = infix(left)

            return left
        finally:
            self._depth -= 1

    def _peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def _cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.cur_token.type, Precedence.LOWEST)

    # Prefix parsers (tokens that can start expressions)

    def _parse_identifier(self) -> Expression:
        return Identifier(self.cur_token, self.cur_token.literal)

    def _parse_integer_literal(self) -> Optional[Expression]:
        """Parse integer literal; values outside int64 are diagnostics."""
        token = self.cur_token
        try:
            value = int(token.literal, 10)
        except ValueError:
            value = None

        if value is None or not INT64_MIN <= value <= INT64_MAX:
            self._record(create_integer_literal_error(token))
            return None

        return IntegerLiteral(token, value)

    def _parse_boolean(self) -> Expression:
        return Boolean(self.cur_token, self._cur_token_is(TokenType.TRUE))

    def _parse_prefix_expression(self) -> Optional[Expression]:
        """Parse unary operation."""
        token = self.cur_token

        self.next_token()
        right = self._parse_expression(Precedence.PREFIX)
        if right is None:
            return None

        return PrefixExpression(token, token.literal, right)

    def _parse_grouped_expression(self) -> Optional[Expression]:
        """Parse parenthesized expression."""
        self.next_token()

        expression = self._parse_expression(Precedence.LOWEST)
        if expression is None:
            return None

        if not self.expect_peek(TokenType.RIGHT_PAREN):
            return None

        return expression

    def _parse_if_expression(self) -> Optional[Expression]:
        """Parse if (<condition>) { ... } [else { ... }]"""
        token = self.cur_token

        if not self.expect_peek(TokenType.LEFT_PAREN):
            return None

        self.next_token()
        condition = self._parse_expression(Precedence.LOWEST)
        if condition is None:
            return None

        if not self.expect_peek(TokenType.RIGHT_PAREN):
            return None
        if not self.expect_peek(TokenType.LEFT_BRACE):
            return None

        consequence = self._parse_block_statement()
        if consequence is None:
            return None

        alternative = None
        if self._peek_token_is(TokenType.ELSE):
            self.next_token()

            if not self.expect_peek(TokenType.LEFT_BRACE):
                return None

            alternative = self._parse_block_statement()
            if alternative is None:
                return None

        return IfExpression(token, condition, consequence, alternative)

    def _parse_function_literal(self) -> Optional[Expression]:
        """Parse fn(<parameters>) { <body> }"""
        token = self.cur_token

        if not self.expect_peek(TokenType.LEFT_PAREN):
            return None

        parameters = self._parse_function_parameters()
        if parameters is None:
            return None

        if not self.expect_peek(TokenType.LEFT_BRACE):
            return None

        body = self._parse_block_statement()
        if body is None:
            return None

        return FunctionLiteral(token, parameters, body)

    def _parse_function_parameters(self) -> Optional[List[Identifier]]:
        identifiers: List[Identifier] = []

        if self._peek_token_is(TokenType.RIGHT_PAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(TokenType.IDENTIFIER):
            return None
        identifiers.append(Identifier(self.cur_token, self.cur_token.literal))

        while self._peek_token_is(TokenType.COMMA):
            self.next_token()
            if not self.expect_peek(TokenType.IDENTIFIER):
                return None
            identifiers.append(Identifier(self.cur_token, self.cur_token.literal))

        if not self.expect_peek(TokenType.RIGHT_PAREN):
            return None

        return identifiers

    # Infix parsers (binary operators and calls)

    def _parse_infix_expression(self, left: Expression) -> Optional[Expression]:
        """Parse binary operation; equal precedence on the right keeps it left associative."""
        token = self.cur_token
        precedence = self._cur_precedence()

        self.next_token()
        right = self._parse_expression(precedence)
        if right is None:
            return None

        return InfixExpression(token, left, token.literal, right)

    def _parse_call_expression(self, function: Expression) -> Optional[Expression]:
        """Parse function call."""
        token = self.cur_token

        arguments = self._parse_call_arguments()
        if arguments is None:
            return None

        return CallExpression(token, function, arguments)

    def _parse_call_arguments(self) -> Optional[List[Expression]]:
        arguments: List[Expression] = []

        if self._peek_token_is(TokenType.RIGHT_PAREN):
            self.next_token()
            return arguments

        self.next_token()
        argument = self._parse_expression(Precedence.LOWEST)
        if argument is None:
            return None
        arguments.append(argument)

        while self._peek_token_is(TokenType.COMMA):
            self.next_token()
            self.next_token()
            argument = self._parse_expression(Precedence.LOWEST)
            if argument is None:
                return None
            arguments.append(argument)

        if not self.expect_peek(TokenType.RIGHT_PAREN):
            return None

        return arguments

    # Utility methods

    def expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the next token has the expected type, else record an error."""
        if self._peek_token_is(token_type):
            self.next_token()
            return True

        self._record(create_unexpected_token_error(token_type, self.peek_token))
        return False

    def _expect_statement_end(self) -> bool:
        """Consume ';', or accept end of input / '}' as the end of the statement."""
        if self._peek_token_is(TokenType.SEMICOLON):
            self.next_token()
            return True
        if self._peek_token_is(TokenType.EOF) or self._peek_token_is(TokenType.RIGHT_BRACE):
            return True
        return self.expect_peek(TokenType.SEMICOLON)

    def _cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type == token_type

    def _peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def _record(self, error: ParseError):
        logger.debug("parse error at %s: %s", error.diagnostic.location, error.message)
        self.diagnostics.append(error)

    def _synchronize(self):
        """
        Skip the rest of a statement that failed to parse.

        Stops just after a ';', or on a '}' or EOF so the enclosing block
        (or the program loop) can handle it.
        """
        skipped = 0
        while not self._cur_token_is(TokenType.EOF):
            if self._cur_token_is(TokenType.SEMICOLON):
                self.next_token()
                break
            if self._cur_token_is(TokenType.RIGHT_BRACE):
                break
            self.next_token()
            skipped += 1
        logger.debug("synchronized after skipping %d token(s), now at %r", skipped, self.cur_token)


def parse_string(source: str, filename: str = "<string>") -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Program AST

    Raises:
        ParseFailure: If parsing produced any diagnostics
    """
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()

    if parser.diagnostics:
        raise ParseFailure(parser.diagnostics)

    return program


def parse_file(filepath: str) -> Program:
    """
    Convenience function to parse a source file.

    Raises:
        ParseFailure: If parsing produced any diagnostics
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, filepath)
