"""
Test suite for interpt AST nodes.

Tests cover:
- Rendering of hand-built trees
- token_literal() for every node family
- Render -> parse -> render fixed point
- Tree traversal

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from interpt.lexer.lexer import Lexer
from interpt.lexer.tokens import Token, TokenType
from interpt.parser.parser import Parser
from interpt.parser.ast_nodes import (
    ASTNodeType, Program, LetStatement, ReturnStatement, ExpressionStatement,
    BlockStatement, Identifier, IntegerLiteral, PrefixExpression, InfixExpression,
    walk,
)


def _ident(name: str) -> Identifier:
    return Identifier(Token(TokenType.IDENTIFIER, name), name)


def _int(value: int) -> IntegerLiteral:
    return IntegerLiteral(Token(TokenType.INTEGER, str(value)), value)


class TestRendering(unittest.TestCase):
    """Test cases for str() on hand-built trees."""

    def test_let_statement(self):
        program = Program([
            LetStatement(Token(TokenType.LET, "let"), _ident("my_var"), _ident("another_var")),
        ])
        self.assertEqual(str(program), "let my_var = another_var;")
        self.assertEqual(program.token_literal(), "let")

    def test_return_statement(self):
        statement = ReturnStatement(Token(TokenType.RETURN, "return"), _int(5))
        self.assertEqual(str(statement), "return 5;")

    def test_nested_operators(self):
        expression = InfixExpression(
            Token(TokenType.PLUS, "+"),
            _int(5),
            "+",
            InfixExpression(Token(TokenType.ASTERISK, "*"), _int(5), "*", _int(10)),
        )
        self.assertEqual(str(expression), "(5 + (5 * 10))")

        prefix = PrefixExpression(Token(TokenType.MINUS, "-"), "-", _ident("a"))
        self.assertEqual(str(prefix), "(-a)")

    def test_blocks(self):
        empty = BlockStatement(Token(TokenType.LEFT_BRACE, "{"), [])
        self.assertEqual(str(empty), "{ }")

        block = BlockStatement(Token(TokenType.LEFT_BRACE, "{"), [
            ExpressionStatement(Token(TokenType.IDENTIFIER, "x"), _ident("x")),
            ReturnStatement(Token(TokenType.RETURN, "return"), _ident("y")),
        ])
        self.assertEqual(str(block), "{ x return y; }")

    def test_repr(self):
        self.assertEqual(repr(_int(7)), "IntegerLiteral('7')")


class TestTokenLiterals(unittest.TestCase):
    """Every node reports the literal of the token that introduced it."""

    def test_parsed_nodes(self):
        parser = Parser(Lexer("let x = -a * fn(y) { if (y) { true } }(1); return !b;"))
        program = parser.parse_program()
        self.assertEqual(parser.errors, [])

        literals = {node.node_type: node.token_literal() for node in walk(program)}
        self.assertEqual(literals[ASTNodeType.LET_STATEMENT], "let")
        self.assertEqual(literals[ASTNodeType.RETURN_STATEMENT], "return")
        self.assertEqual(literals[ASTNodeType.INFIX_EXPRESSION], "*")
        self.assertEqual(literals[ASTNodeType.FUNCTION_LITERAL], "fn")
        self.assertEqual(literals[ASTNodeType.IF_EXPRESSION], "if")
        self.assertEqual(literals[ASTNodeType.BLOCK_STATEMENT], "{")
        self.assertEqual(literals[ASTNodeType.CALL_EXPRESSION], "(")
        self.assertEqual(literals[ASTNodeType.BOOLEAN], "true")
        self.assertEqual(literals[ASTNodeType.INTEGER_LITERAL], "1")

        prefix_literals = {node.token_literal() for node in walk(program)
                           if node.node_type == ASTNodeType.PREFIX_EXPRESSION}
        self.assertEqual(prefix_literals, {"-", "!"})

    def test_empty_program(self):
        self.assertEqual(Program().token_literal(), "")


class TestRoundTrip(unittest.TestCase):
    """Rendering a parsed program and parsing it again is a fixed point."""

    SOURCES = [
        "5 + 5 * 10",
        "-a * b",
        "a + b - c",
        "!(true == false) != !true",
        "let x = 1 + 2 * 3 - -4;",
        "return (a + b) / c;",
        "let add = fn(a, b) { return a + b; };",
        "let f = fn() { let y = 2; return y * y; };",
        "if (a < b) { a } else { b }",
        "add(1, 2 * 3, fn(x) { x }(4))",
        "let r = if (x > 1) { return x; };",
    ]

    def _render(self, source: str) -> str:
        parser = Parser(Lexer(source))
        program = parser.parse_program()
        self.assertEqual(parser.errors, [], f"errors parsing {source!r}")
        return str(program)

    def test_fixed_point(self):
        for source in self.SOURCES:
            with self.subTest(source=source):
                first = self._render(source)
                second = self._render(first)
                self.assertEqual(first, second)


class TestWalk(unittest.TestCase):
    """Test cases for tree traversal."""

    def test_preorder(self):
        parser = Parser(Lexer("let x = 1 + y;"))
        program = parser.parse_program()
        types = [node.node_type for node in walk(program)]
        self.assertEqual(types, [
            ASTNodeType.PROGRAM,
            ASTNodeType.LET_STATEMENT,
            ASTNodeType.IDENTIFIER,
            ASTNodeType.INFIX_EXPRESSION,
            ASTNodeType.INTEGER_LITERAL,
            ASTNodeType.IDENTIFIER,
        ])

    def test_children_of_leaves(self):
        self.assertEqual(_ident("x").children(), [])
        self.assertEqual(_int(1).children(), [])


if __name__ == '__main__':
    unittest.main()
