"""
interpt Parser Package

Implements a Pratt-based recursive descent parser for the interpt language.

Key Features:
- Top-down operator precedence (Pratt) expression parsing
- Grammar extended purely by registering prefix/infix handlers per token type
- Error accumulation with statement-level synchronization
- AST nodes that render back to normalized, fully parenthesized source

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, Precedence, parse_string, parse_file
from .errors import ParseError, ParseFailure

__all__ = [
    # Core parser
    "Parser", "Precedence", "parse_string", "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType", "Program", "Statement", "Expression",
    "LetStatement", "ReturnStatement", "ExpressionStatement", "BlockStatement",
    "Identifier", "IntegerLiteral", "Boolean", "PrefixExpression",
    "InfixExpression", "IfExpression", "FunctionLiteral", "CallExpression",
    "walk",

    # Error handling
    "ParseError", "ParseFailure",
]
