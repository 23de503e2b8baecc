"""
Abstract Syntax Tree node definitions for interpt.

Node families are closed: every statement is one of the Statement
subclasses below and every expression one of the Expression subclasses.
Each node keeps the token that introduced it, owns its children
exclusively, and renders itself back to normalized source text via str().

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional
from enum import Enum

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Statements
    LET_STATEMENT = "LetStatement"
    RETURN_STATEMENT = "ReturnStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    BLOCK_STATEMENT = "BlockStatement"

    # Expressions
    IDENTIFIER = "Identifier"
    INTEGER_LITERAL = "IntegerLiteral"
    BOOLEAN = "Boolean"
    PREFIX_EXPRESSION = "PrefixExpression"
    INFIX_EXPRESSION = "InfixExpression"
    IF_EXPRESSION = "IfExpression"
    FUNCTION_LITERAL = "FunctionLiteral"
    CALL_EXPRESSION = "CallExpression"


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, token: Optional[Token]):
        self.node_type = node_type
        self.token = token

    def token_literal(self) -> str:
        """Literal text of the token that introduced this node."""
        return self.token.literal if self.token is not None else ""

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes, in source order."""
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"


class Statement(ASTNode):
    """Base class for statements."""
    pass


class Expression(ASTNode):
    """Base class for expressions."""
    pass


# ============================================================================
# Top-level nodes
# ============================================================================

class Program(ASTNode):
    """Root AST node representing a complete program."""
    statements: List[Statement]

    def __init__(self, statements: Optional[List[Statement]] = None):
        super().__init__(ASTNodeType.PROGRAM, None)
        self.statements = statements if statements is not None else []

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def children(self) -> List[ASTNode]:
        return list(self.statements)

    def __str__(self) -> str:
        return "".join(str(statement) for statement in self.statements)


# ============================================================================
# Statements
# ============================================================================

class LetStatement(Statement):
    """Variable binding: let <name> = <value>;"""
    name: 'Identifier'
    value: Expression

    def __init__(self, token: Token, name: 'Identifier', value: Expression):
        super().__init__(ASTNodeType.LET_STATEMENT, token)
        self.name = name
        self.value = value

    def children(self) -> List[ASTNode]:
        return [self.name, self.value]

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {self.value};"


class ReturnStatement(Statement):
    """Return statement: return <value>;"""
    return_value: Expression

    def __init__(self, token: Token, return_value: Expression):
        super().__init__(ASTNodeType.RETURN_STATEMENT, token)
        self.return_value = return_value

    def children(self) -> List[ASTNode]:
        return [self.return_value]

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.return_value};"


class ExpressionStatement(Statement):
    """A statement consisting of a single expression."""
    expression: Expression

    def __init__(self, token: Token, expression: Expression):
        super().__init__(ASTNodeType.EXPRESSION_STATEMENT, token)
        self.expression = expression

    def children(self) -> List[ASTNode]:
        return [self.expression]

    def __str__(self) -> str:
        return str(self.expression)


class BlockStatement(Statement):
    """Brace-delimited statement sequence used by if and fn bodies."""
    statements: List[Statement]

    def __init__(self, token: Token, statements: List[Statement]):
        super().__init__(ASTNodeType.BLOCK_STATEMENT, token)
        self.statements = statements

    def children(self) -> List[ASTNode]:
        return list(self.statements)

    def __str__(self) -> str:
        if not self.statements:
            return "{ }"
        return "{ " + " ".join(str(statement) for statement in self.statements) + " }"


# ============================================================================
# Expressions
# ============================================================================

class Identifier(Expression):
    """Identifier reference."""
    value: str

    def __init__(self, token: Token, value: str):
        super().__init__(ASTNodeType.IDENTIFIER, token)
        self.value = value

    def children(self) -> List[ASTNode]:
        return []

    def __str__(self) -> str:
        return self.value


class IntegerLiteral(Expression):
    """Signed 64-bit integer literal."""
    value: int

    def __init__(self, token: Token, value: int):
        super().__init__(ASTNodeType.INTEGER_LITERAL, token)
        self.value = value

    def children(self) -> List[ASTNode]:
        return []

    def __str__(self) -> str:
        return self.token_literal()


class Boolean(Expression):
    """true / false literal."""
    value: bool

    def __init__(self, token: Token, value: bool):
        super().__init__(ASTNodeType.BOOLEAN, token)
        self.value = value

    def children(self) -> List[ASTNode]:
        return []

    def __str__(self) -> str:
        return self.token_literal()


class PrefixExpression(Expression):
    """Unary operation expression: -x, !x."""
    operator: str
    right: Expression

    def __init__(self, token: Token, operator: str, right: Expression):
        super().__init__(ASTNodeType.PREFIX_EXPRESSION, token)
        self.operator = operator
        self.right = right

    def children(self) -> List[ASTNode]:
        return [self.right]

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


class InfixExpression(Expression):
    """Binary operation expression."""
    left: Expression
    operator: str
    right: Expression

    def __init__(self, token: Token, left: Expression, operator: str, right: Expression):
        super().__init__(ASTNodeType.INFIX_EXPRESSION, token)
        self.left = left
        self.operator = operator
        self.right = right

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


class IfExpression(Expression):
    """Conditional expression with an optional else branch."""
    condition: Expression
    consequence: BlockStatement
    alternative: Optional[BlockStatement]

    def __init__(self, token: Token, condition: Expression, consequence: BlockStatement,
                 alternative: Optional[BlockStatement] = None):
        super().__init__(ASTNodeType.IF_EXPRESSION, token)
        self.condition = condition
        self.consequence = consequence
        self.alternative = alternative

    def children(self) -> List[ASTNode]:
        nodes: List[ASTNode] = [self.condition, self.consequence]
        if self.alternative is not None:
            nodes.append(self.alternative)
        return nodes

    def __str__(self) -> str:
        result = f"if ({self.condition}) {self.consequence}"
        if self.alternative is not None:
            result += f" else {self.alternative}"
        return result


class FunctionLiteral(Expression):
    """Anonymous function: fn(<params>) { <body> }"""
    parameters: List[Identifier]
    body: BlockStatement

    def __init__(self, token: Token, parameters: List[Identifier], body: BlockStatement):
        super().__init__(ASTNodeType.FUNCTION_LITERAL, token)
        self.parameters = parameters
        self.body = body

    def children(self) -> List[ASTNode]:
        return [*self.parameters, self.body]

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {self.body}"


class CallExpression(Expression):
    """Function call expression."""
    function: Expression
    arguments: List[Expression]

    def __init__(self, token: Token, function: Expression, arguments: List[Expression]):
        super().__init__(ASTNodeType.CALL_EXPRESSION, token)
        self.function = function
        self.arguments = arguments

    def children(self) -> List[ASTNode]:
        return [self.function, *self.arguments]

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield ``node`` and all of its descendants in pre-order."""
    yield node
    for child in node.children():
        yield from walk(child)
