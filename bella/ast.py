"""Abstract Syntax Tree (AST) definitions for the Bella language.

The AST classes defined in this module represent the syntactic structure
of Bella programs. They are built by the parser (or by any other front
end) and evaluated by the interpreter. Expressions and statements are
kept apart: a function body is always a single expression, and only
statements may change the environment or produce output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


# Expressions

@dataclass
class Numeral(Node):
    value: float


@dataclass
class BooleanLiteral(Node):
    value: bool


@dataclass
class Identifier(Node):
    name: str


@dataclass
class UnaryExpression(Node):
    operator: str
    expression: Node


@dataclass
class BinaryExpression(Node):
    operator: str
    left: Node
    right: Node


@dataclass
class ConditionalExpression(Node):
    test: Node
    consequent: Node
    alternate: Node


@dataclass
class ArrayLiteral(Node):
    elements: List[Node]


@dataclass
class SubscriptExpression(Node):
    array: Node
    subscript: Node


@dataclass
class Call(Node):
    callee: Identifier
    args: List[Node]


# Statements

@dataclass
class VariableDeclaration(Node):
    id: Identifier
    initializer: Node


@dataclass
class FunctionDeclaration(Node):
    id: Identifier
    parameters: List[Identifier]
    body: Node  # a single expression


@dataclass
class Assignment(Node):
    target: Identifier
    source: Node


@dataclass
class PrintStatement(Node):
    expression: Node


@dataclass
class Block(Node):
    statements: List[Node]


@dataclass
class WhileStatement(Node):
    test: Node
    body: Block


@dataclass
class Program(Node):
    block: Block
