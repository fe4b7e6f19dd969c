"""Parser for the Bella language.

Bella source text is parsed by a Lark LALR parser configured with the
grammar below, and the resulting parse tree is turned into the AST
defined in :mod:`bella.ast` by :class:`ASTTransformer`.

The evaluator never depends on this module; any front end that builds
the same AST nodes can feed the interpreter.

The `parse_program` function is the public entry point and returns a
`Program` AST node representing the entire source file.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer

from .ast import (
    Program, Block, VariableDeclaration, FunctionDeclaration, Assignment,
    PrintStatement, WhileStatement, Numeral, BooleanLiteral, Identifier,
    UnaryExpression, BinaryExpression, ConditionalExpression, ArrayLiteral,
    SubscriptExpression, Call, Node
)


BELLA_GRAMMAR = r"""
    ?start: program
    program: statement+

    // Statements
    ?statement: var_decl
              | func_decl
              | assignment
              | print_stmt
              | while_stmt

    var_decl: "let" NAME "=" expression ";"
    func_decl: "fun" NAME "(" [param_list] ")" "=" expression ";"
    param_list: NAME ("," NAME)*
    assignment: NAME "=" expression ";"
    print_stmt: "print" expression ";"
    while_stmt: "while" expression block

    block: "{" statement* "}"

    // Expressions with precedence
    ?expression: disjunction "?" disjunction ":" expression -> conditional
               | disjunction
    ?disjunction: conjunction (OR conjunction)*
    ?conjunction: comparison (AND comparison)*
    ?comparison: additive (REL_OP additive)?
    ?additive: multiplicative (ADD_OP multiplicative)*
    ?multiplicative: power (MUL_OP power)*
    ?power: unary (POW power)?
    ?unary: UNARY_OP unary
          | postfix
    ?postfix: primary
            | postfix "[" expression "]" -> subscript
    ?primary: NUMBER -> numeral
            | "true" -> true
            | "false" -> false
            | NAME "(" [arg_list] ")" -> call
            | NAME -> identifier
            | "(" expression ")"
            | "[" [arg_list] "]" -> array_lit
    arg_list: expression ("," expression)*

    // Tokens
    OR: "||"
    AND: "&&"
    REL_OP: "<=" | ">=" | "==" | "!=" | "<" | ">"
    ADD_OP: "+" | "-"
    MUL_OP: "*" | "/" | "%"
    POW: "**"
    UNARY_OP: "-" | "!"
    NUMBER: /\d+(\.\d+)?([eE][+-]?\d+)?/

    %import common.CNAME -> NAME
    %import common.WS
    %ignore WS

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
"""


BELLA_PARSER = Lark(
    BELLA_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def program(self, items):
        return Program(Block(statements=list(items)))

    def var_decl(self, items):
        return VariableDeclaration(Identifier(str(items[0])), items[1])

    def func_decl(self, items):
        name = Identifier(str(items[0]))
        # with maybe_placeholders off an empty parameter list leaves no child
        params: List[Identifier] = items[1] if len(items) == 3 else []
        body = items[-1]
        return FunctionDeclaration(name, params, body)

    def param_list(self, items):
        return [Identifier(str(item)) for item in items]

    def assignment(self, items):
        return Assignment(Identifier(str(items[0])), items[1])

    def print_stmt(self, items):
        return PrintStatement(items[0])

    def while_stmt(self, items):
        return WhileStatement(items[0], items[1])

    def block(self, items):
        return Block(statements=list(items))

    # Expressions
    def conditional(self, items):
        return ConditionalExpression(items[0], items[1], items[2])

    def binary_expr(self, items):
        # items pattern: expr ( op expr )*, folded left-associatively
        left = items[0]
        i = 1
        while i < len(items):
            op = items[i]
            right = items[i+1]
            left = BinaryExpression(str(op), left, right)
            i += 2
        return left

    def disjunction(self, items):
        return self.binary_expr(items)

    def conjunction(self, items):
        return self.binary_expr(items)

    def comparison(self, items):
        return self.binary_expr(items)

    def additive(self, items):
        return self.binary_expr(items)

    def multiplicative(self, items):
        return self.binary_expr(items)

    def power(self, items):
        # right-associative by the grammar: unary ("**" power)?
        return BinaryExpression(str(items[1]), items[0], items[2])

    def unary(self, items):
        return UnaryExpression(str(items[0]), items[1])

    def subscript(self, items):
        return SubscriptExpression(items[0], items[1])

    def numeral(self, items):
        return Numeral(float(items[0]))

    def true(self, items):
        return BooleanLiteral(True)

    def false(self, items):
        return BooleanLiteral(False)

    def call(self, items):
        args = items[1] if len(items) > 1 else []
        return Call(Identifier(str(items[0])), args)

    def identifier(self, items):
        return Identifier(str(items[0]))

    def array_lit(self, items):
        return ArrayLiteral(items[0] if items else [])

    def arg_list(self, items):
        return list(items)


def parse_program(source: str) -> Program:
    """Parse Bella source code into an AST Program.

    Any syntax errors will be raised as exceptions from the parser.
    """
    tree = BELLA_PARSER.parse(source)
    ast = ASTTransformer().transform(tree)
    if not isinstance(ast, Program):
        raise TypeError(f"expected Program from parser, got {type(ast).__name__}")
    return ast
