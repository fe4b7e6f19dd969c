"""Interpreter for the Bella language.

This module evaluates Bella programs directly over the AST. Expressions
are evaluated by :meth:`Interpreter.evaluate`, which never changes the
environment. Statements are executed by :meth:`Interpreter.execute`,
which takes the current environment and output and returns the new
pair; this is the only place where either evolves. Every misuse of the
language raises a :class:`~bella.errors.BellaError` subclass and aborts
the whole run.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .ast import (
    Program, Block, VariableDeclaration, FunctionDeclaration, Assignment,
    PrintStatement, WhileStatement, Numeral, BooleanLiteral, Identifier,
    UnaryExpression, BinaryExpression, ConditionalExpression, ArrayLiteral,
    SubscriptExpression, Call, Node
)
from .errors import (
    UnboundIdentifier, TypeMismatch, UnknownOperator, DivisionByZero,
    OutOfBounds, ArityMismatch, RepeatedParameter, NotCallable,
)
from .environment import Environment
from .parser import parse_program
from .builtin_function import BuiltinFunction
from .std.math import RealMath, populate_math_environment
from .values import (
    ArrayVal, UserFunction, is_array, is_boolean, is_number, to_string, type_name,
)

Output = Tuple[Any, ...]
State = Tuple[Environment, Output]

NUMERIC_OPERATORS = ('+', '-', '*', '/', '%', '**', '>', '<', '>=', '<=', '==', '!=')
BOOLEAN_OPERATORS = ('&&', '||')


class Interpreter:
    """Core interpreter that executes a Bella AST."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.global_env = populate_math_environment()
        self.real_math = RealMath()
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> List[Any]:
        """Execute `program` and return the values it printed, in order."""
        if env is None:
            env = self.global_env
        if self.debug_level > 0 and self.debug_fp is None:
            # a previous run closed the trace file; later runs append to it
            self.debug_fp = open(self.debug_file, 'a')
        try:
            self.debug(f"run program with {len(program.block.statements)} statements")
            _, output = self.execute_block(program.block, env, ())
            self.debug(f"program finished with {len(output)} outputs")
            return list(output)
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute_block(self, block: Block, env: Environment, output: Output) -> State:
        # Loop bodies share the enclosing scope; no child environment here
        for stmt in block.statements:
            env, output = self.execute(stmt, env, output)
        return env, output

    def execute(self, node: Node, env: Environment, output: Output) -> State:
        if isinstance(node, VariableDeclaration):
            name = node.id.name
            # checked before the initializer runs so it cannot see itself
            env.check_undeclared(name)
            value = self.evaluate(node.initializer, env)
            if self.debug_level >= 2:
                self.debug(f"declare {name}: {type_name(value)} = {to_string(value)}")
            return env.declare(name, value), output
        if isinstance(node, FunctionDeclaration):
            name = node.id.name
            env.check_undeclared(name)
            seen = set()
            for param in node.parameters:
                if param.name in seen:
                    raise RepeatedParameter(f'Parameter {param.name} repeated in function declaration {name}')
                seen.add(param.name)
            func = UserFunction(name, tuple(p.name for p in node.parameters), node.body)
            if self.debug_level >= 2:
                self.debug(f"define function {name}({', '.join(func.parameters)})")
            return env.declare(name, func), output
        if isinstance(node, Assignment):
            name = node.target.name
            env.check_assignable(name)
            value = self.evaluate(node.source, env)
            if self.debug_level >= 2:
                self.debug(f"assign {name} = {to_string(value)}")
            return env.assign(name, value), output
        if isinstance(node, PrintStatement):
            value = self.evaluate(node.expression, env)
            if self.debug_level >= 2:
                self.debug(f"print {to_string(value)}")
            return env, output + (value,)
        if isinstance(node, WhileStatement):
            while True:
                cond = self.evaluate(node.test, env)
                if self.debug_level >= 3:
                    self.debug(f"while condition -> {to_string(cond)}")
                # only the boolean true continues; no truthiness
                if cond is not True:
                    break
                env, output = self.execute_block(node.body, env, output)
            return env, output
        if isinstance(node, Block):
            return self.execute_block(node, env, output)
        # catch any other nodes
        raise NotImplementedError(f"execute: unexpected node type {type(node).__name__}")

    def evaluate(self, node: Node, env: Environment) -> Any:
        if isinstance(node, Numeral):
            return float(node.value)
        if isinstance(node, BooleanLiteral):
            return node.value
        if isinstance(node, Identifier):
            return env.get(node.name)
        if isinstance(node, UnaryExpression):
            operand = self.evaluate(node.expression, env)
            if node.operator == '-':
                if not is_number(operand):
                    raise TypeMismatch(f'Expected number to negate, got {type_name(operand)}')
                return -operand
            if node.operator == '!':
                if not is_boolean(operand):
                    raise TypeMismatch(f'Expected boolean to negate, got {type_name(operand)}')
                return not operand
            raise UnknownOperator(f'Unknown operator {node.operator} for unary expression')
        if isinstance(node, BinaryExpression):
            # both sides are always evaluated; && and || do not short-circuit
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.operator, left, right)
        if isinstance(node, ConditionalExpression):
            test = self.evaluate(node.test, env)
            if not is_boolean(test):
                raise TypeMismatch(f'Expected boolean as test in conditional expression, got {type_name(test)}')
            return self.evaluate(node.consequent if test else node.alternate, env)
        if isinstance(node, ArrayLiteral):
            return ArrayVal(tuple(self.evaluate(el, env) for el in node.elements))
        if isinstance(node, SubscriptExpression):
            target = self.evaluate(node.array, env)
            index = self.evaluate(node.subscript, env)
            if not is_array(target):
                raise TypeMismatch(f'Expected array to subscript, got {type_name(target)}')
            if not is_number(index):
                raise TypeMismatch(f'Expected number as subscript, got {type_name(index)}')
            if not (0 <= index < len(target)) or index != int(index):
                raise OutOfBounds(f'Subscript {to_string(index)} out of bounds for array of length {len(target)}')
            return target.items[int(index)]
        if isinstance(node, Call):
            name = node.callee.name
            func = env.get(name) if name in env else None
            args = [self.evaluate(arg, env) for arg in node.args]
            if name not in env:
                raise UnboundIdentifier(f'Identifier {name} has not been declared')
            return self.call_function(func, args, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node).__name__}")

    def call_function(self, func: Any, args: List[Any], env: Environment) -> Any:
        if isinstance(func, UserFunction):
            if len(args) != len(func.parameters):
                raise ArityMismatch(
                    f"{func.name} expects {len(func.parameters)} arguments, got {len(args)}")
            if self.debug_level >= 3:
                self.debug(f"call {func.name}({', '.join(to_string(a) for a in args)})")
            # the call scope extends the caller's environment with the parameters
            call_env = env.extend(dict(zip(func.parameters, args)))
            return self.evaluate(func.body, call_env)
        if isinstance(func, BuiltinFunction):
            if len(args) != func.arity:
                raise ArityMismatch(f"{func.name} expects {func.arity} arguments, got {len(args)}")
            if self.debug_level >= 3:
                self.debug(f"call builtin {func.name}({', '.join(to_string(a) for a in args)})")
            return func.fn(args)
        raise NotCallable(f'{to_string(func)} is not a function')

    def apply_binary_op(self, op: str, a: Any, b: Any) -> Any:
        if op in NUMERIC_OPERATORS:
            if not is_number(a) or not is_number(b):
                raise TypeMismatch(
                    f'Expected numerical arguments for operator {op}, got {type_name(a)} and {type_name(b)}')
            if op == '+':
                return a + b
            if op == '-':
                return a - b
            if op == '*':
                return a * b
            if op == '/':
                if b == 0:
                    raise DivisionByZero('Division by zero')
                return a / b
            if op == '%':
                return self.real_math.remainder(a, b)
            if op == '**':
                return self.real_math.power(a, b)
            if op == '>':
                return a > b
            if op == '<':
                return a < b
            if op == '>=':
                return a >= b
            if op == '<=':
                return a <= b
            if op == '==':
                return a == b
            if op == '!=':
                return a != b
        if op in BOOLEAN_OPERATORS:
            if not is_boolean(a) or not is_boolean(b):
                raise TypeMismatch(
                    f'Expected boolean arguments for operator {op}, got {type_name(a)} and {type_name(b)}')
            if op == '&&':
                return a and b
            return a or b
        raise UnknownOperator(f'Unknown operator {op} for binary expression')


def interpret(program: Program) -> List[Any]:
    """Run an already-built Bella program and return its output values."""
    return Interpreter().run(program)


def run_program(source: str, debug_level: int = 0) -> List[Any]:
    """Convenience function to parse and run a Bella program from source text."""
    ast_program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level)
    return interpreter.run(ast_program)
