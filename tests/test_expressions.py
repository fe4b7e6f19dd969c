import math

import pytest

from bella.ast import (
    Program, Block, PrintStatement, FunctionDeclaration, VariableDeclaration,
    Numeral, BooleanLiteral, Identifier, UnaryExpression, BinaryExpression,
    ConditionalExpression, ArrayLiteral, SubscriptExpression, Call,
)
from bella.errors import TypeMismatch
from bella.interpreter import interpret
from bella.values import ArrayVal


def run_prints(*expressions):
    return interpret(Program(Block([PrintStatement(e) for e in expressions])))


def binary(op, a, b):
    return BinaryExpression(op, Numeral(a), Numeral(b))


def test_literals():
    assert run_prints(Numeral(5), BooleanLiteral(True)) == [5, True]


def test_numerals_are_floats():
    (value,) = run_prints(Numeral(5))
    assert isinstance(value, float)


def test_unary_operators():
    out = run_prints(
        UnaryExpression('-', Numeral(5)),
        UnaryExpression('!', BooleanLiteral(True)),
        UnaryExpression('!', BooleanLiteral(False)),
    )
    assert out == [-5, False, True]


def test_binary_operators():
    ops = ['+', '-', '*', '/', '%', '**', '>', '<', '>=', '<=', '==', '!=']
    out = run_prints(*[binary(op, 6, 3) for op in ops])
    assert out == [9, 3, 18, 2, 0, 216, True, False, True, False, False, True]


def test_boolean_operators():
    out = run_prints(
        BinaryExpression('&&', BooleanLiteral(True), BooleanLiteral(False)),
        BinaryExpression('||', BooleanLiteral(False), BooleanLiteral(True)),
        BinaryExpression('&&', BooleanLiteral(True), BooleanLiteral(True)),
        BinaryExpression('||', BooleanLiteral(False), BooleanLiteral(False)),
    )
    assert out == [False, True, True, False]


def test_arithmetic_matches_double_precision():
    assert run_prints(binary('+', 0.1, 0.2)) == [0.1 + 0.2]
    assert run_prints(binary('/', 1, 3)) == [1 / 3]
    assert run_prints(binary('*', 1e308, 10)) == [math.inf]


def test_remainder_takes_sign_of_dividend():
    assert run_prints(binary('%', -7, 3), binary('%', 7, -3)) == [-1, 1]


def test_remainder_by_zero_is_nan():
    (value,) = run_prints(binary('%', 5, 0))
    assert math.isnan(value)


def test_power_edge_cases():
    overflow, fractional, zero_base = run_prints(
        binary('**', 10, 400),
        binary('**', -8, 1 / 3),
        binary('**', 0, -1),
    )
    assert overflow == math.inf
    assert math.isnan(fractional)
    assert zero_base == math.inf


def test_both_operands_are_evaluated_for_boolean_operators():
    # the right side fails even though the left side decides the result
    bad = UnaryExpression('!', Numeral(1))
    with pytest.raises(TypeMismatch):
        run_prints(BinaryExpression('||', BooleanLiteral(True), bad))


def test_conditional_evaluates_one_branch():
    # the untaken branch would divide by zero
    boom = binary('/', 1, 0)
    out = run_prints(
        ConditionalExpression(BooleanLiteral(True), Numeral(5), boom),
        ConditionalExpression(binary('==', 4, 6), boom, Numeral(3)),
    )
    assert out == [5, 3]


def test_array_literals():
    out = run_prints(
        ArrayLiteral([Numeral(1), Numeral(2), Numeral(3)]),
        ArrayLiteral([BooleanLiteral(True), ArrayLiteral([])]),
    )
    assert out == [ArrayVal((1, 2, 3)), ArrayVal((True, ArrayVal(())))]


def test_subscripts():
    array = ArrayLiteral([Numeral(1), Numeral(2), Numeral(3)])
    out = run_prints(
        SubscriptExpression(array, Numeral(0)),
        SubscriptExpression(array, Numeral(1)),
        SubscriptExpression(array, binary('+', 1, 1)),
    )
    assert out == [1, 2, 3]


def test_user_function_call():
    program = Program(Block([
        FunctionDeclaration(
            Identifier('add'),
            [Identifier('x'), Identifier('y')],
            BinaryExpression('+', Identifier('x'), Identifier('y')),
        ),
        PrintStatement(Call(Identifier('add'), [Numeral(6), Numeral(4)])),
    ]))
    assert interpret(program) == [10]


def test_parameters_shadow_outer_names():
    program = Program(Block([
        VariableDeclaration(Identifier('x'), Numeral(100)),
        VariableDeclaration(Identifier('z'), Numeral(1)),
        FunctionDeclaration(
            Identifier('f'), [Identifier('x')],
            BinaryExpression('+', Identifier('x'), Identifier('z')),
        ),
        PrintStatement(Call(Identifier('f'), [Numeral(2)])),
        PrintStatement(Identifier('x')),
    ]))
    assert interpret(program) == [3, 100]


def test_recursive_function():
    fact = FunctionDeclaration(
        Identifier('fact'), [Identifier('n')],
        ConditionalExpression(
            BinaryExpression('<=', Identifier('n'), Numeral(1)),
            Numeral(1),
            BinaryExpression('*', Identifier('n'), Call(
                Identifier('fact'), [BinaryExpression('-', Identifier('n'), Numeral(1))])),
        ),
    )
    program = Program(Block([fact, PrintStatement(Call(Identifier('fact'), [Numeral(5)]))]))
    assert interpret(program) == [120]
