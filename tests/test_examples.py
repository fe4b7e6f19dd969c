import pytest

from bella.errors import DuplicateDeclaration
from bella.interpreter import run_program
from bella.values import ArrayVal


def run_example(examples_dir, name):
    with open(examples_dir / name, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source)


def test_sample_program(examples_dir):
    assert run_example(examples_dir, 'sample.bella') == [0]


def test_countdown(examples_dir):
    assert run_example(examples_dir, 'countdown.bella') == [5, 4, 3, 2, 1]


def test_builtins(examples_dir):
    assert run_example(examples_dir, 'builtins.bella') == [5, 0, -1, 0, 5]


def test_arrays(examples_dir):
    out = run_example(examples_dir, 'arrays.bella')
    assert out == [4, 9, 25, 49, ArrayVal((True, False, ArrayVal((1, -1))))]


def test_fibonacci(examples_dir):
    assert run_example(examples_dir, 'fib.bella') == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55]


def test_loop_declaration_fails_on_second_iteration(examples_dir):
    with pytest.raises(DuplicateDeclaration):
        run_example(examples_dir, 'loop_declaration.bella')
