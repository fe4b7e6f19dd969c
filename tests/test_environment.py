import pytest

from bella.environment import Environment
from bella.errors import DuplicateDeclaration, NotAssignable, UnboundIdentifier
from bella.std.math import populate_math_environment, BUILTIN_NAMES
from bella.values import UserFunction


def test_declare_returns_new_snapshot():
    env = Environment()
    extended = env.declare('x', 1.0)
    assert extended.get('x') == 1.0
    assert 'x' not in env


def test_declare_twice_fails():
    env = Environment().declare('x', 1.0)
    with pytest.raises(DuplicateDeclaration):
        env.declare('x', 2.0)


def test_check_undeclared_leaves_env_untouched():
    env = Environment().declare('x', 1.0)
    env.check_undeclared('y')
    with pytest.raises(DuplicateDeclaration):
        env.check_undeclared('x')
    assert 'y' not in env


def test_assign_replaces_one_binding():
    env = Environment({'x': 1.0, 'y': 2.0})
    updated = env.assign('x', 5.0)
    assert updated.get('x') == 5.0
    assert updated.get('y') == 2.0
    assert env.get('x') == 1.0


def test_assign_checks():
    env = Environment({'f': UserFunction('f', (), None), 'c': 3.0}, consts=['c'])
    with pytest.raises(UnboundIdentifier):
        env.assign('missing', 1.0)
    with pytest.raises(NotAssignable):
        env.assign('f', 1.0)
    with pytest.raises(NotAssignable):
        env.assign('c', 1.0)


def test_extend_overrides_without_duplicate_check():
    env = Environment({'x': 1.0})
    frame = env.extend({'x': 2.0, 'y': 3.0})
    assert frame.get('x') == 2.0
    assert frame.get('y') == 3.0
    assert env.get('x') == 1.0


def test_get_unbound():
    with pytest.raises(UnboundIdentifier):
        Environment().get('nope')


def test_initial_environment_holds_exactly_the_builtins():
    env = populate_math_environment()
    assert sorted(env) == sorted(BUILTIN_NAMES)
    assert env.consts == frozenset(BUILTIN_NAMES)
