"""Runtime values for Bella.

A Bella value is one of five kinds, each with its own Python
representation so that the kinds never overlap:

* Number: a Python ``float`` (``bool`` is never a number)
* Boolean: a Python ``bool``
* Array: an :class:`ArrayVal`, a frozen, fixed-length tuple of values
* Built-in function: a :class:`~bella.builtin_function.BuiltinFunction`
* User function: a :class:`UserFunction`, holding parameter names and a
  single expression body

The predicates in this module are the only place where the evaluator asks
which kind a value is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple
import math

from .builtin_function import BuiltinFunction


@dataclass(frozen=True)
class ArrayVal:
    """Represents a Bella array value.

    Arrays are immutable once built: the language has no element
    assignment, so the items are stored as a tuple.
    """
    items: Tuple[Any, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Array({list(self.items)!r})"


@dataclass(frozen=True)
class UserFunction:
    """Represents a function declared in a Bella program.

    The body is an expression node; Bella functions have no statement
    bodies. Calls build their scope from the environment current at the
    call site, so no closure environment is stored here.
    """
    name: str
    parameters: Tuple[str, ...]
    body: Any

    def __repr__(self) -> str:
        return f"<function {self.name}>"


def is_number(value: Any) -> bool:
    # bool is a subclass of int; keep the kinds apart
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, ArrayVal)


def is_user_function(value: Any) -> bool:
    return isinstance(value, UserFunction)


def is_builtin_function(value: Any) -> bool:
    return isinstance(value, BuiltinFunction)


def is_function(value: Any) -> bool:
    return is_user_function(value) or is_builtin_function(value)


def type_name(value: Any) -> str:
    """Return the Bella kind name of a runtime value."""
    if is_boolean(value):
        return 'Boolean'
    if is_number(value):
        return 'Number'
    if is_array(value):
        return 'Array'
    if is_builtin_function(value):
        return 'BuiltinFunction'
    if is_user_function(value):
        return 'UserFunction'
    return type(value).__name__


def format_number(x: float) -> str:
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x == int(x) and abs(x) < 1e21:
        return str(int(x))
    return repr(x)


def to_string(value: Any) -> str:
    """Convert a Bella value to the text shown when it is printed."""
    if is_boolean(value):
        return 'true' if value else 'false'
    if is_number(value):
        return format_number(float(value))
    if is_array(value):
        return '[' + ', '.join(to_string(item) for item in value.items) + ']'
    if is_builtin_function(value) or is_user_function(value):
        return repr(value)
    return str(value)
