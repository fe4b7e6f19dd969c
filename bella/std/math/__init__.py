from .real_math import RealMath
from bella.builtin_function import BuiltinFunction
from bella.environment import Environment
from bella.errors import TypeMismatch
from bella.values import is_number, type_name
from typing import Any, List

BUILTIN_NAMES = ('pi', 'sqrt', 'sin', 'cos', 'ln', 'exp', 'hypot')


def _numeric_args(name: str, args: List[Any]) -> List[float]:
    for arg in args:
        if not is_number(arg):
            raise TypeMismatch(f'{name} expects Number arguments, got {type_name(arg)}')
    return [float(arg) for arg in args]


def populate_math_environment() -> Environment:
        real_math = RealMath()

        def std_sqrt(args: List[Any]) -> Any:
            (x,) = _numeric_args('sqrt', args)
            return real_math.sqrt(x)

        def std_sin(args: List[Any]) -> Any:
            (x,) = _numeric_args('sin', args)
            return real_math.sin(x)

        def std_cos(args: List[Any]) -> Any:
            (x,) = _numeric_args('cos', args)
            return real_math.cos(x)

        def std_ln(args: List[Any]) -> Any:
            (x,) = _numeric_args('ln', args)
            return real_math.ln(x)

        def std_exp(args: List[Any]) -> Any:
            (x,) = _numeric_args('exp', args)
            return real_math.exp(x)

        def std_hypot(args: List[Any]) -> Any:
            x, y = _numeric_args('hypot', args)
            return real_math.hypot(x, y)

        values = {
            'pi': real_math.pi,
            'sqrt': BuiltinFunction('sqrt', 1, std_sqrt),
            'sin': BuiltinFunction('sin', 1, std_sin),
            'cos': BuiltinFunction('cos', 1, std_cos),
            'ln': BuiltinFunction('ln', 1, std_ln),
            'exp': BuiltinFunction('exp', 1, std_exp),
            'hypot': BuiltinFunction('hypot', 2, std_hypot),
        }
        # every pre-bound name is constant, functions included
        return Environment(values, consts=BUILTIN_NAMES)
