# Bella language package
# This package provides a parser and a tree-walking interpreter for Bella.
from .interpreter import interpret, run_program, Interpreter
from .parser import parse_program
from .errors import BellaError

__all__ = [
    'interpret',
    'run_program',
    'parse_program',
    'Interpreter',
    'BellaError',
]
