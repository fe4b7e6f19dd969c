class BellaError(Exception):
    """Base exception for every Bella runtime error.

    Each subclass names one error kind. `name` identifies the kind and
    `message` carries the human-readable detail.
    """
    name = 'BellaError'

    def __init__(self, message: str):
        super().__init__(f"BellaError: {self.name}: {message}")
        self.message = message


class UnboundIdentifier(BellaError):
    name = 'UnboundIdentifier'


class DuplicateDeclaration(BellaError):
    name = 'DuplicateDeclaration'


class NotAssignable(BellaError):
    name = 'NotAssignable'


class TypeMismatch(BellaError):
    name = 'TypeMismatch'


class UnknownOperator(BellaError):
    name = 'UnknownOperator'


class DivisionByZero(BellaError):
    name = 'DivisionByZero'


class OutOfBounds(BellaError):
    name = 'OutOfBounds'


class ArityMismatch(BellaError):
    name = 'ArityMismatch'


class RepeatedParameter(BellaError):
    name = 'RepeatedParameter'


class NotCallable(BellaError):
    name = 'NotCallable'
