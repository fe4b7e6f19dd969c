from typing import Any, Dict, FrozenSet, Iterable, Iterator, Mapping, Optional

from bella.errors import DuplicateDeclaration, NotAssignable, UnboundIdentifier
from bella.values import is_function


class Environment:
    """An immutable snapshot mapping identifiers to values.

    Every update returns a new Environment built from a copy of the
    bindings, so snapshots handed out earlier never change.
    """
    def __init__(self, values: Optional[Mapping[str, Any]] = None, consts: Iterable[str] = ()):
        self._values: Dict[str, Any] = dict(values or {})
        self.consts: FrozenSet[str] = frozenset(consts)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def get(self, name: str) -> Any:
        if name in self._values:
            return self._values[name]
        raise UnboundIdentifier(f'Identifier {name} has not been declared')

    def check_assignable(self, name: str):
        if name not in self._values:
            raise UnboundIdentifier(f'Identifier {name} has not been declared')
        if is_function(self._values[name]):
            raise NotAssignable(f'Cannot assign to function {name}')
        if name in self.consts:
            raise NotAssignable(f'Cannot assign to built-in constant {name}')

    def check_undeclared(self, name: str):
        if name in self._values:
            raise DuplicateDeclaration(f'Identifier {name} has already been declared')

    def declare(self, name: str, value: Any) -> 'Environment':
        self.check_undeclared(name)
        return self._with({name: value})

    def assign(self, name: str, value: Any) -> 'Environment':
        self.check_assignable(name)
        return self._with({name: value})

    def extend(self, bindings: Mapping[str, Any]) -> 'Environment':
        """Return a new scope where `bindings` override existing names."""
        return self._with(bindings)

    def _with(self, bindings: Mapping[str, Any]) -> 'Environment':
        values = dict(self._values)
        values.update(bindings)
        return Environment(values, self.consts)
