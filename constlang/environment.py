"""Scopes holding bindings and functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

if TYPE_CHECKING:
    from constlang.identifier import Identifier


@dataclass(frozen=True)
class Binding:
    """A name bound to an unevaluated expression."""

    expression: Any


@dataclass(frozen=True)
class Function:
    """A named function with its parameter names and body."""

    parameters: tuple
    body: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))


NamedValue = Union[Binding, Function]


class Environment:
    """A scope of names, optionally nested in a parent scope."""

    def __init__(self, parent: Optional[Environment] = None) -> None:
        self.parent = parent
        self._bindings: dict[Identifier, NamedValue] = {}

    def create_child(self) -> Environment:
        return Environment(self)

    def insert_binding(self, name: Identifier, expression: Any) -> None:
        self._bindings[name] = Binding(expression)

    def insert_function(
        self, name: Identifier, parameters: Iterable[Identifier], body: Any
    ) -> None:
        self._bindings[name] = Function(tuple(parameters), body)

    def get_local(self, name: Identifier) -> Optional[NamedValue]:
        """Look a name up in this scope only."""
        return self._bindings.get(name)

    def lookup(self, name: Identifier) -> Optional[NamedValue]:
        """Look a name up in this scope, then in each enclosing scope."""
        env: Optional[Environment] = self
        while env is not None:
            found = env.get_local(name)
            if found is not None:
                return found
            env = env.parent
        return None

    def lookup_local_or_function(self, name: Identifier) -> Optional[NamedValue]:
        """Look a name up locally; from enclosing scopes only functions are visible."""
        found = self.get_local(name)
        if found is not None or self.parent is None:
            return found
        outer = self.parent.lookup(name)
        return outer if isinstance(outer, Function) else None

    def __repr__(self) -> str:
        return f"Environment({self._bindings!r}, parent={self.parent!r})"