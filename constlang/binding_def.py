"""Binding definitions: `let name = expression`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from constlang.errors import MissingEqualsSign, MissingLetKeyword
from constlang.expression import parse_expression
from constlang.identifier import Identifier
from constlang.values import Empty

if TYPE_CHECKING:
    from constlang.environment import Environment


@dataclass(frozen=True)
class BindingDef:
    """A name bound to an unevaluated expression."""

    name: Identifier
    expression: Any

    @classmethod
    def parse(cls, text: str) -> BindingDef:
        """Parse `let name = expression` (without the trailing semicolon)."""
        text = text.strip()
        if not text.startswith("let "):
            raise MissingLetKeyword()
        rest = text[len("let ") :]
        if "=" not in rest:
            raise MissingEqualsSign()
        name, expression = rest.split("=", 1)
        return cls(Identifier.parse(name), parse_expression(expression))

    def store(self, env: Environment) -> None:
        """Record the binding in env."""
        env.insert_binding(self.name, self.expression)

    def run(self, env: Environment) -> Empty:
        """Store the binding; a definition yields the empty expression."""
        self.store(env)
        return Empty()