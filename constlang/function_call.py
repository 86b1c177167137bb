"""Calls of named functions with whitespace-separated arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from constlang.environment import Function
from constlang.errors import EmptyFunctionCall, FunctionNotFound, WrongParameterCount
from constlang.expression import parse_expression
from constlang.identifier import Identifier

if TYPE_CHECKING:
    from constlang.environment import Environment


@dataclass(frozen=True)
class FunctionCall:
    """A function name followed by argument expressions."""

    name: Identifier
    parameters: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @classmethod
    def parse(cls, text: str) -> FunctionCall:
        """Parse `name arg1 arg2 ...`."""
        parts = text.split()
        if not parts:
            raise EmptyFunctionCall()
        name, *arguments = parts
        return cls(
            Identifier.parse(name),
            tuple(parse_expression(argument) for argument in arguments),
        )

    def bind(self, env: Environment) -> Any:
        """Bind the arguments to the parameters in env and return the body."""
        function = env.lookup(self.name)
        if not isinstance(function, Function):
            raise FunctionNotFound()
        if len(function.parameters) != len(self.parameters):
            raise WrongParameterCount(len(function.parameters), len(self.parameters))
        for parameter, argument in zip(function.parameters, self.parameters):
            env.insert_binding(parameter, argument)
        return function.body

    def eval(self, env: Environment) -> Any:
        """Evaluate the call in a fresh child scope of env."""
        local = env.create_child()
        return self.bind(local).eval(local)