"""Function definitions: `fn name params... => body`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from constlang.errors import IdentifierError, MissingArrow, MissingFnKeyword
from constlang.expression import parse_expression
from constlang.identifier import Identifier
from constlang.values import Empty

if TYPE_CHECKING:
    from constlang.environment import Environment


def _valid_identifiers(words: list) -> Iterator[Identifier]:
    """Yield the words that are valid identifiers, skipping the rest."""
    for word in words:
        try:
            yield Identifier.parse(word)
        except IdentifierError:
            continue


@dataclass(frozen=True)
class FunctionDef:
    """A named function with parameter names and a body expression."""

    name: Identifier
    parameters: tuple
    body: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @classmethod
    def parse(cls, text: str) -> FunctionDef:
        """Parse `fn name param... => body`; invalid parameter names are ignored."""
        text = text.strip()
        if not text.startswith("fn "):
            raise MissingFnKeyword()
        rest = text[len("fn ") :]
        if "=>" not in rest:
            raise MissingArrow()
        head, body_text = rest.split("=>", 1)
        stripped = head.strip()
        if " " in stripped:
            name, parameter_text = stripped.split(" ", 1)
        else:
            name, parameter_text = head, ""
        parameters = tuple(_valid_identifiers(parameter_text.split()))
        body = parse_expression(body_text)
        return cls(Identifier.parse(name), parameters, body)

    def store(self, env: Environment) -> None:
        """Record the function in env."""
        env.insert_function(self.name, self.parameters, self.body)

    def run(self, env: Environment) -> Empty:
        """Store the function; a definition yields the empty expression."""
        self.store(env)
        return Empty()