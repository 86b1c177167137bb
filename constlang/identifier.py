"""Identifiers: names of bindings and functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from constlang.environment import Binding
from constlang.errors import (
    BindingNotFound,
    EmptyIdentifier,
    IdentifierContainsSpecialCharacters,
    IdentifierStartsWithNonLetter,
)

if TYPE_CHECKING:
    from constlang.environment import Environment


def _is_xid_start(char: str) -> bool:
    return char != "_" and char.isidentifier()


def _is_xid_continue(char: str) -> bool:
    return ("a" + char).isidentifier()


@dataclass(frozen=True)
class Identifier:
    """A validated, trimmed name."""

    name: str

    @classmethod
    def parse(cls, text: str) -> Identifier:
        """Parse a name after trimming surrounding whitespace."""
        text = text.strip()
        if not text:
            raise EmptyIdentifier()
        if not _is_xid_start(text[0]):
            raise IdentifierStartsWithNonLetter()
        if not all(_is_xid_continue(char) for char in text):
            raise IdentifierContainsSpecialCharacters()
        return cls(text)

    def lookup(self, env: Environment) -> Any:
        """Return the expression bound to this name, searching enclosing scopes."""
        found = env.lookup(self)
        if not isinstance(found, Binding):
            raise BindingNotFound()
        return found.expression

    def eval(self, env: Environment) -> Any:
        return self.lookup(env).eval(env)

    def __str__(self) -> str:
        return self.name