"""Blocks: braced sequences of statements evaluated in their own scope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from constlang.errors import MissingClosingBrace, MissingOpeningBrace
from constlang.statement import parse_statement
from constlang.values import Empty

if TYPE_CHECKING:
    from constlang.environment import Environment


def _split_statements(text: str) -> Iterator[str]:
    """Split text after every `;`, keeping the separator; drop an empty tail."""
    *terminated, tail = text.split(";")
    yield from (piece + ";" for piece in terminated)
    if tail:
        yield tail


@dataclass(frozen=True)
class Block:
    """A sequence of statements whose last one gives the block's expression."""

    statements: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", tuple(self.statements))

    @classmethod
    def parse(cls, text: str) -> Block:
        """Parse `{ statement; statement; ... }`."""
        text = text.strip()
        if not text.startswith("{"):
            raise MissingOpeningBrace()
        text = text[1:]
        if not text.endswith("}"):
            raise MissingClosingBrace()
        inner = text[:-1].strip()
        return cls(tuple(parse_statement(piece) for piece in _split_statements(inner)))

    def last_expression(self, env: Environment) -> Any:
        """Run every statement in env and return the last one's expression."""
        last: Any = Empty()
        for statement in self.statements:
            last = statement.run(env)
        return last

    def eval(self, env: Environment) -> Any:
        """Evaluate the block in a fresh child scope of env."""
        local = env.create_child()
        return self.last_expression(local).eval(local)