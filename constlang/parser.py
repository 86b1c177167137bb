"""A stateful evaluator of statements, one input line at a time."""

from __future__ import annotations

from constlang.environment import Environment
from constlang.statement import parse_statement


class Parser:
    """Parses and evaluates statements against a persistent global scope."""

    def __init__(self) -> None:
        self.environment = Environment()

    def parse(self, text: str) -> str:
        """Run one statement and return its value as text.

        Raises ConstLangError if the statement cannot be parsed or evaluated.
        """
        statement = parse_statement(text)
        expression = statement.run(self.environment)
        return str(expression.eval(self.environment))