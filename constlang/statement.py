"""Statements: binding definitions, function definitions and expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

from constlang.binding_def import BindingDef
from constlang.errors import ConstLangError, InvalidStatement, MissingSemicolon
from constlang.expression import parse_expression
from constlang.function_def import FunctionDef
from constlang.values import Empty

if TYPE_CHECKING:
    from constlang.environment import Environment


@dataclass(frozen=True)
class ExpressionStatement:
    """A statement consisting of a single expression."""

    expression: Any

    def run(self, env: Environment) -> Any:
        """Return the statement's expression unevaluated."""
        return self.expression


Statement = Union[BindingDef, FunctionDef, ExpressionStatement]


def _pre_parse(text: str) -> Optional[Statement]:
    try:
        return ExpressionStatement(parse_expression(text))
    except ConstLangError:
        pass
    try:
        return FunctionDef.parse(text)
    except ConstLangError:
        return None


def _parse_after_strip_semicolon(text: str) -> Optional[Statement]:
    try:
        return BindingDef.parse(text)
    except ConstLangError:
        pass
    try:
        parse_expression(text)
    except ConstLangError:
        return None
    # An expression followed by `;` has no value.
    return ExpressionStatement(Empty())


def parse_statement(text: str) -> Statement:
    """Parse one statement.

    Expressions and function definitions stand alone; a binding definition,
    or an expression whose value is discarded, ends with `;`.
    """
    text = text.strip()
    statement = _pre_parse(text)
    if statement is not None:
        return statement
    if not text.endswith(";"):
        raise MissingSemicolon()
    statement = _parse_after_strip_semicolon(text[:-1].strip())
    if statement is None:
        raise InvalidStatement()
    return statement