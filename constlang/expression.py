"""Parsing of expressions, the things that evaluate to a value."""

from __future__ import annotations

from typing import Any

from constlang.errors import ConstLangError, InvalidExpression
from constlang.identifier import Identifier
from constlang.values import Empty, Number


def _candidates() -> tuple:
    # Imported here because these expression kinds parse their own
    # sub-expressions through this module.
    from constlang.block import Block
    from constlang.function_call import FunctionCall
    from constlang.operation import Operation

    return (Operation, Number, Identifier, Block, FunctionCall)


def parse_expression(text: str) -> Any:
    """Parse text into the first expression kind that accepts it.

    The kinds are tried in order: operation, number, binding name, block,
    function call. Blank text is the empty expression.
    """
    for kind in _candidates():
        try:
            return kind.parse(text)
        except ConstLangError:
            continue
    if not text.strip():
        return Empty()
    raise InvalidExpression()


def is_empty(expression: Any) -> bool:
    """Tell whether an expression is the empty expression."""
    return isinstance(expression, Empty)