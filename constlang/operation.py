"""Binary arithmetic operations between two expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from constlang.errors import InvalidLhs, InvalidRhs, OperatorNotFound
from constlang.expression import is_empty, parse_expression
from constlang.operator import OP_CHARS, Operator
from constlang.values import Number

if TYPE_CHECKING:
    from constlang.environment import Environment


@dataclass(frozen=True)
class Operation:
    """An operator applied to a left-hand and a right-hand expression."""

    lhs: Any
    rhs: Any
    op: Operator

    @classmethod
    def parse(cls, text: str) -> Operation:
        """Split text at its first operator symbol and parse both sides."""
        text = text.strip()
        position = next(
            (index for index, char in enumerate(text) if char in OP_CHARS), None
        )
        if position is None:
            raise OperatorNotFound()
        lhs_text = text[:position]
        op_text = text[position]
        rhs_text = text[position + 1 :]
        lhs = parse_expression(lhs_text)
        if is_empty(lhs):
            raise InvalidLhs()
        rhs = parse_expression(rhs_text)
        if is_empty(rhs):
            raise InvalidRhs()
        return cls(lhs, rhs, Operator.parse(op_text))

    def eval(self, env: Environment) -> Number:
        """Evaluate both sides to numbers and combine them."""
        lhs = self.lhs.eval(env)
        if not isinstance(lhs, Number):
            raise InvalidLhs()
        rhs = self.rhs.eval(env)
        if not isinstance(rhs, Number):
            raise InvalidRhs()
        return Number(self.op.apply(lhs.value, rhs.value))