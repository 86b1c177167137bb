"""Binary arithmetic operators."""

from __future__ import annotations

from enum import Enum

from constlang.errors import InvalidOperator
from constlang.values import I32_MAX, I32_MIN

OP_CHARS = "+-*/"


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def parse(cls, text: str) -> Operator:
        """Parse a single operator symbol."""
        try:
            return cls(text.strip())
        except ValueError:
            raise InvalidOperator() from None

    def apply(self, lhs: int, rhs: int) -> int:
        """Apply the operator with 32-bit signed integer semantics."""
        if self is Operator.ADD:
            result = lhs + rhs
        elif self is Operator.SUB:
            result = lhs - rhs
        elif self is Operator.MUL:
            result = lhs * rhs
        else:
            if rhs == 0:
                raise ZeroDivisionError("attempt to divide by zero")
            quotient = abs(lhs) // abs(rhs)
            result = quotient if (lhs < 0) == (rhs < 0) else -quotient
        if not I32_MIN <= result <= I32_MAX:
            raise OverflowError(f"attempt to {self.name.lower()} with overflow")
        return result