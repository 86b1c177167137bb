"""Numbers and the empty value."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from constlang.errors import InvalidNumber

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Number:
    """A 32-bit signed integer; both an expression and a value."""

    value: int

    @classmethod
    def parse(cls, text: str) -> Number:
        """Parse a decimal literal, raising InvalidNumber if it is not one."""
        text = text.strip()
        if not _NUMBER_PATTERN.fullmatch(text):
            raise InvalidNumber()
        value = int(text)
        if not I32_MIN <= value <= I32_MAX:
            raise InvalidNumber()
        return cls(value)

    def eval(self, env: Any) -> Number:
        return self

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Empty:
    """The empty expression, which evaluates to the empty value."""

    def eval(self, env: Any) -> Empty:
        return self

    def __str__(self) -> str:
        return ""


Value = Union[Number, Empty]