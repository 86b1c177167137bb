"""Exceptions raised while parsing and evaluating programs."""

from __future__ import annotations


class ConstLangError(Exception):
    """Base class of every error raised by the language."""

    default_message = "Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class BindingDefError(ConstLangError):
    """A binding definition could not be parsed."""


class MissingLetKeyword(BindingDefError):
    default_message = "Expect `let` here"


class MissingEqualsSign(BindingDefError):
    default_message = "Expect `=` here"


class OperatorError(ConstLangError):
    """An operator could not be parsed."""


class InvalidOperator(OperatorError):
    default_message = "Invalid operator"


class IdentifierError(ConstLangError):
    """An identifier could not be parsed."""


class IdentifierStartsWithNonLetter(IdentifierError):
    default_message = "Identifier must start with a letter"


class IdentifierContainsSpecialCharacters(IdentifierError):
    default_message = "Identifier must not contain special characters"


class EmptyIdentifier(IdentifierError):
    default_message = "Identifier must not be empty"


class ExpressionError(ConstLangError):
    """An expression could not be parsed."""


class InvalidExpression(ExpressionError):
    default_message = "Invalid expression"


class StatementError(ConstLangError):
    """A statement could not be parsed."""


class MissingSemicolon(StatementError):
    default_message = "Expect `;` here"


class InvalidStatement(StatementError):
    default_message = "Invalid statement"


class OperationError(ConstLangError):
    """An arithmetic operation could not be parsed or evaluated."""


class OperatorNotFound(OperationError):
    default_message = "Operator is not found"


class InvalidLhs(OperationError):
    default_message = "Expect a number in the left-hand side"


class InvalidRhs(OperationError):
    default_message = "Expect a number in the right-hand side"


class NumberError(ConstLangError):
    """A number literal could not be parsed."""


class InvalidNumber(NumberError):
    default_message = "Invalid number"


class BindingError(ConstLangError):
    """A binding could not be resolved."""


class BindingNotFound(BindingError):
    default_message = "Binding is not found"


class BlockError(ConstLangError):
    """A block could not be parsed."""


class MissingOpeningBrace(BlockError):
    default_message = "Missing opening brace `{`"


class MissingClosingBrace(BlockError):
    default_message = "Missing closing brace `}`"


class FunctionDefError(ConstLangError):
    """A function definition could not be parsed."""


class MissingFnKeyword(FunctionDefError):
    default_message = "Expect `fn` here"


class MissingArrow(FunctionDefError):
    default_message = "Expect `=>` here"


class FunctionCallError(ConstLangError):
    """A function call could not be parsed or resolved."""


class FunctionNotFound(FunctionCallError):
    default_message = "Function call is not found"


class WrongParameterCount(FunctionCallError):
    """A function was called with the wrong number of arguments."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Wrong parameter count, expected {expected}, got {got}")


class EmptyFunctionCall(FunctionCallError):
    default_message = "Expect a function call here"