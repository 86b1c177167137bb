import pytest

from constlang.errors import (
    BindingDefError,
    BindingError,
    BindingNotFound,
    BlockError,
    ConstLangError,
    EmptyFunctionCall,
    EmptyIdentifier,
    ExpressionError,
    FunctionCallError,
    FunctionDefError,
    FunctionNotFound,
    IdentifierContainsSpecialCharacters,
    IdentifierError,
    IdentifierStartsWithNonLetter,
    InvalidExpression,
    InvalidLhs,
    InvalidNumber,
    InvalidOperator,
    InvalidRhs,
    InvalidStatement,
    MissingArrow,
    MissingClosingBrace,
    MissingEqualsSign,
    MissingFnKeyword,
    MissingLetKeyword,
    MissingOpeningBrace,
    MissingSemicolon,
    NumberError,
    OperationError,
    OperatorError,
    OperatorNotFound,
    StatementError,
    WrongParameterCount,
)


def test_default_messages():
    cases = [
        (MissingLetKeyword(), "Expect `let` here"),
        (MissingEqualsSign(), "Expect `=` here"),
        (InvalidOperator(), "Invalid operator"),
        (IdentifierStartsWithNonLetter(), "Identifier must start with a letter"),
        (
            IdentifierContainsSpecialCharacters(),
            "Identifier must not contain special characters",
        ),
        (EmptyIdentifier(), "Identifier must not be empty"),
        (InvalidExpression(), "Invalid expression"),
        (MissingSemicolon(), "Expect `;` here"),
        (InvalidStatement(), "Invalid statement"),
        (OperatorNotFound(), "Operator is not found"),
        (InvalidLhs(), "Expect a number in the left-hand side"),
        (InvalidRhs(), "Expect a number in the right-hand side"),
        (InvalidNumber(), "Invalid number"),
        (BindingNotFound(), "Binding is not found"),
        (MissingOpeningBrace(), "Missing opening brace `{`"),
        (MissingClosingBrace(), "Missing closing brace `}`"),
        (MissingFnKeyword(), "Expect `fn` here"),
        (MissingArrow(), "Expect `=>` here"),
        (FunctionNotFound(), "Function call is not found"),
        (EmptyFunctionCall(), "Expect a function call here"),
    ]
    for error, message in cases:
        assert str(error) == message
        assert error.message == message


def test_caught_by_category_and_base():
    cases = [
        (MissingLetKeyword(), BindingDefError),
        (MissingEqualsSign(), BindingDefError),
        (InvalidOperator(), OperatorError),
        (IdentifierStartsWithNonLetter(), IdentifierError),
        (IdentifierContainsSpecialCharacters(), IdentifierError),
        (EmptyIdentifier(), IdentifierError),
        (InvalidExpression(), ExpressionError),
        (MissingSemicolon(), StatementError),
        (InvalidStatement(), StatementError),
        (OperatorNotFound(), OperationError),
        (InvalidLhs(), OperationError),
        (InvalidRhs(), OperationError),
        (InvalidNumber(), NumberError),
        (BindingNotFound(), BindingError),
        (MissingOpeningBrace(), BlockError),
        (MissingClosingBrace(), BlockError),
        (MissingFnKeyword(), FunctionDefError),
        (MissingArrow(), FunctionDefError),
        (FunctionNotFound(), FunctionCallError),
        (EmptyFunctionCall(), FunctionCallError),
    ]
    for error, category in cases:
        with pytest.raises(category) as info:
            raise error
        assert info.value is error
        assert isinstance(info.value, ConstLangError)


def _caught_as(error):
    try:
        raise error
    except BlockError:
        return "block"
    except OperationError:
        return "operation"
    except BindingDefError:
        return "binding_def"
    except NumberError:
        return "number"


def test_categories_are_distinct():
    assert _caught_as(MissingLetKeyword()) == "binding_def"
    assert _caught_as(InvalidNumber()) == "number"
    assert _caught_as(MissingClosingBrace()) == "block"
    assert _caught_as(InvalidLhs()) == "operation"


def test_wrong_parameter_count_message():
    error = WrongParameterCount(2, 3)
    assert error.expected == 2
    assert error.got == 3
    assert str(error) == "Wrong parameter count, expected 2, got 3"


def test_wrong_parameter_count_is_function_call_error():
    error = WrongParameterCount(1, 0)
    assert isinstance(error, FunctionCallError)
    assert isinstance(error, ConstLangError)
    assert error.expected == 1
    assert error.got == 0
    assert str(error) == "Wrong parameter count, expected 1, got 0"


def test_custom_message_overrides_default():
    error = InvalidExpression("custom")
    assert str(error) == "custom"
    assert InvalidExpression().message == "Invalid expression"