import pytest

from constlang.binding_def import BindingDef
from constlang.block import Block
from constlang.environment import Binding, Environment
from constlang.errors import (
    InvalidStatement,
    MissingClosingBrace,
    MissingOpeningBrace,
    MissingSemicolon,
)
from constlang.identifier import Identifier
from constlang.statement import ExpressionStatement
from constlang.values import Empty, Number


def test_parse_empty_block():
    assert Block.parse("{}") == Block(())


def test_parse_empty_with_whitespace():
    assert Block.parse("{   \n   \n     }") == Block(())


def test_parse_with_one_statement():
    assert Block.parse("{ 11451 }") == Block((ExpressionStatement(Number(11451)),))


def test_parse_with_one_expr():
    assert Block.parse("{ a }") == Block((ExpressionStatement(Identifier.parse("a")),))


def test_parse_with_statements():
    block = Block.parse(
        """{ let a = 11451;
        let b = a;
        b}"""
    )
    assert block == Block(
        (
            BindingDef.parse("let a = 11451"),
            BindingDef.parse("let b = a"),
            ExpressionStatement(Identifier.parse("b")),
        )
    )


def test_parse_with_one_line_but_multiple_statements():
    assert Block.parse("{let a = 1;a}") == Block(
        (
            BindingDef.parse("let a = 1"),
            ExpressionStatement(Identifier.parse("a")),
        )
    )


@pytest.mark.parametrize(
    "text, error",
    [
        ("{let a = 11451", MissingClosingBrace),
        ("let a = 11451;}", MissingOpeningBrace),
        ("", MissingOpeningBrace),
    ],
)
def test_parse_without_braces(text, error):
    with pytest.raises(error):
        Block.parse(text)


def test_parse_with_error_in_statement():
    with pytest.raises(MissingSemicolon):
        Block.parse("{let a = 11451}")
    with pytest.raises(InvalidStatement):
        Block.parse("{let 1 = 5;}")


def test_last_expression_of_empty_block():
    assert Block(()).last_expression(Environment()) == Empty()


def test_last_expression_from_lines():
    local = Environment()
    block = Block.parse("{let a = 11451; let b = 11452; b}")
    assert block.last_expression(local) == Identifier.parse("b")
    assert local.lookup(Identifier.parse("a")) == Binding(Number(11451))
    assert local.lookup(Identifier.parse("b")) == Binding(Number(11452))


def test_last_expression_from_expressions():
    assert Block.parse("{114; 514; 1919;}").last_expression(Environment()) == Empty()
    assert Block.parse("{114; 514; 1919; 810}").last_expression(
        Environment()
    ) == Number(810)


def test_nested_block_is_not_parsed():
    with pytest.raises(InvalidStatement):
        Block.parse("{let a = 11451;{let b = 11452; b}}")


def test_eval_uses_child_scope():
    env = Environment()
    BindingDef.parse("let a = 11451").store(env)
    assert Block.parse("{ let b = a; b }").eval(env) == Number(11451)
    assert env.lookup(Identifier.parse("b")) is None


def test_eval_single_expression():
    assert Block.parse("{ 514 }").eval(Environment()) == Number(514)