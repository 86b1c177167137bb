# constlang

constlang is a small expression language for 32-bit signed integers. It has:

- integer literals and the binary operators `+`, `-`, `*` and `/`
- bindings: `let name = expression;`
- blocks: `{ let a = 1; let b = a; b }`. A block's value is its last
  expression, and the block has its own scope inside the enclosing one
- functions: `fn add x y => x + y`, called as `add 1 2`

## Installing

```
pip install .
```

## Interactive prompt

```
constlang
```

The prompt reads standard input one line at a time and treats each line as one
statement. If the statement has a value, the prompt prints it. If it has an
error, the prompt prints `Error: <message>` to standard error. Bindings and
functions you define stay available on later lines. The prompt stops at end
of input (Ctrl-D).

```
> let a = 114;
> let b = 514;
> a + b
628
> fn add x y => x + y
> add a b
628
> { let c = 3; c * 2 }
6
> let d = 1
Error: Expect `;` here
```

## Language notes

- A binding definition must end with `;`. An expression on its own has no
  trailing `;`. An expression followed by `;` gives no value.
- An expression is split at its first operator, and the right-hand side is
  parsed again in the same way. So `2*3+1` gives `8`. There is no operator
  precedence and there are no parentheses.
- Division truncates toward zero. Results must fit in a 32-bit signed integer.
- Bindings and function arguments hold expressions that have not been
  evaluated yet. They are evaluated when they are used.
- When a function has no parameters, a bare call such as `f` is read as a
  binding name, so it fails with `Binding is not found`.
- An operation cannot have a block as an operand.

## Using it from Python

```python
from constlang.parser import Parser

parser = Parser()
parser.parse("let x = 5;")      # returns ""
parser.parse("x * 3")           # returns "15"
```

`Parser.parse` returns what the statement prints: the number as text, or an
empty string when the statement has no value. If the statement cannot be
parsed or a name cannot be resolved, it raises an exception derived from
`constlang.errors.ConstLangError`, whose message is the text the prompt shows.
Arithmetic errors are separate: division by zero raises `ZeroDivisionError`,
and a result outside the 32-bit range raises `OverflowError`.

You can also use the building blocks of the language directly:
`constlang.expression.parse_expression`, `constlang.statement.parse_statement`,
`constlang.environment.Environment`, `constlang.block.Block`,
`constlang.binding_def.BindingDef`, `constlang.function_def.FunctionDef`,
`constlang.function_call.FunctionCall`, `constlang.operation.Operation` and
`constlang.values.Number`.

## What it does not do

The prompt reads from standard input only. It cannot run a script file, and a
statement cannot span more than one line. The prompt catches only
`ConstLangError`. A division by zero or an overflow stops the prompt with a
traceback. The language has integers only: no strings, booleans, comparisons
or control flow.

## Running the tests

```
pip install ".[test]"
pytest
```