# ironwood

Building blocks for an S-expression evaluation engine. The package provides a
string interner, typed runtime values and an expression tree with a fixed set
of built-in function names.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## String interning

`ironwood.intern.StringInterner` maps each distinct string to a `StringId`.
Ids are given out in order, starting at 0. Interning the same string twice
gives the same id.

```python
from ironwood.intern import StringId, StringInterner

interner = StringInterner()
hello = interner.intern("hello")
world = interner.intern("world")

assert hello == StringId(0)
assert interner.intern("hello") == hello
assert interner.resolve(hello) == "hello"
assert interner.resolve(StringId(99)) is None
assert interner.get_id("world") == world
assert interner.get_id("missing") is None
assert "world" in interner
assert len(interner) == 2
```

A `StringId` is a frozen, ordered dataclass; its number is in `raw`. Creating
one outside the range 0 to 2**32 - 1 raises `ValueError`.

`ironwood.context.Context` owns an interner for use during evaluation:

```python
from ironwood.context import Context

ctx = Context()
country = ctx.intern("country")
assert ctx.resolve(country) == "country"
```

## Values

`ironwood.value.Value` is a symbol, string, integer, float, list of strings or
list of integers. Symbols and strings hold `StringId`s. Values are built with
class methods: `Value.symbol`, `Value.string`, `Value.integer`, `Value.float`,
`Value.string_list` and `Value.integer_list`.

```python
from ironwood.value import Value, ValueType

v = Value.integer(42)
assert v.value_type is ValueType.INTEGER
assert v.is_integer()
assert v.as_integer() == 42
assert v.as_float() is None

tags = Value.string_list([hello, world])
assert tags.as_string_list() == (hello, world)
```

Each `is_*` method tells whether the value is of that kind, and each `as_*`
method returns the payload or `None`. Lists are stored as tuples.

Integers must fit in 64 bits: a larger one raises `OverflowError`, and a
non-integer (including `bool`) raises `TypeError`. Symbols, strings and string
lists accept only `StringId`s and raise `TypeError` otherwise.

Float values compare and hash by their exact bit pattern, so a NaN equals
itself and `0.0` differs from `-0.0`. Values are hashable.

## Expressions

`ironwood.expr` defines the expression tree. An expression is a `Literal`
(holding a `Value`), a `Variable` (holding an interned name), a `Call`
(an interned function name and a tuple of arguments) or a `ListExpr` (a tuple
of items). All are frozen and hashable, and share the `Expr` base with
`is_literal`, `is_variable`, `is_call` and `is_list`.

```python
from ironwood.expr import BuiltinFunction, Call, ListExpr, Literal, Variable

eq = ctx.intern("=")
expr = Call(eq, [Variable(country), Literal(Value.string(ctx.intern("NZ")))])
assert expr.is_call()
assert not expr.is_list()
assert len(expr.args) == 2
```

`BuiltinFunction` lists the function names the engine knows: `and`, `or`,
`not`, `=`, `!=`, `<`, `<=`, `>`, `>=`, `in`, `not-in`, `one-of`, `all-of`,
`none-of` and `geo_within_radius`.

```python
assert BuiltinFunction.from_str("one-of") is BuiltinFunction.ONE_OF
assert BuiltinFunction.from_str("unknown") is None
assert BuiltinFunction.EQUAL.as_str() == "="
```

## What this package does not do

There is no parser that reads S-expression text into `Expr` trees, and no
evaluator: `BuiltinFunction` names the built-in operators but nothing here
carries them out. Expressions are built by hand from the classes above.