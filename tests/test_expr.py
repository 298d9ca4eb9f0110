import pytest

from ironwood.expr import BuiltinFunction, Call, ListExpr, Literal, Variable
from ironwood.intern import StringId
from ironwood.value import Value


def test_builtin_functions():
    assert BuiltinFunction.from_str("and") == BuiltinFunction.AND
    assert BuiltinFunction.from_str("=") == BuiltinFunction.EQUAL
    assert BuiltinFunction.from_str("one-of") == BuiltinFunction.ONE_OF
    assert BuiltinFunction.from_str("unknown") is None

    assert BuiltinFunction.AND.as_str() == "and"
    assert BuiltinFunction.EQUAL.as_str() == "="


@pytest.mark.parametrize("fn", list(BuiltinFunction))
def test_builtin_round_trip(fn):
    assert BuiltinFunction.from_str(fn.as_str()) is fn


def test_builtin_spellings():
    assert BuiltinFunction.NOT_IN.as_str() == "not-in"
    assert BuiltinFunction.GEO_WITHIN_RADIUS.as_str() == "geo_within_radius"
    assert len(BuiltinFunction) == 15


def test_expr_kinds():
    lit = Literal(Value.integer(1))
    var = Variable(StringId(0))
    call = Call(StringId(1), [lit, var])
    lst = ListExpr([lit])

    assert [lit.is_literal(), lit.is_variable(), lit.is_call(), lit.is_list()] == [
        True, False, False, False]
    assert [var.is_literal(), var.is_variable(), var.is_call(), var.is_list()] == [
        False, True, False, False]
    assert [call.is_literal(), call.is_variable(), call.is_call(), call.is_list()] == [
        False, False, True, False]
    assert [lst.is_literal(), lst.is_variable(), lst.is_call(), lst.is_list()] == [
        False, False, False, True]


def test_expr_equality_and_hash():
    a = Call(StringId(1), [Literal(Value.float(2.5)), Variable(StringId(0))])
    b = Call(StringId(1), (Literal(Value.float(2.5)), Variable(StringId(0))))
    assert a == b
    assert hash(a) == hash(b)
    assert a.args == (Literal(Value.float(2.5)), Variable(StringId(0)))
    assert a != Call(StringId(2), a.args)