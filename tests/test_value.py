import math

import pytest

from ironwood.intern import StringId
from ironwood.value import Value, ValueType


def test_symbol():
    sym = Value.symbol(StringId(0))
    assert sym.value_type == ValueType.SYMBOL
    assert sym.is_symbol()
    assert not sym.is_string()
    assert sym.as_symbol() == StringId(0)
    assert sym.as_string() is None


def test_string():
    s = Value.string(StringId(1))
    assert s.value_type == ValueType.STRING
    assert s.is_string()
    assert not s.is_symbol()


def test_integer():
    i = Value.integer(42)
    assert i.value_type == ValueType.INTEGER
    assert i.is_integer()
    assert i.as_integer() == 42


def test_float():
    f = Value.float(40.5)
    assert f.value_type == ValueType.FLOAT
    assert f.is_float()
    assert f.as_float() == 40.5


def test_string_list():
    sl = [StringId(0), StringId(1)]
    string_list = Value.string_list(sl)
    assert string_list.value_type == ValueType.STRING_LIST
    assert string_list.is_string_list()
    assert list(string_list.as_string_list()) == sl


def test_integer_list():
    il = [1, 2, 3]
    int_list = Value.integer_list(il)
    assert int_list.value_type == ValueType.INTEGER_LIST
    assert int_list.is_integer_list()
    assert list(int_list.as_integer_list()) == il


def test_symbol_and_string_differ():
    assert Value.symbol(StringId(0)) != Value.string(StringId(0))


def test_float_equality_by_bits():
    assert Value.float(math.nan) == Value.float(math.nan)
    assert Value.float(0.0) != Value.float(-0.0)
    assert hash(Value.float(1.5)) == hash(Value.float(1.5))


def test_integer_and_float_differ():
    assert Value.integer(1) != Value.float(1.0)


def test_values_usable_as_keys():
    table = {Value.integer_list([1, 2]): "a"}
    assert table[Value.integer_list([1, 2])] == "a"


def test_integer_range_checked():
    with pytest.raises(OverflowError):
        Value.integer(2**63)
    with pytest.raises(TypeError):
        Value.integer("1")


def test_string_requires_id():
    with pytest.raises(TypeError):
        Value.string("hello")