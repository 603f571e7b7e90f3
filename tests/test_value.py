import pytest

from skippy.errors import SkippyTypeError
from skippy.types.value import Builtin, Value, ValueType


@pytest.mark.parametrize(
    "value,expected",
    [
        (Value.number(6), "6.000000"),
        (Value.number(-0.5), "-0.500000"),
        (Value.error("Division by zero!"), "Error: Division by zero!"),
        (Value.symbol("foo"), "foo"),
        (Value.function(Builtin("+", lambda env, args: args)), "<function>"),
        (Value.sexpr(), "()"),
        (Value.qexpr(), "{}"),
        (Value.sexpr([Value.symbol("+"), Value.number(1)]), "(+ 1.000000)"),
        (Value.qexpr([Value.qexpr([Value.symbol("a")]), Value.sexpr()]), "{{a} ()}"),
    ]
)
def test_printed_form(value, expected):
    assert str(value) == expected


@pytest.mark.parametrize(
    "value,attr",
    [
        (Value.number(1), "sym"),
        (Value.symbol("a"), "num"),
        (Value.error("e"), "cells"),
        (Value.qexpr(), "err"),
        (Value.number(1), "fun"),
    ]
)
def test_readout_is_tag_checked(value, attr):
    with pytest.raises(SkippyTypeError):
        getattr(value, attr)


def test_only_lists_can_be_retagged():
    v = Value.sexpr()
    v.type = ValueType.QEXPR
    assert v.is_a(ValueType.QEXPR)
    v.type = ValueType.SEXPR
    assert v.is_a(ValueType.SEXPR)
    with pytest.raises(SkippyTypeError):
        v.type = ValueType.NUM
    with pytest.raises(SkippyTypeError):
        Value.number(1).type = ValueType.QEXPR


def test_copy_is_deep():
    inner = Value.qexpr([Value.number(1)])
    outer = Value.qexpr([inner])
    clone = outer.copy()
    assert clone == outer
    assert clone[0] is not inner
    clone[0].add(Value.number(2))
    assert len(inner) == 1


def test_pop_and_take():
    v = Value.sexpr([Value.number(1), Value.number(2), Value.number(3)])
    assert v.pop(1) == Value.number(2)
    assert list(v) == [Value.number(1), Value.number(3)]
    assert v.take(1) == Value.number(3)
    assert len(v) == 0


def test_join_moves_cells():
    a = Value.qexpr([Value.number(1)])
    b = Value.qexpr([Value.number(2), Value.number(3)])
    assert a.join(b) is a
    assert len(a) == 3
    assert len(b) == 0


def test_equality_is_structural():
    assert Value.number(1) == Value.number(1.0)
    assert Value.number(1) != Value.symbol("1")
    assert Value.sexpr() != Value.qexpr()
    assert Value.qexpr([Value.symbol("a")]) == Value.qexpr([Value.symbol("a")])


def test_function_equality_follows_callable():
    def fn(env, args):
        return args
    assert Value.function(Builtin("f", fn)) == Value.function(Builtin("g", fn))
    assert Value.function(Builtin("f", fn)) != Value.function(Builtin("f", lambda e, a: a))


def test_values_are_always_truthy():
    assert Value.sexpr()
    assert Value.number(0)


def test_repr():
    assert repr(Value.number(2)) == "Value(NUM, 2.0)"
    assert repr(Value.function(Builtin("head", None))) == "Value(FUN, 'head')"
