from types import SimpleNamespace

import pytest

from skippy.errors import SkippyTypeError
from skippy.reader.parser import AstNode, parse
from skippy.reader.reader import read
from skippy.types.value import Value, ValueType


def node(tag, contents="", children=()):
    return SimpleNamespace(tag=tag, contents=contents, children=list(children))


def test_number_and_symbol_leaves():
    assert read(AstNode("expr|number|regex", "-3.5")) == Value.number(-3.5)
    assert read(AstNode("number", "7")) == Value.number(7)
    assert read(AstNode("expr|symbol|regex", "add")) == Value.symbol("add")


@pytest.mark.parametrize(
    "literal",
    ["1" + "0" * 400, "-" + "9" * 400, "0." + "0" * 400 + "1"],
)
def test_out_of_range_number(literal):
    assert read(AstNode("expr|number|regex", literal)) == Value.error("invalid number")


def test_zero_is_in_range():
    assert read(AstNode("expr|number|regex", "0.000")) == Value.number(0)


def test_root_reads_as_sexpr():
    result = read(parse("+ 1 2"))
    assert result.is_a(ValueType.SEXPR)
    assert list(result) == [Value.symbol("+"), Value.number(1), Value.number(2)]


def test_punctuation_is_skipped():
    tree = node(">", children=[
        node("regex"),
        node("expr|qexpr|>", children=[
            node("char", "{"),
            node("expr|number|regex", "1"),
            node("expr|sexpr|>", children=[node("char", "("), node("char", ")")]),
            node("char", "}"),
        ]),
        node("regex"),
    ])
    result = read(tree)
    assert result == Value.sexpr([Value.qexpr([Value.number(1), Value.sexpr()])])


def test_read_is_freshly_owned():
    tree = parse("{a b}")
    first, second = read(tree), read(tree)
    first[0].add(Value.symbol("c"))
    assert len(second[0]) == 2


def test_unknown_node():
    with pytest.raises(SkippyTypeError):
        read(node("string", '"hi"'))
