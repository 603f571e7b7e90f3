import pytest

from skippy.types.value import Value
from skippy.builtin.env_builtin import builtin_def


def test_binding_persists_across_lines(run):
    assert run("(def {x} 5)") == "()"
    assert run("x") == "5.000000"
    assert run("(+ x 1)") == "6.000000"


def test_redefinition_overwrites(run, env):
    run("(def {x} 5)")
    run("(def {x} 9)")
    assert run("x") == "9.000000"
    assert env.names().count("x") == 1


def test_define_several(run):
    assert run("(def {a b} 1 2)") == "()"
    assert run("(+ a b)") == "3.000000"


def test_define_from_evaluated_symbol_list(run):
    run("(def {arglist} {a b x y})")
    assert run("arglist") == "{a b x y}"
    run("(def arglist 1 2 3 4)")
    assert run("(list a b x y)") == "{1.000000 2.000000 3.000000 4.000000}"


def test_rebind_builtin_name(run):
    run("(def {plus} +)")
    assert run("(plus 1 2)") == "3.000000"
    run("(def {head} tail)")
    assert run("(head {1 2})") == "{2.000000}"


def test_define_list_value(run):
    run("(def {xs} {1 2 3})")
    assert run("(eval (join {+} xs))") == "6.000000"
    # the binding is untouched by the previous evaluation
    assert run("xs") == "{1.000000 2.000000 3.000000}"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(def {a} 1 2)",
         "Error: Function 'def' cannot define incorrect number of values to symbols!"),
        ("(def {a b} 1)",
         "Error: Function 'def' cannot define incorrect number of values to symbols!"),
        ("(def {1} 2)", "Error: Function 'def' cannot define non-symbol!"),
        ("(def {a {b}} 1 2)", "Error: Function 'def' cannot define non-symbol!"),
        ("(def 1 2)",
         "Error: Function 'def' passed incorrect type for argument 0. "
         "Got Number, but expected Q-Expression."),
    ]
)
def test_def_errors(run, source, expected):
    assert run(source) == expected


def test_failed_def_binds_nothing(run, env):
    before = len(env)
    run("(def {a b} 1)")
    assert len(env) == before
    assert run("a") == "Error: Unbound symbol 'a'!"


def test_def_releases_arguments(env):
    args = Value.sexpr([Value.qexpr([Value.symbol("z")]), Value.number(7)])
    assert builtin_def(env, args) == Value.sexpr()
    assert len(args) == 0
    assert env.get("z") == Value.number(7)


def test_def_with_no_arguments(env):
    result = builtin_def(env, Value.sexpr())
    assert result == Value.error("Function 'def' passed no arguments!")
