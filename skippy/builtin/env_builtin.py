"""Built-in functions for the Skippy runtime environment.

Every builtin has the signature `(env, args) -> Value` and owns `args`, an
S-expression of already evaluated arguments. A failed precondition returns an
Error value; the arguments are released along with it.
"""
from __future__ import annotations

import logging
import math
import operator
from typing import Callable, Optional

from skippy import LispValue
from skippy.types.environment import Environment
from skippy.types.value import Builtin, Value, ValueType
from skippy.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


# -------------------------------
# Argument checks
# -------------------------------
def check_arity(func: str, args: Value, num: int) -> Optional[Value]:
    if len(args) != num:
        return Value.error(
            f"Function '{func}' passed incorrect number of arguments. "
            f"Got {len(args)}, but expected {num}."
        )
    return None


def check_type(func: str, args: Value, index: int, expect: ValueType) -> Optional[Value]:
    got = args[index].type
    if got is not expect:
        return Value.error(
            f"Function '{func}' passed incorrect type for argument {index}. "
            f"Got {got.type_name}, but expected {expect.type_name}."
        )
    return None


def check_not_empty(func: str, args: Value, index: int = 0) -> Optional[Value]:
    if len(args[index]) == 0:
        return Value.error(f"Function '{func}' passed empty Q-expression!")
    return None


def check_some(func: str, args: Value) -> Optional[Value]:
    if len(args) == 0:
        return Value.error(f"Function '{func}' passed no arguments!")
    return None


def first_error(*checks: Callable[[], Optional[Value]]) -> Optional[Value]:
    """Run checks in order, stopping at the first one that fails."""
    for check in checks:
        err = check()
        if err is not None:
            return err
    return None


def release(args: Value, err: Value) -> Value:
    args.cells.clear()
    return err


# -------------------------------
# List operations
# -------------------------------
def builtin_list(env: Environment, args: Value) -> LispValue:
    """Reinterpret the argument S-expression as a Q-expression."""
    args.type = ValueType.QEXPR
    return args


def builtin_head(env: Environment, args: Value) -> LispValue:
    """Q-expression holding only the first element of the argument."""
    err = first_error(
        lambda: check_arity("head", args, 1),
        lambda: check_type("head", args, 0, ValueType.QEXPR),
        lambda: check_not_empty("head", args),
    )
    if err is not None:
        return release(args, err)
    v = args.take(0)
    del v.cells[1:]
    return v


def builtin_tail(env: Environment, args: Value) -> LispValue:
    """Q-expression without the first element of the argument."""
    err = first_error(
        lambda: check_arity("tail", args, 1),
        lambda: check_type("tail", args, 0, ValueType.QEXPR),
        lambda: check_not_empty("tail", args),
    )
    if err is not None:
        return release(args, err)
    v = args.take(0)
    v.pop(0)
    return v


def builtin_eval(env: Environment, args: Value) -> LispValue:
    """Evaluate a Q-expression as if it were an S-expression."""
    err = first_error(
        lambda: check_arity("eval", args, 1),
        lambda: check_type("eval", args, 0, ValueType.QEXPR),
    )
    if err is not None:
        return release(args, err)
    x = args.take(0)
    x.type = ValueType.SEXPR
    return evaluate(x, env)


def builtin_join(env: Environment, args: Value) -> LispValue:
    """Concatenate Q-expressions in argument order."""
    err = check_some("join", args)
    for i in range(len(args)):
        if err is not None:
            break
        err = check_type("join", args, i, ValueType.QEXPR)
    if err is not None:
        return release(args, err)
    x = args.pop(0)
    while len(args):
        x.join(args.pop(0))
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def _mod(x: float, y: float) -> float:
    # Truncate to integers, remainder takes the sign of the dividend
    a, b = math.trunc(x), math.trunc(y)
    r = abs(a) % abs(b)
    return float(-r if a < 0 else r)


def _min(x: float, y: float) -> float:
    return x if x <= y else y


def _max(x: float, y: float) -> float:
    return y if x <= y else x


OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": _mod,
    "min": _min,
    "max": _max,
}


def builtin_op(env: Environment, args: Value, op: str) -> LispValue:
    """Left fold of `op` over numeric arguments, starting from the first."""
    err = check_some(op, args)
    for i in range(len(args)):
        if err is not None:
            break
        err = check_type(op, args, i, ValueType.NUM)
    if err is not None:
        return release(args, err)

    x = args.pop(0)
    # Unary minus negates
    if op == "-" and len(args) == 0:
        x.num = -x.num

    fn = OPERATORS[op]
    while len(args):
        y = args.pop(0)
        if op == "%" and not (math.isfinite(x.num) and math.isfinite(y.num)):
            return release(args, Value.error(
                "Function '%' cannot truncate non-finite number!"
            ))
        if (op == "/" and y.num == 0) or (op == "%" and math.trunc(y.num) == 0):
            return release(args, Value.error("Division by zero!"))
        x.num = fn(x.num, y.num)
    return x


def builtin_add(env: Environment, args: Value) -> LispValue:
    return builtin_op(env, args, "+")


def builtin_sub(env: Environment, args: Value) -> LispValue:
    return builtin_op(env, args, "-")


def builtin_mul(env: Environment, args: Value) -> LispValue:
    return builtin_op(env, args, "*")


def builtin_div(env: Environment, args: Value) -> LispValue:
    return builtin_op(env, args, "/")


def builtin_mod(env: Environment, args: Value) -> LispValue:
    return builtin_op(env, args, "%")


def builtin_min(env: Environment, args: Value) -> LispValue:
    return builtin_op(env, args, "min")


def builtin_max(env: Environment, args: Value) -> LispValue:
    return builtin_op(env, args, "max")


# -------------------------------
# Variables
# -------------------------------
def builtin_def(env: Environment, args: Value) -> LispValue:
    """(def {a b} 1 2) binds a and b in the global environment, returns ()."""
    err = first_error(
        lambda: check_some("def", args),
        lambda: check_type("def", args, 0, ValueType.QEXPR),
    )
    if err is not None:
        return release(args, err)

    syms = args[0]
    if not all(s.is_a(ValueType.SYM) for s in syms):
        return release(args, Value.error("Function 'def' cannot define non-symbol!"))
    if len(syms) != len(args) - 1:
        return release(args, Value.error(
            "Function 'def' cannot define incorrect number of values to symbols!"
        ))

    for i, s in enumerate(syms, start=1):
        env.put(s, args[i])
    args.cells.clear()
    return Value.sexpr()


# -------------------------------
# Registration
# -------------------------------
BUILTINS: list[tuple[tuple[str, ...], Callable[[Environment, Value], LispValue]]] = [
    # Variable functions
    (("def",), builtin_def),
    # List functions
    (("list",), builtin_list),
    (("head",), builtin_head),
    (("tail",), builtin_tail),
    (("eval",), builtin_eval),
    (("join",), builtin_join),
    # Mathematical functions
    (("+", "add"), builtin_add),
    (("-", "sub"), builtin_sub),
    (("*", "mul"), builtin_mul),
    (("/", "div"), builtin_div),
    (("%", "mod"), builtin_mod),
    (("min",), builtin_min),
    (("max",), builtin_max),
]


def register(env: Environment) -> None:
    """Bind every builtin, under each of its names, as a function value."""
    for names, fn in BUILTINS:
        builtin = Builtin(names[0], fn)
        for name in names:
            env.put(name, Value.function(builtin))
    logger.debug("registered %d builtin names", len(env))
