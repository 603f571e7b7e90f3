"""Core evaluator for the Skippy interpreter.

Symbols are looked up, S-expressions are reduced, and everything else
evaluates to itself. Failures are Error values travelling through the same
return path as any other result; nothing here raises for a language error.
"""

from __future__ import annotations

import logging

from skippy import LispValue
from skippy.types.environment import Environment
from skippy.types.value import Value, ValueType

logger = logging.getLogger(__name__)


def evaluate(value: LispValue, env: Environment) -> LispValue:
    """Reduce `value` to a result. Takes ownership of `value`."""
    if value.is_a(ValueType.SYM):
        return env.get(value)
    if value.is_a(ValueType.SEXPR):
        return evaluate_sexpr(value, env)
    # Numbers, errors, functions and Q-expressions are self-evaluating
    return value


def evaluate_sexpr(v: LispValue, env: Environment) -> LispValue:
    cells = v.cells

    # Children first, left to right, in place
    for i in range(len(cells)):
        cells[i] = evaluate(cells[i], env)

    # First error wins
    for i, c in enumerate(cells):
        if c.is_a(ValueType.ERR):
            return v.take(i)

    if len(cells) == 0:
        return v
    if len(cells) == 1:
        return v.take(0)

    f = v.pop(0)
    if not f.is_a(ValueType.FUN):
        v.cells.clear()
        return Value.error("First element is not a function!")

    builtin = f.fun
    logger.debug("apply %s to %s", builtin.name, v)
    # The builtin owns the remaining argument list from here on
    return builtin(env, v)
