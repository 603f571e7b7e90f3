"""Reader: syntax tree -> Value tree.

Works on any node exposing `tag`, `contents` and `children`. Matching on tags
is by substring, so `expr|number|regex` and `number` both read as numbers.
"""

from __future__ import annotations

import math

from skippy import SExpression
from skippy.errors import SkippyTypeError
from skippy.types.value import Value

ROOT_TAG = ">"
DELIMITERS = frozenset({"(", ")", "{", "}"})


def read_num(node) -> Value:
    """Parse a number literal; out-of-range literals become an Error value."""
    text = node.contents
    try:
        x = float(text)
    except ValueError:
        return Value.error("invalid number")
    # float() saturates instead of failing, so detect overflow and underflow
    if math.isinf(x) or (x == 0.0 and any(c in "123456789" for c in text)):
        return Value.error("invalid number")
    return Value.number(x)


def read(node) -> SExpression:
    """Return a freshly owned Value for `node` and everything below it."""
    tag = node.tag
    if "number" in tag:
        return read_num(node)
    if "symbol" in tag:
        return Value.symbol(node.contents)

    if tag == ROOT_TAG or "sexpr" in tag:
        x = Value.sexpr()
    elif "qexpr" in tag:
        x = Value.qexpr()
    else:
        raise SkippyTypeError(f"Cannot read syntax node tagged {tag!r}")

    for child in node.children:
        # Punctuation and anchors carry no value
        if child.contents in DELIMITERS or child.tag == "regex":
            continue
        x.add(read(child))
    return x
