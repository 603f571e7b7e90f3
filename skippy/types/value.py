"""Tagged runtime values for Skippy.

A Value holds exactly one of six variants, selected by its `type` tag:
numbers, errors, symbols, native functions, S-expressions (eager lists)
and Q-expressions (quoted lists). Payload readout is tag-checked; reading
the wrong payload raises SkippyTypeError.

Lists exclusively own their cells. Moving a cell between lists goes through
`pop`, `take` and `join`; sharing goes through `copy`, which is deep.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Iterator, NamedTuple

from skippy.errors import SkippyTypeError


class ValueType(Enum):
    ERR = "Error"
    NUM = "Number"
    SYM = "Symbol"
    FUN = "Function"
    SEXPR = "S-Expression"
    QEXPR = "Q-Expression"

    @property
    def type_name(self) -> str:
        return self.value


LIST_TYPES = (ValueType.SEXPR, ValueType.QEXPR)


class Builtin(NamedTuple):
    """A native operation: the name it was registered under and its callable."""
    name: str
    fn: Callable[..., "Value"]

    def __call__(self, env, args: "Value") -> "Value":
        return self.fn(env, args)


class Value:
    __slots__ = ("_type", "_payload")

    def __init__(self, type: ValueType, payload):
        self._type = type
        self._payload = payload

    # ---------------------------------
    # Constructors
    # ---------------------------------
    @classmethod
    def number(cls, x: float) -> Value:
        return cls(ValueType.NUM, float(x))

    @classmethod
    def error(cls, message: str) -> Value:
        return cls(ValueType.ERR, message)

    @classmethod
    def symbol(cls, name: str) -> Value:
        return cls(ValueType.SYM, name)

    @classmethod
    def function(cls, builtin: Builtin) -> Value:
        return cls(ValueType.FUN, builtin)

    @classmethod
    def sexpr(cls, items: Iterable[Value] = ()) -> Value:
        return cls(ValueType.SEXPR, list(items))

    @classmethod
    def qexpr(cls, items: Iterable[Value] = ()) -> Value:
        return cls(ValueType.QEXPR, list(items))

    # ---------------------------------
    # Tag
    # ---------------------------------
    @property
    def type(self) -> ValueType:
        return self._type

    @type.setter
    def type(self, new_type: ValueType) -> None:
        # Only the two list kinds may be reinterpreted as each other
        if self._type not in LIST_TYPES or new_type not in LIST_TYPES:
            raise SkippyTypeError(
                f"Cannot retag {self._type.type_name} as {new_type.type_name}"
            )
        self._type = new_type

    def is_a(self, t: ValueType) -> bool:
        return self._type is t

    @property
    def is_list(self) -> bool:
        return self._type in LIST_TYPES

    def _expect(self, *types: ValueType):
        if self._type not in types:
            expected = " or ".join(t.type_name for t in types)
            raise SkippyTypeError(f"Expected {expected}, got {self._type.type_name}")
        return self._payload

    # ---------------------------------
    # Tag-checked payloads
    # ---------------------------------
    @property
    def num(self) -> float:
        return self._expect(ValueType.NUM)

    @num.setter
    def num(self, x: float) -> None:
        self._expect(ValueType.NUM)
        self._payload = float(x)

    @property
    def err(self) -> str:
        return self._expect(ValueType.ERR)

    @property
    def sym(self) -> str:
        return self._expect(ValueType.SYM)

    @property
    def fun(self) -> Builtin:
        return self._expect(ValueType.FUN)

    @property
    def cells(self) -> list[Value]:
        return self._expect(*LIST_TYPES)

    # ---------------------------------
    # List operations (ownership transfer)
    # ---------------------------------
    def add(self, x: Value) -> Value:
        """Append `x`, which now belongs to this list."""
        self.cells.append(x)
        return self

    def pop(self, i: int) -> Value:
        """Detach and return the cell at index `i`."""
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Detach the cell at `i` and release every other cell."""
        x = self.pop(i)
        self.cells.clear()
        return x

    def join(self, other: Value) -> Value:
        """Move all of `other`'s cells onto the end of this list."""
        cells = other.cells
        self.cells.extend(cells)
        cells.clear()
        return self

    def copy(self) -> Value:
        if self.is_list:
            return Value(self._type, [c.copy() for c in self._payload])
        # Leaf payloads (float, str, Builtin) are immutable
        return Value(self._type, self._payload)

    def __bool__(self) -> bool:
        # Every Value is truthy; emptiness is asked for with len()
        return True

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    # ---------------------------------
    # Comparison and printing
    # ---------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self._type is ValueType.FUN:
            return self._payload.fn is other._payload.fn
        return self._payload == other._payload

    __hash__ = None

    def __str__(self) -> str:
        t = self._type
        if t is ValueType.NUM:
            return f"{self._payload:f}"
        if t is ValueType.ERR:
            return f"Error: {self._payload}"
        if t is ValueType.SYM:
            return self._payload
        if t is ValueType.FUN:
            return "<function>"
        open_, close = ("(", ")") if t is ValueType.SEXPR else ("{", "}")
        return open_ + " ".join(str(c) for c in self._payload) + close

    def __repr__(self) -> str:
        if self.is_list:
            return f"Value({self._type.name}, {self._payload!r})"
        if self._type is ValueType.FUN:
            return f"Value(FUN, {self._payload.name!r})"
        return f"Value({self._type.name}, {self._payload!r})"
