"""Runtime environment for Skippy.

The Environment stores bindings of symbol names to Values in a single flat,
global frame. Values cross the boundary by copy in both directions, so a
caller can consume whatever `get` hands back and keep ownership of whatever
it passes to `put`.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Union

from skippy.types.value import Value, ValueType

logger = logging.getLogger(__name__)


class Environment:
    """Flat mapping from symbol names to Values."""

    __slots__ = ("vars",)

    def __init__(self):
        # Insertion ordered; only lookup by name matters for evaluation
        self.vars: dict[str, Value] = {}

    @classmethod
    def bootstrap(cls) -> Environment:
        """Return a fresh environment holding every builtin."""
        # Lazy import to avoid circular imports
        from skippy.builtin.env_builtin import register
        env = cls()
        register(env)
        return env

    @staticmethod
    def _name(name: Union[str, Value]) -> str:
        return name.sym if isinstance(name, Value) else name

    def get(self, name: Union[str, Value]) -> Value:
        """Return a copy of the value bound to `name`, or an Error value."""
        key = self._name(name)
        v = self.vars.get(key)
        if v is None:
            return Value.error(f"Unbound symbol '{key}'!")
        return v.copy()

    def put(self, name: Union[str, Value], value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any existing binding."""
        key = self._name(name)
        if logger.isEnabledFor(logging.DEBUG):
            action = "rebind" if key in self.vars else "bind"
            logger.debug("%s %s = %s", action, key, value)
        self.vars[key] = value.copy()

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: Union[str, Value]) -> bool:
        return self._name(name) in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __str__(self) -> str:
        """Compact single-frame view; builtins are listed by name only."""
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                if v.is_a(ValueType.FUN):
                    buffer.write(k)
                else:
                    buffer.write(f"{k}: {v}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
