from __future__ import annotations

import logging
from typing import Callable, Optional

from skippy import SExpression, LispValue
from skippy.reader.parser import parse
from skippy.reader.reader import read
from skippy.types.environment import Environment
from skippy.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates parsing, reading and evaluating Skippy code.
    Keeps one Environment alive across calls so definitions persist.
    """

    def __init__(
        self,
        env: Optional[Environment] = None,
        eval_fn: Callable[[SExpression, Environment], LispValue] = evaluate,
    ):
        self.env: Environment = env if env is not None else Environment.bootstrap()
        self.eval_fn = eval_fn

    def read(self, code: str, filename: str = "<stdin>") -> SExpression:
        """Parse and read `code` without evaluating it.

        Raises SkippySyntaxError if the code does not parse.
        """
        return read(parse(code, filename))

    def eval(self, code: str, filename: str = "<stdin>") -> LispValue:
        """Evaluate one input line; the whole line is a single S-expression."""
        expr = self.read(code, filename)
        logger.debug("read %s", expr)
        return self.eval_fn(expr, self.env)
