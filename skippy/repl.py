"""Interactive read-eval-print loop for Skippy.

One line is parsed, evaluated and printed before the next is read. Parse
failures are reported and the loop carries on; Ctrl+C or end of input ends
the session.
"""

from __future__ import annotations

import logging
import readline
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from skippy import __version__
from skippy import config
from skippy.errors import SkippySyntaxError
from skippy.interpreter import Interpreter

logger = logging.getLogger(__name__)


class Repl:
    PROMPT = "skippy> "

    def __init__(
        self,
        interp: Optional[Interpreter] = None,
        *,
        history_file: Optional[Path] = None,
        history_length: int = 1000,
        input_fn: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ):
        self.interp = interp if interp is not None else Interpreter()
        self.history_file = history_file
        self.history_length = history_length
        self.input_fn = input_fn
        self.out = out if out is not None else sys.stdout
        self.hlen = 0

    def complete(self, text: str, state: int) -> Optional[str]:
        m = [k for k in self.interp.env.names() if k.startswith(text)]
        try:
            return m[state]
        except IndexError:
            return None

    def start(self) -> None:
        """Set up completion and load the history file, if any."""
        readline.set_history_length(self.history_length)
        readline.set_completer(self.complete)
        readline.set_completer_delims(" (){}")
        readline.parse_and_bind("tab: complete")
        # Repl.input adds each line once itself
        readline.set_auto_history(False)
        if self.history_file is None:
            return
        try:
            readline.read_history_file(self.history_file)
            self.hlen = readline.get_current_history_length()
        except FileNotFoundError:
            try:
                self.history_file.touch()
            except OSError as e:
                logger.warning("history disabled: cannot create %s: %s", self.history_file, e)
                self.history_file = None
            self.hlen = readline.get_current_history_length()
        except OSError as e:
            logger.warning("history disabled: cannot read %s: %s", self.history_file, e)
            self.history_file = None

    def input(self) -> str:
        line = self.input_fn(self.PROMPT)
        if line:
            readline.add_history(line)
        if self.history_file is not None and line:
            nhlen = readline.get_current_history_length()
            readline.append_history_file(nhlen - self.hlen, self.history_file)
            self.hlen = nhlen
        return line

    def banner(self) -> None:
        print(f"Skippy Version {__version__}", file=self.out)
        print("Press Ctrl+c to Exit\n", file=self.out)

    def eval_line(self, line: str) -> str:
        """Return the text to print for one input line."""
        try:
            result = self.interp.eval(line)
        except SkippySyntaxError as e:
            logger.debug("parse failure: %s", e)
            return str(e)
        return str(result)

    def run(self) -> None:
        self.banner()
        try:
            while True:
                try:
                    line = self.input()
                except EOFError:
                    break
                print(self.eval_line(line), file=self.out)
        except KeyboardInterrupt:
            pass
        print(file=self.out)


def main() -> int:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    repl = Repl(
        history_file=config.get_history_file(),
        history_length=config.get_history_length(),
    )
    repl.start()
    repl.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
