"""
Interactive read-eval-print loop for PyCombinator.

Each input line holds at most one expression. Results are printed with
repr_value; errors are reported and the loop moves on to the next line.

Commands:
- /help          show this help
- /ast EXPR      print the parsed expression tree without evaluating it
- /exit          leave the REPL
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

from pycombinator.config import get_prompt, setup_logging
from pycombinator.errors import CombinatorError
from pycombinator.interpreter import Interpreter
from pycombinator.printer import pformat_expr, repr_value

logger = logging.getLogger(__name__)


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        output_stream: Optional[TextIO] = None,
        prompt: Optional[str] = None,
    ):
        self.interp = interpreter or Interpreter()
        self.output = output_stream or sys.stdout
        self.prompt = prompt if prompt is not None else get_prompt()
        self.running = False
        self.commands: dict[str, Callable[[str], None]] = {
            "/help": self._cmd_help,
            "/ast": self._cmd_ast,
            "/exit": self._cmd_exit,
        }

    def start(self, read_line: Callable[[str], str] = input) -> None:
        """Loop until /exit, end of input or Ctrl-C."""
        self.running = True
        while self.running:
            try:
                line = read_line(self.prompt)
            except (KeyboardInterrupt, EOFError):
                print(file=self.output)
                break
            self.process_line(line)

    def process_line(self, line: str) -> bool:
        """Handle one line of input. Returns False if it produced an error."""
        line = line.strip()
        if line.startswith("/"):
            name, _, rest = line.partition(" ")
            handler = self.commands.get(name)
            if handler is None:
                print(f"Unknown command: {name} (try /help)", file=self.output)
                return False
            return self._guard(lambda: handler(rest))
        return self._guard(lambda: self._evaluate(line))

    def _evaluate(self, line: str) -> None:
        value = self.interp.eval(line)
        if value is not None:
            print(repr_value(value), file=self.output)

    def _guard(self, action: Callable[[], None]) -> bool:
        try:
            action()
        except CombinatorError as ex:
            logger.debug("reported %s", type(ex).__name__, exc_info=True)
            print(f"{type(ex).__name__}: {ex}", file=self.output)
            return False
        return True

    def _cmd_help(self, _: str) -> None:
        print(__doc__.strip(), file=self.output)

    def _cmd_ast(self, code: str) -> None:
        expr = self.interp.parse(code)
        if expr is None:
            return
        try:
            text = pformat_expr(expr)
        except RecursionError:
            text = "<expression too deeply nested to display>"
        print(text, file=self.output)

    def _cmd_exit(self, _: str) -> None:
        self.running = False


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pycombinator", description="Read-eval-print loop for PyCombinator expressions."
    )
    parser.add_argument("-c", "--command", help="evaluate one expression, print it and exit")
    parser.add_argument("--max-depth", type=int, help="maximum evaluation depth")
    parser.add_argument("--log-level", help="logging level (default: PYCOMBINATOR_LOG_LEVEL or WARNING)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)
    repl = Repl(Interpreter(max_depth=args.max_depth))
    if args.command is not None:
        return 0 if repl.process_line(args.command) else 1
    repl.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
