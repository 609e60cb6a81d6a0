from __future__ import annotations

import logging
from typing import Optional

from pycombinator import PrimitiveTable
from pycombinator.builtin.env_builtin import default_global_environment
from pycombinator.config import get_max_depth
from pycombinator.evaluation.evaluator import evaluate
from pycombinator.reader.parser import read
from pycombinator.types.environment import Environment
from pycombinator.types.expr import Expr
from pycombinator.types.values import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates PyCombinator source against one root environment.

    The root frame is built once here and never modified, so the same
    Interpreter (or its `env`) can serve any number of evaluations.
    """

    def __init__(
        self,
        primitive_table: Optional[PrimitiveTable] = None,
        max_depth: Optional[int] = None,
        *,
        env: Optional[Environment] = None,
    ):
        self.env: Environment = env if env is not None else default_global_environment(primitive_table)
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

    def parse(self, code: str) -> Optional[Expr]:
        expr = read(code)
        logger.debug("read %r -> %r", code, expr)
        return expr

    def eval(self, code: str) -> Optional[Value]:
        """Read one expression from `code` and evaluate it; None for blank input."""
        expr = self.parse(code)
        if expr is None:
            return None
        value = evaluate(expr, self.env, self.max_depth)
        logger.debug("eval %s -> %s", expr, value)
        return value
