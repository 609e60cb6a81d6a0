"""Core evaluator for PyCombinator.

`evaluate` is the entry point; `evaluate0` does the work and threads a depth
counter through every nested evaluation so that runaway recursion ends in a
CombinatorRecursionError instead of exhausting the host stack.
"""

from __future__ import annotations

from typing import Optional

from pycombinator.config import get_max_depth
from pycombinator.errors import CombinatorRecursionError
from pycombinator.evaluation.apply import apply
from pycombinator.types.environment import Environment
from pycombinator.types.expr import CallExpr, Expr, LambdaExpr, Literal, Name
from pycombinator.types.values import Closure, Number, Value


def evaluate(expr: Expr, env: Environment, max_depth: Optional[int] = None) -> Value:
    """
    Evaluate `expr` in `env`, allowing at most `max_depth` nested evaluations
    (PYCOMBINATOR_MAX_DEPTH when not given).
    """
    limit = max_depth if max_depth is not None else get_max_depth()
    try:
        return evaluate0(expr, env, 0, limit)
    except RecursionError:
        # The host stack ran out before the configured limit did.
        raise CombinatorRecursionError(limit) from None


def evaluate0(expr: Expr, env: Environment, depth: int, max_depth: int) -> Value:
    """
    Single evaluation step at nesting level `depth`.
    """
    if depth >= max_depth:
        raise CombinatorRecursionError(max_depth)

    match expr:
        case Literal(value):
            return Number(value)
        case Name(identifier):
            return env.lookup(identifier)
        case LambdaExpr():
            # Capture the environment active here, not the one at call time.
            return Closure.from_lambda(expr, env)
        case CallExpr(operator, operands):
            fn = evaluate0(operator, env, depth + 1, max_depth)
            args = [evaluate0(operand, env, depth + 1, max_depth) for operand in operands]
            return apply(fn, args, evaluate0, depth + 1, max_depth)

    raise TypeError(f"Cannot evaluate {expr!r}")
