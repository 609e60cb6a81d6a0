"""Application engine for PyCombinator.

- Closures: arity check, one new child frame of the captured environment,
  body evaluated there.
- Primitives: arguments unwrapped to host numbers, host errors reported as
  CombinatorPrimitiveError, result wrapped back into a Number.
- Anything else (a Number) is not callable.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from pycombinator.config import get_max_depth
from pycombinator.errors import (
    CombinatorArityError,
    CombinatorNotCallable,
    CombinatorPrimitiveError,
)
from pycombinator.numerals import fits_digit_limit
from pycombinator.types.environment import Environment
from pycombinator.types.expr import Expr
from pycombinator.types.values import Closure, Number, Primitive, Value

EvaluatorFn = Callable[[Expr, Environment, int, int], Value]

# Host exceptions a primitive may raise when it rejects its arguments.
PRIMITIVE_FAILURES = (TypeError, ValueError, ZeroDivisionError, OverflowError)


def apply_closure(
    fn: Closure,
    args: Sequence[Value],
    evaluate_fn: EvaluatorFn,
    depth: int,
    max_depth: int,
) -> Value:
    """Apply a Closure to already-evaluated arguments.

    The new frame is chained to `fn.env`, the frame the lambda was evaluated
    in, and not to the caller's frame: this is what makes scoping lexical.
    """
    if len(args) != fn.arity:
        raise CombinatorArityError(fn.arity, len(args))
    new_env = fn.env.extend(fn.parameters, args)
    return evaluate_fn(fn.body, new_env, depth, max_depth)


def apply_primitive(fn: Primitive, args: Sequence[Value]) -> Number:
    numbers = []
    for arg in args:
        if not isinstance(arg, Number):
            raise CombinatorPrimitiveError(fn.name, f"expected a number, got {arg}")
        numbers.append(arg.value)
    try:
        result = fn.fn(*numbers)
    except PRIMITIVE_FAILURES as exc:
        raise CombinatorPrimitiveError(fn.name, str(exc)) from exc
    if not isinstance(result, (int, float)):
        raise CombinatorPrimitiveError(fn.name, f"non-numeric result {result!r}")
    if not fits_digit_limit(result):
        raise CombinatorPrimitiveError(fn.name, "result is out of range")
    return Number(result)


def apply(
    fn: Value,
    args: Sequence[Value],
    evaluate_fn: Optional[EvaluatorFn] = None,
    depth: int = 0,
    max_depth: Optional[int] = None,
) -> Value:
    """Apply either a Closure or a Primitive.

    - For Closure, defer to apply_closure.
    - For Primitive, defer to apply_primitive.
    - Otherwise, raise CombinatorNotCallable.
    """
    match fn:
        case Closure():
            if evaluate_fn is None:
                # Lazy import to avoid circular imports
                from pycombinator.evaluation.evaluator import evaluate0
                evaluate_fn = evaluate0
            if max_depth is None:
                max_depth = get_max_depth()
            return apply_closure(fn, args, evaluate_fn, depth, max_depth)
        case Primitive():
            return apply_primitive(fn, args)
        case _:
            raise CombinatorNotCallable(fn)
