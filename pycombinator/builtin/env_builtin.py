"""Built-in primitives for the PyCombinator root environment.

The core evaluator knows nothing about arithmetic: the functions below are a
default primitive table, and any other name -> callable mapping can be passed
to `default_global_environment` instead. Primitives receive and return plain
host numbers; they raise TypeError/ValueError/ZeroDivisionError on bad input,
which the application engine reports as CombinatorPrimitiveError.
"""
from __future__ import annotations

import math
import operator
from typing import Optional

from pycombinator import Numeric, PrimitiveTable
from pycombinator.types.environment import Environment
from pycombinator.types.values import Primitive


def _expect_args(name: str, args: tuple[Numeric, ...], count: int) -> None:
    if len(args) != count:
        raise TypeError(f"{name} requires exactly {count} argument(s), got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args: Numeric) -> Numeric:
    """(add a b) => a + b"""
    _expect_args("add", args, 2)
    return operator.add(*args)


def sub(*args: Numeric) -> Numeric:
    """(sub a b) => a - b"""
    _expect_args("sub", args, 2)
    return operator.sub(*args)


def mul(*args: Numeric) -> Numeric:
    """(mul a b) => a * b"""
    _expect_args("mul", args, 2)
    return operator.mul(*args)


def truediv(*args: Numeric) -> Numeric:
    """(truediv a b) => a / b; division by zero is rejected."""
    _expect_args("truediv", args, 2)
    if args[1] == 0:
        raise ZeroDivisionError("division by zero")
    return operator.truediv(*args)


def floordiv(*args: Numeric) -> Numeric:
    """(floordiv a b) => a // b; division by zero is rejected."""
    _expect_args("floordiv", args, 2)
    if args[1] == 0:
        raise ZeroDivisionError("integer division or modulo by zero")
    return operator.floordiv(*args)


def mod(*args: Numeric) -> Numeric:
    _expect_args("mod", args, 2)
    if args[1] == 0:
        raise ZeroDivisionError("modulo by zero")
    return operator.mod(*args)


def power(*args: Numeric) -> Numeric:
    """(pow a b) => a ** b. Complex results (e.g. pow(-1, 0.5)) are rejected."""
    _expect_args("pow", args, 2)
    result = operator.pow(*args)
    if isinstance(result, complex):
        raise ValueError(f"pow({args[0]}, {args[1]}) has no real result")
    return result


def absolute(*args: Numeric) -> Numeric:
    _expect_args("abs", args, 1)
    return abs(args[0])


# -------------------------------
# Comparison
# -------------------------------
def minimum(*args: Numeric) -> Numeric:
    """Smallest of one or more arguments."""
    if not args:
        raise TypeError("min requires at least 1 argument")
    return min(args)


def maximum(*args: Numeric) -> Numeric:
    """Largest of one or more arguments."""
    if not args:
        raise TypeError("max requires at least 1 argument")
    return max(args)


# -------------------------------
# Coercion
# -------------------------------
def to_int(*args: Numeric) -> Numeric:
    """Truncate towards zero; infinities and NaN are rejected."""
    _expect_args("int", args, 1)
    value = args[0]
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"cannot convert {value} to int")
    return int(value)


def to_float(*args: Numeric) -> Numeric:
    _expect_args("float", args, 1)
    return float(args[0])


DEFAULT_PRIMITIVES: PrimitiveTable = {
    "abs": absolute,
    "add": add,
    "float": to_float,
    "floordiv": floordiv,
    "int": to_int,
    "max": maximum,
    "min": minimum,
    "mod": mod,
    "mul": mul,
    "pow": power,
    "sub": sub,
    "truediv": truediv,
}


def default_global_environment(primitive_table: Optional[PrimitiveTable] = None) -> Environment:
    """Build a root frame binding each table entry as a Primitive.

    A new frame is returned on every call; with no table, DEFAULT_PRIMITIVES
    is used.
    """
    table = DEFAULT_PRIMITIVES if primitive_table is None else primitive_table
    return Environment({name: Primitive(name, fn) for name, fn in table.items()})
