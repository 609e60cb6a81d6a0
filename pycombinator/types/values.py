"""Runtime values produced by evaluation.

There are three kinds of value:
    - numbers (e.g. 42)
    - closures, created by evaluating a lambda expression
    - primitives, host functions supplied through the primitive table

Only closures and primitives can be applied; applying a Number is an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from pycombinator import NativeFn, Numeric
from pycombinator.numerals import format_number
from pycombinator.types.environment import Environment
from pycombinator.types.expr import Expr, LambdaExpr


@dataclass(frozen=True, slots=True)
class Number:
    value: Numeric

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True, slots=True, eq=False)
class Closure:
    """A lambda expression paired with the environment it was evaluated in.

    `env` is captured when the lambda is evaluated, never when it is called.
    Closures compare by identity.
    """

    parameters: tuple[str, ...]
    body: Expr
    env: Environment = field(repr=False)

    @classmethod
    def from_lambda(cls, expr: LambdaExpr, env: Environment) -> Closure:
        return cls(expr.parameters, expr.body, env)

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def __str__(self) -> str:
        return "<function>"


@dataclass(frozen=True, slots=True, eq=False)
class Primitive:
    name: str
    fn: NativeFn = field(repr=False)

    def __str__(self) -> str:
        return f"<function {self.name}>"


Value = Union[Number, Closure, Primitive]
