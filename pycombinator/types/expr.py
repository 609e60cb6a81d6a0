"""Abstract syntax tree for PyCombinator expressions.

There are four kinds of expression:
    - literals, which are numbers (e.g. 42)
    - names (e.g. my_var_name)
    - call expressions (e.g. add(3, 4))
    - lambda expressions (e.g. lambda x: x)

Call and lambda expressions are built from simpler expressions, so an Expr is
a tree. Nodes are immutable and never shared cyclically.

`str(expr)` renders source syntax; `repr(expr)` renders the constructor form,
e.g. CallExpr(Name('add'), [Literal(3), Literal(4)]).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pycombinator import Numeric
from pycombinator.numerals import format_number


@dataclass(frozen=True, slots=True)
class Literal:
    value: Numeric

    def __str__(self) -> str:
        return format_number(self.value)

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


@dataclass(frozen=True, slots=True)
class Name:
    identifier: str

    def __str__(self) -> str:
        return self.identifier

    def __repr__(self) -> str:
        return f"Name({self.identifier!r})"


@dataclass(frozen=True, slots=True)
class LambdaExpr:
    """`lambda x, y: add(x, y)` is
    LambdaExpr(['x', 'y'], CallExpr(Name('add'), [Name('x'), Name('y')]))
    """

    parameters: tuple[str, ...]
    body: Expr

    def __post_init__(self):
        # Accept any sequence, store a tuple so the node stays hashable.
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def __str__(self) -> str:
        if not self.parameters:
            return f"lambda: {self.body}"
        return f"lambda {', '.join(self.parameters)}: {self.body}"

    def __repr__(self) -> str:
        return f"LambdaExpr({list(self.parameters)!r}, {self.body!r})"


@dataclass(frozen=True, slots=True)
class CallExpr:
    """`add(3, 4)` is CallExpr(Name('add'), [Literal(3), Literal(4)])."""

    operator: Expr
    operands: tuple[Expr, ...]

    def __post_init__(self):
        object.__setattr__(self, "operands", tuple(self.operands))

    def __str__(self) -> str:
        operator = str(self.operator)
        if isinstance(self.operator, LambdaExpr):
            operator = f"({operator})"
        return f"{operator}({', '.join(str(o) for o in self.operands)})"

    def __repr__(self) -> str:
        return f"CallExpr({self.operator!r}, {list(self.operands)!r})"


Expr = Union[Literal, Name, LambdaExpr, CallExpr]
