"""Text rendering for values and expressions."""

from __future__ import annotations

from pycombinator.numerals import format_number
from pycombinator.types.expr import CallExpr, Expr, LambdaExpr, Literal, Name
from pycombinator.types.values import Closure, Number, Primitive, Value

INDENT = "    "


def repr_value(value: Value) -> str:
    """Render a value for display.

    Numbers render as numerals the lexer reads back; functions render opaquely and never
    show their parameters, body or environment.
    """
    match value:
        case Number(n):
            return format_number(n)
        case Closure():
            return "<function>"
        case Primitive(name=name):
            return f"<function {name}>"
    raise TypeError(f"Not a value: {value!r}")


def pformat_expr(expr: Expr, indents: int = 0) -> str:
    """Indented tree view of an expression, one node per line.

    Format:
    CallExpr(
        Name('add'),
        Literal(3),
        Literal(4)
    )
    """
    pad = INDENT * indents
    match expr:
        case Literal() | Name():
            return f"{pad}{expr!r}"
        case LambdaExpr(parameters, body):
            return (
                f"{pad}LambdaExpr({list(parameters)!r},\n"
                f"{pformat_expr(body, indents + 1)}\n{pad})"
            )
        case CallExpr(operator, operands):
            children = [operator, *operands]
            inner = ",\n".join(pformat_expr(child, indents + 1) for child in children)
            return f"{pad}CallExpr(\n{inner}\n{pad})"
    raise TypeError(f"Not an expression: {expr!r}")
