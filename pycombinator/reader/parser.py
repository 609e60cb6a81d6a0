"""
  Recursive-descent parser for PyCombinator.

    expr        := literal | name | lambda | "(" expr ")" , call_suffix*
    lambda      := "lambda" , params , ":" , expr
    params      := [] | name , ("," , name)*
    call_suffix := "(" , [expr , ("," , expr)*] , ")"

Call suffixes chain to the left, so f(1)(2) reads as
CallExpr(CallExpr(Name('f'), [Literal(1)]), [Literal(2)]).
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from pycombinator.errors import CombinatorSyntaxError
from pycombinator.numerals import to_number
from pycombinator.reader.cursor import Cursor
from pycombinator.reader.lexer import (
    Delimiter,
    NumberLiteral,
    Symbol,
    Token,
    tokenize,
)
from pycombinator.types.expr import CallExpr, Expr, LambdaExpr, Literal, Name

LAMBDA = "lambda"

LPAREN = Delimiter("(")
RPAREN = Delimiter(")")
COMMA = Delimiter(",")
COLON = Delimiter(":")

E = TypeVar("E")


def read(source: str) -> Optional[Expr]:
    """Parse one expression from `source`.

    Returns None when `source` holds no tokens at all. Raises
    CombinatorSyntaxError when it cannot be parsed, when it nests deeper than
    the host stack allows, or when tokens are left over after a complete
    expression.
    """
    src = Cursor(tokenize(source))
    if src.peek() is None:
        return None
    try:
        expr = read_expr(src)
    except RecursionError:
        current = src.peek()
        position = current.pos if current is not None else src.end_offset()
        raise CombinatorSyntaxError("expression nested too deeply", position) from None
    trailing = src.peek()
    if trailing is not None:
        raise CombinatorSyntaxError("unexpected trailing input", trailing.pos)
    return expr


def is_name(token: Optional[Token]) -> bool:
    return isinstance(token, Symbol) and token.name != LAMBDA


def read_expr(src: Cursor[Token]) -> Expr:
    token = src.advance()
    match token:
        case None:
            raise CombinatorSyntaxError("incomplete expression", src.end_offset())
        case NumberLiteral(text=text, pos=pos):
            return read_call_expr(src, Literal(to_number(text, pos)))
        case Symbol(name=name) if name == LAMBDA:
            params = read_comma_separated(src, read_param, COLON)
            _check_distinct(params, token.pos)
            src.expect(COLON)
            body = read_expr(src)
            return LambdaExpr(params, body)
        case Symbol(name=name):
            return read_call_expr(src, Name(name))
        case Delimiter(char="("):
            inner_expr = read_expr(src)
            src.expect(RPAREN)
            return read_call_expr(src, inner_expr)
        case _:
            raise CombinatorSyntaxError(f"unexpected token {token}", token.pos)


def read_comma_separated(
    src: Cursor[Token], reader: Callable[[Cursor[Token]], E], terminator: Delimiter
) -> list[E]:
    """Read `reader` elements separated by commas, up to (not including) `terminator`.

    An element is required after every comma, so `add(3,)` is rejected.
    """
    if src.peek() == terminator:
        return []
    items = [reader(src)]
    while src.peek() == COMMA:
        src.advance()
        items.append(reader(src))
    return items


def read_call_expr(src: Cursor[Token], operator: Expr) -> Expr:
    while src.peek() == LPAREN:
        src.advance()
        operands = read_comma_separated(src, read_expr, RPAREN)
        src.expect(RPAREN)
        operator = CallExpr(operator, operands)
    return operator


def read_param(src: Cursor[Token]) -> str:
    token = src.advance()
    if token is None:
        raise CombinatorSyntaxError("incomplete expression", src.end_offset())
    if not is_name(token):
        raise CombinatorSyntaxError(f"expected a parameter name, got {token}", token.pos)
    return token.name


def _check_distinct(params: list[str], pos: int) -> None:
    seen: set[str] = set()
    for param in params:
        if param in seen:
            raise CombinatorSyntaxError(f"duplicate parameter '{param}' in lambda", pos)
        seen.add(param)

