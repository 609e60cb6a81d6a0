import pytest

from pycombinator.printer import pformat_expr, repr_value
from pycombinator.reader.parser import read
from pycombinator.types.expr import Literal
from pycombinator.types.values import Number


def test_numbers_render_as_literals():
    assert repr_value(Number(7)) == "7"
    assert repr_value(Number(-3)) == "-3"
    assert repr_value(Number(3.5)) == "3.5"
    assert repr_value(Number(2.0)) == "2.0"


def test_functions_render_opaquely(interp):
    assert repr_value(interp.eval("lambda x: add(x, 1)")) == "<function>"
    assert repr_value(interp.eval("add")) == "<function add>"


def test_pformat_call():
    assert pformat_expr(read("add(3, 4)")) == (
        "CallExpr(\n"
        "    Name('add'),\n"
        "    Literal(3),\n"
        "    Literal(4)\n"
        ")"
    )


def test_pformat_lambda():
    assert pformat_expr(read("lambda x: f(x)")) == (
        "LambdaExpr(['x'],\n"
        "    CallExpr(\n"
        "        Name('f'),\n"
        "        Name('x')\n"
        "    )\n"
        ")"
    )


@pytest.mark.parametrize(
    "value,text",
    [
        (1e16, "10000000000000000.0"),
        (-2.5e20, "-250000000000000000000.0"),
        (1.5e-7, "0.00000015"),
        (0.1, "0.1"),
        (-0.0, "-0.0"),
    ]
)
def test_floats_render_positionally(value, text):
    assert repr_value(Number(value)) == text
    assert read(text) == Literal(value)


def test_large_float_literal_reads_back():
    assert str(read("10000000000000000.0")) == "10000000000000000.0"
    assert read(str(read("10000000000000000.0"))) == Literal(1e16)
