import pytest

from pycombinator.builtin.env_builtin import DEFAULT_PRIMITIVES, default_global_environment
from pycombinator.errors import CombinatorPrimitiveError, CombinatorUnboundName
from pycombinator.interpreter import Interpreter
from pycombinator.types.values import Number, Primitive


@pytest.mark.parametrize(
    "source,expected",
    [
        ("add(3, 4)", 7),
        ("sub(10, 3)", 7),
        ("sub(-1, -1)", 0),
        ("mul(2, 3)", 6),
        ("truediv(7, 2)", 3.5),
        ("floordiv(7, 2)", 3),
        ("floordiv(-7, 2)", -4),
        ("mod(7, 3)", 1),
        ("pow(2, 10)", 1024),
        ("pow(4, 0.5)", 2.0),
        ("abs(-5)", 5),
        ("min(3, 1, 2)", 1),
        ("max(3, 1, 2)", 3),
        ("max(7)", 7),
        ("int(3.7)", 3),
        ("int(-3.7)", -3),
        ("float(2)", 2.0),
        ("add(0.5, .25)", 0.75),
        ("add(mul(2, 3), sub(10, 4))", 12),
        ("truediv(add(20, 10), mul(2, 5))", 3.0),
    ]
)
def test_default_primitives(interp, source, expected):
    assert interp.eval(source) == Number(expected)


@pytest.mark.parametrize(
    "source,kind",
    [
        ("truediv(4, 2)", float),
        ("float(2)", float),
        ("int(2.0)", int),
        ("add(1, 2)", int),
        ("add(1, 2.0)", float),
    ]
)
def test_numeric_kind(interp, source, kind):
    assert type(interp.eval(source).value) is kind


@pytest.mark.parametrize(
    "source,name",
    [
        ("truediv(1, 0)", "truediv"),
        ("floordiv(1, 0)", "floordiv"),
        ("mod(1, 0)", "mod"),
        ("add(1)", "add"),
        ("add(1, 2, 3)", "add"),
        ("abs()", "abs"),
        ("min()", "min"),
        ("pow(-1, 0.5)", "pow"),
        ("pow(10.0, 400)", "pow"),
        ("float(pow(10, 400))", "float"),
        ("int(mul(pow(10.0, 300), pow(10.0, 300)))", "mul"),
        ("truediv(pow(10.0, 300), pow(10.0, -300))", "truediv"),
        ("pow(10, 5000)", "pow"),
        ("mul(pow(10, 4000), pow(10, 4000))", "mul"),
        ("add(add, 1)", "add"),
        ("abs(lambda: 1)", "abs"),
    ]
)
def test_primitive_errors(interp, source, name):
    with pytest.raises(CombinatorPrimitiveError) as exc:
        interp.eval(source)
    assert exc.value.name == name


def test_arity_detail(interp):
    with pytest.raises(CombinatorPrimitiveError) as exc:
        interp.eval("add(1)")
    assert exc.value.detail == "add requires exactly 2 argument(s), got 1"


def test_default_table_names():
    assert sorted(DEFAULT_PRIMITIVES) == [
        "abs", "add", "float", "floordiv", "int", "max",
        "min", "mod", "mul", "pow", "sub", "truediv",
    ]


def test_default_global_environment_is_fresh_root():
    first = default_global_environment()
    second = default_global_environment()
    assert first is not second
    assert first.outer is None
    assert isinstance(first.lookup("add"), Primitive)
    assert first.lookup("add").name == "add"


def test_custom_primitive_table():
    interp = Interpreter({"double": lambda x: x * 2, "bad": lambda: "x"})
    assert interp.eval("double(21)") == Number(42)
    with pytest.raises(CombinatorUnboundName):
        interp.eval("add(1, 2)")
    with pytest.raises(CombinatorPrimitiveError) as exc:
        interp.eval("double(1, 2)")
    assert exc.value.name == "double"
    with pytest.raises(CombinatorPrimitiveError):
        interp.eval("bad()")


def test_primitive_is_first_class(interp):
    assert interp.eval("(lambda op: op(6, 7))(mul)") == Number(42)


def test_out_of_range_detail(interp):
    with pytest.raises(CombinatorPrimitiveError) as exc:
        interp.eval("pow(10, 5000)")
    assert exc.value.detail == "result is out of range"


def test_large_results_within_digit_limit(interp):
    assert interp.eval("pow(10, 1000)") == Number(10 ** 1000)
