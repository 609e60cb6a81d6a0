import sys

import pytest
from hypothesis import given, strategies as st

from pycombinator.errors import CombinatorSyntaxError
from pycombinator.numerals import fits_digit_limit, format_number, to_number


@pytest.mark.parametrize(
    "text,expected",
    [
        ("7", 7),
        ("-12", -12),
        ("3.5", 3.5),
        (".5", 0.5),
        ("-0.25", -0.25),
    ]
)
def test_to_number(text, expected):
    value = to_number(text)
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize("text", ["-", "1-2", "1.2.3", "."])
def test_to_number_rejects_malformed(text):
    with pytest.raises(CombinatorSyntaxError) as exc:
        to_number(text, 4)
    assert exc.value.reason == f"'{text}' is not a numeral"
    assert exc.value.position == 4


def test_fits_digit_limit():
    limit = sys.get_int_max_str_digits()
    assert fits_digit_limit(10 ** (limit - 1))
    assert not fits_digit_limit(10 ** (limit + 10))
    assert not fits_digit_limit(-(10 ** (limit + 10)))
    assert fits_digit_limit(1.5)
    assert not fits_digit_limit(float("inf"))
    assert not fits_digit_limit(float("nan"))


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_formatted_floats_read_back(value):
    text = format_number(value)
    assert "e" not in text
    assert "." in text
    assert to_number(text) == value


@given(st.integers(min_value=-10**30, max_value=10**30))
def test_formatted_ints_read_back(value):
    assert to_number(format_number(value)) == value
