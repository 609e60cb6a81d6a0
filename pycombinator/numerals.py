"""Conversion between numeral text and host numbers.

Every Number the language can produce renders as a numeral the lexer reads
back: integers stay within the interpreter's int-to-str digit limit and
floats are finite and written positionally (no exponent).
"""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from typing import Optional

from pycombinator import Numeric
from pycombinator.errors import CombinatorSyntaxError


def fits_digit_limit(value: Numeric) -> bool:
    """True if `value` can be written out in decimal."""
    if isinstance(value, float):
        return math.isfinite(value)
    limit = sys.get_int_max_str_digits()
    # Below 10**limit whenever bit_length <= limit * log2(10).
    return not limit or abs(value).bit_length() <= limit * math.log2(10)


def to_number(text: str, pos: Optional[int] = None) -> Numeric:
    """Convert numeral text to int, or to float when it contains a '.'."""
    if "." in text:
        try:
            value = float(text)
        except ValueError:
            raise CombinatorSyntaxError(f"'{text}' is not a numeral", pos) from None
        if not math.isfinite(value):
            raise CombinatorSyntaxError(f"numeral '{text[:20]}...' is out of range", pos)
        return value
    try:
        return int(text)
    except ValueError:
        digits = text[1:] if text.startswith("-") else text
        if digits.isdigit():
            raise CombinatorSyntaxError(
                f"numeral has more than {sys.get_int_max_str_digits()} digits", pos
            ) from None
        raise CombinatorSyntaxError(f"'{text}' is not a numeral", pos) from None


def format_number(value: Numeric) -> str:
    """Render `value` as numeral text, e.g. 7, 3.5, 10000000000000000.0."""
    text = repr(value)
    if isinstance(value, float) and math.isfinite(value) and "e" in text:
        # repr holds the shortest round-tripping digits; only drop the exponent.
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text
