"""
  Lexer for PyCombinator source text.

- Whitespace is skipped, never tokenized
- Numerals: maximal runs of digits, '.' and '-'
- Symbols: a letter or '_' followed by letters, digits or '_'
- Delimiters: exactly one of ( ) , :

   n.b. '-' only ever starts a numeral. There is no subtraction token;
   subtraction is spelled sub(a, b).
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Optional, Union

from pycombinator.errors import CombinatorSyntaxError
from pycombinator.numerals import to_number
from pycombinator.reader.cursor import Cursor


SYMBOL_STARTS = frozenset(string.ascii_letters + "_")
SYMBOL_INNERS = SYMBOL_STARTS | frozenset(string.digits)
NUMERAL = frozenset(string.digits + ".-")
DELIMITERS = frozenset("(),:")


@dataclass(frozen=True)
class NumberLiteral:
    text: str
    pos: int = field(default=0, compare=False)

    @property
    def end(self) -> int:
        return self.pos + len(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Symbol:
    name: str
    pos: int = field(default=0, compare=False)

    @property
    def end(self) -> int:
        return self.pos + len(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Delimiter:
    char: str
    pos: int = field(default=0, compare=False)

    @property
    def end(self) -> int:
        return self.pos + 1

    def __str__(self) -> str:
        return repr(self.char)


Token = Union[NumberLiteral, Symbol, Delimiter]


def take(src: Cursor[str], allowed: frozenset[str]) -> str:
    """Consume the longest run of characters drawn from `allowed`."""
    chars = []
    while (c := src.peek()) is not None and c in allowed:
        chars.append(src.advance())
    return "".join(chars)


def skip_whitespace(src: Cursor[str]) -> None:
    while (c := src.peek()) is not None and c.isspace():
        src.advance()


def next_token(src: Cursor[str]) -> Optional[Token]:
    """Read one token from `src`, or return None once the input is exhausted."""
    skip_whitespace(src)
    pos = src.position
    c = src.peek()
    if c is None:
        return None
    if c in NUMERAL:
        literal = take(src, NUMERAL)
        to_number(literal, pos)  # reject '-', '1-2', '1.2.3' here
        return NumberLiteral(literal, pos)
    if c in SYMBOL_STARTS:
        return Symbol(take(src, SYMBOL_INNERS), pos)
    if c in DELIMITERS:
        src.advance()
        return Delimiter(c, pos)
    raise CombinatorSyntaxError(f"unexpected character {c!r}", pos)


def tokenize(source: str) -> list[Token]:
    """Split `source` into a list of tokens in source order."""
    src = Cursor(source)
    tokens: list[Token] = []
    while (token := next_token(src)) is not None:
        tokens.append(token)
    return tokens
