"""Position-tracked view over a sequence.

The lexer walks a Cursor over characters and the parser walks one over
tokens. Only `expect` raises; running off the end is reported as None.
"""

from __future__ import annotations

from typing import Generic, Optional, Sequence, TypeVar

from pycombinator.errors import CombinatorSyntaxError

T = TypeVar("T")


class Cursor(Generic[T]):
    __slots__ = ("source", "index")

    def __init__(self, source: Sequence[T]):
        self.source: Sequence[T] = source
        self.index: int = 0

    @property
    def position(self) -> int:
        return self.index

    def at_end(self) -> bool:
        return self.index >= len(self.source)

    def peek(self) -> Optional[T]:
        """Return the current element without consuming it, or None at the end."""
        if self.at_end():
            return None
        return self.source[self.index]

    def advance(self) -> Optional[T]:
        """Consume and return the current element. At the end, return None and stay put."""
        current = self.peek()
        if current is not None:
            self.index += 1
        return current

    def end_offset(self) -> int:
        """Offset just past the last element (the `end` of a token, else the length)."""
        if not self.source:
            return 0
        return getattr(self.source[-1], "end", len(self.source))

    def expect(self, target: T) -> T:
        """Consume the current element, which must equal `target`."""
        actual = self.advance()
        if actual is None:
            raise CombinatorSyntaxError(f"expected {target}, got end of input", self.end_offset())
        if actual != target:
            raise CombinatorSyntaxError(
                f"expected {target}, got {actual}", getattr(actual, "pos", self.index - 1)
            )
        return actual

    def __repr__(self) -> str:
        return f"Cursor(index={self.index}, size={len(self.source)})"
