"""Error kinds raised by the reader and the evaluator.

Every error is terminal for the enclosing read or evaluate call. Only the
REPL catches CombinatorError, reports it and moves on to the next line.
"""

from __future__ import annotations

from typing import Optional


class CombinatorError(Exception):
    """ Base class for all PyCombinator errors"""
    pass


class CombinatorSyntaxError(CombinatorError):
    """ Raised when the lexer or parser rejects its input"""

    def __init__(self, reason: str, position: Optional[int] = None):
        self.reason = reason
        self.position = position
        if position is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (at offset {position})")


class CombinatorUnboundName(CombinatorError):
    """ Raised when a name has no binding in the environment chain"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unbound name '{name}'")


class CombinatorNotCallable(CombinatorError):
    """ Raised when a number is applied to arguments"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"{value} is not callable")


class CombinatorArityError(CombinatorError):
    """ Raised when a closure gets the wrong number of arguments"""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"expected {expected} argument(s), got {got}")


class CombinatorPrimitiveError(CombinatorError):
    """ Raised when a primitive rejects its arguments"""

    def __init__(self, name: str, detail: str):
        self.name = name
        self.detail = detail
        super().__init__(f"{name}: {detail}")


class CombinatorRecursionError(CombinatorError):
    """ Raised when evaluation nests deeper than the configured limit"""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"maximum evaluation depth of {limit} exceeded")
