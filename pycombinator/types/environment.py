"""Runtime environment for PyCombinator.

An Environment is one frame: a read-only mapping from names to values plus an
optional `outer` frame. Frames are fully populated when they are created and
never change afterwards; applying a closure builds a fresh child frame of the
closure's captured frame instead of writing into an existing one. Because of
that, a single root frame can be shared by any number of evaluations.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping, Optional, Sequence

from pycombinator.errors import CombinatorUnboundName

if TYPE_CHECKING:
    from pycombinator.types.values import Value


class Environment:
    """Immutable frame chained to an optional outer frame."""

    __slots__ = ("_vars", "_outer")

    def __init__(
        self,
        bindings: Mapping[str, Value] | None = None,
        outer: Optional[Environment] = None,
    ):
        self._vars: Mapping[str, Value] = MappingProxyType(dict(bindings or {}))
        self._outer: Environment | None = outer

    @property
    def vars(self) -> Mapping[str, Value]:
        return self._vars

    @property
    def outer(self) -> Optional[Environment]:
        return self._outer

    def extend(self, names: Sequence[str], values: Sequence[Value]) -> Environment:
        """Return a child frame binding each name to the value at the same index."""
        return Environment(dict(zip(names, values)), outer=self)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env._vars:
                return env
            env = env._outer
        return None

    def lookup(self, name: str) -> Value:
        """Look up `name` in this frame, then each outer frame up to the root.

        Raises CombinatorUnboundName if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise CombinatorUnboundName(name)
        return env._vars[name]

    def frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env._outer

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self._vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self._outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for env in self.frames():
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
