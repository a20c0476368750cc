"""Runtime environment for AAQZ.

An Environment is one frame of Symbol -> Value bindings plus an `outer` link
to the frame it extends. Frames are never changed after construction: applying
a closure builds a new frame over the closure's captured environment, so many
closures can share a common ancestor frame for reading.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Mapping, Optional

from aaqz.types.errors import AAQZArityError, AAQZNameError
from aaqz.types.symbol import Symbol
from aaqz.types.values import Value


class Environment:
    """Immutable, parent-linked mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        bindings: Mapping[Symbol, Value] | None = None,
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[Symbol, Value] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer

    def extend(self, names: Iterable[Symbol], values: Iterable[Value]) -> Environment:
        """Return a new frame binding `names` to `values` on top of this one.

        Raises AAQZArityError if the two sequences differ in length.
        """
        names = list(names)
        values = list(values)
        if len(names) != len(values):
            raise AAQZArityError(
                f"cannot bind {len(values)} values to {len(names)} names"
            )
        return Environment(dict(zip(names, values)), outer=self)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Value:
        """Look up the value bound to `name`; the nearest binding wins.

        Raises AAQZNameError if the name is bound nowhere in the chain.
        """
        env = self.find(name)
        if env is None:
            raise AAQZNameError(f"unbound identifier: {name}")
        return env.vars[name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def depth(self) -> int:
        """Number of frames in the chain, this one included."""
        n = 0
        env: Optional[Environment] = self
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole chain, innermost frame first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
