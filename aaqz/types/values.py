"""Runtime values produced by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from aaqz.types.expressions import Expression
from aaqz.types.symbol import Symbol

if TYPE_CHECKING:
    from aaqz.types.environment import Environment


class Value:
    """Base class of the closed set of runtime value kinds below."""

    __slots__ = ()


@dataclass(frozen=True)
class Number(Value):
    value: int


@dataclass(frozen=True)
class String(Value):
    value: str


@dataclass(frozen=True)
class Bool(Value):
    value: bool


@dataclass(frozen=True)
class Primitive(Value):
    """Tag naming one of the built-in operations in aaqz.builtin.primitives."""

    op: Symbol


@dataclass(frozen=True)
class Closure(Value):
    """A lambda paired with the environment it was evaluated in.

    The environment is held by reference and shared with every other closure
    created in the same scope. It takes no part in equality or repr.
    """

    params: tuple[Symbol, ...]
    body: Expression
    env: Environment = field(compare=False, repr=False)


@dataclass(frozen=True)
class ErrorValue(Value):
    """Placeholder for a failed result; the raised AAQZError is the failure."""


TRUE = Bool(True)
FALSE = Bool(False)
