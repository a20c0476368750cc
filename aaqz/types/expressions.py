"""Abstract syntax of AAQZ.

The parser emits these nodes and the evaluator consumes them. Every node is a
frozen dataclass holding only other nodes, Symbols, tuples and scalars, so a
parsed program is an immutable tree.
"""

from __future__ import annotations

from dataclasses import dataclass

from aaqz.types.symbol import Symbol


class Expression:
    """Base class of the closed set of AST node kinds below."""

    __slots__ = ()


@dataclass(frozen=True)
class NumberLit(Expression):
    value: int


@dataclass(frozen=True)
class StringLit(Expression):
    value: str


@dataclass(frozen=True)
class BoolLit(Expression):
    value: bool


@dataclass(frozen=True)
class Identifier(Expression):
    name: Symbol


@dataclass(frozen=True)
class If(Expression):
    cond: Expression
    then: Expression
    orelse: Expression


@dataclass(frozen=True)
class Lambda(Expression):
    """Anonymous function; params are distinct names."""

    params: tuple[Symbol, ...]
    body: Expression


@dataclass(frozen=True)
class Apply(Expression):
    """Application; the callee's arity is checked when it is called."""

    callee: Expression
    args: tuple[Expression, ...]
