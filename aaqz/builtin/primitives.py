from __future__ import annotations

import logging
from typing import Callable, Sequence

from aaqz.builtin.output import OutputSink, StdoutSink
from aaqz.evaluation.serializer import canonical_text, serialize
from aaqz.types.errors import (
    AAQZArityError,
    AAQZDivisionByZeroError,
    AAQZTypeError,
    AAQZUnknownPrimitiveError,
    AAQZUserError,
)
from aaqz.types.symbol import Symbol
from aaqz.types.values import TRUE, Bool, Number, String, Value

logger = logging.getLogger(__name__)

PrimitiveFn = Callable[[Sequence[Value], OutputSink], Value]


def _number_operands(op: str, args: Sequence[Value], what: str) -> tuple[int, int]:
    if len(args) != 2:
        raise AAQZArityError(f"{what} operations require exactly two arguments, {op} got {len(args)}")
    a, b = args
    if not isinstance(a, Number) or not isinstance(b, Number):
        raise AAQZTypeError(f"{what} operations require numeric arguments, {op} got {kind_name(a)} and {kind_name(b)}")
    return a.value, b.value


def kind_name(value: Value) -> str:
    return type(value).__name__


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[Value], out: OutputSink) -> Value:
    a, b = _number_operands("+", args, "arithmetic")
    return Number(a + b)


def sub(args: Sequence[Value], out: OutputSink) -> Value:
    a, b = _number_operands("-", args, "arithmetic")
    return Number(a - b)


def mul(args: Sequence[Value], out: OutputSink) -> Value:
    a, b = _number_operands("*", args, "arithmetic")
    return Number(a * b)


def div(args: Sequence[Value], out: OutputSink) -> Value:
    a, b = _number_operands("/", args, "arithmetic")
    if b == 0:
        raise AAQZDivisionByZeroError("division by zero")
    # Integer division truncates toward zero
    q = abs(a) // abs(b)
    return Number(q if (a < 0) == (b < 0) else -q)


# -------------------------------
# Comparison
# -------------------------------
def lte(args: Sequence[Value], out: OutputSink) -> Value:
    a, b = _number_operands("<=", args, "comparison")
    return Bool(a <= b)


def equal(args: Sequence[Value], out: OutputSink) -> Value:
    if len(args) != 2:
        raise AAQZArityError(f"equal? requires exactly two arguments, got {len(args)}")
    return Bool(canonical_text(args[0]) == canonical_text(args[1]))


# -------------------------------
# Output and sequencing
# -------------------------------
def println(args: Sequence[Value], out: OutputSink) -> Value:
    if len(args) != 1:
        raise AAQZArityError(f"println requires exactly one argument, got {len(args)}")
    (arg,) = args
    if not isinstance(arg, String):
        raise AAQZTypeError(f"println requires a string argument, got {kind_name(arg)}")
    out.println(arg.value)
    return TRUE


def seq(args: Sequence[Value], out: OutputSink) -> Value:
    if not args:
        raise AAQZArityError("seq requires at least one expression")
    return args[-1]


def _to_text(value: Value) -> str:
    match value:
        case String(s):
            return s
        case Number(n):
            return str(n)
        case _:
            return serialize(value)


def concat(args: Sequence[Value], out: OutputSink) -> Value:
    if not args:
        raise AAQZArityError("++ requires at least one argument")
    return String("".join(_to_text(arg) for arg in args))


def error(args: Sequence[Value], out: OutputSink) -> Value:
    if len(args) != 1:
        raise AAQZArityError(f"error requires exactly one argument, got {len(args)}")
    raise AAQZUserError(f"user-error: {serialize(args[0])}")


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[Symbol, PrimitiveFn] = {
    Symbol('+'): add,
    Symbol('-'): sub,
    Symbol('*'): mul,
    Symbol('/'): div,
    Symbol('<='): lte,
    Symbol('equal?'): equal,
    Symbol('println'): println,
    Symbol('seq'): seq,
    Symbol('++'): concat,
    Symbol('error'): error,
}


def primitive_symbols() -> list[Symbol]:
    return list(PRIMITIVES)


def apply_primitive(op: Symbol, args: Sequence[Value], out: OutputSink | None = None) -> Value:
    """Run the built-in operation named `op` on already-evaluated arguments.

    Raises AAQZUnknownPrimitiveError if `op` names no built-in operation.
    """
    fn = PRIMITIVES.get(op)
    if fn is None:
        raise AAQZUnknownPrimitiveError(f"unknown primitive operation: {op}")
    logger.debug("primitive %s applied to %d argument(s)", op, len(args))
    return fn(args, out if out is not None else StdoutSink())
