"""Core evaluator for the AAQZ interpreter.

A strict, environment-passing tree walker. Subexpressions are evaluated left
to right before use, closures capture the environment they are created in, and
closure bodies run by direct recursion, so the depth of the Python stack
follows the depth of the interpreted call chain.
"""

from __future__ import annotations

import logging

from aaqz.builtin.output import OutputSink, StdoutSink
from aaqz.builtin.primitives import apply_primitive
from aaqz.types.environment import Environment
from aaqz.types.errors import AAQZArityError, AAQZTypeError
from aaqz.types.expressions import (
    Apply,
    BoolLit,
    Expression,
    Identifier,
    If,
    Lambda,
    NumberLit,
    StringLit,
)
from aaqz.types.values import Bool, Closure, Number, Primitive, String, Value

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment, out: OutputSink | None = None) -> Value:
    """Reduce `expr` to a value in `env`.

    `out` receives println output; it defaults to standard output. Failures
    are raised as AAQZError subclasses and are never caught here.
    """
    if out is None:
        out = StdoutSink()
    return evaluate0(expr, env, out)


def evaluate0(expr: Expression, env: Environment, out: OutputSink) -> Value:
    match expr:
        case NumberLit(n):
            return Number(n)
        case StringLit(s):
            return String(s)
        case BoolLit(b):
            return Bool(b)
        case Identifier(name):
            return env.lookup(name)
        case If(cond, then, orelse):
            test = evaluate0(cond, env, out)
            match test:
                case Bool(True):
                    return evaluate0(then, env, out)
                case Bool(False):
                    return evaluate0(orelse, env, out)
                case _:
                    raise AAQZTypeError("condition must be boolean")
        case Lambda(params, body):
            logger.debug("closure created: params=(%s)", " ".join(map(str, params)))
            return Closure(params, body, env)
        case Apply(callee, args):
            fn = evaluate0(callee, env, out)
            arg_values = [evaluate0(arg, env, out) for arg in args]
            return apply(fn, arg_values, out)
        case _:
            raise TypeError(f"not an AAQZ expression: {expr!r}")


def apply(fn: Value, args: list[Value], out: OutputSink) -> Value:
    """Apply an evaluated callee to evaluated arguments."""
    match fn:
        case Primitive(op):
            return apply_primitive(op, args, out)
        case Closure(params, body, captured):
            if len(params) != len(args):
                raise AAQZArityError(
                    f"arity mismatch between params and args: expected {len(params)}, got {len(args)}"
                )
            logger.debug("applying closure: params=(%s)", " ".join(map(str, params)))
            return evaluate0(body, captured.extend(params, args), out)
        case _:
            raise AAQZTypeError("cannot apply non-function value")
