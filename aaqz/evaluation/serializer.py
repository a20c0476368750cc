"""Printable forms of runtime values."""

from __future__ import annotations

from aaqz.types.errors import AAQZUnserializableError
from aaqz.types.values import Bool, Closure, Number, Primitive, String, Value

PRIMOP_TAG = "#<primop>"
PROCEDURE_TAG = "#<procedure>"


def serialize(value: Value) -> str:
    """Render `value` as the text a program's result is reported with.

    Raises AAQZUnserializableError for anything that is not a well-formed value.
    """
    match value:
        case Number(n):
            return str(n)
        case String(s):
            return f'"{s}"'
        case Bool(b):
            return "true" if b else "false"
        case Primitive():
            return PRIMOP_TAG
        case Closure():
            return PROCEDURE_TAG
        case _:
            raise AAQZUnserializableError(f"serialize: unimplemented value type {type(value).__name__}")


def canonical_text(value: Value) -> str:
    # Kind name plus fields; closure environments are left out of the repr.
    return repr(value)
