"""
  AAQZ parser

Converts untyped surface data into the AST of aaqz.types.expressions:

    - int                            -> NumberLit
    - str                            -> StringLit
    - Symbol                         -> Identifier
    - [if, c, t, e]                  -> If
    - [[p ...], =>, body]            -> Lambda
    - [f, a ...]                     -> Apply

The keywords `if` and `=>`, and lambda parameter names, may be given either as
text or as Symbols, so data built by hand and data produced by
aaqz.reader.reader parse the same way.
"""

from __future__ import annotations

from typing import Iterable

from aaqz import SExpression
from aaqz.types.errors import AAQZSyntaxError
from aaqz.types.expressions import (
    Apply,
    Expression,
    Identifier,
    If,
    Lambda,
    NumberLit,
    StringLit,
)
from aaqz.types.symbol import Symbol


IF = "if"
ARROW = "=>"


def is_keyword(node: SExpression, keyword: str) -> bool:
    if isinstance(node, Symbol):
        return node.id == keyword
    return isinstance(node, str) and node == keyword


def parse(node: SExpression) -> Expression:
    """Parse one surface datum. Raises AAQZSyntaxError on malformed input."""
    # bool is a subclass of int, and is not a leaf of the surface syntax
    if isinstance(node, bool):
        raise AAQZSyntaxError(f"boolean is not valid syntax: {node!r}")
    if isinstance(node, int):
        return NumberLit(node)
    if isinstance(node, str):
        return StringLit(node)
    if isinstance(node, Symbol):
        return Identifier(node)
    if isinstance(node, (list, tuple)):
        return parse_list(node)
    raise AAQZSyntaxError(f"unsupported expression type: {type(node).__name__}")


def parse_list(items: list | tuple) -> Expression:
    if not items:
        raise AAQZSyntaxError("invalid expression: empty list")

    head = items[0]

    if is_keyword(head, IF):
        if len(items) != 4:
            raise AAQZSyntaxError(
                f"if requires a condition, a then branch and an else branch, got {len(items) - 1} parts"
            )
        return If(parse(items[1]), parse(items[2]), parse(items[3]))

    if isinstance(head, (list, tuple)) and len(items) == 3 and is_keyword(items[1], ARROW):
        return Lambda(parse_params(head), parse(items[2]))

    callee = parse(head)
    return Apply(callee, tuple(parse(arg) for arg in items[1:]))


def parse_params(params: Iterable[SExpression]) -> tuple[Symbol, ...]:
    names: list[Symbol] = []
    for param in params:
        if isinstance(param, Symbol):
            name = param
        elif isinstance(param, str):
            name = Symbol(param)
        else:
            raise AAQZSyntaxError(f"invalid lambda parameter: {param!r}")
        if name in names:
            raise AAQZSyntaxError(f"duplicate lambda parameter: {name}")
        names.append(name)
    return tuple(names)


def parse_program(nodes: Iterable[SExpression]) -> list[Expression]:
    """Parse a sequence of top-level forms."""
    return [parse(node) for node in nodes]
