from __future__ import annotations

import logging
from typing import Iterable

from aaqz import SExpression
from aaqz.builtin.output import OutputSink, StdoutSink
from aaqz.builtin.primitives import primitive_symbols
from aaqz.evaluation.evaluator import evaluate
from aaqz.evaluation.serializer import serialize
from aaqz.reader.parser import parse
from aaqz.reader.reader import read
from aaqz.types.environment import Environment
from aaqz.types.symbol import Symbol
from aaqz.types.values import FALSE, TRUE, Primitive, Value

logger = logging.getLogger(__name__)


def top_env() -> Environment:
    """The top-level environment: every primitive, plus true and false."""
    bindings: dict[Symbol, Value] = {op: Primitive(op) for op in primitive_symbols()}
    bindings[Symbol("true")] = TRUE
    bindings[Symbol("false")] = FALSE
    return Environment(bindings)


class Interpreter:
    """
    Owns the top-level environment and the println sink, and runs surface
    data or program text through parse, evaluate and serialize.
    """

    def __init__(self, out: OutputSink | None = None):
        self.env: Environment = top_env()
        self.out: OutputSink = out if out is not None else StdoutSink()

    def interp(self, surface: SExpression) -> Value:
        """Parse and evaluate one surface datum."""
        return evaluate(parse(surface), self.env, self.out)

    def top_interp(self, surface: SExpression) -> str:
        """Parse, evaluate and serialize one surface datum."""
        return serialize(self.interp(surface))

    def run(self, forms: Iterable[SExpression]) -> list[str]:
        results = []
        for form in forms:
            result = self.top_interp(form)
            logger.debug("top-level form evaluated to %s", result)
            results.append(result)
        return results

    def eval(self, code: str) -> list[str]:
        """Read program text and run each top-level form in order."""
        return self.run(read(code))


def top_interp(surface: SExpression, out: OutputSink | None = None) -> str:
    return Interpreter(out).top_interp(surface)
