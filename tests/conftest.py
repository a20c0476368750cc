import pytest

from aaqz.builtin.output import BufferSink
from aaqz.interpreter import Interpreter, top_env


@pytest.fixture
def env():
    """Fresh top-level environment with every primitive bound."""
    return top_env()


@pytest.fixture
def sink():
    return BufferSink()


@pytest.fixture
def interp(sink):
    return Interpreter(out=sink)
