import pytest
from hypothesis import given, strategies as st

from aaqz.builtin.output import BufferSink
from aaqz.builtin.primitives import PRIMITIVES, apply_primitive, primitive_symbols
from aaqz.evaluation.evaluator import evaluate
from aaqz.types.environment import Environment
from aaqz.types.errors import (
    AAQZArityError,
    AAQZDivisionByZeroError,
    AAQZTypeError,
    AAQZUnknownPrimitiveError,
    AAQZUserError,
)
from aaqz.types.expressions import Apply, Identifier, NumberLit
from aaqz.types.symbol import Symbol
from aaqz.types.values import Bool, Closure, ErrorValue, Number, Primitive, String


def prim(op, *args, out=None):
    return apply_primitive(Symbol(op), list(args), out if out is not None else BufferSink())


@given(st.integers(), st.integers())
def test_add_sub_mul(a, b):
    assert prim("+", Number(a), Number(b)) == Number(a + b)
    assert prim("-", Number(a), Number(b)) == Number(a - b)
    assert prim("*", Number(a), Number(b)) == Number(a * b)


@given(st.integers(), st.integers().filter(lambda n: n != 0))
def test_div_truncates_toward_zero(a, b):
    q = prim("/", Number(a), Number(b)).value
    assert abs(q) == abs(a) // abs(b)
    # remainder carries the sign of the dividend
    r = a - q * b
    assert r == 0 or (r > 0) == (a > 0)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (0, 5, 0),
    ]
)
def test_div_examples(a, b, expected):
    assert prim("/", Number(a), Number(b)) == Number(expected)


@given(st.integers())
def test_div_by_zero(a):
    with pytest.raises(AAQZDivisionByZeroError):
        prim("/", Number(a), Number(0))


def test_div_by_zero_through_evaluator():
    env = Environment({Symbol("/"): Primitive(Symbol("/"))})
    expr = Apply(Identifier(Symbol("/")), (NumberLit(1), NumberLit(0)))
    with pytest.raises(AAQZDivisionByZeroError) as exc:
        evaluate(expr, env)
    assert str(exc.value) == "AAQZ division by zero"


@given(st.integers(), st.integers())
def test_lte(a, b):
    assert prim("<=", Number(a), Number(b)) == Bool(a <= b)


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "<="])
@pytest.mark.parametrize("count", [0, 1, 3])
def test_binary_arity(op, count):
    with pytest.raises(AAQZArityError):
        prim(op, *[Number(1)] * count)


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "<="])
@pytest.mark.parametrize(
    "a,b",
    [
        (Number(1), String("2")),
        (String("1"), Number(2)),
        (Bool(True), Number(2)),
        (Number(1), Primitive(Symbol("+"))),
    ]
)
def test_binary_operand_kinds(op, a, b):
    with pytest.raises(AAQZTypeError):
        prim(op, a, b)


def test_type_checked_before_division_by_zero():
    with pytest.raises(AAQZTypeError):
        prim("/", String("1"), Number(0))


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (Number(1), Number(1), True),
        (Number(1), Number(2), False),
        (String("x"), String("x"), True),
        (Number(3), String("3"), False),
        (Bool(True), Bool(True), True),
        (Bool(True), String("true"), False),
        (Primitive(Symbol("+")), Primitive(Symbol("+")), True),
        (Primitive(Symbol("+")), Primitive(Symbol("-")), False),
    ]
)
def test_equal(a, b, expected):
    assert prim("equal?", a, b) == Bool(expected)


def test_equal_closures_compare_by_text_not_environment():
    body = Identifier(Symbol("x"))
    c1 = Closure((Symbol("x"),), body, Environment())
    c2 = Closure((Symbol("x"),), body, Environment({Symbol("y"): Number(1)}))
    c3 = Closure((Symbol("y"),), body, Environment())
    assert prim("equal?", c1, c2) == Bool(True)
    assert prim("equal?", c1, c3) == Bool(False)


@pytest.mark.parametrize("count", [0, 1, 3])
def test_equal_arity(count):
    with pytest.raises(AAQZArityError):
        prim("equal?", *[Number(1)] * count)


def test_println_writes_raw_string():
    sink = BufferSink()
    assert prim("println", String('say "hi"'), out=sink) == Bool(True)
    assert sink.lines == ['say "hi"']
    assert sink.getvalue() == 'say "hi"\n'


def test_println_to_stdout_by_default(capsys):
    assert apply_primitive(Symbol("println"), [String("hello")]) == Bool(True)
    assert capsys.readouterr().out == "hello\n"


@pytest.mark.parametrize("arg", [Number(1), Bool(False), Primitive(Symbol("+"))])
def test_println_requires_string(arg):
    sink = BufferSink()
    with pytest.raises(AAQZTypeError):
        prim("println", arg, out=sink)
    assert sink.lines == []


@pytest.mark.parametrize("count", [0, 2])
def test_println_arity(count):
    with pytest.raises(AAQZArityError):
        prim("println", *[String("a")] * count)


def test_seq_returns_last():
    assert prim("seq", Number(1)) == Number(1)
    assert prim("seq", Number(1), String("two"), Bool(False)) == Bool(False)
    with pytest.raises(AAQZArityError):
        prim("seq")


@pytest.mark.parametrize(
    "args,expected",
    [
        ([String("a")], "a"),
        ([String("a"), String("b")], "ab"),
        ([String("n="), Number(5)], "n=5"),
        ([Number(-1), Number(2)], "-12"),
        ([String("b: "), Bool(True)], "b: true"),
        ([Primitive(Symbol("+"))], "#<primop>"),
        ([Closure((), NumberLit(1), Environment())], "#<procedure>"),
    ]
)
def test_concat(args, expected):
    assert prim("++", *args) == String(expected)


@given(st.lists(st.one_of(st.integers(), st.text()), min_size=1))
def test_concat_strings_and_numbers(items):
    args = [Number(x) if isinstance(x, int) else String(x) for x in items]
    assert prim("++", *args) == String("".join(str(x) for x in items))


def test_concat_arity():
    with pytest.raises(AAQZArityError):
        prim("++")


def test_error_primitive():
    with pytest.raises(AAQZUserError) as exc:
        prim("error", String("boom"))
    assert "boom" in str(exc.value)
    assert str(exc.value) == 'AAQZ user-error: "boom"'
    with pytest.raises(AAQZArityError):
        prim("error")


def test_error_value_is_not_concatenable():
    from aaqz.types.errors import AAQZUnserializableError
    with pytest.raises(AAQZUnserializableError):
        prim("++", ErrorValue())


def test_unknown_primitive():
    with pytest.raises(AAQZUnknownPrimitiveError) as exc:
        prim("frobnicate", Number(1))
    assert "frobnicate" in str(exc.value)


def test_registry():
    names = {str(s) for s in primitive_symbols()}
    assert names == {"+", "-", "*", "/", "<=", "equal?", "println", "seq", "++", "error"}
    assert all(callable(fn) for fn in PRIMITIVES.values())
