import pytest

from symbolic_solver.exceptions import IncompleteExpressionError
from symbolic_solver.expression_tree import (
    parse, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode
)


def C(value):
    return ConstantNode(value)


def V(name):
    return VariableNode(name)


def add(a, b):
    return BinaryOpNode('+', a, b)


def sub(a, b):
    return BinaryOpNode('-', a, b)


def mul(a, b):
    return BinaryOpNode('*', a, b)


def div(a, b):
    return BinaryOpNode('/', a, b)


def pow_(a, b):
    return BinaryOpNode('^', a, b)


def neg(a):
    return mul(C(-1.0), a)


def test_single_variables_and_constants():
    assert parse("x") == V("x")
    assert parse("y  ") == V("y")
    assert parse(" z ") == V("z")
    assert parse("5") == C(5.0)
    assert parse("0.3674") == C(0.3674)
    assert parse("40.") == C(40.0)
    assert parse(" 4 5") == C(45.0)
    assert parse("3.7 ") == C(3.7)


def test_single_binary_operations():
    assert parse("5+3.4") == add(C(5.0), C(3.4))
    assert parse("x + 2") == add(V("x"), C(2.0))
    assert parse("4+  y") == add(C(4.0), V("y"))
    assert parse("4.2-6") == sub(C(4.2), C(6.0))
    assert parse("x * y") == mul(V("x"), V("y"))
    assert parse("3/ y") == div(C(3.0), V("y"))
    assert parse("x^2") == pow_(V("x"), C(2.0))


def test_single_functions():
    assert parse("abs(4.0)") == UnaryOpNode('abs', C(4.0))
    assert parse("sqrt ( 3 )") == UnaryOpNode('sqrt', C(3.0))
    assert parse("exp( x)") == UnaryOpNode('exp', V("x"))
    assert parse("log(y)") == UnaryOpNode('log', V("y"))
    assert parse("sin(0.314)") == UnaryOpNode('sin', C(0.314))
    assert parse("cos(0)") == UnaryOpNode('cos', C(0.0))
    assert parse("tan(z)") == UnaryOpNode('tan', V("z"))


def test_compound_expressions():
    assert parse("tan(3 * x)") == UnaryOpNode('tan', mul(C(3.0), V("x")))
    assert parse("x/(3 + exp(y))") == div(V("x"), add(C(3.0), UnaryOpNode('exp', V("y"))))
    assert parse("sin( x ) - 35.42/(y+2.0)") == sub(
        UnaryOpNode('sin', V("x")), div(C(35.42), add(V("y"), C(2.0))))
    assert parse("(2.7 ^ (log (35 ^ 1.0) ))") == pow_(
        C(2.7), UnaryOpNode('log', pow_(C(35.0), C(1.0))))


def test_precedence_and_associativity():
    assert parse("2.0 + x +15+y") == add(add(add(C(2.0), V("x")), C(15.0)), V("y"))
    assert parse("x-  5 - 3.2") == sub(sub(V("x"), C(5.0)), C(3.2))
    assert parse("x - (5-3.2)") == sub(V("x"), sub(C(5.0), C(3.2)))
    assert parse("x + 2.0 - y*3/4-2 * x") == sub(
        sub(add(V("x"), C(2.0)), div(mul(V("y"), C(3.0)), C(4.0))),
        mul(C(2.0), V("x")))
    # '^' is right associative and binds tighter than '*'
    assert parse("2.0 + x ^ 0.3 ^ y * 2") == add(
        C(2.0), mul(pow_(V("x"), pow_(C(0.3), V("y"))), C(2.0)))


def test_negative_sign():
    assert parse("-1-x") == sub(neg(C(1.0)), V("x"))
    assert parse("-(3 * x /2)") == neg(div(mul(C(3.0), V("x")), C(2.0)))
    assert parse("15.3 * -x*y^-3") == mul(
        mul(C(15.3), neg(V("x"))), pow_(V("y"), neg(C(3.0))))
    assert parse("--x + --(3.2-y)") == add(
        neg(neg(V("x"))), neg(neg(sub(C(3.2), V("y")))))


def test_negative_sign_applies_to_atom_only():
    assert parse("-x^2") == pow_(neg(V("x")), C(2.0))


def test_implicit_multiplication():
    assert parse("3x") == mul(C(3.0), V("x"))
    assert parse("3.2 y - 4 sin(5.01)") == sub(
        mul(C(3.2), V("y")), mul(C(4.0), UnaryOpNode('sin', C(5.01))))
    assert parse("3.2 y - 4 sin(5.01) *xlog(y)") == sub(
        mul(C(3.2), V("y")),
        mul(mul(mul(C(4.0), UnaryOpNode('sin', C(5.01))), V("x")), UnaryOpNode('log', V("y"))))
    assert parse("x (3tan(y) + 5(2/x))") == mul(
        V("x"), add(mul(C(3.0), UnaryOpNode('tan', V("y"))), mul(C(5.0), div(C(2.0), V("x")))))


def test_implicit_multiplication_binds_power_first():
    assert parse("2x^2") == mul(C(2.0), pow_(V("x"), C(2.0)))
    assert parse("x^2y") == mul(pow_(V("x"), C(2.0)), V("y"))


@pytest.mark.parametrize("text", [
    "(x+1",
    "x+",
    "-",
    ")",
    "*x",
    "x2",
    "sin x",
    "sin",
    "sin(x",
    "()",
    "x^",
    "2(3",
])
def test_incomplete_expressions(text):
    with pytest.raises(IncompleteExpressionError):
        parse(text)


def test_trailing_tokens_are_ignored_unless_strict():
    assert parse("(x+1))") == add(V("x"), C(1.0))
    with pytest.raises(IncompleteExpressionError):
        parse("(x+1))", strict=True)
    assert parse("x+1", strict=True) == add(V("x"), C(1.0))
