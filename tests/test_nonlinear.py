import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from symbolic_solver.exceptions import DidNotConvergeError, NoPivotError, UnboundVariableError
from symbolic_solver.expression_tree import Expression, parse, VariableTable
from symbolic_solver.solving import SolverConfig, nonlinear_solve, build_jacobian, evaluate_jacobian


@pytest.mark.parametrize("start", [0.1, -1.5, -0.625])
def test_linear_equation(start):
    assert_array_equal(nonlinear_solve([parse("8x +  5")], ["x"], [start]), [-0.625])


@pytest.mark.parametrize("start, root", [(2.7, 2.0), (0.8, 2.0), (-1.6, -3.0), (-5.0, -3.0)])
def test_quadratic_roots(start, root):
    assert_array_equal(nonlinear_solve([parse("x^2 + x - 6")], ["x"], [start]), [root])


SYSTEM = ["(3x^2-3)/(1+y^2)-2xz+2z", "2yz+((2y)(x^3-3x))/(1+y^2)^2", "(x-1)^2+y^2-9"]


@pytest.mark.parametrize("start, root", [
    ([-1.7, 0.2, -1.4], [-2.0, 0.0, -1.5]),
    ([4.2, 0.4, 7.3], [4.0, 0.0, 7.5]),
    ([1.1, -3.2, 0.01], [1.0, -3.0, 0.02]),
    ([0.8, 2.7, 0.02], [1.0, 3.0, 0.02]),
])
def test_three_variable_system(start, root):
    equations = [parse(text) for text in SYSTEM]
    assert_allclose(nonlinear_solve(equations, ["x", "y", "z"], start), root, rtol=0, atol=1e-12)


def test_accepts_expression_wrappers():
    result = nonlinear_solve([Expression.from_string("x^2 - 4")], ["x"], [3.0])
    assert_array_equal(result, [2.0])


def test_start_point_is_not_modified():
    start = [2.7]
    nonlinear_solve([parse("x^2 + x - 6")], ["x"], start)
    assert start == [2.7]


def test_no_real_root_does_not_converge():
    with pytest.raises(DidNotConvergeError):
        nonlinear_solve([parse("x^2 + 1")], ["x"], [0.5])


def test_singular_jacobian():
    with pytest.raises(DidNotConvergeError) as excinfo:
        nonlinear_solve([parse("x^2")], ["x"], [0.0])
    assert isinstance(excinfo.value.__cause__, NoPivotError)
    assert excinfo.value.iterations == 0


def test_iteration_cap():
    config = SolverConfig(max_iterations=1)
    with pytest.raises(DidNotConvergeError) as excinfo:
        nonlinear_solve([parse("x^2 + x - 6")], ["x"], [0.8], config)
    assert excinfo.value.iterations == 1


def test_unbound_variable():
    with pytest.raises(UnboundVariableError) as excinfo:
        nonlinear_solve([parse("x + y")], ["x"], [1.0])
    assert excinfo.value.name == "y"


def test_dimension_mismatch():
    with pytest.raises(ValueError):
        nonlinear_solve([parse("x - 1"), parse("y - 2")], ["x", "y"], [1.0])
    with pytest.raises(ValueError):
        nonlinear_solve([parse("x - 1")], ["x", "y"], [1.0, 1.0])


def test_rejects_non_expressions():
    with pytest.raises(TypeError):
        nonlinear_solve(["x - 1"], ["x"], [1.0])


def test_jacobian():
    equations = [parse("x y"), parse("x + y^2")]
    jacobian = build_jacobian(equations, ["x", "y"])
    values = evaluate_jacobian(jacobian, VariableTable.of("x", 2.0, "y", 3.0))
    assert_allclose(values, np.array([[3.0, 2.0], [1.0, 6.0]]))
