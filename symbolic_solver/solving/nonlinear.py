"""
Newton's method for square nonlinear systems.

Each equation is an expression implicitly set equal to zero. The Jacobian is
built symbolically once, then evaluated and solved at every iteration.
"""

import numpy as np
from typing import List, Optional, Sequence, Union

from .config import SolverConfig, DEFAULT_CONFIG
from .kernels import round_half_up
from .linear import linear_solve
from ..exceptions import NoPivotError, DidNotConvergeError
from ..expression_tree.core.node import Node
from ..expression_tree.core.variables import VariableTable
from ..expression_tree.expression import Expression
from ..expression_tree.utils.validator import ExpressionValidator
from ..logging_system import log_info, log_warning, log_iteration

EquationLike = Union[Node, Expression]


def _as_node(equation: EquationLike) -> Node:
    if isinstance(equation, Expression):
        return equation.root
    if isinstance(equation, Node):
        return equation
    raise TypeError(f"Expected an expression tree, got {type(equation).__name__}")


def build_jacobian(equations: Sequence[Node], var_names: Sequence[str]) -> List[List[Node]]:
    """jacobian[i][j] is d(equations[i]) / d(var_names[j])"""
    return [[equation.differentiate(name) for name in var_names] for equation in equations]


def evaluate_jacobian(jacobian: Sequence[Sequence[Node]], table: VariableTable) -> np.ndarray:
    return np.array([[entry.evaluate(table) for entry in row] for row in jacobian], dtype=np.float64)


def nonlinear_solve(equations: Sequence[EquationLike], var_names: Sequence[str],
                    start: Sequence[float], config: Optional[SolverConfig] = None) -> np.ndarray:
    """Root of the system equations == 0 found by Newton's method from `start`.

    Coordinates follow the order of `var_names`. Converged when the Newton step
    norm drops below `config.convergence_tolerance`; the point is then rounded
    to `config.round_places` decimals. Raises DidNotConvergeError when the
    iteration cap is exceeded or the Jacobian becomes singular. Starting
    points with a zero coordinate are prone to singular Jacobians.
    """
    config = config or DEFAULT_CONFIG
    nodes = [_as_node(equation) for equation in equations]
    if not (len(nodes) == len(var_names) == len(start)):
        raise ValueError(
            f"Need as many equations as variables and start values, got "
            f"{len(nodes)}, {len(var_names)} and {len(start)}")
    ExpressionValidator.check_bindings(nodes, var_names)
    if ExpressionValidator.has_zero_coordinate(start):
        log_warning(f"Starting point {list(start)} contains a zero coordinate; the Jacobian may be singular")

    jacobian = build_jacobian(nodes, var_names)
    cur_point = np.array(start, dtype=np.float64)
    iter_count = 0

    while True:
        table = VariableTable.from_lists(var_names, cur_point)
        df = evaluate_jacobian(jacobian, table)
        b_vector = np.array([-1.0 * node.evaluate(table) for node in nodes], dtype=np.float64)

        try:
            step = linear_solve(df, b_vector, config)
        except NoPivotError as exc:
            log_warning(f"Singular Jacobian at iteration {iter_count}")
            raise DidNotConvergeError(
                iter_count, f"Jacobian is not invertible at iteration {iter_count}") from exc

        step_norm = float(np.sqrt(np.sum(step * step)))
        log_iteration(iter_count, step_norm, cur_point)

        if step_norm < config.convergence_tolerance:
            result = round_half_up(cur_point, config.round_places)
            log_info(f"Newton's method converged after {iter_count} iterations")
            return result
        if iter_count >= config.max_iterations:
            log_warning(f"Newton's method did not converge within {config.max_iterations} iterations")
            raise DidNotConvergeError(config.max_iterations)

        cur_point = step + cur_point
        iter_count += 1

