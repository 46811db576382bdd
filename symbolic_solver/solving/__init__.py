"""Linear and nonlinear equation solvers."""

from .config import SolverConfig, DEFAULT_CONFIG
from .linear import (
    augment, partial_pivot, swap_rows, scale_row, eliminate_below, eliminate,
    round_half_up, linear_solve, linear_solve_general
)
from .nonlinear import build_jacobian, evaluate_jacobian, nonlinear_solve

__all__ = [
    'SolverConfig', 'DEFAULT_CONFIG',
    'augment', 'partial_pivot', 'swap_rows', 'scale_row', 'eliminate_below', 'eliminate',
    'round_half_up', 'linear_solve', 'linear_solve_general',
    'build_jacobian', 'evaluate_jacobian', 'nonlinear_solve'
]
