"""
Gaussian elimination with partial pivoting.

linear_solve handles square systems with a unique solution; linear_solve_general
reduces any rectangular system to reduced row-echelon form and reports the
solution set as equations over x1..xn.
"""

import numpy as np
from typing import List, Optional, Sequence

from . import kernels
from .config import SolverConfig, DEFAULT_CONFIG
from ..exceptions import NoPivotError, NoSolutionError
from ..logging_system import log_debug


def _as_matrix(matrix) -> np.ndarray:
    mat = np.array(matrix, dtype=np.float64)
    if mat.ndim != 2 or mat.shape[0] == 0 or mat.shape[1] == 0:
        raise ValueError("matrix must be a non-empty rectangular 2-D array")
    return mat


def _as_vector(vector) -> np.ndarray:
    vec = np.array(vector, dtype=np.float64)
    if vec.ndim != 1:
        raise ValueError("vector must be one-dimensional")
    return vec


def augment(matrix, vector) -> np.ndarray:
    """Return a new matrix with `vector` appended as the rightmost column"""
    mat = _as_matrix(matrix)
    vec = _as_vector(vector)
    if mat.shape[0] != vec.shape[0]:
        raise ValueError(f"matrix has {mat.shape[0]} rows but vector has {vec.shape[0]} entries")
    return np.ascontiguousarray(np.column_stack((mat, vec)))


def partial_pivot(mat: np.ndarray, col: int, start_row: int,
                  tolerance: float = DEFAULT_CONFIG.pivot_tolerance) -> int:
    """Index of the pivot row for `col` searching from `start_row` down.

    Ties go to the topmost row. Raises NoPivotError when every candidate is
    numerically zero.
    """
    if not (0 <= col < mat.shape[1] and 0 <= start_row < mat.shape[0]):
        raise IndexError(f"column {col} / row {start_row} out of range for shape {mat.shape}")
    index = kernels.pivot_row(mat, col, start_row, tolerance)
    if index < 0:
        raise NoPivotError(col)
    return int(index)


def swap_rows(mat: np.ndarray, row1: int, row2: int):
    kernels.swap_rows(mat, row1, row2)


def scale_row(mat: np.ndarray, row: int, scale_factor: float):
    kernels.scale_row(mat, row, float(scale_factor))


def eliminate_below(mat: np.ndarray, row: int, pivot_col: int):
    kernels.eliminate_below(mat, row, pivot_col)


def eliminate(mat: np.ndarray, row: int, pivot_col: int):
    kernels.eliminate(mat, row, pivot_col)


def round_half_up(values, places: int):
    return kernels.round_half_up(values, places)


def linear_solve(matrix, vector, config: Optional[SolverConfig] = None) -> np.ndarray:
    """Unique solution of the square system Ax = b.

    Raises NoPivotError when the matrix is singular (no solution or infinitely
    many). Components are rounded to `config.round_places` decimals.
    """
    config = config or DEFAULT_CONFIG
    augmented = augment(matrix, vector)
    dim = augmented.shape[0]
    if augmented.shape[1] != dim + 1:
        raise ValueError(f"linear_solve needs a square matrix, got {dim}x{augmented.shape[1] - 1}")

    for j in range(dim):
        max_idx = partial_pivot(augmented, j, j, config.pivot_tolerance)
        kernels.swap_rows(augmented, j, max_idx)
        kernels.scale_row(augmented, j, 1.0 / augmented[j, j])
        kernels.eliminate_below(augmented, j, j)

    answer = kernels.back_substitute(augmented)
    return kernels.round_half_up(answer, config.round_places)


def _format_number(value: float) -> str:
    return repr(float(value))


def _format_row(coefficients: Sequence[float]) -> str:
    """Render nonzero coefficients as 'x1 - 0.32x3'; empty string for a zero row"""
    parts: List[str] = []
    for j, coefficient in enumerate(coefficients):
        if coefficient == 0:
            continue
        symbol = f"x{j + 1}"
        if not parts:
            parts.append(symbol if coefficient == 1 else f"{_format_number(coefficient)}{symbol}")
        elif coefficient < 0:
            magnitude = "" if coefficient == -1 else _format_number(-1.0 * coefficient)
            parts.append(f" - {magnitude}{symbol}")
        else:
            magnitude = "" if coefficient == 1 else _format_number(coefficient)
            parts.append(f" + {magnitude}{symbol}")
    return "".join(parts)


def linear_solve_general(matrix, vector, config: Optional[SolverConfig] = None) -> List[str]:
    """Solution set of the m-by-n system Ax = b as equations over x1..xn.

    Columns without a pivot are free variables. Zero rows with a zero right
    hand side are dropped; a zero row with a nonzero right hand side raises
    NoSolutionError.
    """
    config = config or DEFAULT_CONFIG
    augmented = augment(matrix, vector)
    rows = augmented.shape[0]
    cols = augmented.shape[1] - 1

    cur_row = 0
    cur_col = 0
    while cur_col < cols and cur_row < rows:
        try:
            max_idx = partial_pivot(augmented, cur_col, cur_row, config.pivot_tolerance)
        except NoPivotError:
            log_debug(f"column {cur_col + 1} has no pivot; x{cur_col + 1} is free")
            cur_col += 1
            continue
        kernels.swap_rows(augmented, cur_row, max_idx)
        kernels.scale_row(augmented, cur_row, 1.0 / augmented[cur_row, cur_col])
        kernels.eliminate(augmented, cur_row, cur_col)
        cur_row += 1
        cur_col += 1

    augmented = kernels.round_half_up(augmented, config.round_places)

    equations: List[str] = []
    for i in range(rows):
        lhs = _format_row(augmented[i, :cols])
        if lhs:
            equations.append(f"{lhs} = {_format_number(augmented[i, cols])}")
        elif augmented[i, cols] != 0:
            raise NoSolutionError()
        else:
            log_debug(f"row {i + 1} is redundant")
    return equations
