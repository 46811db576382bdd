"""
Compiled row-reduction kernels.

All kernels work in place on C-contiguous float64 matrices.
"""

import numpy as np
import numba


@numba.njit(cache=True)
def pivot_row(mat, col, start_row, tolerance):
    """Row at or below start_row with the largest |mat[row, col]|, topmost on ties; -1 if below tolerance"""
    max_idx = start_row
    for i in range(start_row + 1, mat.shape[0]):
        if abs(mat[i, col]) > abs(mat[max_idx, col]):
            max_idx = i
    if abs(mat[max_idx, col]) < tolerance:
        return -1
    return max_idx


@numba.njit(cache=True)
def swap_rows(mat, row1, row2):
    for j in range(mat.shape[1]):
        temp = mat[row1, j]
        mat[row1, j] = mat[row2, j]
        mat[row2, j] = temp


@numba.njit(cache=True)
def scale_row(mat, row, scale_factor):
    for j in range(mat.shape[1]):
        mat[row, j] = scale_factor * mat[row, j]


@numba.njit(cache=True)
def eliminate_below(mat, row, pivot_col):
    """Zero out pivot_col below row; expects mat[row, pivot_col] == 1 and zeros left of it"""
    for i in range(row + 1, mat.shape[0]):
        scale_factor = -1.0 * mat[i, pivot_col]
        for j in range(pivot_col, mat.shape[1]):
            mat[i, j] = mat[i, j] + scale_factor * mat[row, j]


@numba.njit(cache=True)
def eliminate(mat, row, pivot_col):
    """Zero out pivot_col in every row except row"""
    for i in range(mat.shape[0]):
        if i != row:
            scale_factor = -1.0 * mat[i, pivot_col]
            for j in range(pivot_col, mat.shape[1]):
                mat[i, j] = mat[i, j] + scale_factor * mat[row, j]


@numba.njit(cache=True)
def back_substitute(augmented):
    """Solve an upper unit-triangular augmented system"""
    dim = augmented.shape[0]
    answer = np.zeros(dim)
    for i in range(dim - 1, -1, -1):
        row_sum = augmented[i, dim]
        for k in range(dim - 1, i, -1):
            row_sum -= augmented[i, k] * answer[k]
        answer[i] = row_sum
    return answer


def round_half_up(values, places: int):
    """Round to `places` decimals with ties going toward positive infinity"""
    scale = 10.0 ** places
    return np.floor(np.asarray(values, dtype=np.float64) * scale + 0.5) / scale
