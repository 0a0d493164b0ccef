"""Row echelon forms by Gauss and Gauss-Jordan elimination."""

from __future__ import annotations

from nmlpy.matrix import MIN_COEF, Matrix


def _first_pivot(matrix: Matrix, col: int, start: int) -> int | None:
    """Index of the first row at or below start with a non-zero element in col."""
    return next(
        (i for i in range(start, matrix.num_rows) if abs(matrix[i, col]) > MIN_COEF),
        None,
    )


def _max_pivot(matrix: Matrix, col: int, start: int) -> int | None:
    """Index of the row at or below start with the largest absolute element in col."""
    best = max(range(start, matrix.num_rows), key=lambda i: abs(matrix[i, col]))
    return None if abs(matrix[best, col]) < MIN_COEF else best


def ref(matrix: Matrix) -> Matrix:
    """Row echelon form of matrix, computed by Gauss elimination."""
    result = matrix.copy()
    i = j = 0
    while j < result.num_cols and i < result.num_rows:
        pivot = _first_pivot(result, j, i)
        if pivot is None:
            j += 1
            continue
        if pivot != i:
            result.swap_rows(i, pivot)
        result.scale_row(i, 1.0 / result[i, j])
        for k in range(i + 1, result.num_rows):
            if abs(result[k, j]) > MIN_COEF:
                result.add_row_multiple(k, i, -result[k, j])
        i += 1
        j += 1
    return result


def rref(matrix: Matrix) -> Matrix:
    """Reduced row echelon form of matrix, computed by Gauss-Jordan elimination."""
    result = matrix.copy()
    i = j = 0
    while j < result.num_cols and i < result.num_rows:
        pivot = _max_pivot(result, j, i)
        if pivot is None:
            j += 1
            continue
        if pivot != i:
            result.swap_rows(i, pivot)
        result.scale_row(i, 1.0 / result[i, j])
        for k in range(result.num_rows):
            if k != i:
                result.add_row_multiple(k, i, -result[k, j])
        i += 1
        j += 1
    return result