"""Column norms, normalisation and QR decomposition by Gram-Schmidt."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nmlpy.matrix import MIN_COEF, Matrix, MatrixError


@dataclass(frozen=True)
class QR:
    """Factors of A = Q x R."""

    Q: Matrix
    R: Matrix


def _require_col(matrix: Matrix, col: int) -> None:
    if not 0 <= col < matrix.num_cols:
        raise MatrixError(
            f"Cannot get column ({col}). The matrix has {matrix.num_cols} number of columns."
        )


def vector_dot(m1: Matrix, m1col: int, m2: Matrix, m2col: int) -> float:
    """Dot product of column m1col of m1 and column m2col of m2."""
    if m1.num_rows != m2.num_rows:
        raise MatrixError(
            f"The two vectors have different dimensions: {m1.num_rows} and {m2.num_rows}."
        )
    _require_col(m1, m1col)
    _require_col(m2, m2col)
    return sum(m1[i, m1col] * m2[i, m2col] for i in range(m1.num_rows))


def column_l2norm(matrix: Matrix, col: int) -> float:
    """Euclidean norm of one column."""
    _require_col(matrix, col)
    return math.sqrt(sum(matrix[i, col] ** 2 for i in range(matrix.num_rows)))


def l2norms(matrix: Matrix) -> Matrix:
    """Euclidean norm of every column, as a 1 x num_cols matrix."""
    return Matrix.from_values(
        1, matrix.num_cols, [column_l2norm(matrix, j) for j in range(matrix.num_cols)]
    )


def normalize_inplace(matrix: Matrix) -> None:
    """Scale every column of matrix to unit length."""
    norms = l2norms(matrix)
    for j in range(matrix.num_cols):
        if norms[0, j] < MIN_COEF:
            raise MatrixError(
                f"Vector on column {j} is degenerate or near degenerate. "
                "Cannot proceed further."
            )
    for j in range(matrix.num_cols):
        matrix.scale_column(j, 1.0 / norms[0, j])


def normalize(matrix: Matrix) -> Matrix:
    """Copy of matrix with every column scaled to unit length."""
    result = matrix.copy()
    normalize_inplace(result)
    return result


def qr_decompose(matrix: Matrix) -> QR:
    """Decompose matrix into orthonormal Q and upper triangular R."""
    if matrix.num_cols > matrix.num_rows:
        raise MatrixError(
            f"We cannot QR matrix[{matrix.num_rows}, {matrix.num_cols}] "
            "with more columns than rows."
        )
    q = matrix.copy()
    r = Matrix(matrix.num_rows, matrix.num_cols)
    for j in range(matrix.num_cols):
        aj = matrix.column(j)
        for k in range(j):
            rkj = vector_dot(matrix, j, q, k)
            r[k, j] = rkj
            aj -= q.column(k) * rkj
        for i in range(q.num_rows):
            q[i, j] = aj[i, 0]
        norm = column_l2norm(q, j)
        if norm < MIN_COEF:
            raise MatrixError(
                f"Vector on column {j} is degenerate or near degenerate. "
                "Cannot proceed further."
            )
        q.scale_column(j, 1.0 / norm)
        r[j, j] = norm
    return QR(q, r)