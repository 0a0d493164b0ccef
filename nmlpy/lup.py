"""LU decomposition with partial pivoting and linear system solving."""

from __future__ import annotations

from dataclasses import dataclass

from nmlpy.matrix import DEFAULT_FORMAT, MIN_COEF, Matrix, MatrixError


def _pivot_row(matrix: Matrix, k: int) -> int:
    """Row at or below k whose element in column k has the largest magnitude."""
    best_value = matrix[k, k]
    best = k
    for i in range(k + 1, matrix.num_rows):
        if abs(matrix[i, k]) > best_value:
            best_value = abs(matrix[i, k])
            best = i
    return best


@dataclass(frozen=True)
class LUP:
    """Factors of P x A = L x U, with the number of row interchanges made."""

    L: Matrix
    U: Matrix
    P: Matrix
    num_permutations: int

    def determinant(self) -> float:
        """Determinant of the decomposed matrix."""
        product = 1.0
        for k in range(self.U.num_rows):
            product *= self.U[k, k]
        return -product if self.num_permutations % 2 else product

    def lu(self) -> Matrix:
        """U with the strictly lower part of L stored below its diagonal."""
        result = self.U.copy()
        for i in range(1, self.L.num_rows):
            for j in range(i):
                result[i, j] = self.L[i, j]
        return result

    def solve(self, b: Matrix) -> Matrix:
        """Solve A x = b for a column matrix b."""
        if b.num_rows != self.U.num_rows or b.num_cols != 1:
            raise MatrixError(
                f"Cannot solve system. b[{b.num_rows}][{b.num_cols}] should have size "
                f"b[{self.U.num_rows}][1]."
            )
        y = solve_forward(self.L, self.P @ b)
        return solve_backward(self.U, y)

    def inverse(self) -> Matrix:
        """Inverse of the decomposed matrix."""
        n = self.L.num_cols
        result = Matrix.square(n)
        identity = Matrix.identity(self.U.num_rows)
        for j in range(n):
            x = self.solve(identity.column(j))
            for i in range(x.num_rows):
                result[i, j] = x[i, 0]
        return result

    def format(self, fmt: str = DEFAULT_FORMAT) -> str:
        """L, U and P rendered one after another."""
        return self.L.format(fmt) + self.U.format(fmt) + self.P.format(fmt)


def lup_decompose(matrix: Matrix) -> LUP:
    """Decompose a square matrix so that P x A = L x U."""
    if not matrix.is_square:
        raise MatrixError(
            f"Cannot LU. Matrix ({matrix.num_rows}, {matrix.num_cols}) needs to be square."
        )
    n = matrix.num_rows
    lower = Matrix.square(n)
    upper = matrix.copy()
    perm = Matrix.identity(n)
    num_permutations = 0
    for j in range(upper.num_cols):
        pivot = _pivot_row(upper, j)
        if abs(upper[pivot, j]) < MIN_COEF:
            raise MatrixError("Cannot LU. Matrix is degenerate or almost degenerate.")
        if pivot != j:
            upper.swap_rows(j, pivot)
            lower.swap_rows(j, pivot)
            perm.swap_rows(j, pivot)
            num_permutations += 1
        for i in range(j + 1, upper.num_rows):
            mult = upper[i, j] / upper[j, j]
            upper.add_row_multiple(i, j, -mult)
            lower[i, j] = mult
    lower.set_diagonal(1.0)
    return LUP(lower, upper, perm, num_permutations)


def _divide(value: float, diagonal: float, i: int) -> float:
    if diagonal == 0.0:
        raise MatrixError(f"Cannot solve system. Diagonal element [{i}][{i}] is zero.")
    return value / diagonal


def solve_forward(lower: Matrix, b: Matrix) -> Matrix:
    """Solve L x = b using the lower triangular part of lower."""
    n = lower.num_cols
    x = Matrix(n, 1)
    for i in range(n):
        tmp = b[i, 0] - sum(lower[i, j] * x[j, 0] for j in range(i))
        x[i, 0] = _divide(tmp, lower[i, i], i)
    return x


def solve_backward(upper: Matrix, b: Matrix) -> Matrix:
    """Solve U x = b using the upper triangular part of upper."""
    n = upper.num_cols
    x = Matrix(n, 1)
    for i in reversed(range(n)):
        tmp = b[i, 0] - sum(upper[i, j] * x[j, 0] for j in range(i, n))
        x[i, 0] = _divide(tmp, upper[i, i], i)
    return x