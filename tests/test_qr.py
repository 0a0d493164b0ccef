import math

import pytest

from nmlpy.matrix import Matrix, MatrixError
from nmlpy.qr import (
    QR,
    column_l2norm,
    l2norms,
    normalize,
    normalize_inplace,
    qr_decompose,
    vector_dot,
)

TOLERANCE = 0.0001


def _m(rows):
    return Matrix.from_values(len(rows), len(rows[0]), [v for row in rows for v in row])


QR_CASES = [
    [[3.0, 0.0], [4.0, 5.0]],
    [[12.0, -51.0, 4.0], [6.0, 167.0, -68.0], [-4.0, 24.0, -41.0]],
    [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]],
    [[2.0, 7.0, 6.0, 1.0], [9.0, 5.0, 0.0, 2.0], [4.0, 3.0, 8.0, 3.0], [3.0, 5.0, 1.0, 9.0]],
]


@pytest.mark.parametrize("rows", QR_CASES)
def test_q_is_orthonormal_and_r_upper(rows):
    result = qr_decompose(_m(rows))
    n = result.Q.num_cols
    assert (result.Q.transpose() @ result.Q).equals(Matrix.identity(n), TOLERANCE)
    for i in range(result.R.num_rows):
        for j in range(min(i, result.R.num_cols)):
            assert result.R[i, j] == 0.0


def test_known_decomposition():
    result = qr_decompose(_m([[3.0, 0.0], [4.0, 5.0]]))
    assert isinstance(result, QR)
    assert result.Q.equals(_m([[0.6, -0.8], [0.8, 0.6]]), 1e-12)
    assert result.R.equals(_m([[5.0, 4.0], [0.0, 3.0]]), 1e-12)


def test_degenerate_column_is_rejected():
    with pytest.raises(MatrixError):
        qr_decompose(_m([[1.0, 1.0], [1.0, 1.0]]))


def test_wide_matrix_is_rejected():
    with pytest.raises(MatrixError):
        qr_decompose(_m([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))


def test_vector_dot():
    a = _m([[1.0, 2.0], [3.0, 4.0]])
    b = _m([[5.0], [6.0]])
    assert vector_dot(a, 1, b, 0) == pytest.approx(34.0)
    assert vector_dot(a, 0, a, 0) == pytest.approx(10.0)


def test_vector_dot_errors():
    a = _m([[1.0, 2.0], [3.0, 4.0]])
    with pytest.raises(MatrixError):
        vector_dot(a, 0, _m([[1.0], [2.0], [3.0]]), 0)
    with pytest.raises(MatrixError):
        vector_dot(a, 2, a, 0)
    with pytest.raises(MatrixError):
        vector_dot(a, 0, a, 5)


def test_column_l2norm():
    a = _m([[3.0, 1.0], [4.0, 1.0]])
    assert column_l2norm(a, 0) == pytest.approx(5.0)
    assert column_l2norm(a, 1) == pytest.approx(math.sqrt(2.0))
    with pytest.raises(MatrixError):
        column_l2norm(a, 2)


def test_l2norms():
    norms = l2norms(_m([[3.0, 0.0, 1.0], [4.0, 2.0, 0.0]]))
    assert norms.equals(_m([[5.0, 2.0, 1.0]]), 1e-12)


def test_normalize_returns_unit_columns_and_keeps_input():
    a = _m([[3.0, 0.0], [4.0, 2.0]])
    result = normalize(a)
    assert result.equals(_m([[0.6, 0.0], [0.8, 1.0]]), 1e-12)
    assert a.tolist() == [[3.0, 0.0], [4.0, 2.0]]


def test_normalize_inplace_modifies_matrix():
    a = _m([[0.0, 5.0], [2.0, 0.0]])
    normalize_inplace(a)
    assert a.tolist() == [[0.0, 1.0], [1.0, 0.0]]


def test_normalize_rejects_zero_column():
    with pytest.raises(MatrixError):
        normalize(_m([[1.0, 0.0], [1.0, 0.0]]))