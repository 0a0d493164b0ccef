import pytest

from nmlpy.lup import LUP, lup_decompose, solve_backward, solve_forward
from nmlpy.matrix import Matrix, MatrixError

TOLERANCE = 0.0001


def _m(rows):
    return Matrix.from_values(len(rows), len(rows[0]), [v for row in rows for v in row])


def _col(values):
    return Matrix.from_values(len(values), 1, values)


SQUARES = [
    [[1.0, 2.0], [3.0, 4.0]],
    [[6.0, 1.0, 1.0], [4.0, -2.0, 5.0], [2.0, 8.0, 7.0]],
    [[2.0, 7.0, 6.0, 1.0], [9.0, 5.0, 0.0, 2.0], [4.0, 3.0, 8.0, 3.0], [3.0, 5.0, 1.0, 9.0]],
    [[0.0, 1.0], [1.0, 0.0]],
]


@pytest.mark.parametrize("rows", SQUARES)
def test_p_times_a_equals_l_times_u(rows):
    a = _m(rows)
    lup = lup_decompose(a)
    assert (lup.P @ a).equals(lup.L @ lup.U, TOLERANCE)


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([[1.0, 2.0], [3.0, 4.0]], -2.0),
        ([[2.0, 0.0, 0.0], [0.0, 3.0, 0.0], [0.0, 0.0, 4.0]], 24.0),
        ([[6.0, 1.0, 1.0], [4.0, -2.0, 5.0], [2.0, 8.0, 7.0]], -306.0),
        ([[0.0, 1.0], [1.0, 0.0]], -1.0),
    ],
)
def test_determinant(rows, expected):
    assert lup_decompose(_m(rows)).determinant() == pytest.approx(expected, rel=TOLERANCE)


def test_decomposition_of_two_by_two():
    lup = lup_decompose(_m([[1.0, 2.0], [3.0, 4.0]]))
    assert lup.num_permutations == 1
    assert lup.P.tolist() == [[0.0, 1.0], [1.0, 0.0]]
    assert lup.L.equals(_m([[1.0, 0.0], [1.0 / 3.0, 1.0]]), 1e-12)
    assert lup.U.equals(_m([[3.0, 4.0], [0.0, 2.0 / 3.0]]), 1e-12)
    assert lup.lu().equals(_m([[3.0, 4.0], [1.0 / 3.0, 2.0 / 3.0]]), 1e-12)


def test_inverse_of_known_matrix():
    inv = lup_decompose(_m([[4.0, 7.0], [2.0, 6.0]])).inverse()
    assert inv.equals(_m([[0.6, -0.7], [-0.2, 0.4]]), TOLERANCE)


@pytest.mark.parametrize("rows", SQUARES)
def test_matrix_times_inverse_is_identity(rows):
    a = _m(rows)
    inv = lup_decompose(a).inverse()
    assert (a @ inv).equals(Matrix.identity(a.num_rows), TOLERANCE)


def test_solve_two_by_two():
    lup = lup_decompose(_m([[2.0, 1.0], [1.0, 3.0]]))
    assert lup.solve(_col([3.0, 5.0])).equals(_col([0.8, 1.4]), TOLERANCE)


def test_solve_reproduces_right_hand_side():
    a = _m(SQUARES[2])
    b = _col([1.0, 2.0, 3.0, 4.0])
    x = lup_decompose(a).solve(b)
    assert (a @ x).equals(b, TOLERANCE)


def test_solve_rejects_wrong_shape():
    lup = lup_decompose(_m([[2.0, 1.0], [1.0, 3.0]]))
    with pytest.raises(MatrixError):
        lup.solve(_col([1.0, 2.0, 3.0]))
    with pytest.raises(MatrixError):
        lup.solve(_m([[1.0, 2.0], [3.0, 4.0]]))


def test_non_square_is_rejected():
    with pytest.raises(MatrixError):
        lup_decompose(_m([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))


def test_degenerate_is_rejected():
    with pytest.raises(MatrixError):
        lup_decompose(_m([[1.0, 2.0], [2.0, 4.0]]))


def test_solve_forward():
    x = solve_forward(_m([[2.0, 0.0], [3.0, 1.0]]), _col([4.0, 7.0]))
    assert x.equals(_col([2.0, 1.0]), TOLERANCE)


def test_solve_forward_ignores_upper_part():
    x = solve_forward(_m([[2.0, 9.0], [3.0, 1.0]]), _col([4.0, 7.0]))
    assert x.equals(_col([2.0, 1.0]), TOLERANCE)


def test_solve_backward():
    x = solve_backward(_m([[2.0, 1.0], [0.0, 4.0]]), _col([5.0, 8.0]))
    assert x.equals(_col([1.5, 2.0]), TOLERANCE)


def test_solve_backward_ignores_lower_part():
    x = solve_backward(_m([[2.0, 1.0], [7.0, 4.0]]), _col([5.0, 8.0]))
    assert x.equals(_col([1.5, 2.0]), TOLERANCE)


def test_zero_diagonal_is_rejected():
    with pytest.raises(MatrixError):
        solve_forward(_m([[0.0, 0.0], [1.0, 1.0]]), _col([1.0, 1.0]))
    with pytest.raises(MatrixError):
        solve_backward(_m([[1.0, 1.0], [0.0, 0.0]]), _col([1.0, 1.0]))


def test_format_renders_l_u_and_p():
    lup = lup_decompose(_m([[2.0]]))
    assert lup.format("%g ") == "\n1 \n\n\n2 \n\n\n1 \n\n"


def test_lup_can_be_built_directly():
    lup = LUP(Matrix.identity(2), _m([[2.0, 1.0], [0.0, 3.0]]), Matrix.identity(2), 2)
    assert lup.determinant() == pytest.approx(6.0)