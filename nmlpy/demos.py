"""Small command-line demonstrations of the matrix library."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TextIO

from nmlpy.echelon import ref, rref
from nmlpy.lup import lup_decompose, solve_backward, solve_forward
from nmlpy.matrix import Matrix, MatrixError, hstack, vstack
from nmlpy.qr import qr_decompose

DemoFunc = Callable[[argparse.Namespace, TextIO], None]

_DEMOS: dict[str, tuple[str, tuple[str, ...], DemoFunc]] = {}


def _demo(name: str, help_text: str, *paths: str) -> Callable[[DemoFunc], DemoFunc]:
    """Register a demo under name; paths names the file arguments it takes."""

    def register(func: DemoFunc) -> DemoFunc:
        _DEMOS[name] = (help_text, paths, func)
        return func

    return register


@contextmanager
def _open_data(path: str) -> Iterator[TextIO]:
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise MatrixError(
            f"Cannot open file '{path}'. Please check the path is correct "
            "and you have reading rights."
        ) from exc
    with handle:
        yield handle


def _show(out: TextIO, label: str | None, *matrices: Matrix) -> None:
    if label is not None:
        print(label, file=out)
    for m in matrices:
        m.dump(file=out)


@_demo("add-matrices", "add two random matrices")
def _add_matrices(args: argparse.Namespace, out: TextIO) -> None:
    m1 = Matrix.square_random(4, 0.0, 10.0)
    m2 = Matrix.square_random(4, 0.0, 10.0)
    _show(out, "m1=", m1)
    _show(out, "m2=", m2)
    m3 = m1 + m2
    _show(out, "m3=", m3)
    m1 += m2
    _show(out, "m1=", m1)


@_demo("backward-substitution", "solve U x = b read from a file", "path")
def _backward_substitution(args: argparse.Namespace, out: TextIO) -> None:
    with _open_data(args.path) as stream:
        a = Matrix.read(stream)
        b = Matrix.read(stream)
    x = solve_backward(a, b)
    _show(out, None, a, b, x)


@_demo("forward-substitution", "solve L x = b read from a file", "path")
def _forward_substitution(args: argparse.Namespace, out: TextIO) -> None:
    with _open_data(args.path) as stream:
        a = Matrix.read(stream)
        b = Matrix.read(stream)
    x = solve_forward(a, b)
    _show(out, None, a, b, x)


@_demo("concatenate", "concatenate matrices horizontally and vertically")
def _concatenate(args: argparse.Namespace, out: TextIO) -> None:
    eye = Matrix.identity(3)
    eye_x2 = eye.scaled(2.0)
    rndm = Matrix.random(3, 4, 1.0, 5.0)
    concats1 = hstack([eye, eye_x2])
    concats2 = hstack([concats1, rndm])
    print("\nConcatenate horizontally", file=out)
    _show(out, "I=", eye)
    _show(out, "Ix2=", eye_x2)
    _show(out, "rndm=", rndm)
    _show(out, "concats1=", concats1)
    _show(out, "concats2=", concats2)

    a = Matrix.random(3, 4, 1.0, 4.0)
    b = Matrix.random(5, 4, 10.0, 20.0)
    c = Matrix.identity(4)
    ab = vstack([a, b])
    _show(out, "\nA=", a)
    _show(out, "\nB=", b)
    _show(out, "\nC=", c)
    _show(out, "\nA concat B =", ab)


@_demo("random", "print a random 5x5 matrix")
def _random(args: argparse.Namespace, out: TextIO) -> None:
    _show(out, None, Matrix.random(5, 5, -10.0, 10.0))


@_demo("create", "create empty, square and identity matrices")
def _create(args: argparse.Namespace, out: TextIO) -> None:
    _show(out, "\nCreating an empty matrix with 2x3", Matrix(2, 3))
    _show(out, "\nCreating a square matrix 5x5 ", Matrix.square(5))
    eye = Matrix.identity(7)
    _show(
        out,
        "\nCreating an ID 7x7 Matrix and copying it into another matrix:",
        eye,
        eye.copy(),
    )


@_demo("from-array", "create matrices from a list of values")
def _from_array(args: argparse.Namespace, out: TextIO) -> None:
    values = [1.0, 0.2, 3.0, 4.0, 5.0, 3.1]
    _show(out, None, Matrix.from_values(3, 2, values))
    _show(out, None, Matrix.from_values(4, 2, values[:3]))


@_demo("from-file", "read matrices from files", "paths")
def _from_file(args: argparse.Namespace, out: TextIO) -> None:
    for path in args.paths:
        _show(out, None, Matrix.from_file(path))


@_demo("from-input", "read a matrix from standard input")
def _from_input(args: argparse.Namespace, out: TextIO) -> None:
    _show(out, None, Matrix.read(sys.stdin))


@_demo("determinant", "determinant of a random matrix")
def _determinant(args: argparse.Namespace, out: TextIO) -> None:
    m1 = Matrix.square_random(4, 0.0, 10.0)
    decomposition = lup_decompose(m1)
    _show(out, "m1=", m1)
    print(f"determinant={decomposition.determinant():f}", file=out)


@_demo("dot", "multiply two random matrices")
def _dot(args: argparse.Namespace, out: TextIO) -> None:
    m1 = Matrix.square_random(4, 0.0, 10.0)
    m2 = Matrix.square_random(4, 0.0, 10.0)
    _show(out, "m1=", m1)
    _show(out, "m2=", m2)
    _show(out, "m3=", m1 @ m2)


@_demo("inverse", "inverse of a fixed matrix")
def _inverse(args: argparse.Namespace, out: TextIO) -> None:
    print("\nInverse of a matrix:", file=out)
    values = [
        2.0, 7.0, 6.0, 1.0,
        9.0, 5.0, 0.0, 2.0,
        4.0, 3.0, 8.0, 3.0,
        3.0, 5.0, 1.0, 9.0,
    ]
    m = Matrix.from_values(4, 4, values)
    minv = lup_decompose(m).inverse()
    product = m @ minv
    print("m=", end="", file=out)
    m.dump(file=out)
    print("minv=", end="", file=out)
    minv.dump(file=out)
    print("(%e) m * minv=", end="", file=out)
    product.dump("%e\t", file=out)
    print("(%f) m * minv=", end="", file=out)
    product.dump("%f\t", file=out)


@_demo("ls-solve", "solve a random linear system")
def _ls_solve(args: argparse.Namespace, out: TextIO) -> None:
    a = Matrix.square_random(4, 1.0, 10.0)
    b = Matrix.random(4, 1, 1.0, 10.0)
    x = lup_decompose(a).solve(b)
    _show(out, None, x)


@_demo("lup", "LUP decomposition of a random matrix")
def _lup(args: argparse.Namespace, out: TextIO) -> None:
    m1 = Matrix.square_random(4, 0.0, 10.0)
    _show(out, "m1=", m1)
    decomposition = lup_decompose(m1)
    print("L, U, P:", file=out)
    out.write(decomposition.format())


@_demo("equality", "compare two random matrices")
def _equality(args: argparse.Namespace, out: TextIO) -> None:
    m1 = Matrix.random(2, 3, 1.0, 10.0)
    m2 = Matrix.random(2, 3, 1.0, 10.0)
    if m1.equals(m2, 0.001):
        print("Wow, what were the odds..", file=out)
    else:
        print("It's ok, nobody is that lucky!", file=out)
    if m1.same_shape(m2):
        print(
            "At least we know they both have the same number of rows and columns.",
            file=out,
        )


@_demo("multiply-rows", "multiply matrix rows by scalars")
def _multiply_rows(args: argparse.Namespace, out: TextIO) -> None:
    a = Matrix(4, 5)
    a.fill(1.0)
    for i in range(a.num_rows):
        a.scale_row(i, float(i))
    _show(out, None, a)
    _show(out, None, a.scaled_row(1, 5.0))


@_demo("qr", "QR decomposition of a matrix read from a file", "path")
def _qr(args: argparse.Namespace, out: TextIO) -> None:
    a = Matrix.from_file(args.path)
    decomposition = qr_decompose(a)
    _show(out, None, decomposition.Q, decomposition.R)


_ECHELON_VALUES = [
    0.0, 1.0, 2.0,
    1.0, 2.0, 1.0,
    2.0, 7.0, 8.0,
]


@_demo("rref", "reduced row echelon form of a fixed matrix")
def _rref(args: argparse.Namespace, out: TextIO) -> None:
    m1 = Matrix.from_values(3, 3, _ECHELON_VALUES)
    _show(out, "\nm1=", m1)
    _show(out, "\nrrefm1=", rref(m1))


@_demo("ref", "row echelon form of a fixed matrix")
def _ref(args: argparse.Namespace, out: TextIO) -> None:
    m1 = Matrix.from_values(3, 3, _ECHELON_VALUES)
    _show(out, "\nm1=", m1)
    _show(out, "\nrefm1=", ref(m1))


@_demo("remove", "remove a column and a row")
def _remove(args: argparse.Namespace, out: TextIO) -> None:
    m = Matrix.square_random(4, 1.0, 2.0)
    _show(out, None, m)
    less_columns = m.remove_column(1)
    _show(out, None, less_columns)
    _show(out, None, less_columns.remove_row(0))


@_demo("rows", "extract every row of a random matrix")
def _rows(args: argparse.Namespace, out: TextIO) -> None:
    print("\nExtract all matrix rows from a Matrix as matrices", file=out)
    m = Matrix.random(5, 5, -10.0, 10.0)
    _show(out, None, m)
    for i in range(m.num_rows):
        _show(out, None, m.row(i))


@_demo("columns", "extract every column of a random matrix")
def _columns(args: argparse.Namespace, out: TextIO) -> None:
    print("\nExtract all matrix columns from a Matrix as matrices", file=out)
    m = Matrix.random(5, 5, -10.0, 10.0)
    _show(out, None, m)
    for j in range(m.num_cols):
        _show(out, None, m.column(j))


@_demo("row-plus-row", "add multiples of rows to other rows")
def _row_plus_row(args: argparse.Namespace, out: TextIO) -> None:
    m = Matrix.random(5, 4, 1.0, 2.0)
    _show(out, None, m)
    m.add_row_multiple(2, 1, 1.0)
    m.add_row_multiple(0, 1, 2.0)
    _show(out, None, m)


@_demo("scalar-multiply", "multiply a matrix by a scalar")
def _scalar_multiply(args: argparse.Namespace, out: TextIO) -> None:
    m = Matrix.identity(5)
    new_m = m.scaled(2.0)
    if not m.equals(new_m, 0.0):
        print("It's normal to see this message.", file=out)
    m.scale(2.0)
    if m.equals(new_m, 0.0):
        print("It's even more normal to see this message.", file=out)


@_demo("set-all", "set every element to pi")
def _set_all(args: argparse.Namespace, out: TextIO) -> None:
    pi_mat = Matrix.square(5)
    pi_mat.fill(math.pi)
    _show(out, None, pi_mat)


@_demo("set-diagonal", "set the diagonal to pi")
def _set_diagonal(args: argparse.Namespace, out: TextIO) -> None:
    pi_mat = Matrix.square(5)
    pi_mat.set_diagonal(math.pi)
    _show(out, None, pi_mat)


@_demo("swap", "swap rows and columns of a random matrix")
def _swap(args: argparse.Namespace, out: TextIO) -> None:
    m = Matrix.square_random(8, 0.0, 10.0)
    print("m=", end="", file=out)
    m.dump(file=out)
    print("m= (...after swapping col1=1 with col2=2):", file=out)
    m.swap_columns(1, 2)
    m.dump(file=out)
    print(
        "newm= (...after swapping col1=0 with col2=1 and creating a new matrix):",
        file=out,
    )
    m.swapped_columns(0, 1).dump(file=out)
    print("m= (...after swapping row1=0 with row2=2)", file=out)
    m.swap_rows(0, 2)
    m.dump(file=out)


@_demo("transpose", "transpose a random row matrix")
def _transpose(args: argparse.Namespace, out: TextIO) -> None:
    m1 = Matrix.random(1, 5, 1.0, 10.0)
    _show(out, None, m1, m1.transpose())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nmlpy-demo", description="Run a matrix library demonstration."
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    sub = parser.add_subparsers(dest="demo", required=True, metavar="DEMO")
    for name, (help_text, paths, func) in _DEMOS.items():
        demo_parser = sub.add_parser(name, help=help_text)
        for path in paths:
            if path == "paths":
                demo_parser.add_argument(path, nargs="+", help="matrix data files")
            else:
                demo_parser.add_argument(path, help="matrix data file")
        demo_parser.set_defaults(run=func)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the demo named on the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.seed is not None:
        random.seed(args.seed)
    try:
        args.run(args, sys.stdout)
    except MatrixError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0