"""Dense matrices of floats with element, row and column operations."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Sequence
from itertools import chain
from numbers import Real
from typing import TextIO

MIN_COEF = 0.000000000000001
DEFAULT_FORMAT = "%f\t\t"


class MatrixError(ValueError):
    """Raised when an operation cannot be applied to the given matrices."""


def rand_interval(min_value: float, max_value: float) -> float:
    """Return a uniformly distributed number in [min_value, max_value)."""
    return min_value + random.random() * (max_value - min_value)


def _next_token(stream: TextIO) -> str:
    """Read one whitespace-delimited token, consuming nothing past it."""
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)
    return "".join(chars)


def _read_number(stream: TextIO, kind: type) -> float | int:
    token = _next_token(stream)
    if not token:
        raise MatrixError("Invalid matrix data: unexpected end of input.")
    try:
        return kind(token)
    except ValueError as exc:
        raise MatrixError(f"Invalid matrix data: cannot read {token!r}.") from exc


class Matrix:
    """A rectangular matrix of floats, with at least one row and one column."""

    __slots__ = ("_rows",)

    def __init__(self, num_rows: int, num_cols: int) -> None:
        if num_rows <= 0:
            raise MatrixError("Cannot create matrix with 0 number of rows.")
        if num_cols <= 0:
            raise MatrixError("Cannot create matrix with 0 number of cols.")
        self._rows: list[list[float]] = [[0.0] * num_cols for _ in range(num_rows)]

    @classmethod
    def _from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        data = [[float(v) for v in row] for row in rows]
        result = cls(len(data), len(data[0]) if data else 0)
        result._rows = data
        return result

    # Construction

    @classmethod
    def random(cls, num_rows: int, num_cols: int, min_value: float, max_value: float) -> Matrix:
        """Matrix whose elements are drawn uniformly from [min_value, max_value)."""
        result = cls(num_rows, num_cols)
        result._rows = [
            [rand_interval(min_value, max_value) for _ in range(num_cols)]
            for _ in range(num_rows)
        ]
        return result

    @classmethod
    def square(cls, size: int) -> Matrix:
        """Square matrix of zeros."""
        return cls(size, size)

    @classmethod
    def square_random(cls, size: int, min_value: float, max_value: float) -> Matrix:
        """Square matrix of random elements."""
        return cls.random(size, size, min_value, max_value)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Identity matrix of the given size."""
        result = cls(size, size)
        for i, row in enumerate(result._rows):
            row[i] = 1.0
        return result

    @classmethod
    def from_values(cls, num_rows: int, num_cols: int, values: Iterable[float]) -> Matrix:
        """Fill a matrix row by row from values; missing elements are 0.0."""
        result = cls(num_rows, num_cols)
        total = num_rows * num_cols
        flat = [float(v) for v in values][:total]
        flat.extend([0.0] * (total - len(flat)))
        result._rows = [flat[i * num_cols:(i + 1) * num_cols] for i in range(num_rows)]
        return result

    @classmethod
    def from_file(cls, path: str) -> Matrix:
        """Read a matrix from the file at path."""
        try:
            handle = open(path, encoding="utf-8")
        except OSError as exc:
            raise MatrixError(
                f"Cannot open file '{path}'. Please check the path is correct "
                "and you have reading rights."
            ) from exc
        with handle:
            return cls.read(handle)

    @classmethod
    def read(cls, stream: TextIO) -> Matrix:
        """Read the row count, column count and elements from a text stream.

        Only the tokens of one matrix are consumed, so several matrices can be
        read one after another from the same stream.
        """
        num_rows = _read_number(stream, int)
        num_cols = _read_number(stream, int)
        result = cls(num_rows, num_cols)
        for row in result._rows:
            for j in range(num_cols):
                row[j] = _read_number(stream, float)
        return result

    def copy(self) -> Matrix:
        """Independent copy of this matrix."""
        return type(self)._from_rows(self._rows)

    # Shape and equality

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    @property
    def num_cols(self) -> int:
        return len(self._rows[0])

    @property
    def is_square(self) -> bool:
        return self.num_rows == self.num_cols

    def same_shape(self, other: Matrix) -> bool:
        """True if both matrices have the same number of rows and columns."""
        return self.num_rows == other.num_rows and self.num_cols == other.num_cols

    def equals(self, other: Matrix, tolerance: float = 0.0) -> bool:
        """True if shapes match and no elements differ by more than tolerance."""
        if not self.same_shape(other):
            return False
        return all(
            not abs(a - b) > tolerance
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    # Printing

    def format(self, fmt: str = DEFAULT_FORMAT) -> str:
        """Render the matrix, formatting each element with a %-style format."""
        lines = "".join("".join(fmt % v for v in row) + "\n" for row in self._rows)
        return "\n" + lines + "\n"

    def dump(self, fmt: str = DEFAULT_FORMAT, file: TextIO | None = None) -> None:
        """Write the formatted matrix to file (standard output by default)."""
        (sys.stdout if file is None else file).write(self.format(fmt))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"

    # Element access

    def __getitem__(self, key: tuple[int, int]) -> float:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair.")
        i, j = key
        return self._rows[i][j]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair.")
        i, j = key
        self._rows[i][j] = float(value)

    def _require_row(self, row: int, message: str) -> None:
        if not 0 <= row < self.num_rows:
            raise MatrixError(message)

    def _require_col(self, col: int, message: str) -> None:
        if not 0 <= col < self.num_cols:
            raise MatrixError(message)

    def column(self, col: int) -> Matrix:
        """The given column as a new num_rows x 1 matrix."""
        self._require_col(
            col, f"Cannot get column ({col}). The matrix has {self.num_cols} number of columns."
        )
        return type(self)._from_rows([[row[col]] for row in self._rows])

    def row(self, row: int) -> Matrix:
        """The given row as a new 1 x num_cols matrix."""
        self._require_row(
            row, f"Cannot get row ({row}). The matrix has {self.num_rows} number of rows."
        )
        return type(self)._from_rows([self._rows[row]])

    def fill(self, value: float) -> None:
        """Set every element to value."""
        value = float(value)
        self._rows = [[value] * self.num_cols for _ in range(self.num_rows)]

    def set_diagonal(self, value: float) -> None:
        """Set every element of the main diagonal to value."""
        if not self.is_square:
            raise MatrixError(f"Cannot set diag with value(={value:.2f}). Matrix is not square.")
        for i, row in enumerate(self._rows):
            row[i] = float(value)

    # Row and column arithmetic

    def scale_row(self, row: int, factor: float) -> None:
        """Multiply a row by factor in place."""
        self._require_row(
            row, f"Cannot multiply row ({row}), maximum number of rows is {self.num_rows}."
        )
        self._rows[row] = [v * factor for v in self._rows[row]]

    def scaled_row(self, row: int, factor: float) -> Matrix:
        """Copy with a row multiplied by factor."""
        result = self.copy()
        result.scale_row(row, factor)
        return result

    def scale_column(self, col: int, factor: float) -> None:
        """Multiply a column by factor in place."""
        self._require_col(
            col, f"Cannot multiply col ({col}), maximum number of columns is {self.num_cols}."
        )
        for row in self._rows:
            row[col] *= factor

    def scaled_column(self, col: int, factor: float) -> Matrix:
        """Copy with a column multiplied by factor."""
        result = self.copy()
        result.scale_column(col, factor)
        return result

    def add_row_multiple(self, where: int, row: int, multiplier: float) -> None:
        """Add multiplier times row `row` to row `where`, in place."""
        if not (0 <= where < self.num_rows and 0 <= row < self.num_rows):
            raise MatrixError(
                f"Cannot add {multiplier:.2f} x (row={row}) to row={where}. "
                f"Total number of rows is: {self.num_rows}."
            )
        source = self._rows[row]
        self._rows[where] = [d + multiplier * s for d, s in zip(self._rows[where], source)]

    def with_row_multiple_added(self, where: int, row: int, multiplier: float) -> Matrix:
        """Copy with multiplier times row `row` added to row `where`."""
        result = self.copy()
        result.add_row_multiple(where, row, multiplier)
        return result

    def scale(self, factor: float) -> None:
        """Multiply every element by factor in place."""
        self._rows = [[v * factor for v in row] for row in self._rows]

    def scaled(self, factor: float) -> Matrix:
        """Copy with every element multiplied by factor."""
        result = self.copy()
        result.scale(factor)
        return result

    # Structure

    def remove_column(self, col: int) -> Matrix:
        """New matrix without the given column."""
        self._require_col(
            col,
            f"Cannot remove matrix column {col}. The value should be less than {self.num_cols}.",
        )
        return type(self)._from_rows([row[:col] + row[col + 1:] for row in self._rows])

    def remove_row(self, row: int) -> Matrix:
        """New matrix without the given row."""
        self._require_row(
            row, f"Cannot remove matrix row {row}. The value should be less than {self.num_rows}."
        )
        return type(self)._from_rows(self._rows[:row] + self._rows[row + 1:])

    def swap_rows(self, row1: int, row2: int) -> None:
        """Interchange two rows in place."""
        if not (0 <= row1 < self.num_rows and 0 <= row2 < self.num_rows):
            raise MatrixError(
                f"Cannot swap rows ({row1}, {row2}) because the matrix number of rows "
                f"is {self.num_rows}."
            )
        self._rows[row1], self._rows[row2] = self._rows[row2], self._rows[row1]

    def swapped_rows(self, row1: int, row2: int) -> Matrix:
        """Copy with two rows interchanged."""
        result = self.copy()
        result.swap_rows(row1, row2)
        return result

    def swap_columns(self, col1: int, col2: int) -> None:
        """Interchange two columns in place."""
        if not (0 <= col1 < self.num_cols and 0 <= col2 < self.num_cols):
            raise MatrixError(
                f"Cannot swap columns ({col1}, {col2}) because the matrix number of columns "
                f"is {self.num_cols}."
            )
        for row in self._rows:
            row[col1], row[col2] = row[col2], row[col1]

    def swapped_columns(self, col1: int, col2: int) -> Matrix:
        """Copy with two columns interchanged."""
        result = self.copy()
        result.swap_columns(col1, col2)
        return result

    # Operations

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self.same_shape(other):
            raise MatrixError("Cannot add two matrices with different dimensions.")
        self._rows = [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        return self

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self.same_shape(other):
            raise MatrixError("Cannot subtract two matrices with different dimensions.")
        self._rows = [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        return self

    def __mul__(self, factor: object) -> Matrix:
        if not isinstance(factor, Real):
            return NotImplemented
        return self.scaled(float(factor))

    __rmul__ = __mul__

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    def dot(self, other: Matrix) -> Matrix:
        """Matrix product self x other."""
        if self.num_cols != other.num_rows:
            raise MatrixError(
                "Cannot multiply two matrices where the number of columns of the first one "
                "is different than the number of rows of the second one."
            )
        columns = list(zip(*other._rows))
        return type(self)._from_rows(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._rows]
        )

    def transpose(self) -> Matrix:
        """New matrix with rows and columns exchanged."""
        return type(self)._from_rows([list(col) for col in zip(*self._rows)])

    def trace(self) -> float:
        """Sum of the main diagonal of a square matrix."""
        if not self.is_square:
            raise MatrixError("Cannot calculate trace. Matrix needs to be square.")
        return sum(row[i] for i, row in enumerate(self._rows))

    def tolist(self) -> list[list[float]]:
        """Elements as a fresh list of rows."""
        return [row[:] for row in self._rows]


def _checked(matrices: Iterable[Matrix | None]) -> list[Matrix]:
    mats = list(matrices)
    if not mats:
        raise MatrixError("Cannot concatenate an empty sequence of matrices.")
    for k, m in enumerate(mats):
        if m is None:
            raise MatrixError(
                f"Cannot find element {k} in the array (None). "
                f"Expected a total of: {len(mats)} elements."
            )
    return mats


def hstack(matrices: Iterable[Matrix]) -> Matrix:
    """Concatenate matrices with the same number of rows side by side."""
    mats = _checked(matrices)
    num_rows = mats[0].num_rows
    for m in mats[1:]:
        if m.num_rows != num_rows:
            raise MatrixError(
                "Cannot concatenate. Matrices have a different number of rows. "
                f"Expected {num_rows}, found: {m.num_rows}."
            )
    return Matrix._from_rows(
        [list(chain.from_iterable(m._rows[i] for m in mats)) for i in range(num_rows)]
    )


def vstack(matrices: Iterable[Matrix]) -> Matrix:
    """Concatenate matrices with the same number of columns one below another."""
    mats = _checked(matrices)
    num_cols = mats[0].num_cols
    for m in mats[1:]:
        if m.num_cols != num_cols:
            raise MatrixError(
                "Cannot concatenate. Matrices have a different number of cols. "
                f"Expected {num_cols}, found: {m.num_cols}."
            )
    return Matrix._from_rows([row for m in mats for row in m._rows])