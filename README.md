# nmlpy

A small numerical matrix library in plain Python, with no third-party
dependencies. It provides:

- building matrices: zeros, identity, random, from a flat list of values,
  from a text file or stream;
- element, row and column access, and row and column operations that either
  change the matrix in place or return a changed copy (scaling, swapping,
  adding a multiple of one row to another, removing rows and columns);
- horizontal and vertical concatenation;
- addition, subtraction, scalar multiplication, matrix product, transpose
  and trace;
- row echelon and reduced row echelon forms;
- LUP decomposition, determinant, inverse, and solving linear systems;
- column norms, column normalisation and QR decomposition (Gram-Schmidt).

Operations that cannot be carried out (mismatched dimensions, indices out of
range, non-square matrices where a square one is needed, degenerate
matrices, unreadable input) raise `nmlpy.matrix.MatrixError`, a subclass of
`ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Building matrices

```python
from nmlpy.matrix import Matrix, hstack, vstack

zeros = Matrix(2, 3)                     # 2 x 3, all zeros
square = Matrix.square(5)                # 5 x 5, all zeros
eye = Matrix.identity(3)
rnd = Matrix.random(3, 4, 1.0, 5.0)      # values drawn from [1.0, 5.0)

# Values fill the matrix row by row; missing values become 0.0,
# extra values are ignored.
m = Matrix.from_values(3, 2, [1.0, 0.2, 3.0, 4.0, 5.0, 3.1])
print(m)                                 # same as m.format()
print(m.tolist())
print(m.num_rows, m.num_cols, m.is_square)
```

A matrix must have at least one row and one column.

Matrices are read from text as the number of rows, the number of columns,
then the values row by row, all separated by whitespace:

```
3 3
1.0 2.0 3.0
4.0 5.0 6.0
7.0 8.0 10.0
```

```python
a = Matrix.from_file("matrix.data")

with open("system.data") as stream:      # several matrices, one after another
    lhs = Matrix.read(stream)
    rhs = Matrix.read(stream)
```

`format(fmt)` renders each element with a `%`-style format (default
`"%f\t\t"`); `dump(fmt, file)` writes that text to a file, standard output
by default.

### Elements, rows and columns

```python
m = Matrix.identity(4)
m[0, 3] = 2.5
print(m[0, 3])

m.scale_row(1, 5.0)                      # in place
copy = m.scaled_column(0, 2.0)           # new matrix, m unchanged
m.add_row_multiple(2, 1, 1.0)            # row 2 += 1.0 * row 1
m.swap_rows(0, 2)
m.swap_columns(1, 3)
m.fill(1.0)
m.set_diagonal(3.0)                      # square matrices only

first_row = m.row(0)                     # 1 x 4 matrix
first_col = m.column(0)                  # 4 x 1 matrix
smaller = m.remove_column(1).remove_row(0)

side_by_side = hstack([Matrix.identity(3), Matrix.identity(3) * 2.0])
stacked = vstack([Matrix.random(3, 4, 1.0, 4.0), Matrix.identity(4)])
```

Each in-place operation has a copying counterpart: `scaled_row`,
`scaled_column`, `with_row_multiple_added`, `scaled`, `swapped_rows`,
`swapped_columns`.

### Arithmetic

```python
a = Matrix.square_random(4, 0.0, 10.0)
b = Matrix.square_random(4, 0.0, 10.0)

total = a + b
difference = a - b
doubled = a * 2.0                        # or 2.0 * a, or a.scaled(2.0)
product = a @ b                          # or a.dot(b)
transposed = a.transpose()
print(a.trace())

a += b                                   # modifies a in place
print(a.equals(total, 0.0))              # True
print(a.same_shape(transposed))          # True
```

`equals(other, tolerance)` is true when the shapes match and no pair of
elements differs by more than `tolerance`.

### Row echelon forms

```python
from nmlpy.echelon import ref, rref

m = Matrix.from_values(3, 3, [0.0, 1.0, 2.0, 1.0, 2.0, 1.0, 2.0, 7.0, 8.0])
print(ref(m))                            # Gauss elimination
print(rref(m))                           # Gauss-Jordan elimination
```

### LUP decomposition and linear systems

```python
from nmlpy.lup import lup_decompose, solve_backward, solve_forward

a = Matrix.from_values(4, 4, [
    2.0, 7.0, 6.0, 1.0,
    9.0, 5.0, 0.0, 2.0,
    4.0, 3.0, 8.0, 3.0,
    3.0, 5.0, 1.0, 9.0,
])
lup = lup_decompose(a)                   # P * A = L * U
print(lup.L, lup.U, lup.P, lup.num_permutations)

print(lup.determinant())
inverse = lup.inverse()
print((a @ inverse).equals(Matrix.identity(4), 1e-6))   # True

b = Matrix.from_values(4, 1, [1.0, 2.0, 3.0, 4.0])
x = lup.solve(b)                         # solves A * x = b
combined = lup.lu()                      # U with L's multipliers below the diagonal
```

`solve_forward(lower, b)` and `solve_backward(upper, b)` solve triangular
systems directly, using only the lower or upper triangle of the matrix given;
a zero on its diagonal raises `MatrixError`.

### QR decomposition

```python
from nmlpy.qr import column_l2norm, l2norms, normalize, qr_decompose, vector_dot

qr = qr_decompose(a)                     # A = Q * R
print((qr.Q @ qr.R).equals(a, 1e-6))     # True

print(l2norms(a))                        # 1 x n matrix of column norms
print(column_l2norm(a, 0))
print(vector_dot(a, 0, a, 1))            # dot product of columns 0 and 1
unit_columns = normalize(a)              # normalize_inplace(a) changes a itself
```

`qr_decompose` needs at least as many rows as columns and linearly
independent columns.

## Demonstrations

The `nmlpy-demo` command runs one of a set of small demonstrations, named as
its argument:

```
nmlpy-demo inverse
nmlpy-demo --seed 42 lup
nmlpy-demo forward-substitution system.data
nmlpy-demo --help
```

`--seed` seeds the random generator used by the demonstrations that build
random matrices. The demonstrations are:

| Name | What it shows |
| --- | --- |
| `add-matrices` | adding two random matrices, with and without `+=` |
| `dot` | product of two random matrices |
| `concatenate` | `hstack` and `vstack` |
| `random` | a random 5 x 5 matrix |
| `create` | empty, square and identity matrices and a copy |
| `from-array` | `Matrix.from_values`, with and without enough values |
| `from-file PATH [PATH ...]` | reading matrices from files |
| `from-input` | reading a matrix from standard input |
| `forward-substitution PATH` | reading L and b from one file and solving L x = b |
| `backward-substitution PATH` | reading U and b from one file and solving U x = b |
| `determinant` | determinant of a random matrix |
| `inverse` | inverse of a fixed 4 x 4 matrix, checked by multiplication |
| `ls-solve` | solving a random linear system |
| `lup` | L, U and P of a random matrix |
| `qr PATH` | Q and R of a matrix read from a file |
| `ref`, `rref` | row echelon forms of a fixed matrix |
| `equality` | `equals` and `same_shape` |
| `multiply-rows` | scaling rows in place and by copy |
| `remove` | removing a column and a row |
| `rows`, `columns` | extracting every row or column |
| `row-plus-row` | adding multiples of one row to another |
| `scalar-multiply` | `scaled` against `scale` |
| `set-all`, `set-diagonal` | `fill` and `set_diagonal` with pi |
| `swap` | swapping rows and columns |
| `transpose` | transposing a random row matrix |

If a demonstration raises `MatrixError`, the message is written to standard
error and the command exits with status 1.

## Limits

All arithmetic is done on Python lists of floats, so the library suits
small matrices and teaching rather than heavy computation. There are no
sparse matrices, no eigenvalue or singular value routines, and no way to
write a matrix back to a file in the format it is read from.