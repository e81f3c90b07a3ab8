# densematrix

A small pure-Python library for dense matrices of floats. It provides element
access, row and column operations, arithmetic, the infinity norm, the matrix
exponential and a Gaussian-elimination solver for linear systems. It has no
third-party dependencies.

## Installation

```
pip install densematrix
```

To install with the test dependencies, use `pip install "densematrix[test]"`.

## Usage

Dimensions are always given as width first, then height. Elements are
indexed as `m[row, col]`. A new `Matrix(width, height)` is filled with zeros.

```python
from densematrix.matrix import Matrix, MatrixShapeError
from densematrix.manip import matrix_exp, solve_gauss, SingularMatrixError

a = Matrix.from_rows([[0, 0, 1], [0, 1, 0], [1, 0, 0]])
b = Matrix.from_rows([[8], [-11], [-3]])

x = solve_gauss(a, b)       # column matrix holding the solution
residual = a @ x - b
print(residual.norm())      # maximum absolute row sum, close to 0

m = Matrix.zeros(3, 3)
m[0, 0], m[1, 1], m[2, 2] = 1.0, 2.0, -1.0
print(matrix_exp(m, 1e-10))
```

### `densematrix.matrix`

`Matrix` can be built in several ways:

- `Matrix(width, height)` or `Matrix.zeros(width, height)` gives a zero matrix.
- `Matrix.identity(width, height)` gives ones on the main diagonal.
- `Matrix.from_rows(rows)` builds a matrix from equally long rows.
- `Matrix.read(width, height, stream)` reads whitespace-separated numbers row
  by row from a text stream. It raises `ValueError` if there are too few.

The properties `width` and `height` give the shape. `rows()` returns a copy
of the contents as a list of lists, and `copy()` returns an independent
matrix. Matrices compare equal when their shapes and contents match.
`str(m)` formats every element as `%8.4f` followed by a space, one row per
line.

Arithmetic works like this:

- `+` and `-` work between matrices of the same shape.
- `*` and `/` work with a real scalar. Dividing by zero raises
  `ZeroDivisionError`.
- `@` is the matrix product.
- All of them have in-place forms (`+=`, `-=`, `*=`, `/=`, `@=`). `@=`
  requires a result of the same shape as the left operand.

In-place helpers:

- `set_zero()` and `set_identity()` reset the contents.
- `assign(other)` copies from a matrix of the same shape.
- `transpose()` transposes in place and swaps the dimensions of
  non-square matrices.
- `swap_rows(i1, i2)` and `swap_cols(j1, j2)` exchange rows or columns.
- `mul_row(i, factor)` scales a row.
- `add_rows(i1, i2)` adds row `i2` to row `i1`.

`norm()` returns the infinity norm, which is the maximum absolute row sum. It
is 0 for an empty matrix.

Operands with mismatched shapes raise `MatrixShapeError`, a subclass of
`ValueError`. Row or column indices out of range in the row and column
helpers raise `IndexError`.

### `densematrix.manip`

- `matrix_exp(m, eps=1e-10)` sums the Taylor series of the exponential of a
  square matrix. It stops when a term's norm falls below `eps`.
- `solve_gauss(a, b)` solves `a @ x = b` for a square `a` and a one-column
  `b`. It uses Gaussian elimination with partial pivoting and returns `x` as
  a one-column matrix.

Both functions raise `MatrixShapeError` for unsuitable shapes. `solve_gauss`
raises `SingularMatrixError` (a `ValueError`) when a pivot is smaller than
`1e-12` in absolute value.

## Demo

```
densematrix-demo
```

The same demo runs with `python -m densematrix.cli`. It prints the
exponential of the diagonal matrix diag(1, 2, -1). It then solves a fixed
3×3 system and prints the solution, the residual `A*X - B` and the residual
norm. The command takes no options other than `--help`.

## Limitations

The demo always works on its built-in matrices. There is no command that
reads matrices from the user; use `Matrix.read` from your own code for that.
All computation is done in plain Python lists, so the library suits small
matrices rather than large numerical work.