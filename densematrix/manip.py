"""Matrix exponential and Gaussian elimination."""

from __future__ import annotations

from .matrix import Matrix, MatrixShapeError


class SingularMatrixError(ValueError):
    """Raised when a linear system has a (numerically) singular matrix."""


_PIVOT_EPS = 1e-12


def matrix_exp(m: Matrix, eps: float = 1e-10) -> Matrix:
    """Sum the Taylor series of exp(m) until a term's norm drops below eps."""
    if m.width != m.height:
        raise MatrixShapeError("matrix exponential needs a square matrix")
    result = Matrix.identity(m.width, m.height)
    term = m.copy()
    k = 1
    while term.norm() >= eps:
        result += term
        k += 1
        term = (term @ m) / k
    return result


def solve_gauss(a: Matrix, b: Matrix) -> Matrix:
    """Solve ``a @ x = b`` for a column ``b`` by elimination with partial pivoting."""
    if a.width != a.height or a.height != b.height or b.width != 1:
        raise MatrixShapeError("need a square matrix and a matching column")
    n = a.height
    rows = a.rows()
    rhs = [row[0] for row in b.rows()]

    for k in range(n):
        pivot = max(range(k, n), key=lambda i: (abs(rows[i][k]), -i))
        if pivot != k:
            rows[k], rows[pivot] = rows[pivot], rows[k]
            rhs[k], rhs[pivot] = rhs[pivot], rhs[k]
        if abs(rows[k][k]) < _PIVOT_EPS:
            raise SingularMatrixError("matrix is singular")
        for i in range(k + 1, n):
            factor = rows[i][k] / rows[k][k]
            rhs[i] -= factor * rhs[k]
            rows[i][k:] = [x - factor * y for x, y in zip(rows[i][k:], rows[k][k:])]

    solution = [0.0] * n
    for i in reversed(range(n)):
        tail = sum(c * x for c, x in zip(rows[i][i + 1:], solution[i + 1:]))
        solution[i] = (rhs[i] - tail) / rows[i][i]
    return Matrix.from_rows([[x] for x in solution]) if n else Matrix(1, 0)