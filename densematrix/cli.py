"""Demonstration of the matrix exponential and the Gaussian solver."""

from __future__ import annotations

import argparse

from .manip import SingularMatrixError, matrix_exp, solve_gauss
from .matrix import Matrix


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration and print the results."""
    parser = argparse.ArgumentParser(
        prog="densematrix",
        description="Demonstrate the matrix exponential and Gaussian elimination.",
    )
    parser.parse_args(argv)

    print("Testing matrix exponential:")
    m = Matrix(3, 3)
    m[0, 0] = 1.0
    m[1, 1] = 2.0
    m[2, 2] = -1.0
    print("Input matrix:")
    print(m)
    print("Exponential of matrix:")
    print(matrix_exp(m, 1e-10))

    print("\nTesting Gauss method:")
    a = Matrix.from_rows([[0.0, 0.0, 1.0], [0.0, 1.0, 0.0], [1.0, 0.0, 0.0]])
    b = Matrix.from_rows([[8.0], [-11.0], [-3.0]])
    print("Matrix A:")
    print(a)
    print("\nRight part B:")
    print(b)

    try:
        x = solve_gauss(a, b)
    except SingularMatrixError:
        x = None
    print("\nSolution X:")
    if x is None:
        print("NULL matrix")
        return 0
    print(x)

    residual = a @ x - b
    print("Residual A*X - B (should be near zero):")
    print(residual)
    print(f"Residual norm: {residual.norm():f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())