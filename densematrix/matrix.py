"""Dense row-major matrices of floats with basic arithmetic."""

from __future__ import annotations

from itertools import islice
from numbers import Real
from typing import Iterable, Iterator, Sequence, TextIO


class MatrixShapeError(ValueError):
    """Raised when matrix dimensions do not fit the requested operation."""


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class Matrix:
    """A matrix of ``height`` rows and ``width`` columns, zero-filled on creation."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise MatrixShapeError("matrix dimensions must be non-negative")
        self._width = width
        self._height = height
        self._data = [[0.0] * width for _ in range(height)]

    @classmethod
    def zeros(cls, width: int, height: int) -> "Matrix":
        """Return a zero matrix."""
        return cls(width, height)

    @classmethod
    def identity(cls, width: int, height: int) -> "Matrix":
        """Return a matrix with ones on the main diagonal."""
        m = cls(width, height)
        m.set_identity()
        return m

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        """Build a matrix from a sequence of equally long rows."""
        data = [[float(v) for v in row] for row in rows]
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise MatrixShapeError("all rows must have the same length")
        m = cls(width, len(data))
        m._data = data
        return m

    @classmethod
    def read(cls, width: int, height: int, stream: TextIO) -> "Matrix":
        """Read ``width * height`` whitespace-separated numbers row by row."""
        count = width * height
        values = [float(tok) for tok in islice(_tokens(stream), count)]
        if len(values) < count:
            raise ValueError(f"expected {count} numbers, got {len(values)}")
        m = cls(width, height)
        m._data = [values[r * width:(r + 1) * width] for r in range(height)]
        return m

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def rows(self) -> list[list[float]]:
        """Return a copy of the contents as a list of rows."""
        return [list(row) for row in self._data]

    def copy(self) -> "Matrix":
        return Matrix.from_rows(self._data) if self._height else Matrix(self._width, 0)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self._data[i][j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self._data[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def __str__(self) -> str:
        return "\n".join("".join(f"{v:8.4f} " for v in row) for row in self._data)

    def set_zero(self) -> None:
        self._data = [[0.0] * self._width for _ in range(self._height)]

    def set_identity(self) -> None:
        self.set_zero()
        for i in range(min(self._width, self._height)):
            self._data[i][i] = 1.0

    def _check_same_shape(self, other: "Matrix") -> None:
        if self._width != other._width or self._height != other._height:
            raise MatrixShapeError(
                f"shape mismatch: {self._height}x{self._width} "
                f"and {other._height}x{other._width}"
            )

    def assign(self, other: "Matrix") -> None:
        """Copy the contents of a matrix of the same shape into this one."""
        self._check_same_shape(other)
        self._data = other.rows()

    def transpose(self) -> None:
        """Transpose in place; non-square matrices swap their dimensions."""
        self._data = [list(col) for col in zip(*self._data)] if self._height else []
        self._width, self._height = self._height, self._width
        if not self._data:
            self._data = [[] for _ in range(self._height)]

    def _check_row(self, i: int) -> None:
        if not 0 <= i < self._height:
            raise IndexError(f"row index {i} out of range")

    def _check_col(self, j: int) -> None:
        if not 0 <= j < self._width:
            raise IndexError(f"column index {j} out of range")

    def swap_rows(self, i1: int, i2: int) -> None:
        self._check_row(i1)
        self._check_row(i2)
        self._data[i1], self._data[i2] = self._data[i2], self._data[i1]

    def swap_cols(self, j1: int, j2: int) -> None:
        self._check_col(j1)
        self._check_col(j2)
        for row in self._data:
            row[j1], row[j2] = row[j2], row[j1]

    def mul_row(self, i: int, factor: float) -> None:
        self._check_row(i)
        self._data[i] = [v * factor for v in self._data[i]]

    def add_rows(self, i1: int, i2: int) -> None:
        """Add row ``i2`` to row ``i1``."""
        self._check_row(i1)
        self._check_row(i2)
        self._data[i1] = [a + b for a, b in zip(self._data[i1], self._data[i2])]

    def norm(self) -> float:
        """Maximum absolute row sum (infinity norm)."""
        if not self._width or not self._height:
            return 0.0
        return max(sum(abs(v) for v in row) for row in self._data)

    def _elementwise(self, other: "Matrix", op) -> list[list[float]]:
        self._check_same_shape(other)
        return [
            [op(a, b) for a, b in zip(ra, rb)]
            for ra, rb in zip(self._data, other._data)
        ]

    def _with_data(self, data: list[list[float]]) -> "Matrix":
        m = Matrix(self._width, self._height)
        m._data = data
        return m

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._with_data(self._elementwise(other, lambda a, b: a + b))

    def __iadd__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._data = self._elementwise(other, lambda a, b: a + b)
        return self

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._with_data(self._elementwise(other, lambda a, b: a - b))

    def __isub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._data = self._elementwise(other, lambda a, b: a - b)
        return self

    def _scaled(self, scalar: float) -> list[list[float]]:
        return [[v * scalar for v in row] for row in self._data]

    def __mul__(self, scalar: float) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._with_data(self._scaled(scalar))

    def __rmul__(self, scalar: float) -> "Matrix":
        return self.__mul__(scalar)

    def __imul__(self, scalar: float) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        self._data = self._scaled(scalar)
        return self

    def __truediv__(self, scalar: float) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("matrix division by zero")
        return self._with_data(self._scaled(1.0 / scalar))

    def __itruediv__(self, scalar: float) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("matrix division by zero")
        self._data = self._scaled(1.0 / scalar)
        return self

    def _product(self, other: "Matrix") -> "Matrix":
        if self._width != other._height:
            raise MatrixShapeError(
                f"cannot multiply {self._height}x{self._width} "
                f"by {other._height}x{other._width}"
            )
        columns = list(zip(*other._data)) if other._height else [()] * other._width
        result = Matrix(other._width, self._height)
        result._data = [
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self._data
        ]
        return result

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._product(other)

    def __imatmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self.assign(self._product(other))
        return self