"""Dense real or complex matrices with an explicit storage order."""

from __future__ import annotations

import math
import numbers
from enum import IntEnum
from typing import Any, Callable, Iterable, Sequence

import numpy as np

from .config import QConfig


class MatrixStyle(IntEnum):
    """Storage order of the flat data: row-major or column-major."""

    C_STYLE = 120
    FORTRAN_STYLE = 121


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.number))


def _is_vector(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, (list, tuple))


def _normalise(array: np.ndarray) -> np.ndarray:
    if np.iscomplexobj(array):
        return np.asarray(array, dtype=np.complex128)
    return np.asarray(array, dtype=np.float64)


def _format_real(value: float, accuracy: int, max_size: int) -> str:
    text = f"{value:.{accuracy}f}"
    if len(text) > max_size:
        head = text[:max_size]
        text = head.rstrip(".") if "." in head else repr(float(value))
    return text


def _format_number(value: Any, accuracy: int, max_size: int) -> str:
    if isinstance(value, complex):
        imag = value.imag
        negative = imag < 0 or (imag == 0 and math.copysign(1.0, imag) < 0)
        sign = "-" if negative else "+"
        real_text = _format_real(value.real, accuracy, max_size)
        imag_text = _format_real(abs(imag), accuracy, max_size)
        return f"{real_text}{sign}{imag_text}j"
    return _format_real(float(value), accuracy, max_size)


def _format_element(value: Any) -> str:
    if isinstance(value, complex):
        return f"({value.real:g},{value.imag:g})"
    return f"{value:g}"


class Matrix:
    """A two-dimensional matrix of floats or complex numbers."""

    __slots__ = ("_a", "_style")
    __hash__ = None  # type: ignore[assignment]
    __array_ufunc__ = None

    def __init__(
        self,
        n: int,
        m: int,
        fill: Any = 0.0,
        style: MatrixStyle = MatrixStyle.C_STYLE,
    ) -> None:
        if n < 0 or m < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {n}x{m}")
        dtype = np.complex128 if np.iscomplexobj(fill) else np.float64
        self._a = np.full((n, m), fill, dtype=dtype)
        self._style = MatrixStyle(style)

    @classmethod
    def _wrap(cls, array: np.ndarray, style: MatrixStyle) -> Matrix:
        obj = cls.__new__(cls)
        obj._a = _normalise(array)
        obj._style = MatrixStyle(style)
        return obj

    @classmethod
    def from_rows(
        cls, rows: Iterable[Sequence[Any]], style: MatrixStyle = MatrixStyle.C_STYLE
    ) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        rows = [list(row) for row in rows]
        if not rows:
            raise ValueError("at least one row is required")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        return cls._wrap(np.array(rows).reshape(len(rows), width), style)

    @classmethod
    def from_function(
        cls,
        n: int,
        m: int,
        func: Callable[[int, int], Any],
        style: MatrixStyle = MatrixStyle.C_STYLE,
    ) -> Matrix:
        """Build a complex n x m matrix whose (i, j) element is func(i, j)."""
        if n < 0 or m < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {n}x{m}")
        array = np.empty((n, m), dtype=np.complex128)
        for i, j in np.ndindex(n, m):
            array[i, j] = func(i, j)
        return cls._wrap(array, style)

    @property
    def n(self) -> int:
        """Number of rows."""
        return self._a.shape[0]

    @property
    def m(self) -> int:
        """Number of columns."""
        return self._a.shape[1]

    @property
    def style(self) -> MatrixStyle:
        return self._style

    @property
    def is_c_style(self) -> bool:
        return self._style == MatrixStyle.C_STYLE

    @property
    def leading_dimension(self) -> int:
        """Stride between consecutive rows (C) or columns (Fortran) in the flat data."""
        return self.m if self.is_c_style else self.n

    def index(self, i: int, j: int) -> int:
        """Position of element (i, j) in the flat data."""
        if not (0 <= i < self.n and 0 <= j < self.m):
            raise IndexError(f"index ({i}, {j}) out of range for {self.n}x{self.m} matrix")
        return i * self.m + j if self.is_c_style else j * self.n + i

    def data(self) -> np.ndarray:
        """A copy of the elements laid out in this matrix's storage order."""
        return self._a.ravel(order="C" if self.is_c_style else "F").copy()

    def copy(self) -> Matrix:
        return Matrix._wrap(self._a.copy(), self._style)

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        return np.array(self._a, dtype=dtype)

    def __getitem__(self, key: Any) -> Any:
        value = self._a[key]
        return value.item() if np.ndim(value) == 0 else value.tolist()

    def __setitem__(self, key: Any, value: Any) -> None:
        if np.iscomplexobj(value) and not np.iscomplexobj(self._a):
            self._a = self._a.astype(np.complex128)
        self._a[key] = value

    def row(self, index: int) -> list:
        return self._a[index].tolist()

    def col(self, index: int) -> list:
        return self._a[:, index].tolist()

    def modify_row(self, index: int, values: Iterable[Any]) -> None:
        """Overwrite row ``index`` with the first m values."""
        values = list(values)
        if len(values) < self.m:
            raise ValueError(f"row needs {self.m} values, got {len(values)}")
        self[index, :] = np.array(values[: self.m])

    def modify_col(self, index: int, values: Iterable[Any]) -> None:
        """Overwrite column ``index`` with the first n values."""
        values = list(values)
        if len(values) < self.n:
            raise ValueError(f"column needs {self.n} values, got {len(values)}")
        self[:, index] = np.array(values[: self.n])

    def add_rows(self, count: int) -> None:
        """Append ``count`` zero rows."""
        if count < 0:
            raise ValueError("count must be non-negative")
        zeros = np.zeros((count, self.m), dtype=self._a.dtype)
        self._a = np.vstack([self._a, zeros])

    def add_cols(self, count: int) -> None:
        """Append ``count`` zero columns."""
        if count < 0:
            raise ValueError("count must be non-negative")
        zeros = np.zeros((self.n, count), dtype=self._a.dtype)
        self._a = np.hstack([self._a, zeros])

    def remove_rows(self, count: int) -> None:
        """Drop the last ``count`` rows."""
        if not 0 <= count <= self.n:
            raise ValueError(f"cannot remove {count} rows from {self.n}")
        self._a = self._a[: self.n - count].copy()

    def remove_cols(self, count: int) -> None:
        """Drop the last ``count`` columns."""
        if not 0 <= count <= self.m:
            raise ValueError(f"cannot remove {count} columns from {self.m}")
        self._a = self._a[:, : self.m - count].copy()

    def expand(self, count: int) -> None:
        self.add_rows(count)
        self.add_cols(count)

    def reduce(self, count: int) -> None:
        self.remove_rows(count)
        self.remove_cols(count)

    def submatrix(self, n: int, m: int, row_index: int, col_index: int) -> Matrix:
        """The n x m block whose top-left corner is (row_index, col_index)."""
        if min(n, m, row_index, col_index) < 0 or row_index + n > self.n or col_index + m > self.m:
            raise IndexError("submatrix does not fit inside the matrix")
        block = self._a[row_index : row_index + n, col_index : col_index + m]
        return Matrix._wrap(block.copy(), self._style)

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._a.T.copy(), self._style)

    def hermit(self) -> Matrix:
        """Conjugate transpose; defined for complex matrices only."""
        if not np.iscomplexobj(self._a):
            raise TypeError("hermitian conjugate requires a complex matrix")
        return Matrix._wrap(self._a.conj().T.copy(), self._style)

    def to_fortran_style(self) -> None:
        if self._style != MatrixStyle.C_STYLE:
            raise ValueError("matrix is not in C style")
        self._style = MatrixStyle.FORTRAN_STYLE

    def to_c_style(self) -> None:
        if self._style != MatrixStyle.FORTRAN_STYLE:
            raise ValueError("matrix is not in Fortran style")
        self._style = MatrixStyle.C_STYLE

    def to_rows(self) -> list:
        return self._a.tolist()

    def _check_compatible(self, other: Matrix) -> None:
        if self._a.shape != other._a.shape:
            raise ValueError(f"shape mismatch: {self._a.shape} and {other._a.shape}")
        if self._style != other._style:
            raise ValueError("matrices have different storage styles")

    def _matrix_product(self, other: Matrix) -> Matrix:
        if self.m != other.n:
            raise ValueError(f"cannot multiply {self.n}x{self.m} by {other.n}x{other.m}")
        return Matrix._wrap(self._a @ other._a, self._style)

    def _matvec(self, vector: Any) -> list:
        v = np.asarray(vector)
        if v.ndim != 1 or v.shape[0] != self.m:
            raise ValueError(f"vector length must be {self.m}")
        return (self._a @ v).tolist()

    def _vecmat(self, vector: Any) -> list:
        v = np.asarray(vector)
        if v.ndim != 1 or v.shape[0] != self.n:
            raise ValueError(f"vector length must be {self.n}")
        return (v @ self._a).tolist()

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._check_compatible(other)
            return Matrix._wrap(self._a + other._a, self._style)
        if _is_scalar(other):
            return Matrix._wrap(self._a + other, self._style)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._check_compatible(other)
            return Matrix._wrap(self._a - other._a, self._style)
        if _is_scalar(other):
            return Matrix._wrap(self._a - other, self._style)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return self._matrix_product(other)
        if _is_scalar(other):
            return Matrix._wrap(self._a * other, self._style)
        if _is_vector(other):
            return self._matvec(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return Matrix._wrap(other * self._a, self._style)
        if _is_vector(other):
            return self._vecmat(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return self._matrix_product(other)
        if _is_vector(other):
            return self._matvec(other)
        return NotImplemented

    def __rmatmul__(self, other: Any) -> Any:
        if _is_vector(other):
            return self._vecmat(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("matrix division by zero")
        return Matrix._wrap(self._a / other, self._style)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._style == other._style
            and self._a.shape == other._a.shape
            and bool(np.array_equal(self._a, other._a))
        )

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_rows()!r}, style={self._style.name})"

    def show(self, width: int | None = None) -> None:
        """Print the matrix, each element right-aligned in ``width`` characters."""
        if width is None:
            width = QConfig.instance().width
        for row in self.to_rows():
            print("".join(_format_element(value).rjust(width) + " " for value in row))
        print()

    def write_to_csv_file(self, filename: str) -> None:
        """Write the matrix as comma-separated rows using the configured precision."""
        config = QConfig.instance()
        accuracy = config.csv_num_accuracy
        max_size = config.csv_max_number_size
        with open(filename, "w", encoding="utf-8", newline="") as file:
            for row in self.to_rows():
                file.write(",".join(_format_number(v, accuracy, max_size) for v in row) + "\n")