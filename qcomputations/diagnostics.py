"""Random test matrices and checks on computed probabilities and eigenpairs."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np

from .config import QConfig
from .matrix import Matrix, MatrixStyle


def _generator(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _check_dims(n: int, m: int) -> None:
    if n < 0 or m < 0:
        raise ValueError(f"matrix dimensions must be non-negative, got {n}x{m}")


def rand_matrix(
    n: int,
    m: int,
    a: float,
    b: float,
    rng: np.random.Generator | None = None,
) -> Matrix:
    """An n x m real matrix with elements drawn uniformly from [a, b)."""
    _check_dims(n, m)
    values = _generator(rng).uniform(a, b, size=(n, m))
    return Matrix._wrap(values, MatrixStyle.C_STYLE)


def rand_complex_matrix(
    n: int,
    m: int,
    a: complex,
    b: complex,
    rng: np.random.Generator | None = None,
) -> Matrix:
    """An n x m complex matrix; real and imaginary parts are drawn between those of a and b."""
    _check_dims(n, m)
    a, b = complex(a), complex(b)
    gen = _generator(rng)
    real = gen.uniform(a.real, b.real, size=(n, m))
    imag = gen.uniform(a.imag, b.imag, size=(n, m))
    return Matrix._wrap(real + 1j * imag, MatrixStyle.C_STYLE)


def rand_hermitian_matrix(
    n: int,
    m: int,
    a: complex,
    b: complex,
    rng: np.random.Generator | None = None,
) -> Matrix:
    """A random Hermitian matrix with a real diagonal; it must be square."""
    _check_dims(n, m)
    if n != m:
        raise ValueError(f"a Hermitian matrix must be square, got {n}x{m}")
    a, b = complex(a), complex(b)
    gen = _generator(rng)
    real = gen.uniform(a.real, b.real, size=(n, n))
    imag = gen.uniform(a.imag, b.imag, size=(n, n))
    upper = np.triu(real + 1j * imag, k=1)
    values = upper + upper.conj().T + np.diag(np.diag(real)).astype(np.complex128)
    return Matrix._wrap(values, MatrixStyle.C_STYLE)


def binary_string(num: int, bits: int = 32) -> str:
    """The lowest ``bits`` bits of ``num`` in two's complement, most significant first."""
    if bits <= 0:
        raise ValueError("bits must be positive")
    return format(num & ((1 << bits) - 1), f"0{bits}b")


def probs_table(
    probs: Any,
    labels: Iterable[Any],
    time_vec: Sequence[float],
    width: int | None = None,
) -> str:
    """A text table: one line per label with its probability at each time point."""
    if width is None:
        width = QConfig.instance().width
    table = np.asarray(probs)
    labels = list(labels)
    if len(labels) > table.shape[0]:
        raise ValueError(f"{len(labels)} labels but only {table.shape[0]} rows of probabilities")
    if len(time_vec) > table.shape[1]:
        raise ValueError(f"{len(time_vec)} time points but only {table.shape[1]} columns")
    lines = []
    for row, label in zip(table, labels):
        cells = "".join(f"{float(np.real(row[i])):g}".rjust(width) + " " for i in range(len(time_vec)))
        lines.append(str(label).rjust(width) + " : " + cells + "\n")
    return "".join(lines)


def check_probs(
    probs: Any,
    basis_size: int,
    time_vec: Sequence[float],
    eps: float | None = None,
) -> list[tuple[float, float]]:
    """Time points where the first ``basis_size`` probabilities do not sum to one.

    Returns pairs of (time, sum) for every column whose sum differs from 1 by
    at least ``eps``.
    """
    if eps is None:
        eps = QConfig.instance().eps
    table = np.real(np.asarray(probs))
    if basis_size < 0 or basis_size > table.shape[0]:
        raise ValueError(f"basis size {basis_size} does not fit {table.shape[0]} rows")
    if len(time_vec) > table.shape[1]:
        raise ValueError(f"{len(time_vec)} time points but only {table.shape[1]} columns")
    sums = table[:basis_size, : len(time_vec)].sum(axis=0)
    return [
        (float(t), float(total))
        for t, total in zip(time_vec, sums)
        if abs(1.0 - total) >= eps
    ]


def eigen_residuals(
    eigenvalues: Sequence[float],
    eigenvectors: Matrix,
    matrix: Matrix,
) -> list[float]:
    """For each eigenpair, the Euclidean norm of A v - lambda v.

    Column i of ``eigenvectors`` is taken as the eigenvector of ``eigenvalues[i]``.
    """
    a = np.asarray(matrix)
    vectors = np.asarray(eigenvectors)
    if a.shape[0] != a.shape[1]:
        raise ValueError("the matrix must be square")
    if vectors.shape[0] != a.shape[1]:
        raise ValueError("eigenvectors do not match the matrix dimension")
    if len(eigenvalues) > vectors.shape[1]:
        raise ValueError("more eigenvalues than eigenvectors")
    residuals = []
    for i, value in enumerate(eigenvalues):
        v = vectors[:, i]
        residuals.append(float(np.linalg.norm(a @ v - value * v)))
    return residuals