# linfit/linalg/matrix.py
"""
Dense Matrix Kernel

Row-major float64 matrices (numpy 2-D arrays).

- transpose(a)  -> a new (cols x rows) matrix
- multiply(a,b) -> (rows(a) x cols(b)), requires cols(a) == rows(b)
- invert(a)     -> Gauss-Jordan with partial pivoting on [A | I]

Every operation returns a fresh array; inputs are never modified.
"""
from __future__ import annotations

import numpy as np

from linfit.utils.errors import InvalidInputError, SingularMatrixError

SINGULAR_THRESHOLD = 1e-10


def _as_matrix(a, name: str) -> np.ndarray:
    m = np.array(a, dtype=float)
    if m.ndim != 2 or m.shape[0] == 0 or m.shape[1] == 0:
        raise InvalidInputError(f"{name} must be a non-empty 2-D matrix, got shape {m.shape}")
    return m


def identity(n: int) -> np.ndarray:
    return np.eye(n, dtype=float)


def transpose(a) -> np.ndarray:
    m = _as_matrix(a, "a")
    return np.ascontiguousarray(m.T)


def multiply(a, b) -> np.ndarray:
    ma = _as_matrix(a, "a")
    mb = _as_matrix(b, "b")
    if ma.shape[1] != mb.shape[0]:
        raise InvalidInputError(
            f"cannot multiply {ma.shape[0]}x{ma.shape[1]} by {mb.shape[0]}x{mb.shape[1]}: "
            f"cols(a) != rows(b)"
        )
    return ma @ mb


def invert(a) -> np.ndarray:
    """
    Inverse of a square matrix by Gauss-Jordan elimination.

    For each column i:
    1. pick the row k >= i with the largest |aug[k, i]| and swap it into row i
    2. fail if |pivot| < SINGULAR_THRESHOLD
    3. divide row i by the pivot
    4. subtract row i from every other row to clear column i

    Raises
    ------
    InvalidInputError
        a is not square
    SingularMatrixError
        a pivot fell below SINGULAR_THRESHOLD
    """
    m = _as_matrix(a, "a")
    n = m.shape[0]
    if m.shape[1] != n:
        raise InvalidInputError(f"only square matrices can be inverted, got {m.shape}")

    aug = np.hstack([m, identity(n)])

    for i in range(n):
        # ties keep the lowest row index
        max_row = i + int(np.argmax(np.abs(aug[i:, i])))
        if max_row != i:
            aug[[i, max_row]] = aug[[max_row, i]]

        pivot = aug[i, i]
        if abs(pivot) < SINGULAR_THRESHOLD:
            raise SingularMatrixError(
                f"Matrix is singular or nearly singular (pivot {pivot:.3e} at column {i})"
            )

        aug[i] /= pivot

        factors = aug[:, i].copy()
        factors[i] = 0.0
        aug -= np.outer(factors, aug[i])

    return aug[:, n:].copy()
