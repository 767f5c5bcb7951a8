# linfit/datasets.py
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from linfit.utils.errors import InvalidInputError


def as_matrix(X, name: str = "X") -> np.ndarray:
    """
    Coerce a feature matrix to a non-empty 2-D float array.
    Ragged rows fail here instead of deep inside training.
    """
    try:
        m = np.array(X, dtype=float)
    except ValueError as e:
        raise InvalidInputError(f"{name} is not a rectangular numeric matrix: {e}") from e

    if m.ndim != 2:
        raise InvalidInputError(f"{name} must be 2-D (samples x features), got shape {m.shape}")
    if m.shape[0] == 0 or m.shape[1] == 0:
        raise InvalidInputError("Training data cannot be empty")
    return m


def as_targets(Y, name: str = "Y") -> np.ndarray:
    """
    Like as_matrix, but a 1-D target vector becomes a single column.
    """
    try:
        m = np.array(Y, dtype=float)
    except ValueError as e:
        raise InvalidInputError(f"{name} is not a rectangular numeric matrix: {e}") from e

    if m.ndim == 1:
        m = m.reshape(-1, 1)
    if m.ndim != 2:
        raise InvalidInputError(f"{name} must be 1-D or 2-D, got shape {m.shape}")
    if m.shape[0] == 0 or m.shape[1] == 0:
        raise InvalidInputError("Training data cannot be empty")
    return m


def as_training_pair(X, Y) -> Tuple[np.ndarray, np.ndarray]:
    features = as_matrix(X, "X")
    targets = as_targets(Y, "Y")
    if features.shape[0] != targets.shape[0]:
        raise InvalidInputError(
            f"X and Y must have same number of samples: {features.shape[0]} != {targets.shape[0]}"
        )
    return features, targets


def as_vector(x, n_features: int) -> np.ndarray:
    try:
        v = np.array(x, dtype=float).reshape(-1)
    except ValueError as e:
        raise InvalidInputError(f"x is not a numeric feature vector: {e}") from e

    if v.shape[0] != n_features:
        raise InvalidInputError(f"expected {n_features} features, got {v.shape[0]}")
    return v


def one_hot(labels: Sequence[int], n_classes: int | None = None) -> np.ndarray:
    idx = np.asarray(labels, dtype=int).reshape(-1)
    if idx.size and idx.min() < 0:
        raise InvalidInputError("class labels must be non-negative")
    if n_classes is None:
        n_classes = int(idx.max()) + 1 if idx.size else 0
    if idx.size and idx.max() >= n_classes:
        raise InvalidInputError(f"label {int(idx.max())} out of range for {n_classes} classes")

    out = np.zeros((idx.size, n_classes), dtype=float)
    out[np.arange(idx.size), idx] = 1.0
    return out


def argmax(v) -> int:
    """
    Index of the largest entry; the first occurrence wins ties.
    """
    values = np.asarray(v, dtype=float).reshape(-1)
    best = 0
    for i in range(1, values.shape[0]):
        if values[i] > values[best]:
            best = i
    return best


def three_cluster_dataset() -> Tuple[np.ndarray, np.ndarray]:
    """
    15 points in the unit square, 5 per class:
    class 0 near (0, 0), class 1 near (1, 0), class 2 near (0, 1).
    Returns (X, one-hot Y).
    """
    X = np.array(
        [
            [0.05, 0.05], [0.10, 0.00], [0.00, 0.15], [0.12, 0.08], [0.20, 0.10],
            [0.90, 0.05], [1.00, 0.10], [0.85, 0.00], [0.95, 0.15], [0.80, 0.10],
            [0.05, 0.90], [0.10, 1.00], [0.00, 0.85], [0.15, 0.95], [0.10, 0.80],
        ]
    )
    labels = [0] * 5 + [1] * 5 + [2] * 5
    return X, one_hot(labels, 3)
