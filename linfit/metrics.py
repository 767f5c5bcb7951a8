# linfit/metrics.py
from __future__ import annotations

import numpy as np

from linfit.utils.errors import InvalidInputError

CROSS_ENTROPY_EPS = 1e-15


def _same_shape(a: np.ndarray, b: np.ndarray, what: str):
    if a.shape != b.shape:
        raise InvalidInputError(f"{what}: shape mismatch {a.shape} != {b.shape}")


def mean_squared_error(predictions, targets) -> float:
    """
    Squared error averaged over every entry (samples x outputs).
    """
    p = np.atleast_2d(np.asarray(predictions, dtype=float))
    t = np.atleast_2d(np.asarray(targets, dtype=float))
    _same_shape(p, t, "mean_squared_error")
    return float(np.mean((p - t) ** 2))


def cross_entropy(probabilities, onehot, eps: float = CROSS_ENTROPY_EPS) -> float:
    """
    Mean over samples of -log(p_true + eps).

    Every entry where the one-hot target is exactly 1 contributes.
    """
    p = np.atleast_2d(np.asarray(probabilities, dtype=float))
    y = np.atleast_2d(np.asarray(onehot, dtype=float))
    _same_shape(p, y, "cross_entropy")
    losses = -np.log(p + eps)
    return float(np.sum(losses[y == 1.0]) / p.shape[0])


def accuracy(predicted, actual) -> float:
    a = np.asarray(predicted).reshape(-1)
    b = np.asarray(actual).reshape(-1)
    _same_shape(a, b, "accuracy")
    if a.size == 0:
        raise InvalidInputError("accuracy of an empty set is undefined")
    return float(np.mean(a == b))
