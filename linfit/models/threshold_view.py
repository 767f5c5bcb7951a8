# linfit/models/threshold_view.py
from __future__ import annotations

import numpy as np

from linfit.utils.errors import InvalidInputError


class ThresholdedBinaryView:
    """
    Reads a scalar-output linear model as a 2-class classifier.

    predict(x)       -> [1 - p, p] with p = clamp(prediction, 0, 1)
    predict_class(x) -> 1 when the prediction is above threshold
    get_weights()    -> 3 x 2 matrix whose column difference is
                        (w0 - threshold) + w1*x1 + w2*x2, zero on the boundary
    """

    def __init__(self, estimator, threshold: float = 0.5):
        self.estimator = estimator
        self.threshold = float(threshold)

    def _scalar(self, x) -> float:
        out = np.asarray(self.estimator.predict(x), dtype=float).reshape(-1)
        if out.shape[0] != 1:
            raise InvalidInputError(f"expected a scalar-output estimator, got {out.shape[0]} outputs")
        return float(out[0])

    def predict(self, x) -> np.ndarray:
        p = min(1.0, max(0.0, self._scalar(x)))
        return np.array([1.0 - p, p])

    def predict_class(self, x) -> int:
        return int(self._scalar(x) > self.threshold)

    def get_weights(self) -> np.ndarray:
        w = np.asarray(self.estimator.get_weights(), dtype=float)
        if w.shape[1] != 1:
            raise InvalidInputError(f"expected a scalar-output estimator, got {w.shape[1]} outputs")

        out = np.zeros((w.shape[0], 2))
        out[:, 0] = w[:, 0]
        out[0, 0] -= self.threshold
        return out
