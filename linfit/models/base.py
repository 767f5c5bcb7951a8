# linfit/models/base.py
"""
Estimator (FINAL)

Estimator defines the capability shared by every model variant:

- train(X, Y)   : fit on a finite batch, runs to completion
- predict(x)    : inference for a single feature vector
- get_weights() : (F + 1) x O snapshot, row 0 = bias

Variants:
- LinearEstimator     (gradient descent | closed form)
- SoftmaxClassifier   (gradient descent on cross-entropy)
- TrajectoryEstimator (2 features, records the descent path)

Training is synchronous and deterministic for a given seed.
Each instance owns its weights exclusively.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from linfit.datasets import as_vector
from linfit.observability.progress import ProgressReporter
from linfit.utils.errors import NotTrainedError


class Estimator(ABC):
    """
    Abstract Estimator (FINAL)
    """

    def __init__(
        self,
        *,
        seed: int = 42,
        report_every: int = 200,
        progress: Optional[ProgressReporter] = None,
    ):
        self.seed = seed
        self.report_every = report_every
        self.progress = progress if progress is not None else ProgressReporter(every=report_every)

        self._weights: Optional[np.ndarray] = None
        self._trained = False
        self._loss_history: List[float] = []

    # ------------------------------------------------------------------
    # contract
    # ------------------------------------------------------------------
    @abstractmethod
    def train(self, X, Y) -> None:
        """
        Fit weights on X (n x F) and Y (n x O).
        """
        raise NotImplementedError

    @abstractmethod
    def predict(self, x) -> np.ndarray:
        raise NotImplementedError

    def get_weights(self) -> np.ndarray:
        self._require_trained()
        return self._weights.copy()

    @property
    def is_trained(self) -> bool:
        return self._trained

    @property
    def loss_history(self) -> List[float]:
        return list(self._loss_history)

    # ------------------------------------------------------------------
    # shared mechanics
    # ------------------------------------------------------------------
    def _require_trained(self):
        if not self._trained:
            raise NotTrainedError(f"{type(self).__name__} must be trained before prediction")

    def _reset(self):
        self._weights = None
        self._trained = False
        self._loss_history = []

    def _init_weights(self, n_features: int, n_outputs: int, scale: float) -> np.ndarray:
        """
        Uniform in [-scale/2, scale/2], from a generator seeded per call.
        """
        rng = np.random.default_rng(self.seed)
        return (rng.random((n_features + 1, n_outputs)) - 0.5) * scale

    @staticmethod
    def _affine(weights: np.ndarray, X: np.ndarray) -> np.ndarray:
        """
        bias + W^T x for every row of X
        """
        return weights[0] + X @ weights[1:]

    @staticmethod
    def _batch_gradients(X: np.ndarray, residual: np.ndarray) -> np.ndarray:
        """
        Row 0: residual summed over samples (bias)
        Row f: sum of residual * feature f
        """
        return np.vstack([residual.sum(axis=0, keepdims=True), X.T @ residual])

    def _vector(self, x) -> np.ndarray:
        return as_vector(x, self._weights.shape[0] - 1)
