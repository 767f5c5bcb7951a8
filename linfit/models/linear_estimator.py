# linfit/models/linear_estimator.py
from __future__ import annotations

from time import perf_counter
from typing import Optional

import numpy as np

from linfit import logs
from linfit.datasets import as_matrix, as_training_pair
from linfit.linalg import invert, multiply, transpose
from linfit.metrics import mean_squared_error
from linfit.models.base import Estimator
from linfit.observability.progress import ProgressReporter
from linfit.utils.errors import InvalidInputError

INIT_SCALE = 0.01


class LinearEstimator(Estimator):
    """
    Multi-output linear map  y = w0 + W^T x

    Two construction modes, fixed for the lifetime of the instance:

        LinearEstimator(learning_rate=0.1, max_iterations=2000)   # gradient descent
        LinearEstimator(closed_form=True)                          # normal equation

    Closed form solves (X^T X)^-1 X^T y in one pass and raises
    SingularMatrixError when X^T X cannot be inverted; there is no
    iterative fallback.
    """

    def __init__(
        self,
        learning_rate: Optional[float] = None,
        max_iterations: Optional[int] = None,
        *,
        closed_form: bool = False,
        seed: int = 42,
        report_every: int = 200,
        progress: Optional[ProgressReporter] = None,
    ):
        super().__init__(seed=seed, report_every=report_every, progress=progress)

        if closed_form:
            if learning_rate is not None or max_iterations is not None:
                raise InvalidInputError("closed_form=True does not take learning_rate / max_iterations")
        else:
            if learning_rate is None or max_iterations is None:
                raise InvalidInputError("gradient descent needs learning_rate and max_iterations")
            if learning_rate <= 0:
                raise InvalidInputError(f"learning_rate must be > 0, got {learning_rate}")
            if max_iterations < 0:
                raise InvalidInputError(f"max_iterations must be >= 0, got {max_iterations}")

        self.closed_form = closed_form
        self.learning_rate = 0.0 if closed_form else float(learning_rate)
        self.max_iterations = 0 if closed_form else int(max_iterations)

    def __repr__(self) -> str:
        if self.closed_form:
            return "LinearEstimator(closed_form=True)"
        return f"LinearEstimator(learning_rate={self.learning_rate}, max_iterations={self.max_iterations})"

    # ------------------------------------------------------------------
    # training
    # ------------------------------------------------------------------
    @logs.catch("LinearEstimator training failed")
    def train(self, X, Y) -> None:
        features, targets = as_training_pair(X, Y)
        self._reset()

        if self.closed_form:
            weights = self._train_closed_form(features, targets)
        else:
            weights = self._train_gradient_descent(features, targets)

        self._weights = weights
        self._trained = True

    def _train_closed_form(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        logs.info("[Train] LinearEstimator closed form (normal equation)")
        start = perf_counter()

        # [1, x1, x2, ...]
        X_aug = np.hstack([np.ones((X.shape[0], 1)), X])

        X_T = transpose(X_aug)
        XTX_inv = invert(multiply(X_T, X_aug))
        XTY = multiply(X_T, Y)
        weights = multiply(XTX_inv, XTY)

        elapsed = perf_counter() - start
        mse = mean_squared_error(self._affine(weights, X), Y)
        logs.info(f"[Train] LinearEstimator closed form done in {elapsed * 1000:.1f} ms, mse={mse:.6f}")
        return weights

    def _train_gradient_descent(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        n_samples, n_features = X.shape
        n_outputs = Y.shape[1]

        weights = self._init_weights(n_features, n_outputs, INIT_SCALE)
        progress = self.progress
        progress.start("LinearEstimator gradient descent", self.max_iterations)

        for it in range(self.max_iterations):
            residual = self._affine(weights, X) - Y
            mse = float(np.sum(residual ** 2) / (n_samples * n_outputs))
            self._loss_history.append(mse)

            gradients = self._batch_gradients(X, residual)
            weights -= self.learning_rate * gradients / n_samples

            if progress.should_report(it, self.max_iterations):
                progress.update("LinearEstimator", it, self.max_iterations, mse=mse)

        progress.done("LinearEstimator gradient descent")
        return weights

    # ------------------------------------------------------------------
    # inference
    # ------------------------------------------------------------------
    def predict(self, x) -> np.ndarray:
        self._require_trained()
        return self._affine(self._weights, self._vector(x))

    def predict_batch(self, X) -> np.ndarray:
        self._require_trained()
        features = as_matrix(X)
        if features.shape[1] != self._weights.shape[0] - 1:
            raise InvalidInputError(
                f"expected {self._weights.shape[0] - 1} features, got {features.shape[1]}"
            )
        return self._affine(self._weights, features)
