# linfit/models/softmax_classifier.py
from __future__ import annotations

from typing import Optional

import numpy as np

from linfit import logs
from linfit.datasets import argmax, as_matrix, as_training_pair
from linfit.metrics import CROSS_ENTROPY_EPS
from linfit.models.base import Estimator
from linfit.observability.progress import ProgressReporter
from linfit.utils.errors import InvalidInputError

INIT_SCALE = 0.01


def softmax(logits) -> np.ndarray:
    """
    Numerically stable softmax.

    The max logit is subtracted before exponentiating, so logits of
    magnitude 1e6 stay finite. Works on a vector or row-wise on a matrix.
    """
    z = np.asarray(logits, dtype=float)
    shifted = z - np.max(z, axis=-1, keepdims=True)
    e = np.exp(shifted)
    return e / np.sum(e, axis=-1, keepdims=True)


class SoftmaxClassifier(Estimator):
    """
    Multinomial logistic regression trained by batch gradient descent
    on cross-entropy. Y must be one-hot (n x K); K = 2 covers the binary case.
    """

    def __init__(
        self,
        learning_rate: float,
        max_iterations: int,
        *,
        seed: int = 42,
        report_every: int = 200,
        progress: Optional[ProgressReporter] = None,
    ):
        super().__init__(seed=seed, report_every=report_every, progress=progress)
        if learning_rate <= 0:
            raise InvalidInputError(f"learning_rate must be > 0, got {learning_rate}")
        if max_iterations < 0:
            raise InvalidInputError(f"max_iterations must be >= 0, got {max_iterations}")

        self.learning_rate = float(learning_rate)
        self.max_iterations = int(max_iterations)

    def __repr__(self) -> str:
        return f"SoftmaxClassifier(learning_rate={self.learning_rate}, max_iterations={self.max_iterations})"

    @property
    def n_classes(self) -> int:
        self._require_trained()
        return self._weights.shape[1]

    @logs.catch("SoftmaxClassifier training failed")
    def train(self, X, Y) -> None:
        features, targets = as_training_pair(X, Y)
        self._reset()

        n_samples, n_features = features.shape
        n_classes = targets.shape[1]

        weights = self._init_weights(n_features, n_classes, INIT_SCALE)
        progress = self.progress
        progress.start("SoftmaxClassifier gradient descent", self.max_iterations)

        true_class = targets == 1.0
        for it in range(self.max_iterations):
            probs = softmax(self._affine(weights, features))

            loss = float(-np.sum(np.log(probs[true_class] + CROSS_ENTROPY_EPS)) / n_samples)
            self._loss_history.append(loss)

            # d(cross-entropy)/d(logits) for a softmax output
            error = probs - targets
            gradients = self._batch_gradients(features, error)
            weights -= self.learning_rate * gradients / n_samples

            if progress.should_report(it, self.max_iterations):
                progress.update("SoftmaxClassifier", it, self.max_iterations, cross_entropy=loss)

        progress.done("SoftmaxClassifier gradient descent")

        self._weights = weights
        self._trained = True

    def predict(self, x) -> np.ndarray:
        """
        Class probabilities for one sample; they sum to 1.
        """
        self._require_trained()
        return softmax(self._affine(self._weights, self._vector(x)))

    def predict_class(self, x) -> int:
        return argmax(self.predict(x))

    def predict_proba_batch(self, X) -> np.ndarray:
        self._require_trained()
        features = as_matrix(X)
        if features.shape[1] != self._weights.shape[0] - 1:
            raise InvalidInputError(
                f"expected {self._weights.shape[0] - 1} features, got {features.shape[1]}"
            )
        return softmax(self._affine(self._weights, features))
