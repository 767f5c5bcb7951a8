# linfit/models/trajectory_estimator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from linfit import logs
from linfit.datasets import as_matrix, as_training_pair
from linfit.models.base import Estimator
from linfit.observability.progress import ProgressReporter
from linfit.utils.errors import InvalidInputError

INIT_SCALE = 0.1


@dataclass(frozen=True)
class TrajectoryPoint:
    """
    One snapshot of the descent path.

    loss is the mean squared error of the full weights (bias included)
    at the moment the snapshot was taken, i.e. after that iteration's update,
    not the error of the pass that produced it.
    """

    weight1: float
    weight2: float
    loss: float


class TrajectoryEstimator(Estimator):
    """
    2-feature linear regression that records where gradient descent went.

    Snapshots:
    - before the first iteration
    - after every iteration i with i % record_every == 0
    - after the last iteration
    """

    N_FEATURES = 2

    def __init__(
        self,
        learning_rate: float,
        max_iterations: int,
        *,
        seed: int = 42,
        record_every: int = 5,
        report_every: int = 100,
        progress: Optional[ProgressReporter] = None,
    ):
        super().__init__(seed=seed, report_every=report_every, progress=progress)
        if learning_rate <= 0:
            raise InvalidInputError(f"learning_rate must be > 0, got {learning_rate}")
        if max_iterations < 0:
            raise InvalidInputError(f"max_iterations must be >= 0, got {max_iterations}")
        if record_every < 1:
            raise InvalidInputError(f"record_every must be >= 1, got {record_every}")

        self.learning_rate = float(learning_rate)
        self.max_iterations = int(max_iterations)
        self.record_every = int(record_every)
        self._trajectory: List[TrajectoryPoint] = []

    def __repr__(self) -> str:
        return f"TrajectoryEstimator(learning_rate={self.learning_rate}, max_iterations={self.max_iterations})"

    # ------------------------------------------------------------------
    # recorded path
    # ------------------------------------------------------------------
    @property
    def trajectory(self) -> Tuple[TrajectoryPoint, ...]:
        return tuple(self._trajectory)

    @property
    def weight_path(self) -> List[Tuple[float, float]]:
        return [(p.weight1, p.weight2) for p in self._trajectory]

    @property
    def loss_history(self) -> List[float]:
        return [p.loss for p in self._trajectory]

    def _reset(self):
        super()._reset()
        self._trajectory = []

    @staticmethod
    def squared_error(X, y, bias: float, w1: float, w2: float) -> float:
        """
        Mean squared error of  bias + w1*x1 + w2*x2  against y.

        Independent of any trained state; used to sample an error surface.
        """
        features, targets = as_training_pair(X, y)
        if features.shape[1] != TrajectoryEstimator.N_FEATURES or targets.shape[1] != 1:
            raise InvalidInputError(
                f"expected X (n x 2) and scalar targets, got {features.shape} / {targets.shape}"
            )
        residual = bias + w1 * features[:, 0] + w2 * features[:, 1] - targets[:, 0]
        return float(np.mean(residual ** 2))

    def _snapshot(self, weights: np.ndarray, X: np.ndarray, y: np.ndarray):
        residual = weights[0] + X @ weights[1:] - y
        self._trajectory.append(
            TrajectoryPoint(
                weight1=float(weights[1]),
                weight2=float(weights[2]),
                loss=float(np.mean(residual ** 2)),
            )
        )

    # ------------------------------------------------------------------
    # training
    # ------------------------------------------------------------------
    @logs.catch("TrajectoryEstimator training failed")
    def train(self, X, Y) -> None:
        features, targets = as_training_pair(X, Y)
        if features.shape[1] != self.N_FEATURES:
            raise InvalidInputError(f"TrajectoryEstimator needs exactly 2 features, got {features.shape[1]}")
        if targets.shape[1] != 1:
            raise InvalidInputError(f"TrajectoryEstimator needs a scalar target, got {targets.shape[1]} outputs")
        self._reset()

        y = targets[:, 0]
        n_samples = features.shape[0]

        # [w0, w1, w2]
        weights = self._init_weights(self.N_FEATURES, 1, INIT_SCALE)[:, 0]
        logs.info(
            f"[Train] TrajectoryEstimator start w0={weights[0]:.4f} w1={weights[1]:.4f} w2={weights[2]:.4f}"
        )
        self._snapshot(weights, features, y)

        progress = self.progress
        last = self.max_iterations - 1
        for it in range(self.max_iterations):
            residual = weights[0] + features @ weights[1:] - y
            gradients = np.concatenate([[residual.sum()], features.T @ residual]) / n_samples
            weights -= self.learning_rate * gradients

            if it % self.record_every == 0 or it == last:
                self._snapshot(weights, features, y)

            if progress.should_report(it, self.max_iterations):
                progress.update(
                    "TrajectoryEstimator", it, self.max_iterations,
                    mse=float(np.mean(residual ** 2)), w1=weights[1], w2=weights[2],
                )

        logs.info(
            f"[Train] TrajectoryEstimator final w0={weights[0]:.4f} w1={weights[1]:.4f} w2={weights[2]:.4f}"
        )
        self._weights = weights.reshape(-1, 1)
        self._trained = True

    def predict(self, x) -> float:
        self._require_trained()
        v = self._vector(x)
        return float(self._weights[0, 0] + v @ self._weights[1:, 0])

    def predict_batch(self, X) -> np.ndarray:
        self._require_trained()
        features = as_matrix(X)
        if features.shape[1] != self.N_FEATURES:
            raise InvalidInputError(f"expected 2 features, got {features.shape[1]}")
        return self._affine(self._weights, features)[:, 0]
