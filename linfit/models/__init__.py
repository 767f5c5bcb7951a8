"""
Estimators

- LinearEstimator     : regression / coarse one-hot classification
- SoftmaxClassifier   : calibrated class probabilities
- TrajectoryEstimator : 2-feature regression with a recorded descent path
"""
from .base import Estimator
from .linear_estimator import LinearEstimator
from .softmax_classifier import SoftmaxClassifier, softmax
from .threshold_view import ThresholdedBinaryView
from .trajectory_estimator import TrajectoryEstimator, TrajectoryPoint

__all__ = [
    "Estimator",
    "LinearEstimator",
    "SoftmaxClassifier",
    "softmax",
    "ThresholdedBinaryView",
    "TrajectoryEstimator",
    "TrajectoryPoint",
]
