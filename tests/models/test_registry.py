#!filepath: tests/models/test_registry.py
import pytest

from linfit.config import EstimatorConfig
from linfit.models import LinearEstimator, SoftmaxClassifier, TrajectoryEstimator
from linfit.models.registry import build_estimator


def test_build_linear_gradient_descent():
    est = build_estimator(EstimatorConfig(kind="linear", learning_rate=0.2, max_iterations=10, seed=7))

    assert isinstance(est, LinearEstimator)
    assert not est.closed_form
    assert est.learning_rate == 0.2
    assert est.seed == 7


def test_build_linear_closed_form():
    est = build_estimator(EstimatorConfig(kind="linear", closed_form=True))

    assert isinstance(est, LinearEstimator)
    assert est.closed_form


def test_build_softmax():
    est = build_estimator(EstimatorConfig(kind="softmax", learning_rate=0.5, max_iterations=100))
    assert isinstance(est, SoftmaxClassifier)


def test_build_trajectory():
    est = build_estimator(
        EstimatorConfig(kind="trajectory", learning_rate=0.5, max_iterations=100, record_every=3)
    )
    assert isinstance(est, TrajectoryEstimator)
    assert est.record_every == 3


def test_built_estimators_do_not_share_weights(exact_linear_data):
    X, Y = exact_linear_data
    cfg = EstimatorConfig(kind="linear", learning_rate=0.1, max_iterations=20)
    a = build_estimator(cfg)
    b = build_estimator(cfg)
    a.train(X, Y)

    assert a.is_trained
    assert not b.is_trained
