#!filepath: tests/models/test_threshold_view.py
import numpy as np
import pytest

from linfit.models import LinearEstimator, ThresholdedBinaryView, TrajectoryEstimator
from linfit.utils.errors import InvalidInputError


@pytest.fixture
def diagonal_model():
    # y = x1 + x2 on the unit square
    X = [[0, 0], [1, 0], [0, 1], [1, 1]]
    y = [0, 1, 1, 2]
    model = LinearEstimator(closed_form=True)
    model.train(X, y)
    return model


def test_predict_clamps_to_probabilities(diagonal_model):
    view = ThresholdedBinaryView(diagonal_model)

    assert np.allclose(view.predict([0.3, 0.1]), [0.6, 0.4])
    assert np.allclose(view.predict([1.0, 1.0]), [0.0, 1.0])
    assert np.allclose(view.predict([-1.0, -1.0]), [1.0, 0.0])


def test_predict_class(diagonal_model):
    view = ThresholdedBinaryView(diagonal_model)

    assert view.predict_class([0.1, 0.1]) == 0
    assert view.predict_class([0.4, 0.4]) == 1


def test_weights_shift_bias_by_threshold(diagonal_model):
    view = ThresholdedBinaryView(diagonal_model, threshold=0.5)
    w = view.get_weights()

    assert w.shape == (3, 2)
    assert np.allclose(w[:, 0], [-0.5, 1.0, 1.0], atol=1e-6)
    assert np.allclose(w[:, 1], 0.0)


def test_works_with_trajectory_estimator():
    X = [[0, 0], [1, 0], [0, 1], [1, 1]]
    est = TrajectoryEstimator(0.5, 2000)
    est.train(X, [0, 1, 1, 2])

    view = ThresholdedBinaryView(est)
    assert view.predict([0.0, 0.0])[0] > 0.9


def test_rejects_multi_output_models():
    model = LinearEstimator(closed_form=True)
    model.train([[0.0], [1.0], [2.0]], [[0, 1], [1, 0], [2, 1]])

    with pytest.raises(InvalidInputError):
        ThresholdedBinaryView(model).predict([1.0])


def test_predict_class_follows_custom_threshold(diagonal_model):
    view = ThresholdedBinaryView(diagonal_model, threshold=0.3)
    x = [0.2, 0.2]  # prediction 0.4

    assert view.predict_class(x) == 1
    assert view.predict_class([0.1, 0.1]) == 0

    # same side of the boundary that get_weights() reports
    w = view.get_weights()
    margin = (w[0, 0] - w[0, 1]) + (w[1, 0] - w[1, 1]) * x[0] + (w[2, 0] - w[2, 1]) * x[1]
    assert margin > 0
