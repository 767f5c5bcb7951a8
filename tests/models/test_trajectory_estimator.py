#!filepath: tests/models/test_trajectory_estimator.py
import dataclasses

import numpy as np
import pytest

from linfit.models import TrajectoryEstimator, TrajectoryPoint
from linfit.utils.errors import InvalidInputError, NotTrainedError


@pytest.fixture
def plane_data():
    # y = 0.5 + 2*x1 - x2
    rng = np.random.default_rng(5)
    X = rng.uniform(0, 1, size=(25, 2))
    y = 0.5 + 2 * X[:, 0] - X[:, 1]
    return X, y


def test_snapshot_schedule(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.1, 12, record_every=5)
    est.train(X, y)

    # initial + iterations 0, 5, 10 + last (11)
    assert len(est.trajectory) == 5


def test_last_iteration_on_schedule_is_recorded_once(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.1, 11, record_every=5)
    est.train(X, y)

    # initial + iterations 0, 5, 10
    assert len(est.trajectory) == 4


def test_zero_iterations_keeps_initial_snapshot(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.1, 0)
    est.train(X, y)

    assert len(est.trajectory) == 1
    assert abs(est.trajectory[0].weight1) <= 0.05
    assert abs(est.trajectory[0].weight2) <= 0.05


def test_paths_are_parallel(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.1, 200)
    est.train(X, y)

    assert len(est.weight_path) == len(est.loss_history) == len(est.trajectory)
    for (w1, w2), loss, point in zip(est.weight_path, est.loss_history, est.trajectory):
        assert (w1, w2, loss) == (point.weight1, point.weight2, point.loss)


def test_final_snapshot_matches_weights(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.2, 500)
    est.train(X, y)

    w0, w1, w2 = est.get_weights()[:, 0]
    last = est.trajectory[-1]
    assert (last.weight1, last.weight2) == (w1, w2)
    assert last.loss == pytest.approx(TrajectoryEstimator.squared_error(X, y, w0, w1, w2))


def test_descent_lowers_the_error(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.5, 3000)
    est.train(X, y)

    assert est.loss_history[-1] < est.loss_history[0]
    assert est.predict([0.5, 0.5]) == pytest.approx(0.5 + 1.0 - 0.5, abs=0.05)


def test_squared_error_is_independent_of_training():
    X = [[1.0, 0.0], [0.0, 1.0]]
    y = [1.0, 1.0]

    assert TrajectoryEstimator.squared_error(X, y, 0.0, 1.0, 1.0) == 0.0
    assert TrajectoryEstimator.squared_error(X, y, 0.0, 0.0, 0.0) == 1.0
    assert TrajectoryEstimator.squared_error(X, y, 1.0, 0.0, 0.0) == 0.0


def test_squared_error_rejects_wrong_width():
    with pytest.raises(InvalidInputError):
        TrajectoryEstimator.squared_error([[1.0, 2.0, 3.0]], [1.0], 0.0, 0.0, 0.0)


def test_deterministic_for_a_seed(plane_data):
    X, y = plane_data
    a = TrajectoryEstimator(0.1, 50, seed=3)
    b = TrajectoryEstimator(0.1, 50, seed=3)
    a.train(X, y)
    b.train(X, y)

    assert a.trajectory == b.trajectory


def test_column_targets_accepted(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.1, 10)
    est.train(X, y.reshape(-1, 1))

    assert est.get_weights().shape == (3, 1)


def test_requires_two_features():
    est = TrajectoryEstimator(0.1, 10)
    with pytest.raises(InvalidInputError):
        est.train([[1.0, 2.0, 3.0]], [1.0])
    with pytest.raises(InvalidInputError):
        est.train([[1.0, 2.0]], [[1.0, 2.0]])


def test_predict_before_train_raises():
    with pytest.raises(NotTrainedError):
        TrajectoryEstimator(0.1, 10).predict([0.0, 0.0])


def test_points_are_frozen():
    p = TrajectoryPoint(weight1=1.0, weight2=2.0, loss=0.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.loss = 0.0


def test_retraining_clears_the_path(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.1, 12)
    est.train(X, y)
    est.train(X, y)

    assert len(est.trajectory) == 5


def test_snapshot_loss_is_taken_after_the_update(plane_data):
    X, y = plane_data
    est = TrajectoryEstimator(0.5, 1)
    est.train(X, y)

    start, after = est.trajectory
    w0, w1, w2 = est.get_weights()[:, 0]
    # the pass error of iteration 0 is the initial loss; the snapshot moves past it
    assert after.loss == pytest.approx(TrajectoryEstimator.squared_error(X, y, w0, w1, w2))
    assert after.loss < start.loss
