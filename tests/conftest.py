# tests/conftest.py
from __future__ import annotations

import numpy as np
import pytest
from loguru import logger

from linfit.datasets import one_hot


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def captured_logs():
    """
    Collect log lines emitted during a test.
    """
    lines = []
    sink_id = logger.add(lambda msg: lines.append(str(msg)))
    yield lines
    logger.remove(sink_id)


@pytest.fixture
def exact_linear_data():
    # y = x1 + x2
    X = [[0, 0], [1, 0], [0, 1], [1, 1]]
    Y = [[0], [1], [1], [2]]
    return X, Y


@pytest.fixture
def two_clusters():
    """
    Two well separated 2-D clusters, one-hot in 2 classes.
    """
    rng = np.random.default_rng(7)
    c0 = rng.normal(loc=(0.2, 0.2), scale=0.05, size=(20, 2))
    c1 = rng.normal(loc=(0.8, 0.8), scale=0.05, size=(20, 2))
    X = np.vstack([c0, c1])
    Y = one_hot([0] * 20 + [1] * 20, 2)
    return X, Y
