# linfit/workflows/solver_comparison.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from linfit import logs
from linfit.datasets import argmax, as_matrix, as_training_pair
from linfit.metrics import mean_squared_error
from linfit.models.linear_estimator import LinearEstimator
from linfit.observability.instrumentation import Instrumentation


@dataclass(frozen=True)
class ComparisonResult:
    """
    Gradient descent vs closed form on the same data.

    predictions columns:
        point, gd_prediction, gd_class, cf_prediction, cf_class
    """

    gradient_descent: LinearEstimator
    closed_form: LinearEstimator
    predictions: pd.DataFrame
    gd_mse: float
    cf_mse: float
    timeline: dict


def run_solver_comparison(
    X,
    Y,
    test_points,
    *,
    learning_rate: float = 0.1,
    max_iterations: int = 2000,
    seed: int = 42,
    inst: Optional[Instrumentation] = None,
) -> ComparisonResult:
    features, targets = as_training_pair(X, Y)
    points = as_matrix(test_points, "test_points")
    inst = inst or Instrumentation()

    # two independent instances, no shared weights
    gd = LinearEstimator(learning_rate, max_iterations, seed=seed, progress=inst.progress)
    cf = LinearEstimator(closed_form=True)

    with inst.timer("gradient_descent"):
        gd.train(features, targets)
    with inst.timer("closed_form"):
        cf.train(features, targets)

    gd_mse = mean_squared_error(gd.predict_batch(features), targets)
    cf_mse = mean_squared_error(cf.predict_batch(features), targets)
    inst.metrics.record("gd_mse", gd_mse)
    inst.metrics.record("cf_mse", cf_mse)

    rows = []
    for p in points:
        gd_pred = gd.predict(p)
        cf_pred = cf.predict(p)
        rows.append(
            {
                "point": tuple(float(v) for v in p),
                "gd_prediction": np.round(gd_pred, 3).tolist(),
                "gd_class": argmax(gd_pred),
                "cf_prediction": np.round(cf_pred, 3).tolist(),
                "cf_class": argmax(cf_pred),
            }
        )

    inst.generate_timeline_report("solver comparison")
    logs.info(f"[Compare] gd_mse={gd_mse:.6f} cf_mse={cf_mse:.6f}")

    return ComparisonResult(
        gradient_descent=gd,
        closed_form=cf,
        predictions=pd.DataFrame(rows),
        gd_mse=gd_mse,
        cf_mse=cf_mse,
        timeline=dict(inst.timeline),
    )
