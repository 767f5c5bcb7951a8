# linfit/models/registry.py
from typing import Callable, Dict

from linfit.config.estimator_config import EstimatorConfig
from linfit.models.base import Estimator
from linfit.models.linear_estimator import LinearEstimator
from linfit.models.softmax_classifier import SoftmaxClassifier
from linfit.models.trajectory_estimator import TrajectoryEstimator

_ESTIMATOR_REGISTRY: Dict[str, Callable[[EstimatorConfig], Estimator]] = {
    "linear": lambda cfg: (
        LinearEstimator(closed_form=True, seed=cfg.seed, report_every=cfg.report_every)
        if cfg.closed_form
        else LinearEstimator(
            cfg.learning_rate, cfg.max_iterations, seed=cfg.seed, report_every=cfg.report_every
        )
    ),
    "softmax": lambda cfg: SoftmaxClassifier(
        cfg.learning_rate, cfg.max_iterations, seed=cfg.seed, report_every=cfg.report_every
    ),
    "trajectory": lambda cfg: TrajectoryEstimator(
        cfg.learning_rate,
        cfg.max_iterations,
        seed=cfg.seed,
        record_every=cfg.record_every,
        report_every=cfg.report_every,
    ),
}


def build_estimator(cfg: EstimatorConfig) -> Estimator:
    if cfg.kind not in _ESTIMATOR_REGISTRY:
        available = ", ".join(_ESTIMATOR_REGISTRY)
        raise ValueError(f"No estimator for kind={cfg.kind!r}. Available: {available}")

    return _ESTIMATOR_REGISTRY[cfg.kind](cfg)
