# linfit/config/estimator_config.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, NonNegativeInt, PositiveFloat, model_validator


class EstimatorConfig(BaseModel):
    """
    EstimatorConfig

    kind selects the estimator variant:
    - linear     : LinearEstimator (gradient descent or closed form)
    - softmax    : SoftmaxClassifier (gradient descent only)
    - trajectory : TrajectoryEstimator (2 features, records its path)
    """

    kind: Literal["linear", "softmax", "trajectory"] = "linear"

    # gradient descent
    learning_rate: Optional[PositiveFloat] = None
    max_iterations: Optional[NonNegativeInt] = None
    seed: int = 42

    # closed form (linear only)
    closed_form: bool = False

    # reporting
    report_every: int = Field(default=200, ge=1)
    record_every: int = Field(default=5, ge=1)

    @model_validator(mode="after")
    def _check_mode(self) -> "EstimatorConfig":
        if self.closed_form:
            if self.kind != "linear":
                raise ValueError(f"closed_form is only supported for kind='linear', got {self.kind!r}")
            if self.learning_rate is not None or self.max_iterations is not None:
                raise ValueError("closed_form excludes learning_rate / max_iterations")
            return self

        if self.learning_rate is None or self.max_iterations is None:
            raise ValueError(
                f"kind={self.kind!r} with gradient descent needs learning_rate and max_iterations"
            )
        return self
