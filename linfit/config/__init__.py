from .app_config import AppConfig
from .estimator_config import EstimatorConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "EstimatorConfig", "LogConfig"]
