#!filepath: linfit/__init__.py

from .utils.logger import Logging, init_logging, logs
from .utils.errors import (
    InvalidInputError,
    LinfitError,
    NotTrainedError,
    SingularMatrixError,
)
from .config.app_config import AppConfig

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "LinfitError", "InvalidInputError", "SingularMatrixError", "NotTrainedError",
    "AppConfig",
    "__version__",
]
