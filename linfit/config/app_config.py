#!filepath: linfit/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .estimator_config import EstimatorConfig
from .log_config import LogConfig


def project_root() -> str:
    """
    linfit/config/app_config.py -> linfit/config -> linfit -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    estimator: EstimatorConfig

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to linfit/config/base.yml
        - LINFIT_LOG_LEVEL overrides log.level
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv("LINFIT_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})
            raw["log"]["level"] = level

        return cls(**raw)
