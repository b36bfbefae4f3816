"""Configuration management for the ECS/ASG scaler."""

import os
import logging
from typing import Dict, Any, Optional

import yaml
from pythonjsonlogger.json import JsonFormatter

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[str] = None):
    """Configure structured logging for the scaler."""
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    root = logging.getLogger()
    root.setLevel(log_level)

    # Only install one JSON handler, even if called more than once
    for handler in root.handlers:
        if isinstance(handler.formatter, JsonFormatter):
            return root

    handler = logging.StreamHandler()
    formatter = JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    return root


class Config:
    """Scaler configuration."""

    # AWS configuration
    AWS_REGION = os.getenv("AWS_REGION", os.getenv("AWS_DEFAULT_REGION", "us-east-1"))

    # Optional YAML file holding default targets
    DEFAULTS_FILE = os.getenv("ECS_SCALER_CONFIG", "")

    # Each pool instance hosts this many tasks
    TASKS_PER_INSTANCE = 2

    # Keys accepted from the defaults file
    DEFAULT_KEYS = ("region", "cluster", "service", "asg")


def load_defaults(path: Optional[str]) -> Dict[str, Any]:
    """
    Load default scaling targets from a YAML file.

    Args:
        path: Path to the YAML file, or None/empty for no defaults

    Returns:
        Dictionary with any of region, cluster, service and asg

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping
    """
    if not path:
        return {}

    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )

    unknown = set(data) - set(Config.DEFAULT_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

    return {
        key: str(value)
        for key, value in data.items()
        if key in Config.DEFAULT_KEYS and value is not None
    }
