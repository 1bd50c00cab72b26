"""YAML config loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from trainreport.config.schema import MonitorConfig
from trainreport.core.exceptions import ConfigurationError, InvalidConfigurationError


def load_monitor_config(path: str | Path) -> MonitorConfig:
    """Load and validate monitor config from YAML."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        payload: Any = yaml.safe_load(handle) or {}

    if not isinstance(payload, dict):
        raise ConfigurationError(
            f"Invalid config payload in {config_path}: "
            "top-level YAML node must be a mapping."
        )

    try:
        config = MonitorConfig.model_validate(payload)
    except ValidationError as exc:  # pydantic provides detailed message.
        raise InvalidConfigurationError(
            f"Invalid config at {config_path}: {exc}"
        ) from exc

    return config
