"""Model settings read from ``config.yml``."""

# archloom:domain=infrastructure

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import yaml

from archloom.errors import ErrorCode, ValidationError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yml"


@dataclass(frozen=True)
class ModelSettings:
    """Defaults applied by the model when callers leave values unspecified.

    Configurable via ``config.yml`` ``model`` section.
    """

    health_check_interval: int = 60
    health_check_timeout: int = 0

    def __post_init__(self) -> None:
        if self.health_check_interval < 0:
            raise ValidationError(
                ErrorCode.NEGATIVE_INTERVAL,
                "health_checks.interval must be zero or a positive integer",
            )
        if self.health_check_timeout < 0:
            raise ValidationError(
                ErrorCode.NEGATIVE_TIMEOUT,
                "health_checks.timeout must be zero or a positive integer",
            )


def load_model_settings(project_root: Path) -> ModelSettings:
    """Load settings from ``config.yml`` ``model`` section.

    Falls back to defaults for missing keys, a missing file, or a file that
    cannot be parsed.

    Raises:
        ValueError: If a configured value is not an integer.
        ValidationError: If a configured value is negative.
    """
    config_path = project_root / CONFIG_FILENAME
    if not config_path.is_file():
        return ModelSettings()

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        logger.warning("Failed to read %s, using default model settings", config_path)
        return ModelSettings()

    if not isinstance(data, dict):
        return ModelSettings()

    model_section = data.get("model")
    if not isinstance(model_section, dict):
        return ModelSettings()

    checks = model_section.get("health_checks", {})
    if not isinstance(checks, dict):
        checks = {}

    kwargs: dict[str, int] = {}
    for config_key, field_name in (
        ("interval", "health_check_interval"),
        ("timeout", "health_check_timeout"),
    ):
        if config_key not in checks:
            continue
        value = checks[config_key]
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"health_checks.{config_key} must be an integer, got {value!r}"
            raise ValueError(msg)
        kwargs[field_name] = value

    return ModelSettings(**kwargs)
