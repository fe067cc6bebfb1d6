"""Replay configuration loaded from config.yaml."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .scheduler import DEFAULT_MAX_DELAY_MS, DEFAULT_SCALE_FACTOR

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.clawtank/config.yaml").expanduser()

COLOR_MODES = ("auto", "always", "never")


@dataclass(frozen=True)
class ReplayConfig:
    """Tunables for session playback."""

    scale_factor: float = DEFAULT_SCALE_FACTOR
    max_delay_ms: float = DEFAULT_MAX_DELAY_MS
    color: str = "auto"

    def __post_init__(self) -> None:
        for name in ("scale_factor", "max_delay_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
            if value < 0:
                raise ConfigError(f"{name} must not be negative, got {value!r}")
        if self.color not in COLOR_MODES:
            raise ConfigError(
                f"color must be one of {', '.join(COLOR_MODES)}, got {self.color!r}"
            )

    def to_dict(self) -> dict:
        """Serialize to dict for YAML storage."""
        return {
            "scale_factor": self.scale_factor,
            "max_delay_ms": self.max_delay_ms,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ReplayConfig:
        """Deserialize from dict, falling back to defaults for absent keys."""
        defaults = cls()
        return cls(
            scale_factor=data.get("scale_factor", defaults.scale_factor),
            max_delay_ms=data.get("max_delay_ms", defaults.max_delay_ms),
            color=data.get("color", defaults.color),
        )

    def with_overrides(self, **overrides: Any) -> ReplayConfig:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)


def load_config(path: Path | None = None) -> ReplayConfig:
    """Load the replay configuration from a YAML file.

    Args:
        path: Config file to read. Defaults to ``~/.clawtank/config.yaml``.

    Returns:
        ReplayConfig. Defaults if the file doesn't exist or is empty.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    config_path = path if path is not None else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.debug("config_not_found", extra={"config_path": str(config_path)})
        return ReplayConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config '{config_path}': {exc}") from exc

    if data is None:
        return ReplayConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config '{config_path}' must be a mapping")

    replay_data = data.get("replay") or {}
    if not isinstance(replay_data, dict):
        raise ConfigError(f"Config '{config_path}': 'replay' must be a mapping")

    config = ReplayConfig.from_dict(replay_data)
    logger.debug(
        "config_loaded",
        extra={"config_path": str(config_path), **config.to_dict()},
    )
    return config
