"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/emlanalyzer/config.yaml")
CONFIG_ENV_VAR = "EMLANALYZER_CONFIG"
DEFAULT_LOG_LEVEL = "warning"
DEFAULT_PROBE_TIMEOUT = 10.0

# Accepted spellings for each analyzer option.
OPTION_ALIASES = {
    "fetchExternalAssetsSize": "fetch_external_assets_size",
    "fetch_external_assets_size": "fetch_external_assets_size",
    "probeTimeout": "probe_timeout",
    "probe_timeout": "probe_timeout",
}


class ConfigError(ValueError):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class AnalyzerOptions:
    """Options controlling a single analyzer run."""

    fetch_external_assets_size: bool = False
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT


@dataclass(frozen=True)
class LoggingConfig:
    """Logging-related configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file: Path | None = None


@dataclass(frozen=True)
class Config:
    """Fully parsed configuration."""

    options: AnalyzerOptions = field(default_factory=AnalyzerOptions)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load and validate configuration from YAML.

    A missing file is only an error when its location was requested
    explicitly or through ``$EMLANALYZER_CONFIG``; otherwise defaults apply.
    """

    config_path, explicit = _resolve_config_path(path)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        LOGGER.debug("No config file at %s, using defaults.", config_path)
        return Config()

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping.")

    return _parse_config(raw)


def options_from_mapping(raw: Mapping[str, Any] | None) -> AnalyzerOptions:
    """Build validated analyzer options from a flat key/value mapping."""

    if raw is None:
        return AnalyzerOptions()
    if not isinstance(raw, Mapping):
        raise ConfigError("options must be a mapping.")

    values: dict[str, Any] = {}
    for key, value in raw.items():
        try:
            name = OPTION_ALIASES[key]
        except KeyError as exc:
            raise ConfigError(f"Unknown option: {key}") from exc
        if name in values:
            raise ConfigError(f"Option '{name}' given more than once.")
        values[name] = value

    fetch = values.get("fetch_external_assets_size", False)
    if not isinstance(fetch, bool):
        raise ConfigError("fetchExternalAssetsSize must be a boolean.")

    timeout = values.get("probe_timeout", DEFAULT_PROBE_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ConfigError("probeTimeout must be a number of seconds.")
    if timeout <= 0:
        raise ConfigError("probeTimeout must be positive.")

    return AnalyzerOptions(fetch_external_assets_size=fetch, probe_timeout=float(timeout))


def _resolve_config_path(explicit: Path | str | None) -> tuple[Path, bool]:
    if explicit:
        return Path(explicit).expanduser(), True
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser(), True
    return DEFAULT_CONFIG_PATH.expanduser(), False


def _parse_config(raw: dict[str, Any]) -> Config:
    unknown = set(raw) - {"options", "logging"}
    if unknown:
        raise ConfigError(f"Unknown configuration section(s): {', '.join(sorted(unknown))}")
    return Config(
        options=options_from_mapping(raw.get("options")),
        logging=_parse_logging(raw.get("logging")),
    )


def _parse_logging(value: Any) -> LoggingConfig:
    if value is None:
        return LoggingConfig()
    if not isinstance(value, dict):
        raise ConfigError("logging must be a mapping.")
    level = str(value.get("level", DEFAULT_LOG_LEVEL)).lower()
    file_value = value.get("file")
    if file_value is not None and not isinstance(file_value, str):
        raise ConfigError("logging.file must be a string path.")
    log_file = Path(file_value).expanduser() if file_value else None
    return LoggingConfig(level=level, file=log_file)


__all__ = [
    "AnalyzerOptions",
    "Config",
    "ConfigError",
    "LoggingConfig",
    "load_config",
    "options_from_mapping",
]
