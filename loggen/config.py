"""Configuration: frozen dataclass loaded from an optional YAML file and environment variables."""

import logging
import os
from dataclasses import dataclass, field

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_WEIGHTS = {"INFO": 0.80, "WARN": 0.15, "ERROR": 0.05}
VALID_MODES = ("random", "fixed")
# Service name for fixed mode unless one is configured
FIXED_MODE_SERVICE_NAME = "go-logging-service"


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


def _parse_level_weights(val) -> dict[str, float]:
    if val is None:
        return DEFAULT_LEVEL_WEIGHTS.copy()
    if isinstance(val, dict):
        pairs = [(str(k), v) for k, v in val.items()]
    else:
        pairs = [p.split(":") for p in str(val).split(",") if p.strip()]
    try:
        weights = {}
        for level, weight in pairs:
            level = level.strip().upper()
            if level not in DEFAULT_LEVEL_WEIGHTS:
                raise KeyError(level)
            weights[level] = float(weight)
        if not weights or any(w < 0 for w in weights.values()) or sum(weights.values()) <= 0:
            raise ValueError("weights must be non-negative with a positive sum")
        return weights
    except (ValueError, KeyError, TypeError):
        logger.warning("Invalid LEVEL_WEIGHTS %r, using defaults", val)
        return DEFAULT_LEVEL_WEIGHTS.copy()


@dataclass(frozen=True)
class Config:
    log_file: str = "/var/log/app.log"
    max_file_size_bytes: int = 10 * 1024 * 1024  # 10 MiB
    max_files: int = 5
    interval_min: float = 5.0
    interval_max: float = 5.0
    mode: str = "random"
    service_name: str = "synthetic-log-generator"
    level_weights: dict = field(default_factory=lambda: DEFAULT_LEVEL_WEIGHTS.copy())
    debug_probability: float = 0.2
    health_probability: float = 0.3
    lock_enabled: bool = True
    metrics_file: str = ""
    log_level: str = "INFO"

    def validate(self) -> "Config":
        if self.max_file_size_bytes <= 0:
            raise ConfigError(f"max_file_size_bytes must be positive, got {self.max_file_size_bytes}")
        if self.mode not in VALID_MODES:
            raise ConfigError(f"mode must be one of {VALID_MODES}, got {self.mode!r}")
        if self.interval_min < 0 or self.interval_min > self.interval_max:
            raise ConfigError(
                f"invalid interval bounds: min={self.interval_min}, max={self.interval_max}"
            )
        for name in ("debug_probability", "health_probability"):
            p = getattr(self, name)
            if not 0.0 <= p <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1], got {p}")
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigError(f"unknown log_level {self.log_level!r}")
        return self


def load_yaml(path: str) -> dict:
    """Load the ``generator`` section (or the whole mapping) of a YAML file.

    A missing file yields an empty dict; malformed YAML is a configuration error.
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using environment and defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if not data:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    section = data.get("generator", data)
    if not isinstance(section, dict):
        raise ConfigError(f"'generator' section in {path} must be a mapping")
    return section


_ENV_KEYS = {
    "log_file": "LOG_FILE",
    "max_file_size_bytes": "MAX_FILE_SIZE_BYTES",
    "max_files": "MAX_FILES",
    "interval_min": "INTERVAL_MIN",
    "interval_max": "INTERVAL_MAX",
    "mode": "GENERATOR_MODE",
    "service_name": "SERVICE_NAME",
    "level_weights": "LEVEL_WEIGHTS",
    "debug_probability": "DEBUG_PROBABILITY",
    "health_probability": "HEALTH_PROBABILITY",
    "lock_enabled": "LOCK_ENABLED",
    "metrics_file": "METRICS_FILE",
    "log_level": "LOG_LEVEL",
}


def load_config(config_path: str | None = None) -> Config:
    """Build Config from defaults, then the YAML file, then environment variables."""
    config_path = config_path or os.environ.get("CONFIG_PATH")
    raw = load_yaml(config_path) if config_path else {}

    for key, env_name in _ENV_KEYS.items():
        if env_name in os.environ:
            raw[key] = os.environ[env_name]

    # MAX_FILE_SIZE_BYTES takes precedence over MAX_FILE_SIZE_MB
    raw_mb = os.environ.get("MAX_FILE_SIZE_MB", raw.pop("max_file_size_mb", None))
    if "max_file_size_bytes" not in raw and raw_mb is not None:
        try:
            raw["max_file_size_bytes"] = int(float(raw_mb) * 1024 * 1024)
        except ValueError as e:
            raise ConfigError(f"invalid MAX_FILE_SIZE_MB: {raw_mb!r}") from e

    unknown = set(raw) - set(_ENV_KEYS)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

    try:
        interval_min = float(raw.get("interval_min", Config.interval_min))
        # A lone interval_min means a fixed interval
        default_max = interval_min if "interval_min" in raw else Config.interval_max
        interval_max = float(raw.get("interval_max", default_max))
        mode = str(raw.get("mode", Config.mode)).strip().lower()
        default_service = FIXED_MODE_SERVICE_NAME if mode == "fixed" else Config.service_name
        config = Config(
            log_file=str(raw.get("log_file", Config.log_file)),
            max_file_size_bytes=int(raw.get("max_file_size_bytes", Config.max_file_size_bytes)),
            max_files=int(raw.get("max_files", Config.max_files)),
            interval_min=interval_min,
            interval_max=interval_max,
            mode=mode,
            service_name=str(raw.get("service_name", default_service)),
            level_weights=_parse_level_weights(raw.get("level_weights")),
            debug_probability=float(raw.get("debug_probability", Config.debug_probability)),
            health_probability=float(raw.get("health_probability", Config.health_probability)),
            lock_enabled=_parse_bool(raw.get("lock_enabled", Config.lock_enabled)),
            metrics_file=str(raw.get("metrics_file", Config.metrics_file) or ""),
            log_level=str(raw.get("log_level", Config.log_level)).strip().upper(),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid configuration value: {e}") from e

    return config.validate()
