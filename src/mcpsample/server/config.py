"""Server settings — YAML file, environment overrides, CLI flags."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ValidationError

from mcpsample.resources.registry import DEFAULT_RESOURCES_DIR

ENV_PREFIX = "MCPSAMPLE_"

_ENV_FIELDS = ("host", "port", "resources_dir", "log_level")


class ConfigError(Exception):
    """Raised when the settings file or environment cannot be loaded."""


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Runtime settings of the HTTP server."""

    host: str = "127.0.0.1"
    port: int = 5202
    resources_dir: Path = DEFAULT_RESOURCES_DIR
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    telemetry: TelemetrySettings = TelemetrySettings()


def load_settings(path: Path | None = None, **overrides: Any) -> ServerSettings:
    """Build :class:`ServerSettings` from *path*, the environment and *overrides*.

    Later sources win: YAML file, then ``MCPSAMPLE_*`` environment variables,
    then keyword overrides whose value is not ``None``.  ``${VAR}`` references
    in the YAML file are expanded before parsing.

    Raises:
        ConfigError: On unreadable files, YAML errors or invalid values.
    """
    data: dict[str, Any] = {}
    if path is not None:
        data.update(_read_yaml(path))

    for field in _ENV_FIELDS:
        value = os.environ.get(f"{ENV_PREFIX}{field.upper()}")
        if value:
            data[field] = value

    data.update({k: v for k, v in overrides.items() if v is not None})

    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].upper()

    try:
        return ServerSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    try:
        data: Any = yaml.safe_load(os.path.expandvars(raw))
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Settings YAML must be a mapping")
    return data
