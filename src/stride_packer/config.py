"""Configuration for the packer helpers.

Values the desktop tool used to keep as globals (registry location, default
package version, marker patterns) live in an immutable PackagerConfig that is
passed to whichever helper needs it.
"""

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from jsonschema import SchemaError

from .core.validator import config_errors

ENV_CONFIG_PATH = "STRIDE_PACKER_CONFIG"


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded."""


@dataclass(frozen=True)
class PackagerConfig:
    """Immutable settings consumed by the path and file helpers."""

    registry_url: str = (
        "https://raw.githubusercontent.com/Keepsie/HS-Stride-Packer/main/stride_registry.json"
    )
    default_version: str = "1.0.0"
    package_extension: str = ".stridepackage"
    project_marker_pattern: str = "*.sdpkg"
    solution_pattern: str = "*.sln"
    timestamp_format: str = "%Y%m%d_%H%M%S"


DEFAULT_CONFIG = PackagerConfig()


def _read_document(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object.")
    return data


def load_config(path: Path | str | None = None) -> PackagerConfig:
    """Load configuration from a JSON file layered over the defaults.

    Args:
        path: Config file location. Falls back to the STRIDE_PACKER_CONFIG
            environment variable when omitted.

    Returns:
        PackagerConfig instance. Defaults are returned when no file is
        configured or the file does not exist.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or fails schema
            validation
    """
    if path is None:
        path = os.getenv(ENV_CONFIG_PATH, "").strip() or None
    if path is None:
        return DEFAULT_CONFIG

    config_path = Path(path).expanduser()
    if not config_path.exists():
        return DEFAULT_CONFIG

    data = _read_document(config_path)
    try:
        errors = config_errors(data)
    except (OSError, json.JSONDecodeError, SchemaError) as exc:
        raise ConfigError(f"Config schema unavailable: {exc}") from exc

    if errors:
        details = "\n".join(f"  - {line}" for line in errors)
        raise ConfigError(f"Invalid config file {config_path}:\n{details}")

    return replace(DEFAULT_CONFIG, **data)
