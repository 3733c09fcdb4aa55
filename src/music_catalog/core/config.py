"""
Configuration management for Music Catalog
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_CONFIG_FILE = "config.json"

# Environment overrides for the admin credentials
ENV_ADMIN_USERNAME = "MUSIC_CATALOG_ADMIN_USERNAME"
ENV_ADMIN_PASSWORD = "MUSIC_CATALOG_ADMIN_PASSWORD"


class ConfigError(Exception):
    """Base exception for configuration loading. Carries a process exit code."""

    exit_code = 1


class ConfigOpenError(ConfigError):
    """Raised when the config file cannot be opened."""

    exit_code = 1


class ConfigReadError(ConfigError):
    """Raised when the config file cannot be read."""

    exit_code = 2


class ConfigParseError(ConfigError):
    """Raised when the config file is not a valid configuration object."""

    exit_code = 3


@dataclass(frozen=True)
class Config:
    """Process-wide configuration, read once at startup."""

    port: int
    admin_username: str
    admin_password: str
    host: str = "0.0.0.0"
    data_dir: Path = Path("data")
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[Path] = None


def _require(data: dict, key: str, expected: type):
    if key not in data:
        raise ConfigParseError(f"Missing required key: {key!r}")
    value = data[key]
    # bool is a subclass of int
    if not isinstance(value, expected) or isinstance(value, bool):
        raise ConfigParseError(
            f"Key {key!r} must be of type {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigParseError(f"Key {key!r} must be a string")
    return value


def parse_config(data, base_dir: Optional[Path] = None) -> Config:
    """Build a Config from a decoded JSON document.

    Relative ``data-dir`` and ``log-file`` values are resolved against
    ``base_dir`` (normally the directory holding the config file).

    Raises:
        ConfigParseError: If the document is not a valid configuration
    """
    if not isinstance(data, dict):
        raise ConfigParseError("Configuration must be a JSON object")

    port = _require(data, "port", int)
    if not 1 <= port <= 65535:
        raise ConfigParseError(f"Port out of range: {port}")

    admin_username = os.environ.get(ENV_ADMIN_USERNAME) or _require(
        data, "admin-username", str
    )
    admin_password = os.environ.get(ENV_ADMIN_PASSWORD) or _require(
        data, "admin-password", str
    )

    base = base_dir or Path.cwd()

    data_dir = Path(_optional_str(data, "data-dir") or "data").expanduser()
    if not data_dir.is_absolute():
        data_dir = base / data_dir

    log_file = _optional_str(data, "log-file")
    log_path = None
    if log_file:
        log_path = Path(log_file).expanduser()
        if not log_path.is_absolute():
            log_path = base / log_path

    return Config(
        port=port,
        admin_username=admin_username,
        admin_password=admin_password,
        host=_optional_str(data, "host") or "0.0.0.0",
        data_dir=data_dir,
        log_level=(_optional_str(data, "log-level") or "INFO").upper(),
        log_file=log_path,
    )


def load_config(config_path: Path = Path(DEFAULT_CONFIG_FILE)) -> Config:
    """Load configuration from a JSON file.

    A ``.env`` file next to the config file is loaded first, so
    MUSIC_CATALOG_ADMIN_USERNAME / MUSIC_CATALOG_ADMIN_PASSWORD can keep the
    credentials out of the JSON file.

    Raises:
        ConfigOpenError: If the file cannot be opened
        ConfigReadError: If the file cannot be read
        ConfigParseError: If the contents are not valid UTF-8 JSON or not a
            valid configuration
    """
    config_path = Path(config_path)

    env_path = config_path.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    try:
        f = open(config_path, "rb")
    except OSError as e:
        raise ConfigOpenError(f'Failed to open "{config_path}": {e}') from e

    with f:
        try:
            raw = f.read()
        except OSError as e:
            raise ConfigReadError(f'Failed to read "{config_path}": {e}') from e

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigParseError(f'Failed to parse "{config_path}": {e}') from e

    return parse_config(data, base_dir=config_path.resolve().parent)
