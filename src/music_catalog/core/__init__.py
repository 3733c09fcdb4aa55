"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (JSON + .env)
- Logging (Loguru)
- Track name sanitizing and path containment
- Admin credential checks

Clean architecture principle: The core layer has no dependencies on
domain or application layers.
"""

# Configuration
from .config import (
    Config,
    ConfigError,
    ConfigOpenError,
    ConfigReadError,
    ConfigParseError,
    load_config,
    parse_config,
)

# Security
from .auth import check_credentials
from .path_security import is_allowed_name, is_path_within_root

__all__ = [
    # Config
    "Config",
    "ConfigError",
    "ConfigOpenError",
    "ConfigReadError",
    "ConfigParseError",
    "load_config",
    "parse_config",
    # Security
    "check_credentials",
    "is_allowed_name",
    "is_path_within_root",
]
