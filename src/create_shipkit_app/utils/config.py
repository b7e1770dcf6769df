"""
Configuration System

Optional per-user configuration for create-shipkit-app. Features:
- Single-file YAML loading with environment resolution
- Dot-path lookups with defaults
- Works with no file at all: a missing config file is an empty config

Location (first match wins):
    1. SHIPKIT_CONFIG_FILE environment variable
    2. ~/.config/create-shipkit-app/config.yml

Example config.yml::

    defaults:
      template: minimal
      package_manager: npm
    logging:
      level: INFO
      rich_tracebacks: true
      logging_colors:
        installer: cyan
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from create_shipkit_app.errors import ConfigurationError

# Standard logging (not get_logger) to avoid circular imports with logger.py
logger = logging.getLogger("CONFIG")

CONFIG_ENV_VAR = "SHIPKIT_CONFIG_FILE"


def default_config_path() -> Path:
    """Resolve the user config file location (the file need not exist)."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "create-shipkit-app" / "config.yml"


class ConfigBuilder:
    """
    Loads the YAML config file once and answers dot-path lookups.

    Environment placeholders in string values are resolved at load time:
    ``${VAR}``, ``${VAR:-default}`` and ``$VAR``.
    """

    def __init__(self, config_path: str | Path | None = None):
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.raw_config = self._load_config()

    def _load_yaml_file(self, file_path: Path) -> dict[str, Any]:
        """Load and validate a YAML configuration file."""
        try:
            with open(file_path) as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML configuration {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        if config is None:
            logger.debug(f"Configuration file is empty: {file_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Configuration file must contain a dictionary/mapping: {file_path}"
            )

        logger.debug(f"Loaded configuration from {file_path}")
        return config

    def _resolve_env_vars(self, data: Any) -> Any:
        """Recursively resolve environment variables in configuration data."""
        if isinstance(data, dict):
            return {key: self._resolve_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):

            def replace_env_var(match):
                if match.group(1):  # ${VAR_NAME:-default} or ${VAR_NAME}
                    var_name = match.group(1)
                    default_value = match.group(2)
                else:  # $VAR_NAME
                    var_name = match.group(3)
                    default_value = None

                env_value = os.environ.get(var_name)
                if env_value is None:
                    if default_value is not None:
                        return default_value
                    logger.debug(f"Environment variable '{var_name}' not found, keeping original value")
                    return match.group(0)
                return env_value

            pattern = r"\$\{([^}:]+)(?::-(.*?))?\}|\$([A-Za-z_][A-Za-z0-9_]*)"
            return re.sub(pattern, replace_env_var, data)
        else:
            return data

    def _load_config(self) -> dict[str, Any]:
        if not self.config_path.exists():
            logger.debug(f"No configuration file at {self.config_path}, using defaults")
            return {}
        return self._resolve_env_vars(self._load_yaml_file(self.config_path))

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation path."""
        value = self.raw_config

        try:
            for key in path.split("."):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# =============================================================================
# GLOBAL CONFIGURATION
# =============================================================================

_default_config: ConfigBuilder | None = None
_config_cache: dict[str, ConfigBuilder] = {}


def _get_config(config_path: str | Path | None = None) -> ConfigBuilder:
    """Return the default config singleton, or a cached config for an explicit path."""
    global _default_config

    if config_path is None:
        if _default_config is None:
            _default_config = ConfigBuilder()
        return _default_config

    resolved_path = str(Path(config_path).resolve())
    if resolved_path not in _config_cache:
        _config_cache[resolved_path] = ConfigBuilder(resolved_path)
    return _config_cache[resolved_path]


def reset_config() -> None:
    """Drop cached configuration so the next lookup reloads from disk."""
    global _default_config
    _default_config = None
    _config_cache.clear()


def get_config_value(path: str, default: Any = None, config_path: str | Path | None = None) -> Any:
    """
    Get a specific configuration value by dot-separated path.

    Args:
        path: Dot-separated configuration path (e.g., "defaults.template")
        default: Default value to return if path is not found
        config_path: Optional explicit path to configuration file

    Returns:
        The configuration value at the specified path, or default if not found

    Raises:
        ValueError: If path is empty or None

    Examples:
        >>> get_config_value("defaults.package_manager", "pnpm")
        'pnpm'
    """
    if not path:
        raise ValueError("Configuration path cannot be empty or None")

    return _get_config(config_path).get(path, default)
