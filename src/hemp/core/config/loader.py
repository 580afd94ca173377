"""Configuration loader module.

This module provides functions for loading configuration from a YAML file
and the environment and turning it into a validated PresenterConfig.
"""

from typing import Any, Dict, List, Optional
import logging
import os

import yaml
from pydantic import ValidationError

from .schema import PresenterConfig
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "hemp.yaml"

_config: Optional[PresenterConfig] = None


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        Merged dictionary where override values take precedence
    """
    result = base.copy()

    for key, value in override.items():
        if (key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary containing configuration from YAML, empty if the file is missing

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def _normalize_env_key(env_key: str) -> List[str]:
    """Normalize environment variable key to configuration path.

    Args:
        env_key: Environment variable key without prefix (e.g., "LOGGING_LEVEL")

    Returns:
        List of path segments (e.g., ["logging", "level"])
    """
    key_mappings = {
        "DEFAULT_CASING": ["default_casing"],
        "LOGGING_LEVEL": ["logging", "level"],
    }
    if env_key in key_mappings:
        return key_mappings[env_key]
    return env_key.lower().split("_")


def load_from_env(prefix: str = "HEMP") -> Dict[str, Any]:
    """Load configuration from environment variables with given prefix.

    ``<PREFIX>_CONFIG`` names the configuration file and is skipped here.

    Args:
        prefix: Prefix for environment variables to consider

    Returns:
        Dictionary containing configuration from environment
    """
    result: Dict[str, Any] = {}
    prefix_upper = prefix.upper()

    for key, value in os.environ.items():
        if not key.startswith(f"{prefix_upper}_"):
            continue
        env_key = key[len(prefix_upper) + 1:]
        if env_key == "CONFIG":
            continue

        path = _normalize_env_key(env_key)

        # Build nested dictionary
        current = result
        for part in path[:-1]:
            current = current.setdefault(part, {})
        current[path[-1]] = value

    return result


def load_config(
    file_path: Optional[str] = None,
    env_prefix: str = "HEMP"
) -> PresenterConfig:
    """Load PresenterConfig from file and environment.

    Args:
        file_path: Path to config file (defaults to HEMP_CONFIG from env or "hemp.yaml")
        env_prefix: Prefix for environment variables

    Returns:
        Validated PresenterConfig instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = file_path or os.environ.get(f"{env_prefix}_CONFIG", DEFAULT_CONFIG_FILE)

    config_data: Dict[str, Any] = load_yaml_file(str(path))

    # Environment overrides file
    env_config = load_from_env(env_prefix)
    if env_config:
        config_data = merge_dicts(config_data, env_config)

    try:
        config = PresenterConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Failed to load configuration: {e}") from e

    logger.debug("Loaded presenter configuration from %s: %s", path, config)
    return config


def get_config() -> PresenterConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: PresenterConfig) -> None:
    """Replace the process-wide configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Forget the process-wide configuration so the next access reloads it."""
    global _config
    _config = None
