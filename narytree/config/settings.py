"""
Configuration management for Narytree.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from narytree.exceptions import (
    ConfigurationLoadError,
    HashProviderError,
    InvalidConfigurationError,
)
from narytree.logging_config import get_logger
from narytree.merkle.hashing import DEFAULT_HASH_ALGORITHM, hash_function_for

logger = get_logger(__name__)


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${NARYTREE_HASH}" -> value of NARYTREE_HASH env var
        "${NARYTREE_HASH:sha256}" -> value of NARYTREE_HASH or "sha256" if not set
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class TreeConfig:
    """Tree construction defaults."""

    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    number_of_children: int = 2


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    file: str = ""
    format: str = "console"  # "console" or "json"


@dataclass
class NaryTreeConfig:
    """Main Narytree configuration."""

    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.narytree/config.yaml")


def get_default_config() -> NaryTreeConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        NaryTreeConfig: Default configuration object
    """
    return NaryTreeConfig()


def load_config(config_path: Optional[str] = None) -> NaryTreeConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        NaryTreeConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
        ConfigurationLoadError: If the file exists but cannot be read
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.debug(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        )
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise ConfigurationLoadError(
            f"Failed to read configuration file '{config_path}': {e}"
        )

    if config_data is None:
        logger.debug(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping at the top level"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        )

    logger.debug(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _coerce_int(value: Any, name: str) -> int:
    # Environment substitution always yields strings
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")


def _build_config_from_dict(config_data: Dict[str, Any]) -> NaryTreeConfig:
    """
    Build NaryTreeConfig from dictionary loaded from YAML.

    Merges user configuration with defaults.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        NaryTreeConfig: Configuration object
    """
    default_config = get_default_config()

    tree_data = config_data.get('tree') or {}
    tree = TreeConfig(
        hash_algorithm=str(
            tree_data.get('hash_algorithm', default_config.tree.hash_algorithm)
        ),
        number_of_children=_coerce_int(
            tree_data.get('number_of_children', default_config.tree.number_of_children),
            'number_of_children',
        ),
    )

    logging_data = config_data.get('logging') or {}
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=os.path.expanduser(str(logging_data.get('file', default_config.logging.file))),
        format=str(logging_data.get('format', default_config.logging.format)),
    )

    return NaryTreeConfig(tree=tree, logging=logging)


def _validate_config(config: NaryTreeConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if config.tree.number_of_children < 2:
        raise InvalidConfigurationError(
            f"number_of_children must be at least 2, got {config.tree.number_of_children}"
        )

    try:
        hash_function_for(config.tree.hash_algorithm)
    except HashProviderError as e:
        raise InvalidConfigurationError(str(e))

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    valid_formats = ["console", "json"]
    if config.logging.format not in valid_formats:
        raise InvalidConfigurationError(
            f"logging format must be one of {valid_formats}, "
            f"got '{config.logging.format}'"
        )
