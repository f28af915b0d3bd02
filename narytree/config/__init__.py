"""
Configuration management for Narytree.

Handles loading and validation of configuration files.
"""

from narytree.config.settings import (
    LoggingConfig,
    NaryTreeConfig,
    TreeConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "LoggingConfig",
    "NaryTreeConfig",
    "TreeConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
