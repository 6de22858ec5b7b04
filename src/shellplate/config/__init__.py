"""shellplate configuration.

This module provides the public API for loading the ``j2.yaml``
configuration file into typed models.

Example:
    >>> from pathlib import Path
    >>> from shellplate.config import load_config
    >>> config = load_config(Path("j2.yaml"))
    >>> [spec.name for spec in config.variables]
    ['greeting', 'hostname']
"""

from shellplate.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import CONFIG_PATH_ENV_VAR, DEFAULT_CONFIG_FILENAME
from ._discovery import find_config_file
from ._loader import load_config, parse_config, read_yaml_file
from ._models import (
    ArgumentSpec,
    LogFormat,
    LoggingConfig,
    LogLevel,
    RootConfiguration,
    VariableKind,
    VariableSpec,
)

__all__ = [
    "CONFIG_PATH_ENV_VAR",
    "DEFAULT_CONFIG_FILENAME",
    "ArgumentSpec",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RootConfiguration",
    "VariableKind",
    "VariableSpec",
    "find_config_file",
    "load_config",
    "parse_config",
    "read_yaml_file",
]
