"""Configuration models.

This module provides Pydantic models for the ``j2.yaml`` configuration file.
"""

from shellplate.config._models._common import LogFormat, LogLevel, VariableKind
from shellplate.config._models._logging import LoggingConfig
from shellplate.config._models._root import RootConfiguration
from shellplate.config._models._variables import ArgumentSpec, VariableSpec

__all__ = [
    "ArgumentSpec",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RootConfiguration",
    "VariableKind",
    "VariableSpec",
]
