"""Common configuration types.

This module defines shared enums used across configuration models.
"""

from enum import StrEnum


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class VariableKind(StrEnum):
    """How a named variable spec produces its value."""

    SCRIPT = "script"
    COMMAND = "cmd"
    COMMANDS = "cmds"
