"""Shared utilities for shellplate."""

from ._logging import LogFormatType, create_cli_logger, create_null_logger
from ._paths import (
    APP_NAME,
    get_cache_dir,
    get_cli_log_file,
    get_log_dir,
    get_package_dir,
    get_runtime_dir,
)

__all__ = [
    "APP_NAME",
    "LogFormatType",
    "create_cli_logger",
    "create_null_logger",
    "get_cache_dir",
    "get_cli_log_file",
    "get_log_dir",
    "get_package_dir",
    "get_runtime_dir",
]
