"""Shell selection, bundled shell provisioning, and command execution."""

from ._bundled import (
    BUNDLED_SHELL_ENV_VAR,
    RUNTIME_BINARY_NAME,
    BundledShell,
    bundled_shell_scope,
    get_bundled_payload_path,
    get_bundled_shell,
    get_bundled_shell_origin,
    get_bundled_shell_path,
)
from ._executor import ERROR_PREFIX, CommandConfig, build_command, execute, run_command
from ._resolver import BUNDLED_SHELL, BUNDLED_SHELL_NAME, ShellChoice, resolve_shell

__all__ = [
    "BUNDLED_SHELL",
    "BUNDLED_SHELL_ENV_VAR",
    "BUNDLED_SHELL_NAME",
    "ERROR_PREFIX",
    "RUNTIME_BINARY_NAME",
    "BundledShell",
    "CommandConfig",
    "ShellChoice",
    "build_command",
    "bundled_shell_scope",
    "execute",
    "get_bundled_payload_path",
    "get_bundled_shell",
    "get_bundled_shell_origin",
    "get_bundled_shell_path",
    "resolve_shell",
    "run_command",
]
