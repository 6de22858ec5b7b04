"""Shared CLI utilities.

This module provides common utilities used by the CLI:
- Standardized exit codes
- Console utilities for error handling
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Never

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ExitCode",
    "exit_with_error",
    "get_error_console",
]


class ExitCode(IntEnum):
    """Exit codes for the shellplate CLI."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    SCRIPT_ERROR = 2
    TEMPLATE_ERROR = 3
    IO_ERROR = 4
    USAGE_ERROR = 5


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr.

    Returns:
        Console instance writing to stderr.
    """
    from rich.console import Console  # noqa: PLC0415

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display. Printed without markup so
            brackets in template or script diagnostics survive.
        code: The exit code to use.
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print("[red]Error:[/red] ", end="")
    console.print(message, markup=False, highlight=False)
    raise SystemExit(code)
