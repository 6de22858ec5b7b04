"""Execution of shell commands for template variables.

Commands run through an interpreter's ``-c`` flag with optional working
directory and environment overlays. Failures to start the process never
raise: they come back as an ``ERROR: ...`` string so the problem shows up
in the rendered template while the other variables still resolve.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shellplate.exceptions import ProvisioningError
from shellplate.utils import create_null_logger

from ._bundled import get_bundled_shell_path
from ._resolver import BUNDLED_SHELL, ShellChoice

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

ERROR_PREFIX: str = "ERROR: "


@dataclass(frozen=True, slots=True)
class CommandConfig:
    """Configuration for one command execution.

    Attributes:
        command: Command string handed to the interpreter's ``-c`` flag.
        shell: Interpreter to run the command with.
        cwd: Working directory for the child, or None to inherit.
        env: Environment variables added to (or overriding) the inherited
            environment.
    """

    command: str
    shell: ShellChoice = BUNDLED_SHELL
    cwd: str | Path | None = None
    env: dict[str, str] = field(default_factory=dict)


def build_command(config: CommandConfig) -> list[str]:
    """Build the argv list for a command.

    Args:
        config: Command configuration.

    Returns:
        ``[executable, "-c", command]``.

    Raises:
        ProvisioningError: If the bundled shell is selected but unavailable.
    """
    if config.shell.bundled:
        executable = str(get_bundled_shell_path())
    else:
        executable = config.shell.name
    return [executable, "-c", config.command]


def execute(
    config: CommandConfig,
    *,
    logger: FilteringBoundLogger | None = None,
) -> str:
    """Run a command and return its trimmed standard output.

    Blocks until the child exits. Standard output is decoded as UTF-8 with
    invalid sequences replaced and stripped of surrounding whitespace. The
    exit code and standard error do not affect the returned value.

    Args:
        config: Command configuration.
        logger: Optional logger for diagnostics.

    Returns:
        The trimmed output, or ``"ERROR: <diagnostic>"`` if the process could
        not be started, for example because the interpreter is missing or the
        command or environment contains a NUL byte.
    """
    log = logger if logger is not None else create_null_logger()

    env = {**os.environ, **config.env}
    cwd = str(config.cwd) if config.cwd else None

    try:
        cmd = build_command(config)
        result = subprocess.run(  # noqa: S603
            cmd,
            env=env,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except (OSError, ValueError, ProvisioningError) as e:
        log.warning(
            "command_failed",
            command=config.command,
            shell=config.shell.name,
            error=str(e),
        )
        return f"{ERROR_PREFIX}{e}"

    if result.returncode != 0:
        log.debug(
            "command_nonzero_exit",
            command=config.command,
            shell=config.shell.name,
            exit_code=result.returncode,
            stderr=result.stderr.decode("utf-8", errors="replace"),
        )

    return result.stdout.decode("utf-8", errors="replace").strip()


def run_command(
    command: str,
    shell: ShellChoice,
    *,
    working_directory: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    logger: FilteringBoundLogger | None = None,
) -> str:
    """Run ``command`` with ``shell`` and return its trimmed output.

    Convenience wrapper around :func:`execute`.

    Args:
        command: Command string.
        shell: Interpreter choice from :func:`resolve_shell`.
        working_directory: Working directory override.
        env: Environment overlay.
        logger: Optional logger for diagnostics.

    Returns:
        The trimmed output, or an ``ERROR: ...`` string on spawn failure.
    """
    config = CommandConfig(
        command=command,
        shell=shell,
        cwd=working_directory,
        env=dict(env) if env else {},
    )
    return execute(config, logger=logger)
