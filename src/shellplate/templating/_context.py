"""Resolution of variable specs into the template context."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from shellplate.config import VariableKind
from shellplate.scripting import evaluate_expression, stringify
from shellplate.shell import resolve_shell, run_command
from shellplate.utils import create_null_logger

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

    from shellplate.config import RootConfiguration, VariableSpec
    from shellplate.shell import ShellChoice

type ResolvedContext = dict[str, str]


class CommandRunner(Protocol):
    """Callable that runs one shell command, like :func:`run_command`."""

    def __call__(
        self,
        command: str,
        shell: ShellChoice,
        *,
        working_directory: str | Path | None = None,
        env: Mapping[str, str] | None = None,
        logger: FilteringBoundLogger | None = None,
    ) -> str: ...


def _run_spec_command(
    command: str,
    spec: VariableSpec,
    config: RootConfiguration,
    runner: CommandRunner,
    logger: FilteringBoundLogger,
) -> str:
    shell = resolve_shell(spec.shell, config.default_shell)
    return runner(
        command,
        shell,
        working_directory=spec.working_directory,
        env=spec.environment,
        logger=logger,
    )


def build_context(
    config: RootConfiguration,
    *,
    runner: CommandRunner = run_command,
    logger: FilteringBoundLogger | None = None,
) -> ResolvedContext:
    """Resolve every named variable spec into a string value.

    Specs are processed once, in declaration order:

    1. a non-blank ``script`` (and no ``function``) is evaluated;
    2. ``cmd`` runs one command with the resolved shell;
    3. ``cmds`` runs each command in order and joins the outputs with
       newlines.

    A spec that sets more than one of these runs all of them and the later
    value replaces the earlier one. Duplicate names behave the same way:
    the last spec wins. Filter specs contribute nothing here.

    Args:
        config: Loaded configuration.
        runner: Command runner, :func:`run_command` by default.
        logger: Optional logger for diagnostics.

    Returns:
        Mapping from variable name to rendered value.

    Raises:
        ScriptError: If a script variable fails to evaluate.
    """
    log = logger if logger is not None else create_null_logger()
    context: ResolvedContext = {}

    for spec in config.variables:
        name = spec.name
        if name is None:
            continue

        kinds = spec.kinds()
        if len(kinds) > 1:
            log.warning(
                "variable_kinds_overlap",
                variable=name,
                kinds=[kind.value for kind in kinds],
                winner=kinds[-1].value,
            )

        for kind in kinds:
            match kind:
                case VariableKind.SCRIPT:
                    value = stringify(evaluate_expression(spec.body))
                case VariableKind.COMMAND:
                    assert spec.single_command is not None  # noqa: S101
                    value = _run_spec_command(
                        spec.single_command, spec, config, runner, log
                    )
                case VariableKind.COMMANDS:
                    assert spec.multi_command is not None  # noqa: S101
                    value = "\n".join(
                        _run_spec_command(command, spec, config, runner, log)
                        for command in spec.multi_command
                    )

            context[name] = value
            log.debug("variable_resolved", variable=name, kind=kind.value)

    return context
