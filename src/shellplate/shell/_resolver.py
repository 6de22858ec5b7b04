"""Shell selection with per-variable, global, and bundled precedence."""

from __future__ import annotations

from dataclasses import dataclass

BUNDLED_SHELL_NAME: str = "fish"
"""Identifier of the bundled interpreter and the hard default shell."""


@dataclass(frozen=True, slots=True)
class ShellChoice:
    """The interpreter chosen to run a command.

    Attributes:
        name: Interpreter name as configured (or the bundled identifier).
        bundled: Whether the packaged interpreter binary should be used
            instead of looking ``name`` up on ``PATH``.
    """

    name: str
    bundled: bool = False

    @classmethod
    def named(cls, name: str) -> ShellChoice:
        """Build a choice for ``name``, recognizing the bundled identifier."""
        return cls(name=name, bundled=name == BUNDLED_SHELL_NAME)


BUNDLED_SHELL: ShellChoice = ShellChoice(name=BUNDLED_SHELL_NAME, bundled=True)


def resolve_shell(
    per_variable: str | None,
    global_default: str | None,
) -> ShellChoice:
    """Pick the interpreter for a command.

    Precedence, strictly in this order:

    1. ``per_variable`` if present
    2. ``global_default`` if present
    3. the bundled interpreter

    Empty strings count as absent. Nothing is checked here; whether the
    chosen name can actually be run is discovered when the command executes.

    Args:
        per_variable: The variable's ``shell`` override.
        global_default: The configuration's ``default_shell``.

    Returns:
        The chosen interpreter.
    """
    for candidate in (per_variable, global_default):
        if candidate:
            return ShellChoice.named(candidate)
    return BUNDLED_SHELL
