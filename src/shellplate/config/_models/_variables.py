# pyright: reportAny=false, reportExplicitAny=false
"""Variable and filter specification models.

A VariableSpec describes one entry of the ``vars`` list: either a named
template variable produced by a script snippet, a single shell command, or a
list of shell commands, or a scripted function exposed as a template filter.
YAML keys follow the configuration file schema (``script``, ``cmd``, ``cmds``,
``cwd``, ``env``); the attributes use descriptive names and either spelling
is accepted when constructing a model.
"""

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shellplate.config._models._common import VariableKind


class ArgumentSpec(BaseModel):
    """A single parameter of a scripted filter function."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    name: str


class VariableSpec(BaseModel):
    """One configuration entry describing a template variable or filter.

    Attributes:
        name: Variable name exposed to the template context. Required unless
            the entry defines a filter.
        function: Filter name; when set, ``body`` is compiled as a function.
        arguments: Function parameters, used only with ``function``.
        body: Script source (YAML key ``script``).
        single_command: One shell command (YAML key ``cmd``).
        multi_command: Shell commands whose outputs are joined (YAML ``cmds``).
        shell: Per-variable interpreter override.
        working_directory: Per-variable working directory (YAML ``cwd``).
        environment: Environment overlay for spawned commands (YAML ``env``).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True
    )

    name: str | None = None
    function: str | None = None
    arguments: tuple[ArgumentSpec, ...] = ()
    body: str = Field(default="", alias="script")
    single_command: str | None = Field(default=None, alias="cmd")
    multi_command: tuple[str, ...] | None = Field(default=None, alias="cmds")
    shell: str | None = None
    working_directory: str | None = Field(default=None, alias="cwd")
    environment: dict[str, str] | None = Field(default=None, alias="env")

    @field_validator("arguments", mode="before")
    @classmethod
    def coerce_arguments(cls, value: Any) -> Any:
        """Accept bare strings as shorthand for ``{name: ...}`` arguments."""
        if isinstance(value, list | tuple):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    @field_validator("body", mode="before")
    @classmethod
    def coerce_body(cls, value: Any) -> Any:
        # YAML turns `script: 42` into an int
        if value is None:
            return ""
        if isinstance(value, int | float | bool):
            return str(value)
        return value

    @field_validator("environment", mode="before")
    @classmethod
    def coerce_environment(cls, value: Any) -> Any:
        """Render scalar YAML values (numbers, booleans) as strings."""
        if isinstance(value, dict):
            return {
                str(k): v if isinstance(v, str) else _scalar_to_str(v)
                for k, v in value.items()
            }
        return value

    @model_validator(mode="after")
    def check_identity(self) -> Self:
        if self.name is None and self.function is None:
            msg = "a variable needs either 'name' or 'function'"
            raise ValueError(msg)
        if self.function is not None and not self.body.strip():
            msg = f"function '{self.function}' requires a non-empty 'script' body"
            raise ValueError(msg)
        return self

    @property
    def is_filter(self) -> bool:
        """Whether this entry defines a template filter."""
        return self.function is not None

    @property
    def argument_names(self) -> list[str]:
        """Parameter names in declaration order."""
        return [arg.name for arg in self.arguments]

    def kinds(self) -> list[VariableKind]:
        """Return every value source this named spec exercises, in run order.

        A well-formed spec has exactly one kind. Filters and unnamed specs
        have none.
        """
        if self.name is None:
            return []

        kinds: list[VariableKind] = []
        if self.function is None and self.body.strip():
            kinds.append(VariableKind.SCRIPT)
        if self.single_command is not None:
            kinds.append(VariableKind.COMMAND)
        if self.multi_command is not None:
            kinds.append(VariableKind.COMMANDS)
        return kinds


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)
