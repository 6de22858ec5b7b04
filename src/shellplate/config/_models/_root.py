"""Top-level configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from shellplate.config._models._logging import LoggingConfig
from shellplate.config._models._variables import VariableSpec


class RootConfiguration(BaseModel):
    """Top-level ``j2.yaml`` configuration.

    Attributes:
        default_shell: Interpreter used when a variable does not name one.
        variables: Variable and filter specifications (YAML key ``vars``).
        logging: Logging settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True
    )

    default_shell: str | None = None
    variables: tuple[VariableSpec, ...] = Field(default=(), alias="vars")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def filters(self) -> list[VariableSpec]:
        """Specs that define template filters, in declaration order."""
        return [spec for spec in self.variables if spec.is_filter]
