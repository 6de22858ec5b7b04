"""Jinja2 Environment factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jinja2 import Environment

    from shellplate.scripting import TemplateFilter

MAIN_TEMPLATE_NAME: str = "main"
"""Logical name the rendered template is registered under."""


@dataclass(slots=True, frozen=True)
class EnvironmentConfig:
    """Configuration for Jinja2 Environment.

    Attributes:
        autoescape: Enable autoescaping (default: False for text templates).
        trim_blocks: Remove first newline after a block tag.
        lstrip_blocks: Strip leading whitespace before block tags.
        keep_trailing_newline: Preserve trailing newline in templates. Off by
            default; the CLI prints the result followed by a newline.
    """

    autoescape: bool = False
    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = False


def create_environment(
    template_source: str,
    *,
    filters: Mapping[str, TemplateFilter] | None = None,
    config: EnvironmentConfig | None = None,
) -> Environment:
    """Create a Jinja2 Environment holding one template and the script filters.

    The template is registered as ``main`` through a DictLoader. Undefined
    variables keep Jinja2's default behavior and render as empty strings.

    Args:
        template_source: Template text.
        filters: Filters to register, by name. Script filters override
            built-in filters with the same name.
        config: Optional environment configuration. If None, uses defaults.

    Returns:
        Configured Jinja2 Environment.

    Example:
        env = create_environment("{{ who | shout }}", filters={"shout": shout})
        result = env.get_template("main").render(who="world")
    """
    from jinja2 import DictLoader, Environment  # noqa: PLC0415

    if config is None:
        config = EnvironmentConfig()

    env: Environment = Environment(
        loader=DictLoader({MAIN_TEMPLATE_NAME: template_source}),
        autoescape=config.autoescape,  # noqa: S701
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        keep_trailing_newline=config.keep_trailing_newline,
    )

    if filters:
        env.filters.update(filters)

    return env
