"""Template rendering engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from shellplate.scripting import build_filter_set, compile_filter_program
from shellplate.shell import bundled_shell_scope
from shellplate.utils import create_null_logger

from ._context import build_context
from ._environment import MAIN_TEMPLATE_NAME, create_environment

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

    from shellplate.config import RootConfiguration
    from shellplate.scripting import TemplateFilter

    from ._context import CommandRunner
    from ._environment import EnvironmentConfig


def render_template_string(
    template_str: str,
    context: Mapping[str, object],
    *,
    filters: Mapping[str, TemplateFilter] | None = None,
    config: EnvironmentConfig | None = None,
) -> str:
    """Render a Jinja2 template string with context.

    Args:
        template_str: The Jinja2 template string.
        context: Template variables.
        filters: Extra filters to register.
        config: Optional environment configuration.

    Returns:
        Rendered string.

    Raises:
        jinja2.TemplateSyntaxError: If the template is malformed.
        jinja2.TemplateRuntimeError: If a script filter fails.
    """
    env = create_environment(template_str, filters=filters, config=config)
    template = env.get_template(MAIN_TEMPLATE_NAME)
    return cast("str", template.render(dict(context)))


def render_template(
    template_path: Path,
    context: Mapping[str, object],
    *,
    filters: Mapping[str, TemplateFilter] | None = None,
    config: EnvironmentConfig | None = None,
) -> str:
    """Render a Jinja2 template file with context.

    Args:
        template_path: Path to the template file.
        context: Template variables.
        filters: Extra filters to register.
        config: Optional environment configuration.

    Returns:
        Rendered template content.

    Raises:
        FileNotFoundError: If template file does not exist.
        UnicodeDecodeError: If the template is not valid UTF-8.
        jinja2.TemplateSyntaxError: If the template is malformed.
        jinja2.TemplateRuntimeError: If a script filter fails.
    """
    content = template_path.read_text(encoding="utf-8")
    return render_template_string(content, context, filters=filters, config=config)


def render(
    root: RootConfiguration,
    template_path: Path,
    *,
    runner: CommandRunner | None = None,
    config: EnvironmentConfig | None = None,
    logger: FilteringBoundLogger | None = None,
) -> str:
    """Run the whole pipeline for one template.

    Compiles the filter program first so a broken filter stops the run before
    any command executes, then resolves the variables and renders. The
    bundled shell, if it was extracted along the way, is removed afterwards.

    Args:
        root: Loaded configuration.
        template_path: Template to render.
        runner: Command runner override, mostly for tests.
        config: Optional environment configuration.
        logger: Optional logger for diagnostics.

    Returns:
        Rendered text.

    Raises:
        ScriptError: If filter compilation or a script variable fails.
        OSError: If the template cannot be read.
        UnicodeDecodeError: If the template is not valid UTF-8.
        jinja2.TemplateError: If the template is malformed or a filter fails.
    """
    log = logger if logger is not None else create_null_logger()

    with bundled_shell_scope():
        filter_specs = root.filters
        program = compile_filter_program(filter_specs)
        filters = build_filter_set(program, filter_specs)
        log.debug("filters_compiled", filters=sorted(filters))

        if runner is None:
            context = build_context(root, logger=log)
        else:
            context = build_context(root, runner=runner, logger=log)
        log.debug("context_built", variables=sorted(context))

        output = render_template(template_path, context, filters=filters, config=config)

    log.info("template_rendered", template=str(template_path), length=len(output))
    return output
