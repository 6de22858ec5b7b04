r"""shellplate templating.

Resolves the configured variables and renders a Jinja2 template with them.

Basic usage:
    from pathlib import Path

    from shellplate.config import load_config
    from shellplate.templating import render

    config = load_config(Path("j2.yaml"))
    print(render(config, Path("motd.j2")))

Lower level:
    from shellplate.templating import build_context, render_template_string

    context = build_context(config)
    result = render_template_string("Host: {{ hostname }}", context)
"""

from ._context import CommandRunner, ResolvedContext, build_context
from ._environment import MAIN_TEMPLATE_NAME, EnvironmentConfig, create_environment
from ._renderer import render, render_template, render_template_string

__all__ = [
    "MAIN_TEMPLATE_NAME",
    "CommandRunner",
    "EnvironmentConfig",
    "ResolvedContext",
    "build_context",
    "create_environment",
    "render",
    "render_template",
    "render_template_string",
]
