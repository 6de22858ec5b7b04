"""The command-line interface for shellplate."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from jinja2 import TemplateError, TemplateSyntaxError
from rich.console import Console

from shellplate import __version__
from shellplate.config import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    find_config_file,
    load_config,
)
from shellplate.exceptions import ScriptError
from shellplate.templating import render
from shellplate.utils import create_cli_logger

from ._info import build_info_lines
from ._shared import ExitCode, exit_with_error

_HELP = "Render Jinja templates with values from Python snippets and shell commands."


def _describe_config_error(error: ConfigError) -> str:
    message = str(error)
    if isinstance(error, ConfigLoadError) and error.line is not None:
        return f"{message} ({error.path}:{error.line}:{error.column})"
    if isinstance(error, ConfigValidationError) and error.source:
        return f"{message} in {error.source}"
    return message


def _describe_template_error(error: TemplateError) -> str:
    if isinstance(error, TemplateSyntaxError):
        return f"Template syntax error at line {error.lineno}: {error.message}"
    return f"Template error: {error}"


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="shellplate",
        help=_HELP,
        version=__version__,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _render(  # pyright: ignore[reportUnusedFunction]
        *,
        template: Annotated[
            Path | None,
            Parameter(name=["--template", "-t"], help="Path to the Jinja template"),
        ] = None,
        config: Annotated[
            Path | None,
            Parameter(
                name=["--config", "-c"],
                help="Path to the configuration file (default: ./j2.yaml)",
            ),
        ] = None,
        info: Annotated[
            bool,
            Parameter(
                name=["--info", "-i"],
                negative="",
                help="Print version and bundled shell details, then exit",
            ),
        ] = False,
        verbose: Annotated[
            bool,
            Parameter(name="--verbose", negative="", help="Enable debug logging"),
        ] = False,
    ) -> None:
        """Render a template with values computed from j2.yaml.

        Args:
            template: Path to the Jinja template.
            config: Path to the configuration file.
            info: Print version and bundled shell details, then exit.
            verbose: Enable debug logging.
        """
        if info:
            for line in build_info_lines(__version__):
                print(line)  # noqa: T201
            return

        if template is None:
            exit_with_error(
                "--template <PATH> is required unless using --info",
                ExitCode.USAGE_ERROR,
                console=error_console,
            )

        config_path = find_config_file(config)
        try:
            root = load_config(config_path)
        except ConfigError as e:
            exit_with_error(
                _describe_config_error(e), ExitCode.CONFIG_ERROR, console=error_console
            )

        logger = create_cli_logger(
            level="debug" if verbose else root.logging.level,
            log_format=root.logging.format.value,  # type: ignore[arg-type]
            log_file=root.logging.file,
            command="render",
        )
        logger.debug(
            "config_loaded", path=str(config_path), variables=len(root.variables)
        )

        try:
            output = render(root, template, logger=logger)
        except ScriptError as e:
            logger.error("script_failed", error=str(e))
            exit_with_error(str(e), ExitCode.SCRIPT_ERROR, console=error_console)
        except TemplateError as e:
            logger.error("template_failed", error=str(e))
            exit_with_error(
                _describe_template_error(e),
                ExitCode.TEMPLATE_ERROR,
                console=error_console,
            )
        except (OSError, UnicodeDecodeError) as e:
            logger.error("template_unreadable", template=str(template), error=str(e))
            exit_with_error(
                f"Failed to read template: {e}",
                ExitCode.IO_ERROR,
                console=error_console,
            )

        print(output)  # noqa: T201

    return app


def main() -> None:
    """Default entrypoint for the `shellplate` CLI."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
