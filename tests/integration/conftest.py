from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from shellplate.cli import create_app


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def shellplate_cli(console: Console) -> Callable[..., int]:
    """Create the CLI app for testing.

    Returns a callable that runs the CLI with the given arguments and returns
    the exit code (0 if no SystemExit).
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        """Run CLI app and return exit code."""

        try:
            app(args)
        except SystemExit as e:
            if e.code is None:
                return 0
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
