"""Shared test fixtures for shellplate tests."""

import shutil
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console

from shellplate.shell import BUNDLED_SHELL_ENV_VAR, get_bundled_shell


@dataclass(frozen=True, slots=True)
class IsolatedDirs:
    """Per-test replacements for the user cache and log directories."""

    cache_dir: Path
    log_file: Path


@pytest.fixture(autouse=True)
def isolated_dirs(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[IsolatedDirs]:
    """Keep the bundled shell and log files inside the test's tmp_path.

    Also resets the process-wide bundled shell cell afterwards.
    """
    cache_dir = tmp_path / "cache"
    log_file = tmp_path / "logs" / "cli.log"

    monkeypatch.setattr("shellplate.shell._bundled.get_cache_dir", lambda: cache_dir)
    monkeypatch.setattr("shellplate.utils._logging.get_cli_log_file", lambda: log_file)
    monkeypatch.delenv(BUNDLED_SHELL_ENV_VAR, raising=False)
    monkeypatch.delenv("SHELLPLATE_CONFIG", raising=False)
    monkeypatch.delenv("SHELLPLATE_DEBUG", raising=False)
    monkeypatch.delenv("SHELLPLATE_LOG_LEVEL", raising=False)

    yield IsolatedDirs(cache_dir=cache_dir, log_file=log_file)

    get_bundled_shell().cleanup()


@pytest.fixture
def system_sh() -> str:
    """Absolute path of a system shell that runs regardless of its file name."""
    path = shutil.which("bash") or shutil.which("sh")
    assert path is not None
    return path


@pytest.fixture
def bundled_payload(system_sh: str, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Use the system sh binary as the bundled shell payload."""
    monkeypatch.setenv(BUNDLED_SHELL_ENV_VAR, system_sh)
    return Path(system_sh)


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


def write_config(directory: Path, content: str, name: str = "j2.yaml") -> Path:
    """Write a configuration file and return its path."""
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


def write_template(directory: Path, content: str, name: str = "main.j2") -> Path:
    """Write a template file and return its path."""
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path
