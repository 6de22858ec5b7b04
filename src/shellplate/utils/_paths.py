from importlib.resources import files
from pathlib import Path

import platformdirs

APP_NAME = "shellplate"


def get_cache_dir() -> Path:
    """Get the user cache directory used for the extracted bundled shell."""
    return platformdirs.user_cache_path(APP_NAME)


def get_log_dir() -> Path:
    """Get the user log directory for shellplate."""
    return platformdirs.user_log_path(APP_NAME)


def get_cli_log_file() -> Path:
    """Get the path to the default CLI log file inside the log directory."""
    return get_log_dir() / "cli.log"


def get_package_dir() -> Path:
    """Get the root directory of the installed shellplate package."""
    return Path(str(files("shellplate")))


def get_runtime_dir() -> Path:
    """Get the path to the package's _runtime/ directory.

    The directory holds the bundled shell binary and its build-origin note
    when the distribution was built with them.
    """
    return get_package_dir() / "_runtime"
