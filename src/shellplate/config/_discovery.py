"""Configuration file discovery."""

import os
from pathlib import Path

from ._defaults import CONFIG_PATH_ENV_VAR, DEFAULT_CONFIG_FILENAME


def find_config_file(explicit: Path | None = None, *, cwd: Path | None = None) -> Path:
    """Pick the configuration file for this run.

    Precedence: the explicit path (``--config``), then the file named by
    ``SHELLPLATE_CONFIG``, then ``j2.yaml`` in the working directory. The
    returned path is not checked for existence; the loader reports a missing
    file.

    Args:
        explicit: Path given on the command line, if any.
        cwd: Directory to resolve the default file against. Defaults to the
            process working directory.

    Returns:
        Path to the configuration file.
    """
    if explicit is not None:
        return explicit

    from_env = os.environ.get(CONFIG_PATH_ENV_VAR)
    if from_env:
        return Path(from_env)

    base = cwd if cwd is not None else Path.cwd()
    return base / DEFAULT_CONFIG_FILENAME
