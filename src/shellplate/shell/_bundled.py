"""Provisioning of the bundled shell binary.

The distribution may ship a shell binary as package data
(``shellplate/_runtime/fish``). It cannot be executed from inside a wheel or
zip, so on first use it is copied into the user cache directory with
executable permissions. The cache directory is used instead of a temporary
directory because temporary directories are often mounted ``noexec``.

Materialization happens at most once per process (lock-guarded cell) and is
safe when several shellplate processes race: the binary is written to a
temporary file and atomically renamed into place, an existing file is reused
as-is, and a "text file busy" error means another process is already running
the file, which proves it is usable.
"""

from __future__ import annotations

import contextlib
import errno
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from shellplate.exceptions import ProvisioningError
from shellplate.utils import get_cache_dir, get_runtime_dir

if TYPE_CHECKING:
    from collections.abc import Iterator

BUNDLED_SHELL_ENV_VAR: str = "SHELLPLATE_BUNDLED_SHELL"
"""Environment variable pointing at a shell binary to use as the payload."""

RUNTIME_BINARY_NAME: str = "fish_runtime"
"""File name of the materialized binary inside the cache directory."""

_PAYLOAD_RESOURCE: str = "fish"
_ORIGIN_RESOURCE: str = "ORIGIN"


def get_bundled_payload_path() -> Path:
    """Locate the bundled shell binary to materialize.

    ``SHELLPLATE_BUNDLED_SHELL`` takes precedence over the packaged resource.

    Returns:
        Path to the payload file.

    Raises:
        ProvisioningError: If no payload is available.
    """
    from_env = os.environ.get(BUNDLED_SHELL_ENV_VAR)
    if from_env:
        candidate = Path(from_env)
    else:
        candidate = get_runtime_dir() / _PAYLOAD_RESOURCE

    if not candidate.is_file():
        msg = (
            f"Bundled shell payload not found at {candidate}; set "
            f"{BUNDLED_SHELL_ENV_VAR} or configure default_shell"
        )
        raise ProvisioningError(msg)
    return candidate


def get_bundled_shell_origin() -> str:
    """Return the build-origin note shipped with the bundled shell."""
    origin = get_runtime_dir() / _ORIGIN_RESOURCE
    try:
        return origin.read_text(encoding="utf-8").strip() or "unknown"
    except OSError:
        return "unknown"


def _write_executable(target: Path, payload: bytes) -> None:
    """Atomically place ``payload`` at ``target`` with mode 0o755."""
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
    try:
        with os.fdopen(fd, "wb") as f:
            _ = f.write(payload)
        os.chmod(tmp_name, 0o755)  # noqa: PTH101
        os.replace(tmp_name, target)  # noqa: PTH105
    except BaseException:
        with contextlib.suppress(OSError):
            Path(tmp_name).unlink()
        raise


class BundledShell:
    """Single-assignment, thread-safe cell holding the materialized binary.

    Attributes:
        cache_dir: Directory the binary is materialized into. Defaults to the
            user cache directory, looked up on first use.
    """

    def __init__(self, cache_dir: Path | None = None) -> None:
        self.cache_dir: Path | None = cache_dir
        self._lock: threading.Lock = threading.Lock()
        self._path: Path | None = None

    @property
    def materialized(self) -> bool:
        """Whether this cell has been initialized."""
        return self._path is not None

    def path(self) -> Path:
        """Return the executable path, materializing the binary on first call.

        Raises:
            ProvisioningError: If the payload is missing or cannot be written.
        """
        with self._lock:
            if self._path is None:
                self._path = self._materialize()
            return self._path

    def _materialize(self) -> Path:
        cache_dir = self.cache_dir if self.cache_dir is not None else get_cache_dir()
        bin_path = cache_dir / RUNTIME_BINARY_NAME

        # Reuse whatever an earlier run or a concurrent process left behind.
        if bin_path.exists():
            return bin_path

        payload_path = get_bundled_payload_path()
        try:
            cache_dir.mkdir(parents=True, exist_ok=True)
            _write_executable(bin_path, payload_path.read_bytes())
        except OSError as e:
            if e.errno == errno.ETXTBSY:
                return bin_path
            msg = f"Failed to create runtime binary at {bin_path}: {e}"
            raise ProvisioningError(msg) from e

        return bin_path

    def cleanup(self) -> None:
        """Delete the materialized binary and reset the cell.

        Does nothing if the binary was never materialized by this cell.
        """
        with self._lock:
            if self._path is None:
                return
            with contextlib.suppress(FileNotFoundError):
                self._path.unlink()
            self._path = None


_bundled_shell = BundledShell()


def get_bundled_shell() -> BundledShell:
    """Return the process-wide bundled shell cell."""
    return _bundled_shell


def get_bundled_shell_path() -> Path:
    """Return the path to the bundled shell, materializing it if needed.

    Raises:
        ProvisioningError: If the binary cannot be provided.
    """
    return _bundled_shell.path()


@contextmanager
def bundled_shell_scope(shell: BundledShell | None = None) -> Iterator[BundledShell]:
    """Delete the materialized bundled shell on every exit path.

    Args:
        shell: Cell to clean up. Defaults to the process-wide cell.

    Yields:
        The cell, so callers can materialize eagerly if they need to.
    """
    cell = shell if shell is not None else _bundled_shell
    try:
        yield cell
    finally:
        cell.cleanup()
