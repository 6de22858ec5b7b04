"""The ``--info`` report on the bundled shell."""

from __future__ import annotations

import subprocess

from shellplate.exceptions import ProvisioningError
from shellplate.shell import (
    bundled_shell_scope,
    get_bundled_payload_path,
    get_bundled_shell_origin,
)


def build_info_lines(version: str) -> list[str]:
    """Collect version and bundled shell diagnostics.

    Extracts the bundled shell, runs ``--version`` on it by absolute path so
    ``PATH`` cannot interfere, and removes the extracted binary again.

    Args:
        version: shellplate version string.

    Returns:
        Report lines, in display order.
    """
    lines = [
        f"shellplate v{version}",
        f"Build Shell Source: {get_bundled_shell_origin()}",
    ]

    try:
        size = get_bundled_payload_path().stat().st_size
    except (OSError, ProvisioningError) as e:
        lines.append(f"Embedded Size: unavailable ({e})")
    else:
        lines.append(f"Embedded Size: {size} bytes")

    with bundled_shell_scope() as shell:
        try:
            result = subprocess.run(  # noqa: S603
                [str(shell.path()), "--version"],
                capture_output=True,
                stdin=subprocess.DEVNULL,
                check=False,
            )
        except (OSError, ProvisioningError) as e:
            lines.append(f"Embedded Shell Verification: FAILED ({e})")
        else:
            ver = result.stdout.decode("utf-8", errors="replace").strip()
            lines.append(f"Embedded Shell Verification: {ver} [OK]")

    return lines
