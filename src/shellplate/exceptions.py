"""shellplate exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class ShellplateError(Exception):
    """Base exception for shellplate errors."""


class ConfigError(ShellplateError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


class ScriptError(ShellplateError):
    """Raised when a script snippet cannot be compiled, evaluated, or called."""

    def __init__(
        self,
        message: str,
        *,
        source: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and script context."""
        super().__init__(message)
        self.source: str = source
        self.cause: Exception | None = cause


class ProvisioningError(ShellplateError):
    """Raised when the bundled shell cannot be materialized on disk."""
