# pyright: reportAny=false, reportExplicitAny=false
"""YAML configuration file loading."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from shellplate.exceptions import ConfigLoadError, ConfigValidationError

from ._models import RootConfiguration

if TYPE_CHECKING:
    from pathlib import Path


def read_yaml_file(path: Path) -> dict[str, Any]:
    """Read and parse a YAML configuration file.

    An empty document yields an empty dictionary.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML content as dictionary.

    Raises:
        ConfigLoadError: If the file is missing, unreadable, cannot be parsed,
            or its top level is not a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        msg = f"Config file not found: {path}"
        raise ConfigLoadError(msg, path=path) from e
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read config file: {e}"
        raise ConfigLoadError(msg, path=path) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        line: int | None = None
        column: int | None = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line = mark.line + 1
            column = mark.column + 1
        msg = f"Failed to parse YAML file: {e}"
        raise ConfigLoadError(msg, path=path, line=line, column=column) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping, got {type(data).__name__}"
        raise ConfigLoadError(msg, path=path)
    return data


def parse_config(data: dict[str, Any], *, source: str | None = None) -> RootConfiguration:
    """Validate a configuration dictionary into a RootConfiguration.

    Args:
        data: Raw configuration values.
        source: Description of where the values came from, for diagnostics.

    Returns:
        The validated configuration.

    Raises:
        ConfigValidationError: If the values do not match the schema. The
            first reported problem is described.
    """
    try:
        return RootConfiguration.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"]) or "<root>"
        msg = f"Invalid configuration at '{key}': {first['msg']}"
        raise ConfigValidationError(
            msg,
            key=key,
            value=first.get("input"),
            expected=first["msg"],
            source=source,
        ) from e


def load_config(path: Path) -> RootConfiguration:
    """Load and validate a ``j2.yaml`` configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
        ConfigValidationError: If the content does not match the schema.
    """
    return parse_config(read_yaml_file(path), source=str(path))
