"""Default configuration values."""

DEFAULT_CONFIG_FILENAME: str = "j2.yaml"
"""Configuration file looked up in the current directory."""

CONFIG_PATH_ENV_VAR: str = "SHELLPLATE_CONFIG"
"""Environment variable naming an alternative configuration file."""
