"""Configuration loading."""

from populate_boards.config.loader import load_config, parse_boolean_input, read_env_overrides

__all__ = ["load_config", "parse_boolean_input", "read_env_overrides"]
