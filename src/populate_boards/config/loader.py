"""Config loading from GitHub Action inputs."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from populate_boards.contracts.config import ConfigOverrides, PopulateConfig, merge_config
from populate_boards.contracts.exceptions import ConfigError

_TRUE_VALUES = frozenset({"true", "True", "TRUE"})
_FALSE_VALUES = frozenset({"false", "False", "FALSE"})

_STRING_INPUTS = ("cards_path", "boards", "delimiter", "column_name", "token")
_BOOLEAN_INPUTS = ("use_delimiter", "development_mode", "organization")


def _input_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def _read_input(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(_input_name(name), "").strip()
    return value or None


def parse_boolean_input(name: str, raw: str) -> bool:
    """Parse an action boolean input using the YAML 1.2 core-schema spellings."""
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigError(f"Input does not meet YAML 1.2 'Core Schema' specification: {name}")


def read_env_overrides(environ: Mapping[str, str] | None = None) -> ConfigOverrides:
    """Collect the action inputs present in *environ* as config overrides.

    Empty or missing inputs are left unset so that the defaults apply.
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for name in _STRING_INPUTS:
        raw = _read_input(env, name)
        if raw is not None:
            values[name] = raw
    for name in _BOOLEAN_INPUTS:
        raw = _read_input(env, name)
        if raw is not None:
            values[name] = parse_boolean_input(name, raw)

    try:
        return ConfigOverrides.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    overrides: ConfigOverrides | None = None,
) -> PopulateConfig:
    """Build the run configuration: defaults, then action inputs, then *overrides*."""
    layers = [read_env_overrides(environ)]
    if overrides is not None:
        layers.append(overrides)
    try:
        return merge_config(PopulateConfig(), *layers)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
