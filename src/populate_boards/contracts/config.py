"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator


class PopulateConfig(BaseModel):
    cards_path: Path = Path("cards")
    boards: Path = Path("boards.yml")
    delimiter: str = "-"
    use_delimiter: bool = False
    development_mode: bool = False
    column_name: str = "Column"
    # Selects organization(login:) over user(login:) when resolving projects.
    organization: bool = True
    token: str | None = None

    model_config = {"frozen": True}

    @field_validator("column_name")
    @classmethod
    def validate_column_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("column_name must not be empty")
        return value


class ConfigOverrides(BaseModel):
    """Partial configuration; unset fields keep the defaults they are merged over."""

    cards_path: Path | None = None
    boards: Path | None = None
    delimiter: str | None = None
    use_delimiter: bool | None = None
    development_mode: bool | None = None
    column_name: str | None = None
    organization: bool | None = None
    token: str | None = None

    model_config = {"frozen": True}


def merge_config(defaults: PopulateConfig, *overrides: ConfigOverrides) -> PopulateConfig:
    """Merge *overrides* over *defaults* field by field, later overrides winning."""
    values: dict[str, Any] = defaults.model_dump()
    for override in overrides:
        for name in ConfigOverrides.model_fields:
            value = getattr(override, name)
            if value is not None:
                values[name] = value
    return PopulateConfig.model_validate(values)
