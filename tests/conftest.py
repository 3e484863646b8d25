"""Shared test fixtures for populate-boards tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from populate_boards.contracts.board import BoardDefinition
from populate_boards.contracts.config import PopulateConfig
from tests.fakes.cards import write_card


@pytest.fixture
def cards_path(tmp_path: Path) -> Path:
    """A card tree with one group holding two prefixed columns."""
    root = tmp_path / "cards"
    write_card(root, "group-a", "01-todo", "01-Write docs.md", "Document the CLI")
    write_card(root, "group-a", "01-todo", "02-Add tests.md", "Cover the engine")
    write_card(root, "group-a", "02-done", "01-Bootstrap.md", "Initial layout")
    return root


@pytest.fixture
def config(cards_path: Path, tmp_path: Path) -> PopulateConfig:
    return PopulateConfig(
        cards_path=cards_path,
        boards=tmp_path / "boards.yml",
        delimiter="-",
        use_delimiter=True,
        column_name="Column",
        token="tok_123",
    )


@pytest.fixture
def board() -> BoardDefinition:
    return BoardDefinition(
        name="Roadmap",
        description="Quarterly roadmap",
        owner="acme",
        board_id=7,
        content=["group-a"],
    )
