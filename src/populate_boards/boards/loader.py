"""Load board manifests and card content from disk."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from populate_boards.contracts.board import BoardDefinition, CardDefinition
from populate_boards.contracts.exceptions import BoardLoadError, ContentPathError


def load_boards(path: Path) -> list[BoardDefinition]:
    """Load and validate the board manifest.

    The manifest is a YAML document with a top-level ``boards`` list, each
    entry describing one remote project board.

    Args:
        path: Path to the manifest (e.g. ``boards.yml``).

    Returns:
        Board definitions in manifest order.

    Raises:
        BoardLoadError: If the file is missing, unreadable, not valid YAML,
                        or does not match the board schema.
    """
    if not path.exists():
        raise BoardLoadError(f"missing board manifest: {path}")
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise BoardLoadError(f"invalid YAML in board manifest: {exc}") from exc
    except OSError as exc:
        raise BoardLoadError(f"failed to read board manifest: {exc}") from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("boards"), list):
        raise BoardLoadError(f"board manifest must contain a 'boards' list: {path}")

    try:
        return [BoardDefinition.model_validate(entry) for entry in payload["boards"]]
    except ValidationError as exc:
        raise BoardLoadError(f"board manifest validation failed: {exc}") from exc


def group_path(cards_path: Path, group: str) -> Path:
    """Return the directory for a content group, failing if it is unusable."""
    path = cards_path / group
    if not path.is_dir():
        raise ContentPathError(f"content group directory not found: {path}", path=str(path))
    return path


def list_column_dirs(cards_path: Path, group: str) -> list[str]:
    """Names of the immediate subdirectories of a content group."""
    path = group_path(cards_path, group)
    try:
        return [entry.name for entry in path.iterdir() if entry.is_dir()]
    except OSError as exc:
        raise ContentPathError(f"failed to read content group {path}: {exc}", path=str(path)) from exc


def load_cards(cards_path: Path, group: str) -> list[CardDefinition]:
    """Load every card file of a content group.

    Each column subdirectory contributes one card per regular file: the title
    is the file name without its extension, the body is the file contents.
    Hidden files such as ``.gitkeep`` are skipped. Columns and files are
    visited in sorted order.
    """
    cards: list[CardDefinition] = []
    for column in sorted(list_column_dirs(cards_path, group)):
        column_path = cards_path / group / column
        try:
            files = sorted(
                entry for entry in column_path.iterdir() if entry.is_file() and not entry.name.startswith(".")
            )
            for card_file in files:
                cards.append(
                    CardDefinition(
                        title=card_file.stem,
                        body=card_file.read_text(encoding="utf-8"),
                        column=column,
                    )
                )
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentPathError(f"failed to read cards in {column_path}: {exc}", path=str(column_path)) from exc
    return cards
