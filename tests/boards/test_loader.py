from pathlib import Path

import pytest

from populate_boards.boards.loader import load_boards, load_cards
from populate_boards.contracts.exceptions import BoardLoadError, ContentPathError
from tests.fakes.cards import write_card

MANIFEST = """\
boards:
  - name: Roadmap
    description: Quarterly roadmap
    owner: acme
    board_id: 7
    content:
      - group-a
      - group-b
  - name: Ops
    owner: acme
    board_id: 8
    content: [ops]
"""


def test_load_boards_parses_manifest(tmp_path: Path) -> None:
    path = tmp_path / "boards.yml"
    path.write_text(MANIFEST, encoding="utf-8")

    boards = load_boards(path)

    assert [board.name for board in boards] == ["Roadmap", "Ops"]
    assert boards[0].content == ["group-a", "group-b"]
    assert boards[0].board_id == 7
    assert boards[1].description == ""


def test_load_boards_missing_file(tmp_path: Path) -> None:
    with pytest.raises(BoardLoadError, match="missing board manifest"):
        load_boards(tmp_path / "nope.yml")


def test_load_boards_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "boards.yml"
    path.write_text("boards: [unterminated", encoding="utf-8")

    with pytest.raises(BoardLoadError, match="invalid YAML"):
        load_boards(path)


def test_load_boards_requires_boards_list(tmp_path: Path) -> None:
    path = tmp_path / "boards.yml"
    path.write_text("projects: []\n", encoding="utf-8")

    with pytest.raises(BoardLoadError, match="'boards' list"):
        load_boards(path)


def test_load_boards_rejects_invalid_entry(tmp_path: Path) -> None:
    path = tmp_path / "boards.yml"
    path.write_text("boards:\n  - name: Roadmap\n    owner: acme\n    board_id: seven\n", encoding="utf-8")

    with pytest.raises(BoardLoadError, match="validation failed"):
        load_boards(path)


def test_load_cards_reads_files_per_column(cards_path: Path) -> None:
    cards = load_cards(cards_path, "group-a")

    assert [(card.title, card.column, card.body) for card in cards] == [
        ("01-Write docs", "01-todo", "Document the CLI"),
        ("02-Add tests", "01-todo", "Cover the engine"),
        ("01-Bootstrap", "02-done", "Initial layout"),
    ]


def test_load_cards_skips_loose_files_and_nested_dirs(tmp_path: Path) -> None:
    write_card(tmp_path, "g", "todo", "Card.md", "body")
    (tmp_path / "g" / "notes.txt").write_text("ignored", encoding="utf-8")
    (tmp_path / "g" / "todo" / "nested").mkdir()

    cards = load_cards(tmp_path, "g")

    assert [card.title for card in cards] == ["Card"]


def test_load_cards_missing_group(tmp_path: Path) -> None:
    with pytest.raises(ContentPathError):
        load_cards(tmp_path, "missing")


def test_load_cards_skips_hidden_files(tmp_path: Path) -> None:
    write_card(tmp_path, "g", "todo", "Task.md", "body")
    write_card(tmp_path, "g", "todo", ".gitkeep", "")

    cards = load_cards(tmp_path, "g")

    assert [card.title for card in cards] == ["Task"]
