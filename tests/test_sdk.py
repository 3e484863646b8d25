from pathlib import Path

import pytest

from populate_boards.contracts.board import BoardDefinition
from populate_boards.contracts.config import PopulateConfig
from populate_boards.contracts.exceptions import AuthenticationError, BoardLoadError
from populate_boards.providers.github.provider import GitHubBoardProvider
from populate_boards.sdk import PopulateBoards
from tests.fakes.board_provider import FakeBoardProvider


def _write_manifest(path: Path) -> None:
    path.write_text(
        "boards:\n"
        "  - name: Roadmap\n"
        "    owner: acme\n"
        "    board_id: 7\n"
        "    content: [group-a]\n",
        encoding="utf-8",
    )


@pytest.mark.asyncio
async def test_run_loads_manifest_and_reconciles(config: PopulateConfig) -> None:
    _write_manifest(config.boards)
    provider = FakeBoardProvider()
    provider.add_project("acme", 7)

    result = await PopulateBoards(provider=provider, config=config).run()

    assert [board.board for board in result.boards] == ["Roadmap"]
    assert result.boards[0].cards_created == 3
    assert provider.entered is False


@pytest.mark.asyncio
async def test_run_uses_explicit_boards(config: PopulateConfig, board: BoardDefinition) -> None:
    provider = FakeBoardProvider()
    provider.add_project("acme", 7)

    result = await PopulateBoards(provider=provider, config=config).run([board])

    assert result.boards[0].board == "Roadmap"
    assert provider.call_names[0] == "fetch_project"


@pytest.mark.asyncio
async def test_run_raises_for_missing_manifest(config: PopulateConfig) -> None:
    provider = FakeBoardProvider()

    with pytest.raises(BoardLoadError):
        await PopulateBoards(provider=provider, config=config).run()

    assert provider.calls == []


@pytest.mark.asyncio
async def test_from_config_builds_github_provider(config: PopulateConfig) -> None:
    app = await PopulateBoards.from_config(config)

    assert isinstance(app._provider, GitHubBoardProvider)


@pytest.mark.asyncio
async def test_from_config_without_token_fails_before_any_request() -> None:
    with pytest.raises(AuthenticationError):
        await PopulateBoards.from_config(PopulateConfig(token=None))
