import os
from pathlib import Path

import pytest

from populate_boards.cli import build_parser, format_summary, main
from populate_boards.contracts.config import PopulateConfig
from populate_boards.contracts.result import BoardResult, DrainOutcome, ReconcileResult
from populate_boards.engine.progress import ReconcileProgress
from populate_boards.sdk import PopulateBoards
from tests.fakes.board_provider import FakeBoardProvider

MANIFEST = """\
boards:
  - name: Roadmap
    owner: acme
    board_id: 7
    content: [group-a]
  - name: Missing
    owner: acme
    board_id: 99
    content: [group-a]
"""


@pytest.fixture(autouse=True)
def _clean_action_inputs(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def fake_provider(monkeypatch: pytest.MonkeyPatch) -> FakeBoardProvider:
    provider = FakeBoardProvider()
    provider.add_project("acme", 7)

    async def fake_from_config(
        cls: type[PopulateBoards], config: PopulateConfig, *, progress: ReconcileProgress | None = None
    ) -> PopulateBoards:
        return cls(provider=provider, config=config, progress=progress)

    monkeypatch.setattr(PopulateBoards, "from_config", classmethod(fake_from_config))
    return provider


def _args(cards_path: Path, manifest: Path, *extra: str) -> list[str]:
    return ["--cards-path", str(cards_path), "--boards", str(manifest), "--use-delimiter", "--token", "tok", *extra]


def test_parser_leaves_unset_flags_as_none() -> None:
    args = build_parser().parse_args([])

    assert args.use_delimiter is None
    assert args.development_mode is None
    assert args.token is None


def test_main_returns_5_when_a_board_fails(
    cards_path: Path, tmp_path: Path, fake_provider: FakeBoardProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    manifest = tmp_path / "boards.yml"
    manifest.write_text(MANIFEST, encoding="utf-8")

    code = main(_args(cards_path, manifest))

    assert code == 5
    out = capsys.readouterr().out
    assert "ok      Roadmap" in out
    assert "failed  Missing" in out
    assert "1 ok, 1 failed" in out


def test_main_development_mode_succeeds_without_mutations(
    cards_path: Path, tmp_path: Path, fake_provider: FakeBoardProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    manifest = tmp_path / "boards.yml"
    manifest.write_text(MANIFEST.split("  - name: Missing")[0], encoding="utf-8")

    code = main(_args(cards_path, manifest, "--development-mode"))

    assert code == 0
    assert fake_provider.mutation_calls == []
    assert "[development] No changes were made" in capsys.readouterr().out


def test_main_with_progress_display(cards_path: Path, tmp_path: Path, fake_provider: FakeBoardProvider) -> None:
    manifest = tmp_path / "boards.yml"
    manifest.write_text(MANIFEST.split("  - name: Missing")[0], encoding="utf-8")

    assert main(_args(cards_path, manifest, "--progress")) == 0


def test_main_returns_3_for_missing_manifest(
    cards_path: Path, tmp_path: Path, fake_provider: FakeBoardProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(_args(cards_path, tmp_path / "absent.yml"))

    assert code == 3
    assert "missing board manifest" in capsys.readouterr().err


def test_main_returns_3_for_invalid_boolean_input(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_DEVELOPMENT_MODE", "maybe")

    assert main([]) == 3


def test_main_returns_4_without_token(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--boards", str(tmp_path / "boards.yml")])

    assert code == 4
    assert "not implemented" in capsys.readouterr().err


def test_format_summary_lists_each_board() -> None:
    result = ReconcileResult(
        boards=[
            BoardResult(board="Roadmap", drain=DrainOutcome.PARTIAL, columns=["a", "b"], cards_created=4),
            BoardResult(board="Ops", success=False, error="boom"),
        ]
    )

    summary = format_summary(result)

    assert "columns=2  cards=4  statuses=0  drain=partial" in summary
    assert "failed  Ops" in summary
    assert "boom" in summary
