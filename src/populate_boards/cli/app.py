"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from populate_boards.cli.parser import build_parser
from populate_boards.cli.progress import RichReconcileProgress
from populate_boards.config import load_config
from populate_boards.contracts.config import ConfigOverrides
from populate_boards.contracts.exceptions import AuthenticationError, BoardLoadError, ConfigError, ProviderError
from populate_boards.contracts.result import ReconcileResult
from populate_boards.sdk import PopulateBoards


def _overrides_from_args(args: argparse.Namespace) -> ConfigOverrides:
    return ConfigOverrides(
        cards_path=args.cards_path,
        boards=args.boards,
        delimiter=args.delimiter,
        use_delimiter=args.use_delimiter,
        development_mode=args.development_mode,
        column_name=args.column_name,
        organization=args.organization,
        token=args.token,
    )


async def _run(args: argparse.Namespace) -> ReconcileResult:
    config = load_config(overrides=_overrides_from_args(args))
    if args.progress:
        with RichReconcileProgress() as progress:
            app = await PopulateBoards.from_config(config, progress=progress)
            result = await app.run()
    else:
        app = await PopulateBoards.from_config(config)
        result = await app.run()
    print(format_summary(result))
    return result


def format_summary(result: ReconcileResult) -> str:
    mode = "development" if result.development_mode else "apply"
    lines = ["", f"populate-boards - run complete ({mode})", ""]
    for board in result.boards:
        if board.success:
            drain = board.drain.value if board.drain is not None else "-"
            lines.append(
                f"  ok      {board.board:<24}  columns={len(board.columns)}  "
                f"cards={board.cards_created}  statuses={board.statuses_set}  drain={drain}"
            )
        else:
            lines.append(f"  failed  {board.board:<24}  {board.error}")
    lines.append("")
    lines.append(f"  Boards:  {len(result.boards) - len(result.failed)} ok, {len(result.failed)} failed")
    if result.development_mode:
        lines.append("")
        lines.append("  [development] No changes were made")
    lines.append("")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s %(message)s", stream=sys.stderr)

    try:
        result = asyncio.run(_run(args))
    except (ConfigError, BoardLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if result.failed:
        return 5
    return 0
