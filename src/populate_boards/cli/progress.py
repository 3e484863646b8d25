"""Rich live display of board reconciliation."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from populate_boards.contracts.result import BoardResult
from populate_boards.engine.progress import ReconcileProgress


class RichReconcileProgress(ReconcileProgress):
    """One overall bar counting boards, plus one card bar per board.

    A board that fails before its cards are loaded still gets a row, so
    every board in the manifest shows up with its outcome::

        with RichReconcileProgress() as progress:
            result = await PopulateBoards(..., progress=progress).run()
    """

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=24),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console or Console(stderr=True),
        )
        self._boards_task: RichTaskID | None = None
        self._cards_task: RichTaskID | None = None

    def __enter__(self) -> RichReconcileProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    @property
    def rows(self) -> list[str]:
        """Current row descriptions, boards bar first."""
        return [task.description for task in self._progress.tasks]

    def boards_started(self, total: int) -> None:
        self._boards_task = self._progress.add_task("[bold]boards[/]", total=total)

    def cards_started(self, board: str, total: int) -> None:
        self._cards_task = self._progress.add_task(f"  {board}", total=total)

    def card_done(self, board: str) -> None:
        if self._cards_task is not None:
            self._progress.advance(self._cards_task)

    def board_finished(self, result: BoardResult) -> None:
        cards_task, self._cards_task = self._cards_task, None
        if result.success:
            description = f"  [green]{result.board}[/] drain={result.drain or '-'}"
        else:
            description = f"  [red]{result.board} failed[/]: {result.error}"

        if cards_task is None:
            self._progress.add_task(description, total=0)
        else:
            self._progress.update(cards_task, description=description)
        if self._boards_task is not None:
            self._progress.advance(self._boards_task)
