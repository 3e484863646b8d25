"""Board-level progress events emitted by ``BoardReconciler``."""

from __future__ import annotations

from abc import ABC, abstractmethod

from populate_boards.contracts.result import BoardResult


class ReconcileProgress(ABC):
    """Receives one ``boards_started``, then per board any card events and a ``board_finished``."""

    @abstractmethod
    def boards_started(self, total: int) -> None: ...

    @abstractmethod
    def cards_started(self, board: str, total: int) -> None:
        """Card insertion for *board* begins; not emitted when the board fails earlier."""

    @abstractmethod
    def card_done(self, board: str) -> None: ...

    @abstractmethod
    def board_finished(self, result: BoardResult) -> None:
        """Emitted for every board, abandoned ones included."""


class NullReconcileProgress(ReconcileProgress):
    def boards_started(self, total: int) -> None:
        pass

    def cards_started(self, board: str, total: int) -> None:
        pass

    def card_done(self, board: str) -> None:
        pass

    def board_finished(self, result: BoardResult) -> None:
        pass
