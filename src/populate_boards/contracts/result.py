"""Reconciliation result contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class DrainOutcome(StrEnum):
    EMPTY = "empty"
    PARTIAL = "partial"
    SKIPPED = "skipped"


class BoardResult(BaseModel):
    board: str
    success: bool = True
    drain: DrainOutcome | None = None
    columns: list[str] = Field(default_factory=list)
    cards_created: int = 0
    statuses_set: int = 0
    error: str | None = None


class ReconcileResult(BaseModel):
    boards: list[BoardResult] = Field(default_factory=list)
    development_mode: bool = False

    @property
    def failed(self) -> list[BoardResult]:
        return [board for board in self.boards if not board.success]
