"""Local board and card definitions."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BoardDefinition(BaseModel):
    name: str
    description: str = ""
    owner: str
    board_id: int
    content: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class CardDefinition(BaseModel):
    title: str
    body: str = ""
    column: str = ""

    model_config = {"frozen": True}
