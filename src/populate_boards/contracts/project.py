"""Remote project models and typed per-operation results.

Provider implementations decode raw API payloads into these models once, so
the engine never walks an untyped response tree.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RemoteProject(BaseModel):
    id: str


class FieldOption(BaseModel):
    id: str
    name: str


class ClassificationField(BaseModel):
    """Single-select field holding each card's column."""

    id: str
    name: str
    options: list[FieldOption] = Field(default_factory=list)


class RemoteItem(BaseModel):
    id: str


class ProjectLookupResult(BaseModel):
    project: RemoteProject | None = None


class FieldLookupResult(BaseModel):
    field: ClassificationField | None = None


class ItemsPageResult(BaseModel):
    items: list[RemoteItem] = Field(default_factory=list)
