"""Board provider contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from populate_boards.contracts.project import (
    ClassificationField,
    FieldLookupResult,
    ItemsPageResult,
    ProjectLookupResult,
    RemoteItem,
)


class BoardProvider(ABC):
    """Remote project-board operations used by the reconciliation engine.

    Every call is awaited before the next one is issued; implementations are
    not required to be safe for concurrent use.
    """

    @abstractmethod
    async def __aenter__(self) -> BoardProvider: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def fetch_project(self, owner: str, number: int) -> ProjectLookupResult: ...

    @abstractmethod
    async def fetch_field(self, project_id: str, name: str) -> FieldLookupResult: ...

    @abstractmethod
    async def fetch_items_page(self, project_id: str, first: int = 100) -> ItemsPageResult: ...

    @abstractmethod
    async def delete_items(self, project_id: str, item_ids: list[str]) -> None: ...

    @abstractmethod
    async def update_project_metadata(self, project_id: str, title: str, description: str) -> None: ...

    @abstractmethod
    async def delete_field(self, field_id: str) -> None: ...

    @abstractmethod
    async def create_single_select_field(
        self, project_id: str, name: str, options: list[str]
    ) -> ClassificationField: ...

    @abstractmethod
    async def create_draft_item(self, project_id: str, title: str, body: str) -> RemoteItem: ...

    @abstractmethod
    async def set_item_field_value(self, project_id: str, item_id: str, field_id: str, option_id: str) -> None: ...
