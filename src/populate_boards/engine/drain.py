"""Bounded removal of every item on a project."""

from __future__ import annotations

import logging

from populate_boards.contracts.exceptions import ProviderError
from populate_boards.contracts.provider import BoardProvider
from populate_boards.contracts.result import DrainOutcome

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
MAX_CYCLES = 30


class ProjectDrainer:
    """Deletes project items page by page until none remain or the budget runs out.

    Each cycle fetches at most ``page_size`` item ids and issues a single bulk
    delete for them. A project holding more than ``page_size * max_cycles``
    items is left non-empty and reported as :attr:`DrainOutcome.PARTIAL`.
    """

    def __init__(
        self,
        provider: BoardProvider,
        *,
        page_size: int = PAGE_SIZE,
        max_cycles: int = MAX_CYCLES,
    ) -> None:
        self._provider = provider
        self._page_size = page_size
        self._max_cycles = max_cycles

    async def drain(self, project_id: str) -> DrainOutcome:
        deleted = 0
        for cycle in range(1, self._max_cycles + 1):
            item_ids = await self._fetch_item_ids(project_id)
            if not item_ids:
                logger.info("Project %s drained (%d item(s) deleted in %d cycle(s))", project_id, deleted, cycle)
                return DrainOutcome.EMPTY

            await self._provider.delete_items(project_id, item_ids)
            deleted += len(item_ids)
            logger.debug("Drain cycle %d deleted %d item(s)", cycle, len(item_ids))

        logger.warning(
            "Project %s not empty after %d drain cycles (%d item(s) deleted); continuing",
            project_id,
            self._max_cycles,
            deleted,
        )
        return DrainOutcome.PARTIAL

    async def _fetch_item_ids(self, project_id: str) -> list[str]:
        try:
            page = await self._provider.fetch_items_page(project_id, first=self._page_size)
        except ProviderError as exc:
            logger.warning("Fetching items for project %s failed, treating as empty: %s", project_id, exc)
            return []
        return [item.id for item in page.items]
